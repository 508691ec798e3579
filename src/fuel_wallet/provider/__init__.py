"""Network access points for the Fuel wallet SDK."""

from .base import Provider
from .client import JsonRpcProvider
from .memory import InMemoryProvider

__all__ = [
    "Provider",
    "JsonRpcProvider",
    "InMemoryProvider",
]
