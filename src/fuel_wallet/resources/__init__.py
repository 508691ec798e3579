"""Resource listing and selection for the Fuel wallet SDK."""

from .catalog import ResourceCatalog, MAX_RESOURCE_RECORDS, enforce_record_limit
from .selector import ResourceSelector, to_excluded

__all__ = [
    "ResourceCatalog",
    "MAX_RESOURCE_RECORDS",
    "enforce_record_limit",
    "ResourceSelector",
    "to_excluded",
]
