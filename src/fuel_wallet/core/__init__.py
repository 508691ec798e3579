"""
Core module for the Fuel wallet SDK.

This module contains the amount arithmetic, types, configuration and
exceptions that form the foundation of the SDK.
"""

from .config import WalletConfig
from .amount import to_amount, to_u64, U64_MAX
from .types import (
    BASE_ASSET_ID,
    CoinQuantity,
    Coin,
    Message,
    Resource,
    ExcludedResources,
    TransactionCost,
    TxParams,
    TransactionResponse,
    CallResult,
    RPCRequest,
    RPCResponse,
    normalize_b256,
    parse_resource,
)
from .quantities import (
    coin_quantityfy,
    merge_quantities,
    add_amount_to_asset,
)
from .exceptions import (
    WalletSDKError,
    ConfigurationError,
    ProviderNotSetError,
    ResourceLimitExceededError,
    InsufficientFundsError,
    ValidationError,
    InvalidAmountError,
    RPCError,
    NetworkError,
    TimeoutError,
    RateLimitError,
    TransactionError,
)

__all__ = [
    # Configuration
    "WalletConfig",

    # Amounts
    "to_amount",
    "to_u64",
    "U64_MAX",

    # Core types
    "BASE_ASSET_ID",
    "CoinQuantity",
    "Coin",
    "Message",
    "Resource",
    "ExcludedResources",
    "TransactionCost",
    "TxParams",
    "TransactionResponse",
    "CallResult",
    "RPCRequest",
    "RPCResponse",
    "normalize_b256",
    "parse_resource",

    # Quantity aggregation
    "coin_quantityfy",
    "merge_quantities",
    "add_amount_to_asset",

    # Exceptions
    "WalletSDKError",
    "ConfigurationError",
    "ProviderNotSetError",
    "ResourceLimitExceededError",
    "InsufficientFundsError",
    "ValidationError",
    "InvalidAmountError",
    "RPCError",
    "NetworkError",
    "TimeoutError",
    "RateLimitError",
    "TransactionError",
]
