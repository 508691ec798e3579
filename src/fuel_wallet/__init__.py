"""
Fuel Wallet SDK for Python

Account-level resource discovery, funding and transaction dispatch
for Fuel networks.
"""

__version__ = "0.1.0"

# Core configuration and types
from .core.config import WalletConfig
from .core.amount import to_amount, to_u64
from .core.types import (
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
)
from .core.quantities import coin_quantityfy, merge_quantities, add_amount_to_asset

# Transaction requests
from .transactions.request import (
    TransactionType,
    ScriptTransactionRequest,
    transaction_requestify,
)

# Providers
from .provider import Provider, JsonRpcProvider, InMemoryProvider

# Resource listing and selection
from .resources import ResourceCatalog, ResourceSelector, MAX_RESOURCE_RECORDS

# Funding
from .transactions.funder import TransactionFunder

# Account facade
from .account import Account

# Exceptions
from .core.exceptions import (
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
    "__version__",

    # Configuration
    "WalletConfig",

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
    "to_amount",
    "to_u64",
    "coin_quantityfy",
    "merge_quantities",
    "add_amount_to_asset",

    # Transactions
    "TransactionType",
    "ScriptTransactionRequest",
    "transaction_requestify",
    "TransactionFunder",

    # Providers
    "Provider",
    "JsonRpcProvider",
    "InMemoryProvider",

    # Resources
    "ResourceCatalog",
    "ResourceSelector",
    "MAX_RESOURCE_RECORDS",

    # Account
    "Account",

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
