"""Custom exceptions for the Fuel wallet SDK."""

from typing import Optional, Any, Dict


class WalletSDKError(Exception):
    """Base exception for all wallet SDK errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(WalletSDKError):
    """Configuration is invalid or missing."""
    pass


class ProviderNotSetError(WalletSDKError):
    """An operation needing network access was called without a provider."""

    def __init__(self, message: str = "Provider not set", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class ResourceLimitExceededError(WalletSDKError):
    """A resource listing returned more records than the supported limit."""

    def __init__(
        self,
        kind: str,
        limit: int,
        count: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            f"Wallets containing more than {limit} {kind} exceed the current supported limit.",
            details
        )
        self.kind = kind
        self.limit = limit
        self.count = count


class InsufficientFundsError(WalletSDKError):
    """Available resources cannot cover the requested quantities."""

    def __init__(
        self,
        message: str,
        asset_id: Optional[str] = None,
        required: Optional[int] = None,
        available: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.asset_id = asset_id
        self.required = required
        self.available = available


class ValidationError(WalletSDKError):
    """Input validation failed."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.field = field
        self.value = value


class InvalidAmountError(ValidationError):
    """Amount is negative or malformed."""
    pass


class RPCError(WalletSDKError):
    """RPC call failed."""

    def __init__(
        self,
        message: str,
        method: Optional[str] = None,
        status_code: Optional[int] = None,
        response_data: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.method = method
        self.status_code = status_code
        self.response_data = response_data


class NetworkError(WalletSDKError):
    """Network connectivity issues."""
    pass


class TransactionError(WalletSDKError):
    """Transaction building or execution failed."""

    def __init__(
        self,
        message: str,
        tx_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.tx_id = tx_id


class TimeoutError(WalletSDKError):
    """Operation timed out."""

    def __init__(
        self,
        message: str,
        timeout_duration: Optional[float] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.timeout_duration = timeout_duration


class RateLimitError(RPCError):
    """Rate limit exceeded."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details=details)
        self.retry_after = retry_after
