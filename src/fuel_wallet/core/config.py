"""Configuration management for the Fuel wallet SDK."""

import os
from dataclasses import dataclass

from .exceptions import ConfigurationError


@dataclass(frozen=True)
class WalletConfig:
    """Configuration for the wallet SDK."""
    provider_url: str
    chain_id: int = 0
    max_gas_per_tx: int = 100_000_000
    default_gas_price: int = 1
    request_timeout: float = 30.0
    max_retries: int = 3
    retry_delay: float = 1.0
    withdraw_script: bytes = b""

    def __post_init__(self):
        if not self.provider_url:
            raise ConfigurationError("provider_url must not be empty")
        if self.max_gas_per_tx <= 0:
            raise ConfigurationError("max_gas_per_tx must be positive")
        if self.max_retries < 0:
            raise ConfigurationError("max_retries must not be negative")

    @classmethod
    def from_env(cls) -> 'WalletConfig':
        """Load configuration from environment variables."""
        try:
            return cls(
                provider_url=os.environ.get('FUEL_PROVIDER_URL', 'http://127.0.0.1:4000/v1/rpc'),
                chain_id=int(os.environ.get('FUEL_CHAIN_ID', '0')),
                max_gas_per_tx=int(os.environ.get('FUEL_MAX_GAS_PER_TX', '100000000')),
                default_gas_price=int(os.environ.get('FUEL_GAS_PRICE', '1')),
                request_timeout=float(os.environ.get('REQUEST_TIMEOUT', '30.0')),
                max_retries=int(os.environ.get('MAX_RETRIES', '3')),
                retry_delay=float(os.environ.get('RETRY_DELAY', '1.0'))
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid environment configuration: {e}")

    @classmethod
    def local(cls) -> 'WalletConfig':
        """Local node configuration."""
        return cls(
            provider_url="http://127.0.0.1:4000/v1/rpc",
            chain_id=0
        )

    @classmethod
    def testnet(cls) -> 'WalletConfig':
        """Testnet configuration."""
        return cls(
            provider_url="https://beta-5.fuel.network/v1/rpc",
            chain_id=0,
            request_timeout=60.0
        )
