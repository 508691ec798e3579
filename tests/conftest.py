"""Shared fixtures for the Fuel wallet SDK tests."""

import pytest

from fuel_wallet.account import Account
from fuel_wallet.core.config import WalletConfig
from fuel_wallet.provider.memory import InMemoryProvider

from tests import TEST_ADDRESSES, TEST_ASSETS, TEST_CONFIG


@pytest.fixture
def config():
    """Test configuration."""
    return WalletConfig(
        provider_url=TEST_CONFIG['test_provider_url'],
        request_timeout=TEST_CONFIG['timeout'],
        max_retries=TEST_CONFIG['max_retries'],
        retry_delay=TEST_CONFIG['retry_delay'],
        max_gas_per_tx=1_000_000
    )


@pytest.fixture
def provider():
    """In-memory provider with the owner holding 5 of each test asset."""
    memory = InMemoryProvider(fee=1)
    for asset_id in TEST_ASSETS.values():
        memory.add_coin(TEST_ADDRESSES['owner'], 5, asset_id)
    return memory


@pytest.fixture
def account(provider, config):
    """Account of the owner bound to the in-memory provider."""
    return Account(TEST_ADDRESSES['owner'], provider, config)
