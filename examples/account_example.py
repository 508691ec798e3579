#!/usr/bin/env python3
"""
Account Example: Balances, Funding and Transfers

This example walks through the Account interface:
- Querying coins, messages and balances
- Funding a hand-built transaction request
- Transfers and base-layer withdrawals
- Error handling

The first part runs against the in-memory provider and needs no network.
The last part talks to the node at FUEL_PROVIDER_URL.
"""

import asyncio
import logging
import os
from pathlib import Path
import sys

# Add the src directory to the path so we can import the SDK modules
project_dir = Path(__file__).parent.parent
src_dir = project_dir / "src"
sys.path.insert(0, str(src_dir))

from fuel_wallet import Account, InMemoryProvider, JsonRpcProvider, WalletConfig
from fuel_wallet.core.exceptions import (
    InsufficientFundsError,
    InvalidAmountError,
    ProviderNotSetError,
    WalletSDKError,
)
from fuel_wallet.core.types import BASE_ASSET_ID
from fuel_wallet.testing import seed_test_wallet
from fuel_wallet.transactions.request import ScriptTransactionRequest

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

GENESIS = "0x" + "69" * 32
ALICE = "0x" + "a1" * 32
BOB = "0x" + "b0" * 32
TOKEN = "0x" + "01" * 32


async def example_balances(provider: InMemoryProvider):
    """Seed a wallet and read it back."""
    print("\n=== Balances Example ===")

    genesis = Account(GENESIS, provider)
    alice = Account(ALICE, provider)

    await seed_test_wallet(alice, [(1_000, BASE_ASSET_ID), (250, TOKEN)], genesis)

    print(f"Base balance: {await alice.get_balance()}")
    print(f"Token balance: {await alice.get_balance(TOKEN)}")
    for balance in await alice.get_balances():
        print(f"  {balance.asset_id}: {balance.amount}")
    print(f"Coins held: {len(await alice.get_coins())}")


async def example_manual_funding(provider: InMemoryProvider):
    """Build a request by hand, fund it and simulate it."""
    print("\n=== Manual Funding Example ===")

    alice = Account(ALICE, provider)

    request = ScriptTransactionRequest(gas_limit=10_000, gas_price=1)
    request.add_coin_output(BOB, 10, TOKEN)

    cost = await provider.quote_transaction_cost(request)
    await alice.fund(request, cost.required_quantities, cost.max_fee)
    print(f"Request has {len(request.inputs)} inputs and {len(request.outputs)} outputs")

    result = await alice.simulate_transaction(request)
    print(f"Simulation receipts: {len(result.receipts)}")

    response = await alice.send_transaction(request)
    print(f"✅ Sent {response.id}")


async def example_transfer(provider: InMemoryProvider):
    """Transfer and withdraw through the high-level helpers."""
    print("\n=== Transfer Example ===")

    alice = Account(ALICE, provider)
    bob = Account(BOB, provider)

    response = await alice.transfer(BOB, 25, TOKEN, {"gasLimit": 10_000})
    print(f"✅ Transfer {response.id}: Bob now holds {await bob.get_balance(TOKEN)} tokens")

    response = await alice.withdraw_to_base_layer(BOB, 100)
    print(f"✅ Withdrawal {response.id} submitted")


async def example_error_handling(provider: InMemoryProvider):
    """Demonstrate error handling scenarios."""
    print("\n=== Error Handling Examples ===")

    alice = Account(ALICE, provider)

    test_cases = [
        ("Negative amount", lambda: alice.transfer(BOB, -1)),
        ("Malformed amount", lambda: alice.transfer(BOB, "lots")),
        ("More than the wallet holds", lambda: alice.transfer(BOB, 10**9, TOKEN)),
        ("No provider", lambda: Account(BOB).get_balance()),
    ]

    for name, call in test_cases:
        try:
            await call()
            print(f"❌ {name}: Should have failed but didn't")
        except InvalidAmountError:
            print(f"✅ {name}: Correctly caught invalid amount")
        except InsufficientFundsError as e:
            print(f"✅ {name}: Correctly caught insufficient funds ({e.required} required)")
        except ProviderNotSetError:
            print(f"✅ {name}: Correctly caught missing provider")
        except WalletSDKError as e:
            print(f"⚠️  {name}: Unexpected SDK error: {e}")


async def example_node():
    """Read balances from a running node."""
    print("\n=== Node Example ===")

    config = WalletConfig.from_env()

    async with JsonRpcProvider(config) as provider:
        if not await provider.health_check():
            print("⚠️  Node appears to be down")
            return

        account = Account(ALICE, provider, config)
        try:
            balances = await account.get_balances()
            print(f"Node reports {len(balances)} assets for {account.address}")
        except WalletSDKError as e:
            print(f"❌ Query failed: {e}")


async def main():
    """Run all Account examples."""
    print("🚀 Fuel Wallet SDK Examples")
    print("=" * 50)

    provider = InMemoryProvider(fee=1)
    provider.add_coin(GENESIS, 1_000_000)
    provider.add_coin(GENESIS, 1_000_000, TOKEN)

    try:
        await example_balances(provider)
        await example_manual_funding(provider)
        await example_transfer(provider)
        await example_error_handling(provider)
        await example_node()

        print("\n" + "=" * 50)
        print("✅ All examples completed")

    except Exception as e:
        print(f"\n❌ Example failed with error: {e}")
        logger.exception("Example execution failed")


if __name__ == "__main__":
    if not os.environ.get('FUEL_PROVIDER_URL'):
        os.environ['FUEL_PROVIDER_URL'] = 'http://127.0.0.1:4000/v1/rpc'

    asyncio.run(main())
