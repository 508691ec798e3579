"""Helpers for tests that need funded accounts."""

from typing import Iterable

from .account import Account
from .core.quantities import CoinQuantityLike, coin_quantityfy
from .core.exceptions import ProviderNotSetError
from .core.types import TransactionResponse
from .transactions.request import ScriptTransactionRequest


async def seed_test_wallet(
    wallet: Account,
    quantities: Iterable[CoinQuantityLike],
    genesis: Account,
    gas_limit: int = 10_000
) -> TransactionResponse:
    """
    Send ``quantities`` from ``genesis`` to ``wallet`` in one transaction.

    ``genesis`` must be bound to the same provider as ``wallet``.
    """
    provider = genesis.provider
    if provider is None:
        raise ProviderNotSetError()

    request = ScriptTransactionRequest(gas_limit=gas_limit, gas_price=genesis.config.default_gas_price)

    for quantity in map(coin_quantityfy, quantities):
        request.add_coin_output(wallet.address, quantity.amount, quantity.asset_id)

    cost = await provider.quote_transaction_cost(request)
    await genesis.fund(request, cost.required_quantities, cost.max_fee)
    return await genesis.send_transaction(request)
