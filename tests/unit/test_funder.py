"""Unit tests for TransactionFunder."""

from unittest.mock import create_autospec

import pytest

from fuel_wallet.core.exceptions import InsufficientFundsError, InvalidAmountError
from fuel_wallet.core.types import BASE_ASSET_ID, CoinQuantity, ExcludedResources
from fuel_wallet.provider.memory import InMemoryProvider
from fuel_wallet.resources.catalog import ResourceCatalog
from fuel_wallet.resources.selector import ResourceSelector
from fuel_wallet.transactions.funder import TransactionFunder
from fuel_wallet.transactions.request import CoinInput, ScriptTransactionRequest

from tests import TEST_ADDRESSES, TEST_ASSETS

OWNER = TEST_ADDRESSES['owner']
RECEIVER = TEST_ADDRESSES['receiver']
ASSET_A = TEST_ASSETS['asset_a']
ASSET_B = TEST_ASSETS['asset_b']


def input_totals(request):
    return request.input_totals(owner=OWNER)


@pytest.fixture
def memory():
    provider = InMemoryProvider()
    for amount in (3, 7):
        provider.add_coin(OWNER, amount, ASSET_A)
        provider.add_coin(OWNER, amount, BASE_ASSET_ID)
    provider.add_coin(OWNER, 5, ASSET_B)
    return provider


@pytest.fixture
def funder(memory):
    return TransactionFunder(OWNER, ResourceSelector(ResourceCatalog(memory)))


class TestFundCalls:
    """Test what the funder asks the selector for."""

    @pytest.mark.asyncio
    async def test_fee_added_to_base_asset(self):
        selector = create_autospec(ResourceSelector, instance=True)
        selector.get_resources_to_spend.return_value = []
        request = ScriptTransactionRequest()
        quantities = [CoinQuantity(asset_id=ASSET_A, amount=10)]

        await TransactionFunder(OWNER, selector).fund(request, quantities, 29)

        selector.get_resources_to_spend.assert_awaited_once_with(
            OWNER,
            [
                CoinQuantity(asset_id=ASSET_A, amount=10),
                CoinQuantity(asset_id=BASE_ASSET_ID, amount=29),
            ],
            ExcludedResources(utxos=[], messages=[])
        )
        assert quantities == [CoinQuantity(asset_id=ASSET_A, amount=10)]

    @pytest.mark.asyncio
    async def test_existing_inputs_excluded_and_counted(self):
        selector = create_autospec(ResourceSelector, instance=True)
        selector.get_resources_to_spend.return_value = []
        request = ScriptTransactionRequest()
        request.inputs.append(CoinInput(id="0x" + "aa" * 34, owner=OWNER, asset_id=ASSET_A, amount=4))

        await TransactionFunder(OWNER, selector).fund(request, [(10, ASSET_A)], 1)

        selector.get_resources_to_spend.assert_awaited_once_with(
            OWNER,
            [
                CoinQuantity(asset_id=ASSET_A, amount=6),
                CoinQuantity(asset_id=BASE_ASSET_ID, amount=1),
            ],
            ExcludedResources(utxos=["0x" + "aa" * 34], messages=[])
        )

    @pytest.mark.asyncio
    async def test_foreign_inputs_do_not_count(self):
        selector = create_autospec(ResourceSelector, instance=True)
        selector.get_resources_to_spend.return_value = []
        request = ScriptTransactionRequest()
        request.inputs.append(CoinInput(id="0x" + "bb" * 34, owner=RECEIVER, asset_id=ASSET_A, amount=4))

        await TransactionFunder(OWNER, selector).fund(request, [(4, ASSET_A)], 0)

        args = selector.get_resources_to_spend.await_args.args
        assert args[1] == [CoinQuantity(asset_id=ASSET_A, amount=4)]
        assert args[2].utxos == ["0x" + "bb" * 34]

    @pytest.mark.asyncio
    async def test_fully_covered_request_skips_selection(self):
        selector = create_autospec(ResourceSelector, instance=True)
        request = ScriptTransactionRequest()
        request.inputs.append(CoinInput(id="0x" + "cc" * 34, owner=OWNER, asset_id=BASE_ASSET_ID, amount=9))

        await TransactionFunder(OWNER, selector).fund(request, [(5, BASE_ASSET_ID)], 2)

        selector.get_resources_to_spend.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_fee(self):
        selector = create_autospec(ResourceSelector, instance=True)

        with pytest.raises(InvalidAmountError):
            await TransactionFunder(OWNER, selector).fund(ScriptTransactionRequest(), [], -1)

        selector.get_resources_to_spend.assert_not_awaited()


class TestFundGuarantee:
    """Test the funded request against the in-memory ledger."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("quantities,fee", [
        ([(1, ASSET_A)], 1),
        ([(8, ASSET_A), (2, ASSET_B)], 4),
        ([(2, BASE_ASSET_ID), (3, BASE_ASSET_ID)], 5),
        ([], 10),
        ([(0.5, ASSET_B)], 0.5),
    ])
    async def test_inputs_cover_quantities_and_fee(self, funder, quantities, fee):
        request = ScriptTransactionRequest()

        await funder.fund(request, quantities, fee)

        totals = input_totals(request)
        expected = {}
        for amount, asset_id in quantities:
            expected[asset_id] = expected.get(asset_id, 0) + amount
        expected[BASE_ASSET_ID] = expected.get(BASE_ASSET_ID, 0) + fee
        for asset_id, amount in expected.items():
            assert totals.get(asset_id, 0) >= amount

    @pytest.mark.asyncio
    async def test_second_fund_does_not_reuse_inputs(self, funder):
        request = ScriptTransactionRequest()

        await funder.fund(request, [(7, ASSET_A)], 0)
        await funder.fund(request, [(10, ASSET_A)], 0)

        ids = [tx_input.resource_id for tx_input in request.inputs]
        assert len(ids) == len(set(ids))
        assert input_totals(request)[ASSET_A] == 10

    @pytest.mark.asyncio
    async def test_insufficient_funds_leaves_request_untouched(self, funder):
        request = ScriptTransactionRequest()

        with pytest.raises(InsufficientFundsError):
            await funder.fund(request, [(11, ASSET_A)], 1)

        assert request.inputs == []
        assert request.outputs == []
