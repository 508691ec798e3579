"""Unit tests for transaction requests."""

import pytest

from fuel_wallet.core.exceptions import InvalidAmountError, TransactionError, ValidationError
from fuel_wallet.core.types import BASE_ASSET_ID, Coin, CoinQuantity, Message, TxParams
from fuel_wallet.transactions.request import (
    ChangeOutput,
    CoinInput,
    CoinOutput,
    MessageInput,
    ScriptTransactionRequest,
    TransactionType,
    build_withdraw_script_data,
    transaction_requestify,
)

from tests import TEST_ADDRESSES, TEST_ASSETS

OWNER = TEST_ADDRESSES['owner']
RECEIVER = TEST_ADDRESSES['receiver']
ASSET_A = TEST_ASSETS['asset_a']


@pytest.fixture
def coin():
    return Coin(id="0x" + "11" * 34, owner=OWNER, asset_id=ASSET_A, amount=5)


@pytest.fixture
def message():
    return Message(nonce="0x" + "22" * 32, sender=RECEIVER, recipient=OWNER, amount=3)


class TestBuildRequest:
    """Test request construction."""

    def test_from_params_defaults(self):
        request = ScriptTransactionRequest.from_params(gas_limit=100, gas_price=2)
        assert request.gas_limit == 100
        assert request.gas_price == 2
        assert request.maturity == 0

    def test_from_params_overrides(self):
        params = TxParams(gas_limit=1, gas_price=1, maturity=1)
        request = ScriptTransactionRequest.from_params(params, gas_limit=100, gas_price=2)
        assert (request.gas_limit, request.gas_price, request.maturity) == (1, 1, 1)

    def test_add_coin_output(self):
        request = ScriptTransactionRequest()
        request.add_coin_output(RECEIVER, 2, ASSET_A)
        assert request.outputs == [CoinOutput(to=RECEIVER, amount=2, asset_id=ASSET_A)]

    def test_add_coin_output_rejects_negative(self):
        request = ScriptTransactionRequest()
        with pytest.raises(InvalidAmountError):
            request.add_coin_output(RECEIVER, -2, ASSET_A)

    def test_change_output_not_duplicated(self):
        request = ScriptTransactionRequest()
        request.add_change_output(OWNER, ASSET_A)
        request.add_change_output(OWNER, ASSET_A)
        assert request.outputs == [ChangeOutput(to=OWNER, asset_id=ASSET_A)]


class TestResources:
    """Test attaching resources."""

    def test_add_coin(self, coin):
        request = ScriptTransactionRequest()
        request.add_resource(coin)

        assert request.inputs == [CoinInput(id=coin.id, owner=OWNER, asset_id=ASSET_A, amount=5)]
        assert request.outputs == [ChangeOutput(to=OWNER, asset_id=ASSET_A)]

    def test_add_message(self, message):
        request = ScriptTransactionRequest()
        request.add_resource(message)

        assert isinstance(request.inputs[0], MessageInput)
        assert request.inputs[0].asset_id == BASE_ASSET_ID
        assert request.outputs == [ChangeOutput(to=OWNER, asset_id=BASE_ASSET_ID)]

    def test_duplicate_resource_rejected(self, coin):
        request = ScriptTransactionRequest()
        request.add_resource(coin)
        with pytest.raises(TransactionError):
            request.add_resource(coin)

    def test_input_totals(self, coin, message):
        foreign = Coin(id="0x" + "33" * 34, owner=RECEIVER, asset_id=ASSET_A, amount=7)
        request = ScriptTransactionRequest()
        request.add_resources([coin, message, foreign])

        assert request.input_totals() == {ASSET_A: 12, BASE_ASSET_ID: 3}
        assert request.input_totals(owner=OWNER) == {ASSET_A: 5, BASE_ASSET_ID: 3}
        assert request.input_ids() == {coin.id, message.nonce, foreign.id}

    def test_coin_output_quantities(self):
        request = ScriptTransactionRequest()
        request.add_coin_output(RECEIVER, 2, ASSET_A)
        request.add_coin_output(OWNER, 3, ASSET_A)
        request.add_change_output(OWNER, BASE_ASSET_ID)

        assert request.coin_output_quantities() == [CoinQuantity(asset_id=ASSET_A, amount=5)]


class TestRequestify:
    """Test normalization of request-like values."""

    def test_request_returned_as_is(self):
        request = ScriptTransactionRequest()
        assert transaction_requestify(request) is request

    def test_from_mapping(self):
        request = transaction_requestify({"type": TransactionType.SCRIPT})
        assert isinstance(request, ScriptTransactionRequest)
        assert request.inputs == []

    def test_wire_form_round_trip(self, coin, message):
        request = ScriptTransactionRequest(gas_limit=10, gas_price=1, script=b"\x01")
        request.add_resources([coin, message])
        request.add_coin_output(RECEIVER, 2, ASSET_A)

        rebuilt = transaction_requestify(request.to_dict())
        assert rebuilt == request

    def test_create_type_unsupported(self):
        with pytest.raises(TransactionError):
            transaction_requestify({"type": TransactionType.CREATE})

    def test_unknown_type(self):
        with pytest.raises(ValidationError):
            transaction_requestify({"type": "banana"})

    def test_not_a_mapping(self):
        with pytest.raises(ValidationError):
            transaction_requestify(42)


class TestWithdrawScriptData:
    """Test withdrawal encoding."""

    def test_layout(self):
        data = build_withdraw_script_data(RECEIVER, 258)
        assert len(data) == 40
        assert data[:32] == bytes.fromhex(RECEIVER[2:])
        assert data[32:] == (258).to_bytes(8, "big")

    def test_amount_out_of_range(self):
        with pytest.raises(InvalidAmountError):
            build_withdraw_script_data(RECEIVER, 2 ** 64)
