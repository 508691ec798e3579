"""Unit tests for core types."""

from typing import List

import pytest
from pydantic import BaseModel

from fuel_wallet.core.exceptions import InvalidAmountError, ValidationError
from fuel_wallet.core.types import (
    BASE_ASSET_ID,
    Coin,
    CoinQuantity,
    ExcludedResources,
    Message,
    Resource,
    TransactionCost,
    TxParams,
    normalize_b256,
    parse_resource,
)

from tests import TEST_ADDRESSES, TEST_ASSETS

OWNER = TEST_ADDRESSES['owner']


class TestNormalizeB256:
    """Test 32-byte identifier validation."""

    def test_lowercases(self):
        mixed = "0x" + "AB" * 32
        assert normalize_b256(mixed) == "0x" + "ab" * 32

    def test_accepts_bytes(self):
        assert normalize_b256(bytes(32)) == BASE_ASSET_ID

    @pytest.mark.parametrize("value", [
        "0xinvalid",
        "09c0b2d1a486c439a87bcba6b46a7a1a23f3897cc83a94521a96da5c23bc58db",
        "0x" + "zz" * 32,
        b"\x00" * 31,
        123,
    ])
    def test_rejects_invalid(self, value):
        with pytest.raises(ValidationError):
            normalize_b256(value)


class TestModels:
    """Test pydantic models."""

    def test_coin_quantity_defaults_to_base_asset(self):
        assert CoinQuantity(amount=1).asset_id == BASE_ASSET_ID

    def test_coin_quantity_rejects_negative(self):
        with pytest.raises(InvalidAmountError):
            CoinQuantity(amount=-1)

    def test_coin_quantity_is_frozen(self):
        quantity = CoinQuantity(amount=1)
        with pytest.raises(Exception):
            quantity.amount = 2

    def test_coin_from_camel_case(self):
        coin = Coin(id="0x" + "11" * 34, owner=OWNER, assetId=TEST_ASSETS['asset_a'], amount="5")
        assert coin.asset_id == TEST_ASSETS['asset_a']
        assert coin.amount == 5
        assert coin.resource_id == "0x" + "11" * 34

    def test_message_is_base_asset(self):
        message = Message(nonce="0x" + "22" * 32, sender=OWNER, recipient=OWNER, amount=3)
        assert message.asset_id == BASE_ASSET_ID
        assert message.resource_id == "0x" + "22" * 32

    def test_parse_resource_infers_kind(self):
        message = parse_resource({"nonce": "0x" + "22" * 32, "sender": OWNER, "recipient": OWNER, "amount": 1})
        coin = parse_resource({"id": "0x" + "11" * 34, "owner": OWNER, "assetId": BASE_ASSET_ID, "amount": 1})
        assert isinstance(message, Message)
        assert isinstance(coin, Coin)

    def test_parse_resource_unknown_kind(self):
        with pytest.raises(ValidationError):
            parse_resource({"kind": "contract"})

    def test_resource_union_discriminates_on_kind(self):
        class Holder(BaseModel):
            resources: List[Resource]

        holder = Holder(resources=[
            {"kind": "coin", "id": "0x11", "owner": OWNER, "assetId": BASE_ASSET_ID, "amount": "4"},
            {"kind": "message", "nonce": "0x" + "22" * 32, "sender": OWNER, "recipient": OWNER, "amount": 2},
        ])

        assert [type(r) for r in holder.resources] == [Coin, Message]
        assert holder.resources[0].amount == 4

    def test_excluded_resources_ids(self):
        excluded = ExcludedResources(utxos=["0xAA"], messages=["0xbb"])
        assert excluded.ids == {"0xaa", "0xbb"}

    def test_transaction_cost_from_wire(self):
        cost = TransactionCost(**{
            "gasUsed": "234",
            "gasPrice": 1,
            "minFee": 1,
            "maxFee": "0x2",
            "requiredQuantities": [{"assetId": TEST_ASSETS['asset_a'], "amount": "1"}],
        })
        assert cost.max_fee == 2
        assert cost.required_quantities == [CoinQuantity(asset_id=TEST_ASSETS['asset_a'], amount=1)]

    def test_tx_params_optional(self):
        params = TxParams(gasLimit=1, gasPrice="1", maturity=1)
        assert (params.gas_limit, params.gas_price, params.maturity) == (1, 1, 1)
        assert TxParams().gas_limit is None
