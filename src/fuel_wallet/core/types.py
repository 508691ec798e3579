"""Core type definitions for the Fuel wallet SDK."""

from typing import Annotated, List, Optional, Dict, Any, Union, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from .amount import to_amount
from .exceptions import ValidationError

BASE_ASSET_ID = "0x" + "00" * 32


def normalize_b256(value: Any, field: str = "address") -> str:
    """
    Validate and normalize a 32-byte identifier (address or asset id).

    Args:
        value: ``0x``-prefixed hex string or 32 raw bytes
        field: Field name reported in validation errors

    Returns:
        Lowercase ``0x``-prefixed hex string

    Raises:
        ValidationError: If the value is not a 32-byte identifier
    """
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 32:
            raise ValidationError(f"{field} must be 32 bytes long", field=field, value=value)
        return "0x" + bytes(value).hex()

    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string", field=field, value=value)

    if not value.lower().startswith("0x"):
        raise ValidationError(f"{field} must start with '0x'", field=field, value=value)

    if len(value) != 66:
        raise ValidationError(f"{field} must be 66 characters long", field=field, value=value)

    try:
        bytes.fromhex(value[2:])
    except ValueError:
        raise ValidationError(f"{field} contains invalid hex characters", field=field, value=value)

    return "0x" + value[2:].lower()


def normalize_hex(value: Any, field: str = "id") -> str:
    """Validate a variable-length ``0x``-prefixed hex string."""
    if not isinstance(value, str) or not value.lower().startswith("0x"):
        raise ValidationError(f"{field} must be a 0x-prefixed hex string", field=field, value=value)
    try:
        bytes.fromhex(value[2:])
    except ValueError:
        raise ValidationError(f"{field} contains invalid hex characters", field=field, value=value)
    return "0x" + value[2:].lower()


class CoinQuantity(BaseModel):
    """An amount of a single asset, either required or held."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    asset_id: str = Field(default=BASE_ASSET_ID, alias="assetId")
    amount: int

    @field_validator('asset_id', mode='before')
    @classmethod
    def validate_asset_id(cls, v):
        return normalize_b256(v, "asset_id")

    @field_validator('amount', mode='before')
    @classmethod
    def validate_amount(cls, v):
        return to_amount(v)


class Coin(BaseModel):
    """A spendable coin (UTXO) owned by an address."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: Literal["coin"] = "coin"
    id: str
    owner: str
    asset_id: str = Field(alias="assetId")
    amount: int
    maturity: int = 0
    block_created: int = Field(default=0, alias="blockCreated")

    @field_validator('id', mode='before')
    @classmethod
    def validate_id(cls, v):
        return normalize_hex(v, "id")

    @field_validator('owner', mode='before')
    @classmethod
    def validate_owner(cls, v):
        return normalize_b256(v, "owner")

    @field_validator('asset_id', mode='before')
    @classmethod
    def validate_asset_id(cls, v):
        return normalize_b256(v, "asset_id")

    @field_validator('amount', mode='before')
    @classmethod
    def validate_amount(cls, v):
        return to_amount(v)

    @property
    def resource_id(self) -> str:
        return self.id


class Message(BaseModel):
    """A bridged message spendable as base asset by its recipient."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: Literal["message"] = "message"
    nonce: str
    sender: str
    recipient: str
    amount: int
    data: str = "0x"
    da_height: int = Field(default=0, alias="daHeight")

    @field_validator('nonce', 'sender', 'recipient', mode='before')
    @classmethod
    def validate_b256(cls, v, info):
        return normalize_b256(v, info.field_name)

    @field_validator('amount', mode='before')
    @classmethod
    def validate_amount(cls, v):
        return to_amount(v)

    @field_validator('data', mode='before')
    @classmethod
    def validate_data(cls, v):
        return normalize_hex(v, "data")

    @property
    def asset_id(self) -> str:
        return BASE_ASSET_ID

    @property
    def resource_id(self) -> str:
        return self.nonce


Resource = Annotated[Union[Coin, Message], Field(discriminator="kind")]

_resource_adapter = TypeAdapter(Resource)


def parse_resource(data: Dict[str, Any]) -> Resource:
    """Build a Coin or Message from a raw record, inferring the kind if absent."""
    kind = data.get("kind")
    if kind is None:
        kind = "message" if "nonce" in data else "coin"
    if kind not in ("coin", "message"):
        raise ValidationError(f"Unknown resource kind: {kind}", field="kind", value=kind)
    return _resource_adapter.validate_python({**data, "kind": kind})


class ExcludedResources(BaseModel):
    """Resource ids that must not be selected again."""
    model_config = ConfigDict(frozen=True)

    utxos: List[str] = Field(default_factory=list)
    messages: List[str] = Field(default_factory=list)

    @field_validator('utxos', 'messages', mode='before')
    @classmethod
    def validate_ids(cls, v):
        return [normalize_hex(item, "excluded id") for item in v]

    @property
    def ids(self) -> set:
        return set(self.utxos) | set(self.messages)


class TransactionCost(BaseModel):
    """Fee quote for a transaction request."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    gas_used: int = Field(alias="gasUsed")
    gas_price: int = Field(alias="gasPrice")
    min_gas_price: int = Field(default=0, alias="minGasPrice")
    min_fee: int = Field(alias="minFee")
    max_fee: int = Field(alias="maxFee")
    used_fee: int = Field(default=0, alias="usedFee")
    min_gas: int = Field(default=0, alias="minGas")
    max_gas: int = Field(default=0, alias="maxGas")
    receipts: List[Dict[str, Any]] = Field(default_factory=list)
    required_quantities: List[CoinQuantity] = Field(default_factory=list, alias="requiredQuantities")

    @field_validator(
        'gas_used', 'gas_price', 'min_gas_price', 'min_fee', 'max_fee',
        'used_fee', 'min_gas', 'max_gas', mode='before'
    )
    @classmethod
    def validate_amounts(cls, v, info):
        return to_amount(v, info.field_name)


class TxParams(BaseModel):
    """Caller overrides for a new transaction request."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    gas_limit: Optional[int] = Field(default=None, alias="gasLimit")
    gas_price: Optional[int] = Field(default=None, alias="gasPrice")
    maturity: Optional[int] = None

    @field_validator('gas_limit', 'gas_price', 'maturity', mode='before')
    @classmethod
    def validate_numbers(cls, v, info):
        if v is None:
            return v
        return to_amount(v, info.field_name)


class TransactionResponse(BaseModel):
    """Handle returned after a transaction has been dispatched."""
    model_config = ConfigDict(frozen=True)

    id: str
    status: Optional[str] = None


class CallResult(BaseModel):
    """Receipts produced by a non-committing simulation."""
    model_config = ConfigDict(frozen=True)

    receipts: List[Dict[str, Any]] = Field(default_factory=list)


class RPCRequest(BaseModel):
    """JSON-RPC request structure."""
    jsonrpc: str = "2.0"
    id: Union[str, int] = 1
    method: str
    params: List[Any]


class RPCResponse(BaseModel):
    """JSON-RPC response structure."""
    jsonrpc: str
    id: Union[str, int]
    result: Optional[Any] = None
    error: Optional[Dict[str, Any]] = None
