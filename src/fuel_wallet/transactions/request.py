"""Transaction request building for the Fuel wallet SDK."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Set, Union

from ..core.amount import to_amount, to_u64
from ..core.exceptions import TransactionError, ValidationError
from ..core.types import (
    BASE_ASSET_ID,
    Coin,
    CoinQuantity,
    Message,
    Resource,
    TxParams,
    normalize_b256,
    normalize_hex,
)


class TransactionType(IntEnum):
    """Transaction kinds understood by the network."""
    SCRIPT = 0
    CREATE = 1


@dataclass
class CoinInput:
    """A coin consumed by a transaction."""
    id: str
    owner: str
    asset_id: str
    amount: int
    maturity: int = 0

    @property
    def resource_id(self) -> str:
        return self.id


@dataclass
class MessageInput:
    """A message consumed by a transaction."""
    nonce: str
    sender: str
    recipient: str
    amount: int
    data: str = "0x"

    @property
    def asset_id(self) -> str:
        return BASE_ASSET_ID

    @property
    def resource_id(self) -> str:
        return self.nonce


@dataclass
class CoinOutput:
    """Sends a fixed amount of an asset to an address."""
    to: str
    amount: int
    asset_id: str


@dataclass
class ChangeOutput:
    """Returns whatever is left of an asset to an address."""
    to: str
    asset_id: str


TransactionInput = Union[CoinInput, MessageInput]
TransactionOutput = Union[CoinOutput, ChangeOutput]


@dataclass
class ScriptTransactionRequest:
    """
    Mutable script transaction under assembly.

    The request is owned by the caller until it is dispatched. Funding
    mutates ``inputs`` and ``outputs`` in place.
    """
    type: ClassVar[TransactionType] = TransactionType.SCRIPT

    script: bytes = b""
    script_data: bytes = b""
    gas_limit: int = 0
    gas_price: int = 0
    maturity: int = 0
    inputs: List[TransactionInput] = field(default_factory=list)
    outputs: List[TransactionOutput] = field(default_factory=list)

    @classmethod
    def from_params(
        cls,
        tx_params: Optional[TxParams] = None,
        gas_limit: int = 0,
        gas_price: int = 0,
        script: bytes = b"",
        script_data: bytes = b""
    ) -> 'ScriptTransactionRequest':
        """Create a request from defaults, letting ``tx_params`` override them."""
        params = tx_params or TxParams()
        return cls(
            script=script,
            script_data=script_data,
            gas_limit=params.gas_limit if params.gas_limit is not None else gas_limit,
            gas_price=params.gas_price if params.gas_price is not None else gas_price,
            maturity=params.maturity if params.maturity is not None else 0,
        )

    def add_coin_output(self, to: str, amount: Any, asset_id: str = BASE_ASSET_ID) -> None:
        """Add an output sending ``amount`` of ``asset_id`` to ``to``."""
        self.outputs.append(CoinOutput(
            to=normalize_b256(to, "to"),
            amount=to_amount(amount),
            asset_id=normalize_b256(asset_id, "asset_id")
        ))

    def add_change_output(self, to: str, asset_id: str = BASE_ASSET_ID) -> None:
        """Add a change output for ``asset_id`` unless one already exists."""
        to = normalize_b256(to, "to")
        asset_id = normalize_b256(asset_id, "asset_id")
        for output in self.outputs:
            if isinstance(output, ChangeOutput) and output.asset_id == asset_id:
                return
        self.outputs.append(ChangeOutput(to=to, asset_id=asset_id))

    def add_resource(self, resource: Resource) -> None:
        """
        Attach a coin or message as an input.

        A change output back to the resource owner is added for its asset.

        Raises:
            TransactionError: If the resource is already an input
        """
        if resource.resource_id in self.input_ids():
            raise TransactionError(f"Resource {resource.resource_id} is already an input")

        if isinstance(resource, Coin):
            self.inputs.append(CoinInput(
                id=resource.id,
                owner=resource.owner,
                asset_id=resource.asset_id,
                amount=resource.amount,
                maturity=resource.maturity
            ))
            self.add_change_output(resource.owner, resource.asset_id)
        elif isinstance(resource, Message):
            self.inputs.append(MessageInput(
                nonce=resource.nonce,
                sender=resource.sender,
                recipient=resource.recipient,
                amount=resource.amount,
                data=resource.data
            ))
            self.add_change_output(resource.recipient, BASE_ASSET_ID)
        else:
            raise TransactionError(f"Unsupported resource type: {type(resource).__name__}")

    def add_resources(self, resources: List[Resource]) -> None:
        for resource in resources:
            self.add_resource(resource)

    def input_ids(self) -> Set[str]:
        return {tx_input.resource_id for tx_input in self.inputs}

    def input_totals(self, owner: Optional[str] = None) -> Dict[str, int]:
        """
        Sum inputs per asset.

        Args:
            owner: If given, only count coins owned by and messages addressed to it

        Returns:
            Mapping of asset id to total input amount
        """
        if owner is not None:
            owner = normalize_b256(owner, "owner")

        totals: Dict[str, int] = {}
        for tx_input in self.inputs:
            holder = tx_input.owner if isinstance(tx_input, CoinInput) else tx_input.recipient
            if owner is not None and holder != owner:
                continue
            totals[tx_input.asset_id] = totals.get(tx_input.asset_id, 0) + tx_input.amount
        return totals

    def coin_output_quantities(self) -> List[CoinQuantity]:
        """Amounts sent by coin outputs, merged per asset."""
        totals: Dict[str, int] = {}
        for output in self.outputs:
            if isinstance(output, CoinOutput):
                totals[output.asset_id] = totals.get(output.asset_id, 0) + output.amount
        return [CoinQuantity(asset_id=asset_id, amount=amount) for asset_id, amount in totals.items()]

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation used on the wire."""
        inputs = []
        for tx_input in self.inputs:
            if isinstance(tx_input, CoinInput):
                inputs.append({
                    "type": "coin",
                    "id": tx_input.id,
                    "owner": tx_input.owner,
                    "assetId": tx_input.asset_id,
                    "amount": str(tx_input.amount),
                    "maturity": tx_input.maturity,
                })
            else:
                inputs.append({
                    "type": "message",
                    "nonce": tx_input.nonce,
                    "sender": tx_input.sender,
                    "recipient": tx_input.recipient,
                    "amount": str(tx_input.amount),
                    "data": tx_input.data,
                })

        outputs = []
        for output in self.outputs:
            if isinstance(output, CoinOutput):
                outputs.append({
                    "type": "coin",
                    "to": output.to,
                    "amount": str(output.amount),
                    "assetId": output.asset_id,
                })
            else:
                outputs.append({"type": "change", "to": output.to, "assetId": output.asset_id})

        return {
            "type": int(self.type),
            "script": "0x" + self.script.hex(),
            "scriptData": "0x" + self.script_data.hex(),
            "gasLimit": str(self.gas_limit),
            "gasPrice": str(self.gas_price),
            "maturity": self.maturity,
            "inputs": inputs,
            "outputs": outputs,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ScriptTransactionRequest':
        """Build a request from its wire form or a loose request-like mapping."""
        request = cls(
            script=_to_bytes(data.get("script", b""), "script"),
            script_data=_to_bytes(data.get("scriptData", data.get("script_data", b"")), "script_data"),
            gas_limit=to_amount(data.get("gasLimit", data.get("gas_limit", 0)), "gas_limit"),
            gas_price=to_amount(data.get("gasPrice", data.get("gas_price", 0)), "gas_price"),
            maturity=to_amount(data.get("maturity", 0), "maturity"),
        )

        for raw in data.get("inputs", []):
            if raw.get("type") == "message" or "nonce" in raw:
                request.inputs.append(MessageInput(
                    nonce=normalize_b256(raw["nonce"], "nonce"),
                    sender=normalize_b256(raw["sender"], "sender"),
                    recipient=normalize_b256(raw["recipient"], "recipient"),
                    amount=to_amount(raw["amount"]),
                    data=normalize_hex(raw.get("data", "0x"), "data"),
                ))
            else:
                request.inputs.append(CoinInput(
                    id=normalize_hex(raw["id"], "id"),
                    owner=normalize_b256(raw["owner"], "owner"),
                    asset_id=normalize_b256(raw.get("assetId", raw.get("asset_id")), "asset_id"),
                    amount=to_amount(raw["amount"]),
                    maturity=to_amount(raw.get("maturity", 0), "maturity"),
                ))

        for raw in data.get("outputs", []):
            asset_id = raw.get("assetId", raw.get("asset_id", BASE_ASSET_ID))
            if raw.get("type") == "change":
                request.add_change_output(raw["to"], asset_id)
            else:
                request.add_coin_output(raw["to"], raw["amount"], asset_id)

        return request


def transaction_requestify(
    request_like: Union[ScriptTransactionRequest, Mapping[str, Any]]
) -> ScriptTransactionRequest:
    """
    Normalize a request-like value into a ScriptTransactionRequest.

    An existing request is returned as is, so callers keep working on
    the same object.

    Raises:
        ValidationError: If the value cannot be interpreted as a request
        TransactionError: If the transaction type is not supported
    """
    if isinstance(request_like, ScriptTransactionRequest):
        return request_like

    if not isinstance(request_like, Mapping):
        raise ValidationError(
            f"Cannot build a transaction request from {type(request_like).__name__}",
            field="request",
            value=request_like
        )

    raw_type = request_like.get("type", TransactionType.SCRIPT)
    try:
        tx_type = TransactionType(int(raw_type))
    except (TypeError, ValueError):
        raise ValidationError(f"Unknown transaction type: {raw_type}", field="type", value=raw_type)

    if tx_type != TransactionType.SCRIPT:
        raise TransactionError(f"Unsupported transaction type: {tx_type.name}")

    return ScriptTransactionRequest.from_dict(request_like)


def build_withdraw_script_data(recipient: str, amount: Any) -> bytes:
    """Encode a withdrawal as the 32-byte recipient followed by a big-endian u64 amount."""
    recipient_bytes = bytes.fromhex(normalize_b256(recipient, "recipient")[2:])
    return recipient_bytes + to_u64(amount).to_bytes(8, "big")


def _to_bytes(value: Any, field_name: str) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return bytes.fromhex(normalize_hex(value, field_name)[2:])
