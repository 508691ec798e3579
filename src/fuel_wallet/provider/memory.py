"""In-process provider backed by a simple ledger.

Useful for tests and local experiments: it honours the full Provider
contract, applies dispatched transactions to its own coin set, and records
every call so callers can assert on ordering.
"""

import hashlib
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from ..core.exceptions import InsufficientFundsError, TransactionError
from ..core.types import (
    BASE_ASSET_ID,
    CallResult,
    Coin,
    CoinQuantity,
    ExcludedResources,
    Message,
    Resource,
    TransactionCost,
    TransactionResponse,
    normalize_b256,
)
from ..core.quantities import merge_quantities
from ..transactions.request import (
    ChangeOutput,
    CoinInput,
    CoinOutput,
    MessageInput,
    ScriptTransactionRequest,
)
from .base import Provider

logger = logging.getLogger(__name__)


class InMemoryProvider(Provider):
    """Deterministic Provider implementation holding coins and messages in memory."""

    def __init__(self, fee: int = 1, gas_price: int = 1):
        self.fee = fee
        self.gas_price = gas_price
        self.coins: Dict[str, Coin] = {}
        self.messages: Dict[str, Message] = {}
        self.calls: List[Tuple[str, tuple]] = []
        self._tx_counter = 0

    def add_coin(self, owner: str, amount: int, asset_id: str = BASE_ASSET_ID) -> Coin:
        """Create a coin out of thin air, as a genesis block would."""
        coin = Coin(
            id=self._next_id("coin"),
            owner=owner,
            asset_id=asset_id,
            amount=amount
        )
        self.coins[coin.id] = coin
        return coin

    def add_message(self, recipient: str, amount: int, sender: Optional[str] = None) -> Message:
        """Create a bridged message spendable by ``recipient``."""
        nonce = self._next_id("message")
        message = Message(
            nonce=nonce,
            sender=sender or "0x" + "ff" * 32,
            recipient=recipient,
            amount=amount
        )
        self.messages[message.nonce] = message
        return message

    async def list_coins(self, address: str, asset_id: Optional[str] = None) -> List[Coin]:
        self.calls.append(("list_coins", (address, asset_id)))
        address = normalize_b256(address)
        if asset_id is not None:
            asset_id = normalize_b256(asset_id, "asset_id")
        return [
            coin for coin in self.coins.values()
            if coin.owner == address and (asset_id is None or coin.asset_id == asset_id)
        ]

    async def list_messages(self, address: str) -> List[Message]:
        self.calls.append(("list_messages", (address,)))
        address = normalize_b256(address)
        return [message for message in self.messages.values() if message.recipient == address]

    async def list_balances(self, address: str) -> List[CoinQuantity]:
        self.calls.append(("list_balances", (address,)))
        address = normalize_b256(address)
        return merge_quantities(
            (coin.amount, coin.asset_id) for coin in self.coins.values() if coin.owner == address
        )

    async def query_spendable_resources(
        self,
        address: str,
        required_quantities: List[CoinQuantity],
        excluded: ExcludedResources
    ) -> List[Resource]:
        """Pick resources largest-first per asset, breaking ties by resource id."""
        self.calls.append(("query_spendable_resources", (address, required_quantities, excluded)))
        address = normalize_b256(address)
        skip = excluded.ids

        selected: List[Resource] = []
        for quantity in required_quantities:
            candidates = [
                resource for resource in self._owned_resources(address)
                if resource.asset_id == quantity.asset_id and resource.resource_id not in skip
            ]
            candidates.sort(key=lambda r: (-r.amount, r.resource_id))

            total = 0
            for resource in candidates:
                if total >= quantity.amount:
                    break
                selected.append(resource)
                skip.add(resource.resource_id)
                total += resource.amount

            if total < quantity.amount:
                raise InsufficientFundsError(
                    f"Not enough resources to cover {quantity.amount} of asset {quantity.asset_id}",
                    asset_id=quantity.asset_id,
                    required=quantity.amount,
                    available=total
                )

        return selected

    async def quote_transaction_cost(
        self,
        request: ScriptTransactionRequest,
        forwarding_quantities: Optional[List[CoinQuantity]] = None
    ) -> TransactionCost:
        self.calls.append(("quote_transaction_cost", (request, forwarding_quantities)))
        required = merge_quantities([
            *request.coin_output_quantities(),
            *(forwarding_quantities or []),
        ])
        return TransactionCost(
            gas_used=self.fee,
            gas_price=self.gas_price,
            min_gas_price=self.gas_price,
            min_fee=self.fee,
            max_fee=self.fee,
            used_fee=self.fee,
            min_gas=self.fee,
            max_gas=self.fee,
            required_quantities=required
        )

    async def estimate_transaction_dependencies(self, request: ScriptTransactionRequest) -> None:
        self.calls.append(("estimate_transaction_dependencies", (request,)))

    async def dispatch(self, request: ScriptTransactionRequest) -> TransactionResponse:
        """Validate the request against the ledger and apply it."""
        self.calls.append(("dispatch", (request,)))
        tx_id, change = self._execute(request)

        for tx_input in request.inputs:
            if isinstance(tx_input, CoinInput):
                del self.coins[tx_input.id]
            else:
                del self.messages[tx_input.nonce]

        for output in request.outputs:
            if isinstance(output, CoinOutput) and output.amount > 0:
                self.add_coin(output.to, output.amount, output.asset_id)
        for (owner, asset_id), amount in change.items():
            if amount > 0:
                self.add_coin(owner, amount, asset_id)

        logger.debug(f"Applied transaction {tx_id} with {len(request.inputs)} inputs")
        return TransactionResponse(id=tx_id, status="success")

    async def simulate(self, request: ScriptTransactionRequest) -> CallResult:
        self.calls.append(("simulate", (request,)))
        tx_id, change = self._execute(request)
        receipts = [
            {"type": "transfer", "to": output.to, "assetId": output.asset_id, "amount": output.amount}
            for output in request.outputs if isinstance(output, CoinOutput)
        ]
        receipts.append({"type": "scriptResult", "result": "success", "txId": tx_id})
        return CallResult(receipts=receipts)

    def call_names(self) -> List[str]:
        return [name for name, _ in self.calls]

    def _owned_resources(self, address: str) -> Iterable[Resource]:
        for coin in self.coins.values():
            if coin.owner == address:
                yield coin
        for message in self.messages.values():
            if message.recipient == address:
                yield message

    def _execute(self, request: ScriptTransactionRequest) -> Tuple[str, Dict[Tuple[str, str], int]]:
        """Check inputs against the ledger and compute change per (owner, asset)."""
        self._tx_counter += 1
        tx_id = self._hash("tx", self._tx_counter)

        inputs: Dict[str, int] = {}
        for tx_input in request.inputs:
            if isinstance(tx_input, CoinInput):
                if tx_input.id not in self.coins:
                    raise TransactionError(f"Coin {tx_input.id} does not exist or is spent", tx_id=tx_id)
            elif isinstance(tx_input, MessageInput):
                if tx_input.nonce not in self.messages:
                    raise TransactionError(f"Message {tx_input.nonce} does not exist or is spent", tx_id=tx_id)
            inputs[tx_input.asset_id] = inputs.get(tx_input.asset_id, 0) + tx_input.amount

        spent: Dict[str, int] = {BASE_ASSET_ID: self.fee}
        for output in request.outputs:
            if isinstance(output, CoinOutput):
                spent[output.asset_id] = spent.get(output.asset_id, 0) + output.amount

        for asset_id, amount in spent.items():
            if inputs.get(asset_id, 0) < amount:
                raise TransactionError(
                    f"Inputs of asset {asset_id} cover {inputs.get(asset_id, 0)}, need {amount}",
                    tx_id=tx_id
                )

        change: Dict[Tuple[str, str], int] = {}
        for output in request.outputs:
            if isinstance(output, ChangeOutput):
                remainder = inputs.get(output.asset_id, 0) - spent.get(output.asset_id, 0)
                change[(output.to, output.asset_id)] = remainder
        return tx_id, change

    def _next_id(self, prefix: str) -> str:
        self._tx_counter += 1
        return self._hash(prefix, self._tx_counter)

    @staticmethod
    def _hash(prefix: str, counter: int) -> str:
        return "0x" + hashlib.sha256(f"{prefix}:{counter}".encode()).hexdigest()
