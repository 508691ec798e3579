"""Network access point contract used by accounts."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..core.types import (
    CallResult,
    Coin,
    CoinQuantity,
    ExcludedResources,
    Message,
    Resource,
    TransactionCost,
    TransactionResponse,
)
from ..transactions.request import ScriptTransactionRequest


class Provider(ABC):
    """
    Everything an Account needs from the network.

    Implementations own transport concerns (framing, retries, timeouts).
    Each call is a single attempt from the caller's point of view: it
    either returns or raises.
    """

    @abstractmethod
    async def list_coins(self, address: str, asset_id: Optional[str] = None) -> List[Coin]:
        """Coins owned by ``address``, optionally restricted to one asset."""

    @abstractmethod
    async def list_messages(self, address: str) -> List[Message]:
        """Messages spendable by ``address``."""

    @abstractmethod
    async def list_balances(self, address: str) -> List[CoinQuantity]:
        """Total holdings of ``address`` per asset."""

    @abstractmethod
    async def query_spendable_resources(
        self,
        address: str,
        required_quantities: List[CoinQuantity],
        excluded: ExcludedResources
    ) -> List[Resource]:
        """
        Resources of ``address`` covering ``required_quantities``.

        Raises:
            InsufficientFundsError: If no sufficient subset exists
        """

    @abstractmethod
    async def quote_transaction_cost(
        self,
        request: ScriptTransactionRequest,
        forwarding_quantities: Optional[List[CoinQuantity]] = None
    ) -> TransactionCost:
        """Fee quote and required quantities for ``request``."""

    @abstractmethod
    async def estimate_transaction_dependencies(self, request: ScriptTransactionRequest) -> None:
        """Prepare ``request`` for dispatch, mutating it in place."""

    @abstractmethod
    async def dispatch(self, request: ScriptTransactionRequest) -> TransactionResponse:
        """Submit ``request`` to the network."""

    @abstractmethod
    async def simulate(self, request: ScriptTransactionRequest) -> CallResult:
        """Execute ``request`` without committing it."""
