"""Attaching resources to a transaction request so it covers its costs."""

import logging
from typing import Dict, Iterable, List

from ..core.amount import AmountLike
from ..core.quantities import CoinQuantityLike, add_amount_to_asset
from ..core.types import BASE_ASSET_ID, CoinQuantity, ExcludedResources, normalize_b256
from ..resources.selector import ResourceSelector
from .request import CoinInput, ScriptTransactionRequest

logger = logging.getLogger(__name__)


class TransactionFunder:
    """Funds requests on behalf of a single owner."""

    def __init__(self, owner: str, selector: ResourceSelector):
        self.owner = normalize_b256(owner, "owner")
        self.selector = selector

    async def fund(
        self,
        request: ScriptTransactionRequest,
        quantities: Iterable[CoinQuantityLike],
        fee: AmountLike
    ) -> None:
        """
        Add inputs to ``request`` until it covers ``quantities`` plus ``fee``.

        The fee is charged in the base asset. Inputs the owner already placed
        on the request count toward the totals, and every existing input is
        excluded from selection so nothing is spent twice. The request is
        mutated in place.

        Raises:
            InvalidAmountError: If an amount or the fee is invalid
            ResourceLimitExceededError: If the provider returned too many records
            InsufficientFundsError: If the owner cannot cover the requirements
        """
        required = add_amount_to_asset(fee, BASE_ASSET_ID, quantities)
        owned = request.input_totals(owner=self.owner)

        missing: List[CoinQuantity] = []
        for quantity in required:
            held = owned.get(quantity.asset_id, 0)
            if held < quantity.amount:
                missing.append(CoinQuantity(asset_id=quantity.asset_id, amount=quantity.amount - held))

        if not missing:
            logger.debug("Request already covers its requirements")
            return

        resources = await self.selector.get_resources_to_spend(
            self.owner,
            missing,
            self._excluded(request)
        )
        request.add_resources(resources)
        logger.info(f"Funded request with {len(resources)} resources for {len(missing)} assets")

    @staticmethod
    def _excluded(request: ScriptTransactionRequest) -> ExcludedResources:
        ids: Dict[str, List[str]] = {"utxos": [], "messages": []}
        for tx_input in request.inputs:
            key = "utxos" if isinstance(tx_input, CoinInput) else "messages"
            ids[key].append(tx_input.resource_id)
        return ExcludedResources(**ids)
