"""Selection of resources covering required asset quantities."""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Union

from ..core.exceptions import InsufficientFundsError
from ..core.quantities import CoinQuantityLike, merge_quantities
from ..core.types import ExcludedResources, Resource
from .catalog import ResourceCatalog

logger = logging.getLogger(__name__)

ExcludedLike = Union[ExcludedResources, Mapping[str, Any], None]


def to_excluded(excluded: ExcludedLike) -> ExcludedResources:
    """Normalize an exclusion set given as a model, a mapping or None."""
    if excluded is None:
        return ExcludedResources()
    if isinstance(excluded, ExcludedResources):
        return excluded
    return ExcludedResources(
        utxos=list(excluded.get("utxos", [])),
        messages=list(excluded.get("messages", []))
    )


class ResourceSelector:
    """
    Picks resources whose per-asset totals cover a set of requirements.

    Which resources are chosen is up to the provider. This class only
    guarantees sufficiency: duplicates and excluded ids returned by the
    provider are discarded, and the remainder must still cover every
    requirement.
    """

    def __init__(self, catalog: ResourceCatalog):
        self.catalog = catalog

    async def get_resources_to_spend(
        self,
        address: str,
        quantities: Iterable[CoinQuantityLike],
        excluded: ExcludedLike = None
    ) -> List[Resource]:
        """
        Select resources of ``address`` covering ``quantities``.

        Args:
            address: Owner of the resources
            quantities: Requirements; fractional amounts are rounded up
            excluded: Resource ids that must not be selected

        Returns:
            Resources whose per-asset totals are at least the requirement

        Raises:
            InvalidAmountError: If a requirement amount is invalid
            ResourceLimitExceededError: If the provider returned too many records
            InsufficientFundsError: If the requirements cannot be covered
        """
        required = [q for q in merge_quantities(quantities) if q.amount > 0]
        if not required:
            return []

        excluded = to_excluded(excluded)
        resources = await self.catalog.query_spendable_resources(address, required, excluded)

        selected = self._dedupe(resources, excluded.ids)
        totals = self._totals(selected)

        for quantity in required:
            available = totals.get(quantity.asset_id, 0)
            if available < quantity.amount:
                raise InsufficientFundsError(
                    f"Selected resources cover {available} of asset {quantity.asset_id}, "
                    f"{quantity.amount} required",
                    asset_id=quantity.asset_id,
                    required=quantity.amount,
                    available=available
                )

        logger.debug(f"Selected {len(selected)} resources for {len(required)} assets")
        return selected

    @staticmethod
    def _dedupe(resources: List[Resource], excluded_ids: set) -> List[Resource]:
        seen = set(excluded_ids)
        selected = []
        for resource in resources:
            if resource.resource_id in seen:
                logger.warning(f"Dropping duplicate or excluded resource {resource.resource_id}")
                continue
            seen.add(resource.resource_id)
            selected.append(resource)
        return selected

    @staticmethod
    def _totals(resources: List[Resource]) -> Dict[str, int]:
        totals: Dict[str, int] = {}
        for resource in resources:
            totals[resource.asset_id] = totals.get(resource.asset_id, 0) + resource.amount
        return totals
