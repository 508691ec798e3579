"""Resource and balance listings with a hard record cap."""

import logging
from typing import List, Optional, Sequence

from ..core.exceptions import ResourceLimitExceededError
from ..core.types import Coin, CoinQuantity, ExcludedResources, Message, Resource
from ..provider.base import Provider

logger = logging.getLogger(__name__)

MAX_RESOURCE_RECORDS = 9999


def enforce_record_limit(records: Sequence, kind: str, limit: int = MAX_RESOURCE_RECORDS) -> None:
    """
    Reject listings larger than the supported limit.

    Raises:
        ResourceLimitExceededError: If ``records`` holds more than ``limit`` entries
    """
    if len(records) > limit:
        logger.error(f"Provider returned {len(records)} {kind}, limit is {limit}")
        raise ResourceLimitExceededError(kind, limit, count=len(records))


class ResourceCatalog:
    """Reads coins, messages and balances of an address through a provider.

    Listings above ``MAX_RESOURCE_RECORDS`` fail as a whole instead of being
    truncated, so callers never see incomplete financial data.
    """

    def __init__(self, provider: Provider, limit: int = MAX_RESOURCE_RECORDS):
        self.provider = provider
        self.limit = limit

    async def list_coins(self, address: str, asset_id: Optional[str] = None) -> List[Coin]:
        coins = await self.provider.list_coins(address, asset_id)
        enforce_record_limit(coins, "coins", self.limit)
        return list(coins)

    async def list_messages(self, address: str) -> List[Message]:
        messages = await self.provider.list_messages(address)
        enforce_record_limit(messages, "messages", self.limit)
        return list(messages)

    async def list_balances(self, address: str) -> List[CoinQuantity]:
        balances = await self.provider.list_balances(address)
        enforce_record_limit(balances, "balances", self.limit)
        return list(balances)

    async def query_spendable_resources(
        self,
        address: str,
        required_quantities: List[CoinQuantity],
        excluded: ExcludedResources
    ) -> List[Resource]:
        """Spendable resources covering ``required_quantities``; the cap counts coins and messages together."""
        resources = await self.provider.query_spendable_resources(address, required_quantities, excluded)
        kind = "coins" if any(isinstance(r, Coin) for r in resources) else "messages"
        enforce_record_limit(resources, kind, self.limit)
        return list(resources)
