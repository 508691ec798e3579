"""Asset quantity normalization and aggregation."""

from typing import Any, Dict, Iterable, List, Mapping, Union

from .amount import AmountLike
from .exceptions import ValidationError
from .types import BASE_ASSET_ID, CoinQuantity

CoinQuantityLike = Union[CoinQuantity, Mapping[str, Any], tuple, list]


def coin_quantityfy(like: CoinQuantityLike) -> CoinQuantity:
    """
    Normalize a quantity-like value into a CoinQuantity.

    Accepted forms:
        - a CoinQuantity (returned unchanged)
        - a mapping with ``amount`` and ``asset_id`` (or ``assetId``)
        - a tuple or list ``(amount[, asset_id])``

    The asset defaults to the base asset and fractional amounts are rounded up.

    Raises:
        ValidationError: If the value has an unsupported shape
        InvalidAmountError: If the amount is negative or malformed
    """
    if isinstance(like, CoinQuantity):
        return like

    if isinstance(like, Mapping):
        asset_id = like.get("asset_id", like.get("assetId", BASE_ASSET_ID))
        if "amount" not in like:
            raise ValidationError("Coin quantity requires an amount", field="amount", value=like)
        return CoinQuantity(asset_id=asset_id, amount=like["amount"])

    if isinstance(like, (tuple, list)) and 1 <= len(like) <= 2:
        asset_id = like[1] if len(like) == 2 and like[1] is not None else BASE_ASSET_ID
        return CoinQuantity(asset_id=asset_id, amount=like[0])

    raise ValidationError(
        f"Unsupported coin quantity: {like!r}",
        field="quantity",
        value=like
    )


def merge_quantities(quantities: Iterable[CoinQuantityLike]) -> List[CoinQuantity]:
    """
    Sum quantities per asset.

    Returns one entry per distinct asset, ordered by first occurrence.
    """
    totals: Dict[str, int] = {}
    for like in quantities:
        quantity = coin_quantityfy(like)
        totals[quantity.asset_id] = totals.get(quantity.asset_id, 0) + quantity.amount

    return [CoinQuantity(asset_id=asset_id, amount=amount) for asset_id, amount in totals.items()]


def add_amount_to_asset(
    amount: AmountLike,
    asset_id: str,
    coin_quantities: Iterable[CoinQuantityLike]
) -> List[CoinQuantity]:
    """
    Add an amount to one asset's bucket of a quantity list.

    The input is merged first, then ``amount`` is added to ``asset_id``;
    a new entry is appended if the asset was not already requested.
    The input list is not modified.

    Args:
        amount: Amount to add (typically the transaction fee)
        asset_id: Asset receiving the amount (typically the base asset)
        coin_quantities: Existing requirements

    Returns:
        New list of merged quantities
    """
    extra = CoinQuantity(asset_id=asset_id, amount=amount)
    return merge_quantities([*coin_quantities, extra])
