"""Amount conversion for asset quantities.

Amounts are plain Python ints, so addition and comparison never overflow.
Fractional inputs always round up: a transaction funded with slightly more
than requested is valid, one funded with less is not.
"""

from decimal import Decimal, InvalidOperation, ROUND_CEILING
from typing import Any, Union

from .exceptions import InvalidAmountError

AmountLike = Union[int, str, float, Decimal]

U64_MAX = 2 ** 64 - 1


def to_amount(value: Any, field: str = "amount") -> int:
    """
    Convert an amount-like value to a non-negative integer.

    Accepts ints, decimal or ``0x`` hex strings, Decimals and floats.
    Fractional values are rounded toward the ceiling, so ``0.9`` becomes ``1``.

    Args:
        value: Amount to convert
        field: Field name reported in validation errors

    Returns:
        The amount as a non-negative int

    Raises:
        InvalidAmountError: If the value is negative or malformed
    """
    if isinstance(value, bool):
        raise InvalidAmountError("Amount must be a number, not a boolean", field=field, value=value)

    if isinstance(value, int):
        amount = value
    elif isinstance(value, str):
        amount = _parse_string(value, field)
    elif isinstance(value, float):
        # repr gives the shortest decimal form, so 0.9 stays 0.9
        amount = _ceil_decimal(Decimal(repr(value)), field, value)
    elif isinstance(value, Decimal):
        amount = _ceil_decimal(value, field, value)
    else:
        raise InvalidAmountError(
            f"Unsupported amount type: {type(value).__name__}",
            field=field,
            value=value
        )

    if amount < 0:
        raise InvalidAmountError("Amount must not be negative", field=field, value=value)
    return amount


def to_u64(value: Any, field: str = "amount") -> int:
    """Convert an amount and check that it fits in an unsigned 64-bit word."""
    amount = to_amount(value, field)
    if amount > U64_MAX:
        raise InvalidAmountError("Amount exceeds the u64 range", field=field, value=value)
    return amount


def _parse_string(value: str, field: str) -> int:
    text = value.strip().replace("_", "")
    if not text:
        raise InvalidAmountError("Amount must not be empty", field=field, value=value)

    if text.lower().startswith("0x"):
        try:
            return int(text, 16)
        except ValueError:
            raise InvalidAmountError("Amount contains invalid hex characters", field=field, value=value)

    try:
        return _ceil_decimal(Decimal(text), field, value)
    except InvalidOperation:
        raise InvalidAmountError("Amount must be a valid number", field=field, value=value)


def _ceil_decimal(value: Decimal, field: str, original: Any) -> int:
    if not value.is_finite():
        raise InvalidAmountError("Amount must be finite", field=field, value=original)
    # -0.5 would otherwise round up to 0
    if value < 0:
        raise InvalidAmountError("Amount must not be negative", field=field, value=original)
    return int(value.to_integral_value(rounding=ROUND_CEILING))
