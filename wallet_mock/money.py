"""Decimal helpers for monetary fields.

Balances travel as strings fixed to 4 fractional digits, fees and totals as
strings fixed to 8. All arithmetic happens on `Decimal` to avoid drift.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, ROUND_UP, Decimal, InvalidOperation
from typing import Any

from .errors import ValidationError


BALANCE_PLACES = Decimal("0.0001")
FEE_PLACES = Decimal("0.00000001")
ZERO = Decimal("0")
# Largest accepted amount; keeps 8-place quantization within the default 28-digit context.
MAX_AMOUNT = Decimal("1e15")


def quantize_balance(value: Decimal, *, rounding: str = ROUND_HALF_UP) -> Decimal:
    return value.quantize(BALANCE_PLACES, rounding=rounding)


def quantize_fee(value: Decimal) -> Decimal:
    return value.quantize(FEE_PLACES, rounding=ROUND_HALF_UP)


def charge_amount(value: Decimal) -> Decimal:
    """Amount actually debited for `value`: rounded up to the balance precision.

    A nonzero cost never rounds down to a free debit.
    """

    return value.quantize(BALANCE_PLACES, rounding=ROUND_UP)


def clamp_non_negative(value: Decimal) -> Decimal:
    return value if value > ZERO else quantize_balance(ZERO)


def format_balance(value: Decimal) -> str:
    return f"{quantize_balance(value):.4f}"


def format_fee(value: Decimal) -> str:
    return f"{quantize_fee(value):.8f}"


def format_plain(value: Decimal) -> str:
    """Render a decimal without exponent notation, as the caller sent it."""

    return format(value, "f")


def parse_amount(
    value: Any,
    field: str,
    *,
    allow_zero: bool = False,
    default: Decimal | None = None,
) -> Decimal:
    """Parse a JSON monetary field into a finite, non-negative Decimal.

    Accepts numbers and numeric strings. Missing values fall back to `default`
    when one is given and are rejected otherwise.
    """

    if value is None or (isinstance(value, str) and not value.strip()):
        if default is not None:
            return default
        raise ValidationError(f"Missing required field: {field}", details={"field": field})

    if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
        raise ValidationError(f"Field {field} must be numeric", details={"field": field})

    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f"Field {field} must be numeric", details={"field": field}) from None

    if not amount.is_finite():
        raise ValidationError(f"Field {field} must be a finite number", details={"field": field})
    if amount < ZERO:
        raise ValidationError(f"Field {field} must not be negative", details={"field": field})
    if amount == ZERO and not allow_zero:
        raise ValidationError(f"Field {field} must be greater than zero", details={"field": field})
    if amount > MAX_AMOUNT:
        raise ValidationError(f"Field {field} must not exceed {MAX_AMOUNT:f}", details={"field": field})
    return amount
