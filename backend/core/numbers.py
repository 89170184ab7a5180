"""
Decimal helpers shared by the derived-field computations.

Money, quantities and percentages are stored with two decimals and rounded
half-up. Ratios are rounded to four places before being scaled to a
percentage.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

TWO_PLACES = Decimal("0.01")
FOUR_PLACES = Decimal("0.0001")
HUNDRED = Decimal("100")
ZERO = Decimal("0")


def to_decimal(value) -> Decimal | None:
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def money(value) -> Decimal | None:
    """Quantize to two decimals, half-up."""
    value = to_decimal(value)
    if value is None:
        return None
    return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def ratio(part, whole) -> Decimal | None:
    """part / whole to four places; None when whole is missing or zero."""
    part, whole = to_decimal(part), to_decimal(whole)
    if part is None or not whole:
        return None
    return (part / whole).quantize(FOUR_PLACES, rounding=ROUND_HALF_UP)


def percent(part, whole) -> Decimal | None:
    """part / whole × 100 with two decimals; None when whole is missing or zero."""
    share = ratio(part, whole)
    if share is None:
        return None
    return money(share * HUNDRED)


def positive(value) -> bool:
    return value is not None and to_decimal(value) > 0
