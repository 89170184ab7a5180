"""
Fertilizer applications: cost, shelf life and effectiveness signals.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from dateutil.relativedelta import relativedelta

from core.identifiers import IdentifierGenerator
from core.numbers import money, ratio, to_decimal
from db.enums import FertilizerType, FertilizerUnit
from db.records import stamp_created, stamp_updated

HIGH_COST = Decimal("5000")

DEFAULT_COMPOSITIONS = {
    FertilizerType.ORGANIC: "Organic matter",
    FertilizerType.NPK: "N-P-K blend",
    FertilizerType.NITROGEN: "Nitrogen (N)",
    FertilizerType.PHOSPHATE: "Phosphorus (P2O5)",
    FertilizerType.POTASH: "Potassium (K2O)",
    FertilizerType.MICRONUTRIENTS: "Trace elements",
}


def recompute(usage):
    cost = to_decimal(usage.cost_per_unit)
    quantity = to_decimal(usage.quantity)
    if cost is not None and quantity is not None:
        usage.total_cost = money(cost * quantity)
    return usage


def on_create(usage, now: datetime, ids: IdentifierGenerator) -> None:
    stamp_created(usage, now, ids)
    if usage.application_date is None:
        usage.application_date = now.date()
    recompute(usage)


def on_update(usage, now: datetime) -> None:
    stamp_updated(usage, now)
    recompute(usage)


def quantity_in_kg(usage) -> Decimal | None:
    quantity = to_decimal(usage.quantity)
    if quantity is None:
        return None
    unit = usage.unit or FertilizerUnit.KG
    return quantity * Decimal(unit.kg_factor)


def cost_per_kg(usage) -> Decimal | None:
    return ratio(usage.total_cost, quantity_in_kg(usage))


def is_expired(usage, today: date) -> bool:
    return usage.expiry_date is not None and today > usage.expiry_date


def is_expiring_soon(usage, today: date) -> bool:
    if usage.expiry_date is None or is_expired(usage, today):
        return False
    return usage.expiry_date < today + relativedelta(months=3)


def is_high_cost(usage) -> bool:
    total = to_decimal(usage.total_cost)
    return total is not None and total > HIGH_COST


def has_low_effectiveness(usage) -> bool:
    return usage.effectiveness_rating is not None and usage.effectiveness_rating <= 2


def has_high_effectiveness(usage) -> bool:
    return usage.effectiveness_rating is not None and usage.effectiveness_rating >= 4


def needs_optimization(usage, today: date) -> bool:
    return is_high_cost(usage) or has_low_effectiveness(usage) or is_expired(usage, today)


def composition_summary(usage) -> str:
    if usage.composition:
        return usage.composition
    return DEFAULT_COMPOSITIONS.get(usage.fertilizer_type, "Unknown composition")
