"""
Irrigation Events — water use, cost and how much moisture it bought.

water_efficiency = (moisture after - moisture before) / water amount
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from core.identifiers import IdentifierGenerator
from core.numbers import HUNDRED, money, ratio, to_decimal
from db.enums import EfficiencyLevel
from db.records import stamp_created, stamp_updated

EXPENSIVE = Decimal("1000")
HIGH_USAGE = Decimal("10000")

# half-open [low, high) bands over efficiency * 100
EFFICIENCY_BANDS = (
    (Decimal("0"), Decimal("40"), EfficiencyLevel.VERY_LOW),
    (Decimal("40"), Decimal("60"), EfficiencyLevel.LOW),
    (Decimal("60"), Decimal("75"), EfficiencyLevel.MEDIUM),
    (Decimal("75"), Decimal("85"), EfficiencyLevel.HIGH),
    (Decimal("85"), Decimal("100"), EfficiencyLevel.VERY_HIGH),
)


def recompute(event):
    cost = to_decimal(event.water_cost)
    amount = to_decimal(event.water_amount)
    if cost is not None and amount is not None:
        event.total_cost = money(cost * amount)
    return event


def on_create(event, now: datetime, ids: IdentifierGenerator) -> None:
    stamp_created(event, now, ids)
    if event.irrigation_date is None:
        event.irrigation_date = now
    recompute(event)


def on_update(event, now: datetime) -> None:
    stamp_updated(event, now)
    recompute(event)


def moisture_increase(event) -> Decimal | None:
    before = to_decimal(event.soil_moisture_before)
    after = to_decimal(event.soil_moisture_after)
    if before is None or after is None:
        return None
    return after - before


def water_efficiency(event) -> Decimal | None:
    increase = moisture_increase(event)
    if increase is None:
        return None
    return ratio(increase, event.water_amount)


def efficiency_level(event) -> EfficiencyLevel | None:
    efficiency = water_efficiency(event)
    if efficiency is None:
        return None
    scaled = efficiency * HUNDRED
    for low, high, level in EFFICIENCY_BANDS:
        if low <= scaled < high:
            return level
    return EfficiencyLevel.VERY_HIGH


def cost_per_liter(event) -> Decimal | None:
    return ratio(event.total_cost, event.water_amount)


def is_expensive(event) -> bool:
    total = to_decimal(event.total_cost)
    return total is not None and total > EXPENSIVE


def is_high_water_usage(event) -> bool:
    amount = to_decimal(event.water_amount)
    return amount is not None and amount > HIGH_USAGE


def has_low_efficiency(event) -> bool:
    return efficiency_level(event) in (EfficiencyLevel.VERY_LOW, EfficiencyLevel.LOW)


def needs_optimization(event) -> bool:
    return is_expensive(event) or is_high_water_usage(event) or has_low_efficiency(event)


def formatted_duration(event) -> str:
    minutes = event.duration_minutes
    if minutes is None:
        return "N/A"
    if minutes >= 60:
        return f"{minutes // 60}h {minutes % 60:02d}m"
    return f"{minutes} minutes"


def moisture_summary(event) -> str:
    increase = moisture_increase(event)
    if increase is None:
        return "N/A"
    before = to_decimal(event.soil_moisture_before)
    after = to_decimal(event.soil_moisture_after)
    return f"{before:.1f}% → {after:.1f}% ({increase:+.1f}%)"
