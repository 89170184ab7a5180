"""
Crop production cycles: expected vs actual output of one planting.

total_production follows the actual yield once it is known and falls back
to the expected yield while the crop is still in the ground.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from core.identifiers import IdentifierGenerator
from core.numbers import money, percent, to_decimal
from db.enums import ProductionStatus
from db.records import stamp_created, stamp_updated


def recompute(production):
    area = to_decimal(production.area_planted)
    actual = to_decimal(production.actual_yield)
    expected = to_decimal(production.expected_yield)
    if area is None:
        return production
    if actual is not None:
        production.total_production = money(actual * area)
    elif expected is not None and production.total_production is None:
        production.total_production = money(expected * area)
    return production


def on_create(production, now: datetime, ids: IdentifierGenerator) -> None:
    stamp_created(production, now, ids)
    recompute(production)


def on_update(production, now: datetime) -> None:
    stamp_updated(production, now)
    recompute(production)


def is_harvested(production) -> bool:
    return production.production_status in (ProductionStatus.HARVESTED, ProductionStatus.SOLD)


def is_active(production) -> bool:
    return production.production_status in (ProductionStatus.PLANTED, ProductionStatus.GROWING)


def is_overdue(production, today: date) -> bool:
    return (
        production.expected_harvest_date is not None
        and today > production.expected_harvest_date
        and not is_harvested(production)
    )


def yield_efficiency(production) -> Decimal | None:
    """Actual yield as a percentage of the expected yield."""
    if production.actual_yield is None:
        return None
    return percent(production.actual_yield, production.expected_yield)


def production_cycle(production) -> str:
    season = production.season.label if production.season else "Unknown"
    return f"{season} {production.year}"
