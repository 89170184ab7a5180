"""
Market price observations and the signals derived from them.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from decimal import Decimal

from core.identifiers import IdentifierGenerator
from core.numbers import ZERO, money, to_decimal
from db.enums import DemandLevel, PriceTrend, SupplyLevel
from db.records import stamp_created, stamp_updated

HIGH_PRICE = Decimal("1000")
LOW_PRICE = Decimal("100")
RECENT_DAYS = 7
OUTDATED_DAYS = 30


def on_create(price, now: datetime, ids: IdentifierGenerator) -> None:
    stamp_created(price, now, ids)
    if price.price_date is None:
        price.price_date = now.date()


def on_update(price, now: datetime) -> None:
    stamp_updated(price, now)


def total_cost_per_kg(price) -> Decimal | None:
    base = to_decimal(price.price_per_kg)
    if base is None:
        return None
    extras = sum(
        (to_decimal(cost) or ZERO for cost in (price.transport_cost, price.storage_cost, price.processing_cost)),
        ZERO,
    )
    return money(base + extras)


def seasonal_adjusted_price(price) -> Decimal | None:
    base = to_decimal(price.price_per_kg)
    factor = to_decimal(price.seasonal_factor)
    if base is None or factor is None or factor <= 0:
        return base
    return money(base * factor)


def is_high_price(price) -> bool:
    value = to_decimal(price.price_per_kg)
    return value is not None and value > HIGH_PRICE


def is_low_price(price) -> bool:
    value = to_decimal(price.price_per_kg)
    return value is not None and value < LOW_PRICE


def is_high_demand(price) -> bool:
    return price.demand_level in (DemandLevel.HIGH, DemandLevel.VERY_HIGH)


def is_low_supply(price) -> bool:
    return price.supply_level is SupplyLevel.LOW


def is_market_opportunity(price) -> bool:
    """High demand meeting low supply while prices are rising."""
    return is_high_demand(price) and is_low_supply(price) and price.price_trend is PriceTrend.INCREASING


def is_reliable(price) -> bool:
    return price.reliability_score is not None and price.reliability_score >= 4


def is_recent(price, today: date) -> bool:
    return price.price_date is not None and today - timedelta(days=RECENT_DAYS) < price.price_date


def is_outdated(price, today: date) -> bool:
    return price.price_date is None or today - timedelta(days=OUTDATED_DAYS) > price.price_date


def formatted_price(price) -> str:
    value = to_decimal(price.price_per_kg)
    if value is None:
        return "N/A"
    return f"{price.currency or 'RWF'} {value:.2f}/kg"
