"""
Crop catalog entries and their agronomic ranges.
"""

from __future__ import annotations

from datetime import datetime

from core.identifiers import IdentifierGenerator
from core.numbers import to_decimal
from db.enums import MarketDemand
from db.records import stamp_created, stamp_updated

SHORT_GROWING_DAYS = 90
LONG_GROWING_DAYS = 365
LONG_STORAGE_DAYS = 365


def on_create(crop, now: datetime, ids: IdentifierGenerator) -> None:
    stamp_created(crop, now, ids)


def on_update(crop, now: datetime) -> None:
    stamp_updated(crop, now)


def full_name(crop) -> str:
    if crop.variety:
        return f"{crop.crop_name} ({crop.variety})"
    return crop.crop_name


def growing_period_display(crop) -> str:
    days = crop.growing_period_days
    if days is None:
        return "N/A"
    months = days / 30
    if months < 1:
        return f"{days} days"
    if months < 12:
        return f"{months:.1f} months"
    return f"{months / 12:.1f} years"


def storage_life_display(crop) -> str:
    days = crop.storage_life_days
    if days is None:
        return "N/A"
    if days < 30:
        return f"{days} days"
    if days < 365:
        return f"{days / 30:.1f} months"
    return f"{days / 365:.1f} years"


def temperature_range(crop) -> str:
    low, high = to_decimal(crop.temperature_min), to_decimal(crop.temperature_max)
    if low is None or high is None:
        return "N/A"
    return f"{low:.1f}°C - {high:.1f}°C"


def ph_range(crop) -> str:
    low, high = to_decimal(crop.soil_ph_min), to_decimal(crop.soil_ph_max)
    if low is None or high is None:
        return "N/A"
    return f"{low:.1f} - {high:.1f}"


def is_high_demand(crop) -> bool:
    return crop.market_demand_level is MarketDemand.HIGH


def has_long_storage_life(crop) -> bool:
    return crop.storage_life_days is not None and crop.storage_life_days > LONG_STORAGE_DAYS


def is_short_growing(crop) -> bool:
    return crop.growing_period_days is not None and crop.growing_period_days <= SHORT_GROWING_DAYS


def is_long_growing(crop) -> bool:
    return crop.growing_period_days is not None and crop.growing_period_days >= LONG_GROWING_DAYS
