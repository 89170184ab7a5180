"""
Farmers and the farms they hold.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from core.identifiers import IdentifierGenerator
from core.numbers import to_decimal
from db.enums import ExperienceLevel
from db.records import stamp_created, stamp_updated

LARGE_FARM = Decimal("10")
SMALL_FARM = Decimal("2")


def on_create(record, now: datetime, ids: IdentifierGenerator) -> None:
    stamp_created(record, now, ids)


def on_update(record, now: datetime) -> None:
    stamp_updated(record, now)


# ── Farms ──────────────────────────────────────────────────────────────────


def coordinates(farm) -> str:
    lat, lon = to_decimal(farm.latitude), to_decimal(farm.longitude)
    if lat is None or lon is None:
        return "N/A"
    return f"{lat:.6f}, {lon:.6f}"


def is_large_farm(farm) -> bool:
    size = to_decimal(farm.farm_size)
    return size is not None and size > LARGE_FARM


def is_small_farm(farm) -> bool:
    size = to_decimal(farm.farm_size)
    return size is not None and size <= SMALL_FARM


def size_category(farm) -> str:
    if is_small_farm(farm):
        return "Small Farm"
    if is_large_farm(farm):
        return "Large Farm"
    return "Medium Farm"


# ── Farmers ────────────────────────────────────────────────────────────────


def full_address(farmer) -> str:
    parts = (farmer.location, farmer.sector, farmer.district, farmer.province)
    return ", ".join(part for part in parts if part)


def is_experienced(farmer) -> bool:
    return farmer.experience_level is ExperienceLevel.EXPERT


def is_beginner(farmer) -> bool:
    return farmer.experience_level in (None, ExperienceLevel.BEGINNER)
