"""
Weather station readings.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from core.identifiers import IdentifierGenerator
from core.numbers import to_decimal
from db.enums import TemperatureRange
from db.records import stamp_created, stamp_updated

# (upper bound, band); readings at or above the last bound are VERY_HOT
TEMPERATURE_BANDS = (
    (Decimal("0"), TemperatureRange.FREEZING),
    (Decimal("10"), TemperatureRange.COLD),
    (Decimal("20"), TemperatureRange.COOL),
    (Decimal("25"), TemperatureRange.MILD),
    (Decimal("30"), TemperatureRange.WARM),
    (Decimal("35"), TemperatureRange.HOT),
)


def on_create(reading, now: datetime, ids: IdentifierGenerator) -> None:
    stamp_created(reading, now, ids)
    if reading.record_date is None:
        reading.record_date = now


def on_update(reading, now: datetime) -> None:
    stamp_updated(reading, now)


def is_rainy(reading) -> bool:
    rainfall = to_decimal(reading.rainfall)
    return rainfall is not None and rainfall > 0


def is_windy(reading) -> bool:
    wind = to_decimal(reading.wind_speed)
    return wind is not None and wind > 20


def is_hot(reading) -> bool:
    temperature = to_decimal(reading.temperature)
    return temperature is not None and temperature > 30


def is_cold(reading) -> bool:
    temperature = to_decimal(reading.temperature)
    return temperature is not None and temperature < 10


def temperature_range(reading) -> TemperatureRange | None:
    temperature = to_decimal(reading.temperature)
    if temperature is None:
        return None
    for upper, band in TEMPERATURE_BANDS:
        if temperature < upper:
            return band
    return TemperatureRange.VERY_HOT
