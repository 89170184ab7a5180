"""
Environmental Monitoring — risk scoring of field observations.

Up to five indicators each contribute 0-3 points:

    air quality index        >150: 3   >100: 2   >50: 1
    water quality index       <40: 3    <60: 2   <80: 1
    deforestation rate (%)     >5: 3     >2: 2   >0.5: 1
    soil erosion rate         >10: 3     >5: 2    >2: 1
    endangered species ratio  >0.3: 3   >0.2: 2  >0.1: 1

The unweighted mean over the indicators present picks the band:
>=2.5 CRITICAL, >=1.5 HIGH, >=0.5 MEDIUM, otherwise LOW. With no
indicator present the stored level is left as it is.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from decimal import Decimal

import structlog

from core.identifiers import IdentifierGenerator
from core.numbers import to_decimal
from db.enums import MonitoringFrequency, RiskLevel, ValidationStatus
from db.records import stamp_created, stamp_updated

logger = structlog.get_logger()


def _descending(value: Decimal, bands: tuple[str, str, str]) -> int:
    """Points for an indicator where higher readings are worse."""
    high, medium, low = (Decimal(b) for b in bands)
    if value > high:
        return 3
    if value > medium:
        return 2
    if value > low:
        return 1
    return 0


def _ascending(value: Decimal, bands: tuple[str, str, str]) -> int:
    """Points for an indicator where lower readings are worse."""
    high, medium, low = (Decimal(b) for b in bands)
    if value < high:
        return 3
    if value < medium:
        return 2
    if value < low:
        return 1
    return 0


def risk_factors(record) -> list[int]:
    factors = []
    aqi = to_decimal(record.air_quality_index)
    if aqi is not None:
        factors.append(_descending(aqi, ("150", "100", "50")))
    wqi = to_decimal(record.water_quality_index)
    if wqi is not None:
        factors.append(_ascending(wqi, ("40", "60", "80")))
    deforestation = to_decimal(record.deforestation_rate)
    if deforestation is not None:
        factors.append(_descending(deforestation, ("5", "2", "0.5")))
    erosion = to_decimal(record.soil_erosion_rate)
    if erosion is not None:
        factors.append(_descending(erosion, ("10", "5", "2")))
    if record.endangered_species_count is not None and record.species_count:
        share = Decimal(record.endangered_species_count) / Decimal(record.species_count)
        factors.append(_descending(share, ("0.3", "0.2", "0.1")))
    return factors


def classify_risk(factors: list[int]) -> RiskLevel | None:
    if not factors:
        return None
    average = sum(factors) / len(factors)
    if average >= 2.5:
        return RiskLevel.CRITICAL
    if average >= 1.5:
        return RiskLevel.HIGH
    if average >= 0.5:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def recompute(record):
    level = classify_risk(risk_factors(record))
    if level is not None:
        record.environmental_risk_level = level
    return record


def on_create(record, now: datetime, ids: IdentifierGenerator) -> None:
    stamp_created(record, now, ids)
    if record.record_date is None:
        record.record_date = now.date()
    recompute(record)


def on_update(record, now: datetime) -> None:
    stamp_updated(record, now)
    recompute(record)
    if (
        record.validation_status in (ValidationStatus.VALIDATED, ValidationStatus.REJECTED)
        and record.validation_date is None
        and record.validated_by
    ):
        record.validation_date = now


def schedule_next_monitoring(record, today: date) -> date | None:
    """Set next_monitoring_date from the monitoring frequency; on-demand has none."""
    frequency = record.monitoring_frequency
    if frequency is None or frequency is MonitoringFrequency.ON_DEMAND:
        record.next_monitoring_date = None
    else:
        record.next_monitoring_date = today + timedelta(days=frequency.days)
    return record.next_monitoring_date


def is_high_risk(record) -> bool:
    return record.environmental_risk_level is not None and record.environmental_risk_level.is_high_risk


def requires_action(record) -> bool:
    return record.environmental_risk_level is not None and record.environmental_risk_level.requires_action


def has_reliable_data(record) -> bool:
    return record.data_quality is not None and record.data_quality.is_reliable


def is_monitoring_due(record, today: date) -> bool:
    return record.next_monitoring_date is not None and today >= record.next_monitoring_date
