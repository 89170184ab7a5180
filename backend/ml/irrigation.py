"""
Irrigation predictions: water stress turned into an alert level.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from core.identifiers import IdentifierGenerator
from core.numbers import to_decimal
from db.enums import IrrigationAlertLevel
from db.records import stamp_created, stamp_updated

# (level, stress risk at or above, yield impact at or below)
ALERT_BOUNDS = (
    (IrrigationAlertLevel.CRITICAL, 80, -40),
    (IrrigationAlertLevel.HIGH, 60, -20),
    (IrrigationAlertLevel.MODERATE, 40, -10),
)


def yield_impact_from_stress(stress) -> Decimal | None:
    """Expected yield change (%) for a water stress risk (%)."""
    stress = to_decimal(stress)
    if stress is None:
        return None
    if stress < 30:
        return Decimal("5")
    if stress < 50:
        return Decimal("0")
    if stress < 70:
        return Decimal("-15")
    if stress < 85:
        return Decimal("-30")
    return Decimal("-50")


def alert_level_for(stress, impact) -> IrrigationAlertLevel:
    stress = to_decimal(stress)
    impact = to_decimal(impact)
    for level, stress_bound, impact_bound in ALERT_BOUNDS:
        if (stress is not None and stress >= stress_bound) or (impact is not None and impact <= impact_bound):
            return level
    return IrrigationAlertLevel.LOW


def recompute(prediction):
    if prediction.predicted_yield_impact is None:
        prediction.predicted_yield_impact = yield_impact_from_stress(prediction.water_stress_risk)
    prediction.alert_level = alert_level_for(prediction.water_stress_risk, prediction.predicted_yield_impact)
    return prediction


def on_create(prediction, now: datetime, ids: IdentifierGenerator) -> None:
    stamp_created(prediction, now, ids)
    if prediction.prediction_date is None:
        prediction.prediction_date = now
    recompute(prediction)


def on_update(prediction, now: datetime) -> None:
    stamp_updated(prediction, now)
    recompute(prediction)


def irrigation_urgency(prediction) -> str:
    level = prediction.alert_level or IrrigationAlertLevel.LOW
    return level.description


def requires_immediate_irrigation(prediction) -> bool:
    return prediction.alert_level is IrrigationAlertLevel.CRITICAL
