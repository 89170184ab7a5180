"""
Production Predictions — accuracy tracking and the review workflow.

    PENDING -> VALIDATED | REJECTED      (validate / reject)
    VALIDATED -> published               (publish / unpublish)

Accuracy once the actual value is known:
    100 * (1 - |actual - predicted| / predicted), clamped to [0, 100]
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import structlog

from core.identifiers import IdentifierGenerator
from core.numbers import HUNDRED, ZERO, money, ratio, to_decimal
from db.enums import AccuracyLevel, ValidationStatus
from db.records import stamp_created, stamp_updated

logger = structlog.get_logger()

# inclusive bands, first match wins
ACCURACY_BANDS = (
    (Decimal("0"), Decimal("40"), AccuracyLevel.VERY_LOW),
    (Decimal("40"), Decimal("60"), AccuracyLevel.LOW),
    (Decimal("60"), Decimal("75"), AccuracyLevel.MEDIUM),
    (Decimal("75"), Decimal("85"), AccuracyLevel.HIGH),
    (Decimal("85"), Decimal("100"), AccuracyLevel.VERY_HIGH),
)


def accuracy(predicted, actual) -> Decimal | None:
    predicted, actual = to_decimal(predicted), to_decimal(actual)
    if actual is None or predicted is None or predicted <= 0:
        return None
    error = ratio(abs(actual - predicted), predicted)
    return money(min(HUNDRED, max(ZERO, (1 - error) * HUNDRED)))


def recompute(prediction):
    achieved = accuracy(prediction.predicted_value, prediction.actual_value)
    if achieved is not None:
        prediction.accuracy_achieved = achieved
    return prediction


def on_create(prediction, now: datetime, ids: IdentifierGenerator) -> None:
    stamp_created(prediction, now, ids)
    if prediction.prediction_date is None:
        prediction.prediction_date = now
    prediction.last_updated = now
    recompute(prediction)


def on_update(prediction, now: datetime) -> None:
    stamp_updated(prediction, now)
    prediction.last_updated = now
    recompute(prediction)


def accuracy_level(prediction) -> AccuracyLevel:
    value = to_decimal(prediction.accuracy_achieved)
    if value is None:
        return AccuracyLevel.MEDIUM
    for low, high, level in ACCURACY_BANDS:
        if low <= value <= high:
            return level
    return AccuracyLevel.MEDIUM


def update_actual_value(prediction, value, now: datetime) -> None:
    prediction.actual_value = value
    prediction.last_updated = now
    recompute(prediction)


# ── Review workflow ────────────────────────────────────────────────────────


def _skip(prediction, action: str) -> None:
    logger.debug("prediction.transition_skipped", action=action, prediction_id=prediction.id)


def can_validate(prediction) -> bool:
    return prediction.validation_status is ValidationStatus.PENDING


def validate(prediction, validator_id: str, now: datetime) -> None:
    if not can_validate(prediction):
        return _skip(prediction, "validate")
    prediction.validation_status = ValidationStatus.VALIDATED
    prediction.validated_by = validator_id
    prediction.validation_date = now


def reject(prediction, validator_id: str, now: datetime) -> None:
    if not can_validate(prediction):
        return _skip(prediction, "reject")
    prediction.validation_status = ValidationStatus.REJECTED
    prediction.validated_by = validator_id
    prediction.validation_date = now


def can_publish(prediction) -> bool:
    return prediction.validation_status is ValidationStatus.VALIDATED and not prediction.published


def publish(prediction) -> None:
    if not can_publish(prediction):
        return _skip(prediction, "publish")
    prediction.published = True


def unpublish(prediction) -> None:
    if not prediction.published:
        return _skip(prediction, "unpublish")
    prediction.published = False


def is_within_interval(prediction) -> bool | None:
    actual = to_decimal(prediction.actual_value)
    low = to_decimal(prediction.prediction_interval_min)
    high = to_decimal(prediction.prediction_interval_max)
    if actual is None or low is None or high is None:
        return None
    return low <= actual <= high
