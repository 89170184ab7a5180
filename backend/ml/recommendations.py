"""
Resource Recommendations — validity windows, implementation and feedback.

A recommendation is ACTIVE until it is implemented, rejected, superseded
or runs past `valid_until`. The validity window defaults by category:

    EMERGENCY 7 days, PROBLEM_SOLVING 14, PREVENTIVE 60, SEASONAL 90,
    anything else 30
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from decimal import Decimal

import structlog

from core.identifiers import IdentifierGenerator
from core.numbers import money, percent, to_decimal
from db.enums import EffectivenessRating, RecommendationCategory, RecommendationStatus, SustainabilityLevel
from db.records import stamp_created, stamp_updated

logger = structlog.get_logger()

VALIDITY_DAYS = {
    RecommendationCategory.EMERGENCY: 7,
    RecommendationCategory.PROBLEM_SOLVING: 14,
    RecommendationCategory.PREVENTIVE: 60,
    RecommendationCategory.SEASONAL: 90,
}
DEFAULT_VALIDITY_DAYS = 30
EXPIRY_WARNING_DAYS = 7
HIGH_CONFIDENCE = Decimal("80")
LOW_CONFIDENCE = Decimal("60")
LOW_COST = Decimal("10000")
HIGH_ROI = Decimal("20")


# ── Lifecycle ──────────────────────────────────────────────────────────────


def validity_days(category: RecommendationCategory | None) -> int:
    return VALIDITY_DAYS.get(category, DEFAULT_VALIDITY_DAYS)


def on_create(recommendation, now: datetime, ids: IdentifierGenerator) -> None:
    stamp_created(recommendation, now, ids)
    if recommendation.generated_date is None:
        recommendation.generated_date = now
    if recommendation.valid_until is None:
        days = validity_days(recommendation.recommendation_category)
        recommendation.valid_until = now.date() + timedelta(days=days)


def on_update(recommendation, now: datetime) -> None:
    stamp_updated(recommendation, now)
    if recommendation.status is RecommendationStatus.IMPLEMENTED and recommendation.implementation_date is None:
        recommendation.implementation_date = now.date()
    if recommendation.reviewed_by and recommendation.review_date is None:
        recommendation.review_date = now


# ── Predicates ─────────────────────────────────────────────────────────────


def is_active(recommendation) -> bool:
    return recommendation.status is RecommendationStatus.ACTIVE


def is_overdue(recommendation, today: date) -> bool:
    return (
        is_active(recommendation)
        and recommendation.valid_until is not None
        and today > recommendation.valid_until
    )


def is_expiring_soon(recommendation, today: date) -> bool:
    return (
        is_active(recommendation)
        and recommendation.valid_until is not None
        and today + timedelta(days=EXPIRY_WARNING_DAYS) > recommendation.valid_until
    )


def is_high_confidence(recommendation) -> bool:
    score = to_decimal(recommendation.confidence_score)
    return score is not None and score >= HIGH_CONFIDENCE


def is_low_confidence(recommendation) -> bool:
    score = to_decimal(recommendation.confidence_score)
    return score is not None and score < LOW_CONFIDENCE


def is_low_cost(recommendation) -> bool:
    cost = to_decimal(recommendation.estimated_cost)
    return cost is not None and cost <= LOW_COST


def is_high_value(recommendation) -> bool:
    roi = to_decimal(recommendation.expected_roi)
    return roi is not None and roi >= HIGH_ROI


def is_within_timing_window(recommendation, today: date) -> bool:
    start, end = recommendation.timing_start_date, recommendation.timing_end_date
    if start is None or end is None:
        return True
    return start <= today <= end


def is_follow_up_due(recommendation, today: date) -> bool:
    return (
        bool(recommendation.follow_up_required)
        and recommendation.follow_up_date is not None
        and today >= recommendation.follow_up_date
    )


def has_positive_feedback(recommendation) -> bool:
    rating = recommendation.effectiveness_rating
    return rating is not None and rating.is_positive


def cost_variance(recommendation) -> Decimal | None:
    actual = to_decimal(recommendation.actual_cost)
    estimated = to_decimal(recommendation.estimated_cost)
    if actual is None or estimated is None:
        return None
    return money(actual - estimated)


def cost_variance_percentage(recommendation) -> Decimal | None:
    return percent(cost_variance(recommendation), recommendation.estimated_cost)


def sustainability_level(recommendation) -> SustainabilityLevel | None:
    score = recommendation.sustainability_score
    if score is None:
        return None
    if score <= 2:
        return SustainabilityLevel.VERY_LOW
    if score <= 4:
        return SustainabilityLevel.LOW
    if score <= 6:
        return SustainabilityLevel.MEDIUM
    if score <= 8:
        return SustainabilityLevel.HIGH
    return SustainabilityLevel.VERY_HIGH


# ── Transitions ────────────────────────────────────────────────────────────


def _skip(recommendation, action: str) -> None:
    logger.debug("recommendation.transition_skipped", action=action, recommendation_id=recommendation.id)


def can_implement(recommendation, today: date) -> bool:
    return is_active(recommendation) and not is_overdue(recommendation, today)


def implement(recommendation, today: date, notes: str | None = None) -> None:
    if not can_implement(recommendation, today):
        return _skip(recommendation, "implement")
    recommendation.status = RecommendationStatus.IMPLEMENTED
    recommendation.implementation_date = today
    if notes:
        recommendation.implementation_notes = notes


def reject(recommendation) -> None:
    if not is_active(recommendation):
        return _skip(recommendation, "reject")
    recommendation.status = RecommendationStatus.REJECTED


def supersede(recommendation) -> None:
    if not is_active(recommendation):
        return _skip(recommendation, "supersede")
    recommendation.status = RecommendationStatus.SUPERSEDED


def mark_as_expired(recommendation, today: date) -> None:
    if not is_overdue(recommendation, today):
        return _skip(recommendation, "mark_as_expired")
    recommendation.status = RecommendationStatus.EXPIRED


def add_effectiveness_rating(recommendation, rating: EffectivenessRating, feedback: str | None = None) -> None:
    recommendation.effectiveness_rating = rating
    if feedback:
        recommendation.farmer_feedback = feedback


def update_actual_cost(recommendation, cost) -> None:
    recommendation.actual_cost = money(cost)


def schedule_follow_up(recommendation, follow_up_on: date) -> None:
    recommendation.follow_up_required = True
    recommendation.follow_up_date = follow_up_on


def complete_follow_up(recommendation) -> None:
    recommendation.follow_up_required = False
    recommendation.follow_up_date = None
