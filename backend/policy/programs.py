"""
Agricultural Policies — budget utilization, reviews and expiry.

utilization_rate = budget_utilized / budget_allocated * 100
An ACTIVE policy turns EXPIRED on the first write after its expiry date.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import structlog
from dateutil.relativedelta import relativedelta

from core.identifiers import IdentifierGenerator
from core.numbers import percent, to_decimal
from db.enums import PolicyEffectiveness, PolicyStatus
from db.records import stamp_created, stamp_updated

logger = structlog.get_logger()

EXPIRY_WARNING_DAYS = 90
HIGH_UTILIZATION = Decimal("80")

EFFECTIVENESS_BANDS = (
    (Decimal("90"), PolicyEffectiveness.HIGHLY_EFFECTIVE),
    (Decimal("75"), PolicyEffectiveness.EFFECTIVE),
    (Decimal("60"), PolicyEffectiveness.MODERATELY_EFFECTIVE),
    (Decimal("40"), PolicyEffectiveness.SLIGHTLY_EFFECTIVE),
)


def utilization_rate(policy) -> Decimal | None:
    if policy.budget_utilized is None:
        return None
    return percent(policy.budget_utilized, policy.budget_allocated)


def on_create(policy, now: datetime, ids: IdentifierGenerator) -> None:
    stamp_created(policy, now, ids)
    if policy.utilization_rate is None:
        policy.utilization_rate = utilization_rate(policy)
    if policy.next_review_date is None and policy.effective_date is not None:
        policy.next_review_date = policy.effective_date + relativedelta(years=1)


def on_update(policy, now: datetime) -> None:
    stamp_updated(policy, now)
    rate = utilization_rate(policy)
    if rate is not None:
        policy.utilization_rate = rate
    today = now.date()
    if policy.status is PolicyStatus.ACTIVE and policy.expiry_date is not None and today > policy.expiry_date:
        policy.status = PolicyStatus.EXPIRED
        logger.info("policy.auto_expired", policy_id=policy.id, expiry_date=str(policy.expiry_date))


def effectiveness(policy) -> PolicyEffectiveness:
    score = to_decimal(policy.effectiveness_score)
    if score is None:
        return PolicyEffectiveness.NOT_ASSESSED
    for floor, band in EFFECTIVENESS_BANDS:
        if score >= floor:
            return band
    return PolicyEffectiveness.INEFFECTIVE


def is_currently_active(policy, today: date) -> bool:
    if policy.status is not PolicyStatus.ACTIVE:
        return False
    if policy.effective_date is not None and today < policy.effective_date:
        return False
    return policy.expiry_date is None or today <= policy.expiry_date


def is_expiring_soon(policy, today: date) -> bool:
    if policy.expiry_date is None or today > policy.expiry_date:
        return False
    return (policy.expiry_date - today).days <= EXPIRY_WARNING_DAYS


def has_high_utilization(policy) -> bool:
    rate = to_decimal(policy.utilization_rate)
    return rate is not None and rate >= HIGH_UTILIZATION


def requires_review(policy, today: date) -> bool:
    return policy.next_review_date is not None and today > policy.next_review_date


def is_socially_inclusive(policy) -> bool:
    return bool(policy.youth_focus or policy.gender_considerations)


def is_environmentally_friendly(policy) -> bool:
    return bool(policy.climate_smart or policy.environmental_clearance)


def beneficiary_reach(policy) -> Decimal | None:
    """Actual beneficiaries as a percentage of the target."""
    if policy.actual_beneficiaries is None:
        return None
    return percent(policy.actual_beneficiaries, policy.target_beneficiaries)
