"""
Climate events (drought, flood, ...) and the losses attributed to them.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from core.identifiers import IdentifierGenerator
from core.numbers import to_decimal
from db.enums import EventIntensity, ImpactSeverity
from db.records import stamp_created, stamp_updated

SIGNIFICANT_LOSS = Decimal("50000")
RECENT_DAYS = 30


def event_duration_days(impact) -> int | None:
    """Inclusive length of the event; None while it has no end date."""
    if impact.event_start_date is None or impact.event_end_date is None:
        return None
    return (impact.event_end_date - impact.event_start_date).days + 1


def on_create(impact, now: datetime, ids: IdentifierGenerator) -> None:
    stamp_created(impact, now, ids)
    if impact.report_date is None:
        impact.report_date = now.date()
    if impact.event_duration_days is None:
        impact.event_duration_days = event_duration_days(impact)


def on_update(impact, now: datetime) -> None:
    stamp_updated(impact, now)
    duration = event_duration_days(impact)
    if duration is not None:
        impact.event_duration_days = duration
    if impact.verified and impact.verification_date is None:
        impact.verification_date = now


def impact_severity(impact) -> ImpactSeverity:
    loss = to_decimal(impact.economic_loss)
    if loss is None:
        return ImpactSeverity.LOW
    if loss >= Decimal("1000000"):
        return ImpactSeverity.CATASTROPHIC
    if loss >= Decimal("100000"):
        return ImpactSeverity.HIGH
    if loss >= Decimal("10000"):
        return ImpactSeverity.MODERATE
    return ImpactSeverity.LOW


def is_ongoing(impact, today: date) -> bool:
    return impact.event_end_date is None or today <= impact.event_end_date


def is_recent(impact, today: date) -> bool:
    if impact.event_start_date is None:
        return False
    return (today - impact.event_start_date).days <= RECENT_DAYS


def has_significant_loss(impact) -> bool:
    loss = to_decimal(impact.economic_loss)
    return loss is not None and loss >= SIGNIFICANT_LOSS


def requires_emergency_response(impact) -> bool:
    severe = impact.event_intensity in (EventIntensity.SEVERE, EventIntensity.EXTREME)
    return severe or has_significant_loss(impact)
