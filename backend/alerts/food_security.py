"""
Food Security Alerts — severity scoring, escalation and resolution.

Severity score (1-10):
    alert_level.priority * 2
    + (escalation_level - 1)
    + 2 when more than 100 000 people are affected, 1 above 10 000
clamped to [1, 10]. The score is refreshed on every write that changes one
of its inputs; a score set in that same write is kept as given.

Transitions are gated on the alert's current state; a call whose guard
fails changes nothing.
"""

from __future__ import annotations

from datetime import datetime, timedelta

import structlog

from core.identifiers import IdentifierGenerator
from db.enums import AlertLevel, ResolutionStatus, UrgencyLevel
from db.records import changed, stamp_created, stamp_updated

logger = structlog.get_logger()

MAX_ESCALATION = 5
LARGE_POPULATION = 100_000
HIGH_POPULATION = 10_000
SEVERITY_INPUTS = ("alert_level", "escalation_level", "affected_population")


def severity_score(alert) -> int:
    score = alert.alert_level.priority * 2 + ((alert.escalation_level or 1) - 1)
    population = alert.affected_population or 0
    if population > LARGE_POPULATION:
        score += 2
    elif population > HIGH_POPULATION:
        score += 1
    return min(10, max(1, score))


# ── Lifecycle ──────────────────────────────────────────────────────────────


def on_create(alert, now: datetime, ids: IdentifierGenerator) -> None:
    stamp_created(alert, now, ids)
    if alert.alert_date is None:
        alert.alert_date = now
    if alert.severity_score is None:
        alert.severity_score = severity_score(alert)


def on_update(alert, now: datetime) -> None:
    """Re-score when an input moved, unless this write also set the score itself."""
    stamp_updated(alert, now)
    if alert.severity_score is None or (
        changed(alert, *SEVERITY_INPUTS) and not changed(alert, "severity_score")
    ):
        alert.severity_score = severity_score(alert)
    if alert.resolution_status is ResolutionStatus.RESOLVED and alert.resolution_date is None:
        alert.resolution_date = now


# ── Predicates ─────────────────────────────────────────────────────────────


def is_expired(alert, now: datetime) -> bool:
    return alert.expiry_date is not None and now > alert.expiry_date


def is_active(alert, now: datetime) -> bool:
    return bool(alert.is_active) and not is_expired(alert, now)


def is_overdue(alert, now: datetime) -> bool:
    return bool(alert.response_required) and alert.response_deadline is not None and now > alert.response_deadline


def is_escalated(alert) -> bool:
    return (alert.escalation_level or 1) > 2


def affects_high_population(alert) -> bool:
    return (alert.affected_population or 0) > HIGH_POPULATION


def is_resolved(alert) -> bool:
    return alert.resolution_status is ResolutionStatus.RESOLVED


def urgency_level(alert) -> UrgencyLevel:
    level = alert.escalation_level or 1
    if alert.alert_level is AlertLevel.CRITICAL or level >= 4:
        return UrgencyLevel.EMERGENCY
    if alert.alert_level is AlertLevel.HIGH or level >= 3:
        return UrgencyLevel.URGENT
    if alert.alert_level is AlertLevel.MEDIUM or level >= 2:
        return UrgencyLevel.MODERATE
    return UrgencyLevel.ROUTINE


def is_ready_for_resolution(alert) -> bool:
    return alert.resolution_status is ResolutionStatus.IN_PROGRESS and bool((alert.mitigation_measures or "").strip())


# ── Transitions ────────────────────────────────────────────────────────────


def _skip(alert, action: str) -> None:
    logger.debug("alert.transition_skipped", action=action, alert_id=alert.id)


def can_escalate(alert, now: datetime) -> bool:
    return (alert.escalation_level or 1) < MAX_ESCALATION and is_active(alert, now)


def escalate(alert, now: datetime) -> None:
    """Raise the escalation level; from level 4 the alert becomes CRITICAL."""
    if not can_escalate(alert, now):
        return _skip(alert, "escalate")
    alert.escalation_level = (alert.escalation_level or 1) + 1
    if alert.escalation_level >= 4 and alert.alert_level is not AlertLevel.CRITICAL:
        alert.alert_level = AlertLevel.CRITICAL
    alert.severity_score = severity_score(alert)
    logger.info("alert.escalated", alert_id=alert.id, escalation_level=alert.escalation_level)


def can_mark_in_progress(alert) -> bool:
    return alert.resolution_status is ResolutionStatus.UNRESOLVED


def mark_in_progress(alert) -> None:
    if not can_mark_in_progress(alert):
        return _skip(alert, "mark_in_progress")
    alert.resolution_status = ResolutionStatus.IN_PROGRESS


def can_resolve(alert, now: datetime) -> bool:
    return not is_resolved(alert) and is_active(alert, now)


def mark_resolved(alert, now: datetime) -> None:
    if not can_resolve(alert, now):
        return _skip(alert, "mark_resolved")
    alert.resolution_status = ResolutionStatus.RESOLVED
    alert.resolution_date = now


def can_deactivate(alert, now: datetime) -> bool:
    return bool(alert.is_active) and (is_expired(alert, now) or is_resolved(alert))


def deactivate(alert, now: datetime) -> None:
    if not can_deactivate(alert, now):
        return _skip(alert, "deactivate")
    alert.is_active = False


def can_reactivate(alert, now: datetime) -> bool:
    return not alert.is_active and not is_expired(alert, now)


def reactivate(alert, now: datetime) -> None:
    if not can_reactivate(alert, now):
        return _skip(alert, "reactivate")
    alert.is_active = True
    alert.resolution_status = ResolutionStatus.UNRESOLVED
    alert.resolution_date = None


def can_extend(alert, now: datetime) -> bool:
    return is_active(alert, now) and alert.expiry_date is not None


def extend_expiry(alert, days: int, now: datetime) -> None:
    if not can_extend(alert, now) or days <= 0:
        return _skip(alert, "extend_expiry")
    alert.expiry_date = alert.expiry_date + timedelta(days=days)


def update_response_deadline(alert, deadline: datetime) -> None:
    alert.response_deadline = deadline
    alert.response_required = True


def _append_unique(values: list | None, item: str) -> list:
    values = list(values or [])
    if item and item not in values:
        values.append(item)
    return values


def add_stakeholder(alert, stakeholder: str) -> None:
    alert.stakeholders_notified = _append_unique(alert.stakeholders_notified, stakeholder)


def add_follow_up_alert(alert, alert_code: str) -> None:
    alert.follow_up_alerts = _append_unique(alert.follow_up_alerts, alert_code)


# ── Display ────────────────────────────────────────────────────────────────


def formatted_population(alert) -> str:
    population = alert.affected_population
    if population is None:
        return "Unknown"
    if population >= 1_000_000:
        return f"{population / 1_000_000:.1f}M people"
    if population >= 1_000:
        return f"{population / 1_000:.1f}K people"
    return f"{population} people"


def formatted_severity(alert) -> str:
    if alert.severity_score is None:
        return "N/A"
    return f"{alert.severity_score}/10"
