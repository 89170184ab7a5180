"""
Advisory messages shown to farmers (irrigation, pest control, market, ...).
"""

from __future__ import annotations

from datetime import datetime

from core.identifiers import IdentifierGenerator
from db.records import stamp_created, stamp_updated


def on_create(advisory, now: datetime, ids: IdentifierGenerator) -> None:
    stamp_created(advisory, now, ids)
    if advisory.valid_from is None:
        advisory.valid_from = now


def on_update(advisory, now: datetime) -> None:
    stamp_updated(advisory, now)


def mark_as_read(advisory, now: datetime) -> None:
    if advisory.is_read:
        return
    advisory.is_read = True
    advisory.read_at = now


def mark_implemented(advisory, now: datetime, notes: str | None = None) -> None:
    if advisory.is_implemented:
        return
    advisory.is_implemented = True
    advisory.implementation_date = now
    if notes:
        advisory.implementation_notes = notes


def is_valid(advisory, now: datetime) -> bool:
    """Active and inside its validity window."""
    if not advisory.is_active:
        return False
    if advisory.valid_from is not None and now < advisory.valid_from:
        return False
    return advisory.valid_until is None or now <= advisory.valid_until
