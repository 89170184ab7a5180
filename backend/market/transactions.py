"""
Farmer to buyer sales — totals, farmer net and the payment lifecycle.

    PENDING -> CONFIRMED -> DELIVERED -> PAID
    PENDING | CONFIRMED -> CANCELLED
    anything but CANCELLED/DISPUTED -> DISPUTED

Transitions whose guard fails leave the record untouched; call the
matching `can_*` predicate first when the outcome matters.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import structlog

from core.identifiers import IdentifierGenerator
from core.numbers import ZERO, money, to_decimal
from db.enums import RatingLevel, TransactionStatus, TransportResponsibility
from db.records import stamp_created, stamp_updated

logger = structlog.get_logger()

TWO = Decimal("2")


# ── Lifecycle ──────────────────────────────────────────────────────────────


def farmer_transport_share(transaction) -> Decimal:
    cost = to_decimal(transaction.transport_cost)
    if cost is None:
        return ZERO
    if transaction.transport_responsibility is TransportResponsibility.FARMER:
        return cost
    if transaction.transport_responsibility is TransportResponsibility.SHARED:
        return money(cost / TWO)
    return ZERO


def recompute(transaction):
    quantity = to_decimal(transaction.quantity)
    price = to_decimal(transaction.price_per_unit)
    if quantity is None or price is None:
        return transaction

    total = money(quantity * price)
    transaction.total_amount = total
    deductions = (
        (to_decimal(transaction.broker_commission) or ZERO)
        + (to_decimal(transaction.government_tax) or ZERO)
        + farmer_transport_share(transaction)
    )
    transaction.net_amount_farmer = money(total - deductions)
    return transaction


def on_create(transaction, now: datetime, ids: IdentifierGenerator) -> None:
    stamp_created(transaction, now, ids)
    if transaction.transaction_date is None:
        transaction.transaction_date = now
    recompute(transaction)


def on_update(transaction, now: datetime) -> None:
    stamp_updated(transaction, now)
    recompute(transaction)


# ── Transitions ────────────────────────────────────────────────────────────


def can_confirm(transaction) -> bool:
    return transaction.status is TransactionStatus.PENDING


def can_deliver(transaction) -> bool:
    return transaction.status is TransactionStatus.CONFIRMED


def can_mark_as_paid(transaction) -> bool:
    return transaction.status is TransactionStatus.DELIVERED


def can_cancel(transaction) -> bool:
    return transaction.status in (TransactionStatus.PENDING, TransactionStatus.CONFIRMED)


def can_dispute(transaction) -> bool:
    return transaction.status not in (TransactionStatus.CANCELLED, TransactionStatus.DISPUTED)


def _skip(transaction, action: str) -> None:
    logger.debug(
        "transaction.transition_skipped",
        action=action,
        transaction_id=transaction.id,
        status=transaction.status.name if transaction.status else None,
    )


def confirm(transaction) -> None:
    if not can_confirm(transaction):
        return _skip(transaction, "confirm")
    transaction.status = TransactionStatus.CONFIRMED


def mark_as_delivered(transaction) -> None:
    if not can_deliver(transaction):
        return _skip(transaction, "deliver")
    transaction.status = TransactionStatus.DELIVERED


def mark_as_paid(transaction, now: datetime) -> None:
    if not can_mark_as_paid(transaction):
        return _skip(transaction, "mark_as_paid")
    transaction.status = TransactionStatus.PAID
    transaction.payment_date = now
    transaction.completion_date = now


def cancel(transaction) -> None:
    if not can_cancel(transaction):
        return _skip(transaction, "cancel")
    transaction.status = TransactionStatus.CANCELLED


def mark_as_disputed(transaction) -> None:
    if not can_dispute(transaction):
        return _skip(transaction, "dispute")
    transaction.status = TransactionStatus.DISPUTED


# ── Predicates ─────────────────────────────────────────────────────────────


def is_completed(transaction) -> bool:
    return transaction.status is TransactionStatus.PAID


def is_active(transaction) -> bool:
    return transaction.status is not TransactionStatus.CANCELLED


def farmer_rating_level(transaction) -> RatingLevel:
    return RatingLevel.from_rating(transaction.rating_farmer)


def buyer_rating_level(transaction) -> RatingLevel:
    return RatingLevel.from_rating(transaction.rating_buyer)


def formatted_total(transaction) -> str:
    total = to_decimal(transaction.total_amount)
    if total is None:
        return "N/A"
    return f"{transaction.currency or 'XAF'} {total:,.2f}"
