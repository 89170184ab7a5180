"""
Buyer profiles: credit standing, capacity and reputation checks.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from core.identifiers import IdentifierGenerator
from core.numbers import to_decimal
from db.enums import CreditRating
from db.records import stamp_created, stamp_updated

HIGH_VOLUME = Decimal("1000")
LARGE_CAPACITY = Decimal("500")
HIGH_CREDIT_LIMIT = Decimal("50000")
PREMIUM_RATING = Decimal("4")
EXPERIENCED_YEARS = 5
GOOD_CREDIT = (CreditRating.A_PLUS, CreditRating.A, CreditRating.B_PLUS)


def on_create(buyer, now: datetime, ids: IdentifierGenerator) -> None:
    stamp_created(buyer, now, ids)


def on_update(buyer, now: datetime) -> None:
    stamp_updated(buyer, now)


def parse_credit_rating(text: str | None) -> CreditRating | None:
    """Map a rating as written by people ("a+", " B ") to its member."""
    return CreditRating.from_label(text)


def is_high_volume(buyer) -> bool:
    volume = to_decimal(buyer.annual_volume)
    return volume is not None and volume > HIGH_VOLUME


def has_large_storage_capacity(buyer) -> bool:
    capacity = to_decimal(buyer.storage_capacity)
    return capacity is not None and capacity > LARGE_CAPACITY


def is_premium(buyer) -> bool:
    rating = to_decimal(buyer.rating)
    return rating is not None and rating >= PREMIUM_RATING and bool(buyer.verified)


def business_age(buyer, today: date) -> int | None:
    if buyer.established_year is None:
        return None
    return today.year - buyer.established_year


def is_experienced(buyer, today: date) -> bool:
    age = business_age(buyer, today)
    return age is not None and age >= EXPERIENCED_YEARS


def has_good_credit(buyer) -> bool:
    return buyer.credit_rating in GOOD_CREDIT


def has_high_credit_limit(buyer) -> bool:
    limit = to_decimal(buyer.credit_limit)
    return limit is not None and limit > HIGH_CREDIT_LIMIT


def verification_status(buyer) -> str:
    return "VERIFIED" if buyer.verified else "NOT_VERIFIED"
