"""
Identifier Generation — record ids and dated business codes.

Record id:      <prefix><last 6 digits of epoch millis><N random A-Z0-9>
Business code:  <PREFIX>[YYMMDD][HHMM]<k epoch-millis digits><m random A-Z0-9>

Examples (at 2024-03-05 14:07, millis ...8123456):
  Transaction id    TX123456K7Q2ZD
  Transaction code  TXN2403051407456QX9
  Inventory code    STOCK2403053456AB7

Uniqueness is probabilistic here; the write path (db.store) checks the
database and asks for a fresh value on collision.
"""

from __future__ import annotations

import secrets
import string
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

ALPHABET = string.ascii_uppercase + string.digits

# entity -> (id prefix, random suffix length)
ID_PREFIXES: dict[str, tuple[str, int]] = {
    "AIRecommendation": ("AR", 6),
    "Buyer": ("BY", 6),
    "ClimateImpact": ("CI", 6),
    "Crop": ("CR", 6),
    "CropProduction": ("CP", 6),
    "EnvironmentalData": ("ED", 6),
    "Farm": ("FM", 6),
    "Farmer": ("F", 7),
    "FertilizerUsage": ("FU", 6),
    "FoodSecurityAlert": ("FSA", 5),
    "Inventory": ("INV", 5),
    "IrrigationData": ("IR", 6),
    "IrrigationPrediction": ("IP", 6),
    "MarketPrice": ("MP", 6),
    "PolicyData": ("PD", 6),
    "ProductionPrediction": ("PP", 6),
    "ResourceRecommendation": ("RR", 6),
    "SoilData": ("SD", 6),
    "SupplyChain": ("SC", 6),
    "Transaction": ("TX", 6),
    "WeatherData": ("WD", 6),
}


@dataclass(frozen=True)
class CodeFormat:
    prefix: str
    timestamp_digits: int
    random_length: int
    include_date: bool = True
    include_time: bool = False


CODE_FORMATS: dict[str, CodeFormat] = {
    "Buyer": CodeFormat("BUY", 4, 4, include_date=False),
    "ClimateImpact": CodeFormat("IMP", 4, 4),
    "EnvironmentalData": CodeFormat("ENV", 4, 4),
    "FoodSecurityAlert": CodeFormat("ALT", 0, 4),
    "Inventory": CodeFormat("STOCK", 4, 3),
    "PolicyData": CodeFormat("POL", 4, 4),
    "ProductionPrediction": CodeFormat("PRED", 4, 4),
    "ResourceRecommendation": CodeFormat("REC", 4, 4),
    "SupplyChain": CodeFormat("TRK", 6, 5, include_date=False),
    "Transaction": CodeFormat("TXN", 3, 3, include_time=True),
}


def _epoch_millis(now: datetime) -> int:
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return int(now.timestamp() * 1000)


class IdentifierGenerator:
    """Builds record ids and business codes from a timestamp and random suffix.

    `choose` picks one character from the alphabet; it defaults to
    `secrets.choice` and can be swapped for a seeded `random.Random().choice`
    in tests.
    """

    def __init__(self, choose: Callable[[str], str] | None = None) -> None:
        self._choose = choose or secrets.choice

    def random_suffix(self, length: int) -> str:
        return "".join(self._choose(ALPHABET) for _ in range(length))

    def random_digits(self, length: int) -> str:
        return "".join(self._choose(string.digits) for _ in range(length))

    def timestamp_digits(self, now: datetime, digits: int) -> str:
        if digits <= 0:
            return ""
        return str(_epoch_millis(now))[-digits:]

    def record_id(self, entity: str, now: datetime, random_length: int | None = None) -> str:
        if entity not in ID_PREFIXES:
            raise ValueError(f"No identifier prefix registered for '{entity}'")
        prefix, default_length = ID_PREFIXES[entity]
        length = random_length or default_length
        return f"{prefix}{self.timestamp_digits(now, 6)}{self.random_suffix(length)}"

    def business_code(self, entity: str, now: datetime) -> str:
        fmt = CODE_FORMATS.get(entity)
        if fmt is None:
            raise ValueError(f"No business code format registered for '{entity}'")
        parts = [fmt.prefix]
        if fmt.include_date:
            parts.append(now.strftime("%y%m%d"))
        if fmt.include_time:
            parts.append(now.strftime("%H%M"))
        parts.append(self.timestamp_digits(now, fmt.timestamp_digits))
        parts.append(self.random_suffix(fmt.random_length))
        return "".join(parts)
