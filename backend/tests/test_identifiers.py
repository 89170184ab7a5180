"""
Unit Tests — Identifier generation and the pinned clock.
"""

import re
from datetime import datetime

import pytest

NOW = datetime(2024, 3, 5, 14, 7)


def _constant(char):
    from core.identifiers import IdentifierGenerator

    return IdentifierGenerator(lambda alphabet: char)


class TestRecordIds:
    def test_record_id_layout(self):
        """Prefix, last six digits of epoch millis, then the random suffix."""
        assert _constant("A").record_id("Transaction", NOW) == "TX620000AAAAAA"

    def test_per_entity_suffix_length(self):
        """Inventory and alerts use five random chars, farmers seven."""
        gen = _constant("Z")
        assert gen.record_id("Inventory", NOW) == "INV620000ZZZZZ"
        assert gen.record_id("FoodSecurityAlert", NOW) == "FSA620000ZZZZZ"
        assert gen.record_id("Farmer", NOW) == "F620000ZZZZZZZ"

    def test_default_generator_uses_alphabet(self):
        """Random suffix only contains A-Z and 0-9."""
        from core.identifiers import IdentifierGenerator

        record_id = IdentifierGenerator().record_id("Buyer", NOW)
        assert re.fullmatch(r"BY620000[A-Z0-9]{6}", record_id)

    def test_unknown_entity_raises(self):
        """Entities without a registered prefix are rejected."""
        with pytest.raises(ValueError, match="No identifier prefix"):
            _constant("A").record_id("Tractor", NOW)


class TestBusinessCodes:
    def test_transaction_code_includes_time(self):
        """TXN + date + time + 3 timestamp digits + 3 random chars."""
        assert _constant("Q").business_code("Transaction", NOW) == "TXN2403051407000QQQ"

    def test_inventory_code(self):
        assert _constant("B").business_code("Inventory", NOW) == "STOCK2403050000BBB"

    def test_tracking_code_has_no_date(self):
        """Supply-chain tracking codes are TRK + 6 timestamp digits + 5 random chars."""
        assert _constant("C").business_code("SupplyChain", NOW) == "TRK620000CCCCC"

    def test_alert_code_has_no_timestamp_digits(self):
        assert _constant("D").business_code("FoodSecurityAlert", NOW) == "ALT240305DDDD"

    def test_entity_without_code_raises(self):
        """Crops carry no business code."""
        with pytest.raises(ValueError, match="No business code format"):
            _constant("A").business_code("Crop", NOW)


class TestFixedClock:
    def test_advance_and_today(self):
        """advance() moves the pinned instant forward."""
        from core.clock import FixedClock

        clock = FixedClock(NOW)
        assert clock() == NOW
        clock.advance(days=2, hours=3)
        assert clock() == datetime(2024, 3, 7, 17, 7)
        assert clock.today().isoformat() == "2024-03-07"

    def test_system_clock_is_naive(self):
        """System time is naive UTC to match the DateTime columns."""
        from core.clock import system_clock

        assert system_clock().tzinfo is None
