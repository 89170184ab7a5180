"""
Unit Tests — Labeled enums and Decimal helpers.
"""

from decimal import Decimal


class TestLabeledEnums:
    def test_from_label_is_case_insensitive(self):
        from db.enums import FacilityType

        assert FacilityType.from_label("cold storage") is FacilityType.COLD_STORAGE
        assert FacilityType.from_label("Igloo") is None

    def test_scored_lookup(self):
        from db.enums import RatingLevel

        assert RatingLevel.from_score(2) is RatingLevel.POOR
        assert RatingLevel.from_rating(None) is RatingLevel.FAIR

    def test_stage_ordering(self):
        from db.enums import SupplyChainStage

        assert SupplyChainStage.HARVEST.order == 1
        assert SupplyChainStage.RETAIL.order == 8
        assert SupplyChainStage.HARVEST.previous_stage() is None

    def test_alert_level_carries_priority_and_colour(self):
        from db.enums import AlertLevel

        assert AlertLevel.HIGH.priority == 4
        assert AlertLevel.CRITICAL.color_code == "#dc3545"
        assert AlertLevel.HIGH.label == "High"


class TestNumbers:
    def test_money_rounds_half_up(self):
        from core.numbers import money

        assert money(Decimal("2.345")) == Decimal("2.35")
        assert money(0.1 + 0.2) == Decimal("0.30")
        assert money(None) is None

    def test_percent_of_zero_is_undefined(self):
        from core.numbers import percent

        assert percent(Decimal("5"), Decimal("0")) is None
        assert percent(Decimal("1"), Decimal("3")) == Decimal("33.33")

    def test_positive(self):
        from core.numbers import positive

        assert positive(Decimal("0.01")) is True
        assert positive(0) is False
        assert positive(None) is False


class TestRecordStamping:
    def test_column_defaults_fill_transient_records(self):
        from datetime import datetime

        from core.identifiers import IdentifierGenerator
        from db.enums import InventoryStatus
        from db.models import Inventory
        from db.records import stamp_created

        inv = Inventory(crop_id="CR1")
        stamp_created(inv, datetime(2024, 3, 5, 14, 7), IdentifierGenerator(lambda alphabet: "K"))

        assert inv.status is InventoryStatus.AVAILABLE
        assert inv.reserved_quantity == 0
        assert inv.unit == "KG"
        assert inv.id == "INV620000KKKKK"
        assert inv.inventory_code == "STOCK2403050000KKK"
