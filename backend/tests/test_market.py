"""
Unit Tests — Market prices and buyer profiles.
"""

import re
from datetime import date, timedelta
from decimal import Decimal

import pytest

TODAY = date(2024, 3, 5)


class TestMarketPrices:
    def _price(self, **fields):
        from db.enums import MarketType
        from db.models import MarketPrice

        defaults = {
            "crop_id": "CR001",
            "market_name": "Nyabugogo",
            "market_type": MarketType.WHOLESALE,
            "price_date": TODAY,
            "price_per_kg": Decimal("500"),
        }
        defaults.update(fields)
        return MarketPrice(**defaults)

    def test_total_cost_adds_handling_costs(self):
        from market import prices

        price = self._price(transport_cost=Decimal("20"), storage_cost=Decimal("5"), processing_cost=Decimal("5"))
        assert prices.total_cost_per_kg(price) == Decimal("530.00")
        assert prices.total_cost_per_kg(self._price()) == Decimal("500.00")

    def test_seasonal_adjustment(self):
        from market import prices

        assert prices.seasonal_adjusted_price(self._price(seasonal_factor=Decimal("1.2"))) == Decimal("600.00")
        assert prices.seasonal_adjusted_price(self._price()) == Decimal("500")

    def test_price_levels(self):
        from market import prices

        assert prices.is_high_price(self._price(price_per_kg=Decimal("1200"))) is True
        assert prices.is_low_price(self._price(price_per_kg=Decimal("80"))) is True
        assert prices.is_high_price(self._price()) is False
        assert prices.formatted_price(self._price(currency="RWF")) == "RWF 500.00/kg"

    def test_market_opportunity(self):
        from db.enums import DemandLevel, PriceTrend, SupplyLevel
        from market import prices

        price = self._price(
            demand_level=DemandLevel.VERY_HIGH,
            supply_level=SupplyLevel.LOW,
            price_trend=PriceTrend.INCREASING,
        )
        assert prices.is_market_opportunity(price) is True

        price.price_trend = PriceTrend.STABLE
        assert prices.is_market_opportunity(price) is False

    def test_freshness(self):
        from market import prices

        assert prices.is_recent(self._price(price_date=TODAY - timedelta(days=3)), TODAY) is True
        assert prices.is_recent(self._price(price_date=TODAY - timedelta(days=7)), TODAY) is False
        assert prices.is_outdated(self._price(price_date=TODAY - timedelta(days=30)), TODAY) is False
        assert prices.is_outdated(self._price(price_date=TODAY - timedelta(days=31)), TODAY) is True

    def test_reliability(self):
        from market import prices

        assert prices.is_reliable(self._price(reliability_score=4)) is True
        assert prices.is_reliable(self._price(reliability_score=3)) is False

    @pytest.mark.asyncio
    async def test_price_must_be_positive(self, test_db, clock, ids):
        from core.errors import RecordValidationError
        from db.enums import MarketType
        from db.models import MarketPrice
        from db.store import create_record

        with pytest.raises(RecordValidationError, match="price_per_kg"):
            await create_record(
                test_db,
                MarketPrice,
                {
                    "crop_id": "CR001",
                    "market_name": "Kimironko",
                    "market_type": MarketType.RETAIL,
                    "price_date": TODAY,
                    "price_per_kg": Decimal("0"),
                },
                clock=clock,
                ids=ids,
            )


class TestBuyers:
    def _buyer(self, **fields):
        from db.enums import BuyerType
        from db.models import Buyer

        defaults = {"user_id": "U1", "company_name": "Kigali Grain Ltd", "buyer_type": BuyerType.WHOLESALER}
        defaults.update(fields)
        return Buyer(**defaults)

    def test_parse_credit_rating(self):
        from db.enums import CreditRating
        from market import buyers

        assert buyers.parse_credit_rating("a+") is CreditRating.A_PLUS
        assert buyers.parse_credit_rating(" B ") is CreditRating.B
        assert buyers.parse_credit_rating("Z") is None
        assert buyers.parse_credit_rating(None) is None

    def test_credit(self):
        from db.enums import CreditRating
        from market import buyers

        assert buyers.has_good_credit(self._buyer(credit_rating=CreditRating.B_PLUS)) is True
        assert buyers.has_good_credit(self._buyer(credit_rating=CreditRating.B)) is False
        assert buyers.has_high_credit_limit(self._buyer(credit_limit=Decimal("60000"))) is True

    def test_premium_requires_verification(self):
        from market import buyers

        assert buyers.is_premium(self._buyer(rating=Decimal("4.5"), verified=True)) is True
        assert buyers.is_premium(self._buyer(rating=Decimal("4.5"), verified=False)) is False
        assert buyers.verification_status(self._buyer(verified=True)) == "VERIFIED"

    def test_business_age(self):
        from market import buyers

        buyer = self._buyer(established_year=2018)
        assert buyers.business_age(buyer, TODAY) == 6
        assert buyers.is_experienced(buyer, TODAY) is True
        assert buyers.is_experienced(self._buyer(established_year=2021), TODAY) is False
        assert buyers.business_age(self._buyer(), TODAY) is None

    def test_capacity(self):
        from market import buyers

        buyer = self._buyer(annual_volume=Decimal("1500"), storage_capacity=Decimal("400"))
        assert buyers.is_high_volume(buyer) is True
        assert buyers.has_large_storage_capacity(buyer) is False

    @pytest.mark.asyncio
    async def test_create_assigns_buyer_code(self, test_db, clock, ids):
        from db.enums import BuyerType
        from db.models import Buyer
        from db.store import create_record

        buyer = await create_record(
            test_db,
            Buyer,
            {"user_id": "U1", "company_name": "Huye Millers", "buyer_type": BuyerType.PROCESSOR},
            clock=clock,
            ids=ids,
        )

        assert re.fullmatch(r"BUY0000[A-Z0-9]{4}", buyer.buyer_code)
        assert buyer.id.startswith("BY620000")
