"""
Unit Tests — Climate impacts and weather readings.
"""

from datetime import date, datetime
from decimal import Decimal

import pytest


@pytest.mark.asyncio
class TestClimateImpact:
    async def test_duration_and_report_date(self, test_db, clock, ids):
        """Duration counts both the first and the last day."""
        from db.enums import ClimateEvent
        from db.models import ClimateImpact
        from db.store import create_record

        impact = await create_record(
            test_db,
            ClimateImpact,
            {
                "region": "Eastern",
                "year": 2024,
                "climate_event": ClimateEvent.DROUGHT,
                "event_start_date": date(2024, 2, 1),
                "event_end_date": date(2024, 2, 10),
                "economic_loss": Decimal("250000"),
            },
            clock=clock,
            ids=ids,
        )

        assert impact.event_duration_days == 10
        assert impact.report_date == date(2024, 3, 5)
        assert impact.impact_code.startswith("IMP240305")

    async def test_verification_stamped_once(self, test_db, clock, ids):
        from db.enums import ClimateEvent
        from db.models import ClimateImpact
        from db.store import create_record, update_record

        impact = await create_record(
            test_db,
            ClimateImpact,
            {"region": "Western", "year": 2024, "climate_event": ClimateEvent.FLOOD, "event_start_date": date(2024, 3, 1)},
            clock=clock,
            ids=ids,
        )
        await update_record(test_db, impact, {"verified": True}, clock=clock)
        stamped = impact.verification_date
        clock.advance(days=3)
        await update_record(test_db, impact, {"reported_by": "meteo"}, clock=clock)

        assert stamped == datetime(2024, 3, 5, 14, 7)
        assert impact.verification_date == stamped


class TestClimatePredicates:
    def _impact(self, **fields):
        from db.models import ClimateImpact

        return ClimateImpact(**fields)

    def test_severity_bands(self):
        from db.enums import ImpactSeverity
        from environment import climate

        assert climate.impact_severity(self._impact(economic_loss=Decimal("250000"))) is ImpactSeverity.HIGH
        assert climate.impact_severity(self._impact(economic_loss=Decimal("1000000"))) is ImpactSeverity.CATASTROPHIC
        assert climate.impact_severity(self._impact(economic_loss=Decimal("9999"))) is ImpactSeverity.LOW
        assert climate.impact_severity(self._impact()) is ImpactSeverity.LOW

    def test_emergency_response(self):
        from db.enums import EventIntensity
        from environment import climate

        assert climate.requires_emergency_response(self._impact(event_intensity=EventIntensity.EXTREME)) is True
        assert climate.requires_emergency_response(self._impact(economic_loss=Decimal("50000"))) is True
        assert climate.requires_emergency_response(self._impact(event_intensity=EventIntensity.MILD)) is False

    def test_ongoing_and_recent(self):
        from environment import climate

        impact = self._impact(event_start_date=date(2024, 2, 20))
        assert climate.is_ongoing(impact, date(2024, 3, 5)) is True
        assert climate.is_recent(impact, date(2024, 3, 5)) is True
        assert climate.is_recent(impact, date(2024, 4, 1)) is False


class TestWeather:
    def _reading(self, **fields):
        from db.models import WeatherData

        return WeatherData(latitude=Decimal("-1.94"), longitude=Decimal("30.06"), **fields)

    def test_temperature_range(self):
        from db.enums import TemperatureRange
        from environment import weather

        assert weather.temperature_range(self._reading(temperature=Decimal("32"))) is TemperatureRange.HOT
        assert weather.temperature_range(self._reading(temperature=Decimal("-2"))) is TemperatureRange.FREEZING
        assert weather.temperature_range(self._reading(temperature=Decimal("35"))) is TemperatureRange.VERY_HOT
        assert weather.temperature_range(self._reading()) is None

    def test_condition_flags(self):
        from environment import weather

        reading = self._reading(temperature=Decimal("32"), wind_speed=Decimal("25"), rainfall=Decimal("0"))
        assert weather.is_hot(reading) is True
        assert weather.is_cold(reading) is False
        assert weather.is_windy(reading) is True
        assert weather.is_rainy(reading) is False
