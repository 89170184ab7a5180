"""
Unit Tests — Soil analysis (bands, quality score, condition, recommendations).
"""

import re
from datetime import date
from decimal import Decimal

import pytest

IDEAL = {
    "ph_level": Decimal("6.5"),
    "nitrogen_content": Decimal("100"),
    "phosphorus_content": Decimal("50"),
    "potassium_content": Decimal("300"),
    "organic_matter": Decimal("5"),
    "moisture_content": Decimal("35"),
    "electrical_conductivity": Decimal("0.5"),
    "porosity": Decimal("45"),
    "bulk_density": Decimal("1.3"),
}

POOR = {
    "ph_level": Decimal("4.8"),
    "nitrogen_content": Decimal("10"),
    "phosphorus_content": Decimal("5"),
    "potassium_content": Decimal("60"),
    "organic_matter": Decimal("0.5"),
    "moisture_content": Decimal("10"),
    "electrical_conductivity": Decimal("3"),
}


def _sample(**fields):
    from db.models import SoilData

    return SoilData(farm_id="FM001", **fields)


class TestBands:
    def test_ph_bands(self):
        from db.enums import PhBand
        from environment import soil

        assert soil.ph_band(_sample(ph_level=Decimal("4.2"))) is PhBand.VERY_ACIDIC
        assert soil.ph_band(_sample(ph_level=Decimal("7.0"))) is PhBand.NEUTRAL
        assert soil.ph_band(_sample(ph_level=Decimal("9.5"))) is PhBand.VERY_ALKALINE
        assert soil.ph_band(_sample()) is None

    def test_nutrient_levels(self):
        from db.enums import NutrientLevel
        from environment import soil

        sample = _sample(**IDEAL)
        assert soil.nitrogen_level(sample) is NutrientLevel.HIGH
        assert soil.phosphorus_level(sample) is NutrientLevel.HIGH
        assert soil.potassium_level(sample) is NutrientLevel.HIGH
        assert soil.nutrient_level("nitrogen", Decimal("200")) is NutrientLevel.VERY_HIGH
        assert soil.nutrient_level("potassium", Decimal("79")) is NutrientLevel.VERY_LOW


class TestSoilCondition:
    def test_ideal_sample(self):
        from db.enums import SoilCondition
        from environment import soil

        sample = _sample(**IDEAL)
        assert soil.soil_quality_score(sample) == "Excellent"
        assert soil.evaluate_soil_condition(sample) is SoilCondition.GOOD
        assert soil.soil_recommendations(sample) == ["Maintain current pH levels with regular monitoring"]

    def test_poor_sample(self):
        from db.enums import SoilCondition
        from environment import soil

        sample = _sample(**POOR)
        recommendations = soil.soil_recommendations(sample)

        assert soil.evaluate_soil_condition(sample) is SoilCondition.BAD
        assert soil.soil_quality_score(sample) == "Very Poor"
        assert len(recommendations) == 9
        assert recommendations[0] == "Apply agricultural lime to raise soil pH"
        assert "Consider salt-tolerant crop varieties" in recommendations
        assert soil.has_salinity_issue(sample) is True
        assert soil.has_low_organic_matter(sample) is True

    def test_missing_ph(self):
        """Without a pH reading the sample cannot be rated."""
        from db.enums import SoilCondition
        from environment import soil

        sample = _sample(organic_matter=Decimal("5"))
        assert soil.soil_quality_score(sample) == "Incomplete Data"
        assert soil.evaluate_soil_condition(sample) is SoilCondition.BAD

    def test_missing_measurements_shrink_the_maximum(self):
        """Partial data is rated on what was measured, not penalised as zero."""
        from db.enums import SoilCondition
        from environment import soil

        sample = _sample(ph_level=Decimal("7.0"), organic_matter=Decimal("4"))
        scores = soil.condition_scores(sample)

        assert scores["ph"] == 25
        assert scores["organic_matter"] == 20
        assert scores["nutrients"] is None
        assert soil.evaluate_soil_condition(sample) is SoilCondition.GOOD

    def test_condition_report(self):
        from environment import soil

        report = soil.condition_report(_sample(**IDEAL))
        assert report["condition"] == "GOOD"
        assert report["scores"]["electrical_conductivity"] == 10
        assert report["recommendations"] == ["Maintain current pH levels with regular monitoring"]


class TestSoilSchedule:
    def test_sample_code(self, ids):
        from environment import soil

        code = soil.generate_sample_code("greenvalley", date(2024, 3, 5), ids)
        assert re.fullmatch(r"SOIL_GREEN_20240305_\d{3}", code)

    def test_sample_code_without_farm_code(self, ids):
        from environment import soil

        assert soil.generate_sample_code(None, date(2024, 3, 5), ids).startswith("SOIL_FARM_20240305_")

    def test_test_due(self):
        from environment import soil

        sample = _sample(next_test_due=date(2025, 3, 5))
        assert soil.is_test_due(sample, date(2025, 3, 5)) is True
        assert soil.is_test_overdue(sample, date(2025, 3, 5)) is False
        assert soil.is_test_overdue(sample, date(2025, 3, 6)) is True

    @pytest.mark.asyncio
    async def test_next_test_due_one_year_out(self, test_db, clock, ids):
        from db.models import SoilData
        from db.store import create_record

        sample = await create_record(
            test_db,
            SoilData,
            {"farm_id": "FM001", "measurement_date": date(2024, 3, 5), "ph_level": Decimal("6.2")},
            clock=clock,
            ids=ids,
        )

        assert sample.next_test_due == date(2025, 3, 5)
        assert sample.id.startswith("SD620000")

    @pytest.mark.asyncio
    async def test_ph_out_of_range_rejected(self, test_db, clock, ids):
        from core.errors import RecordValidationError
        from db.models import SoilData
        from db.store import create_record

        with pytest.raises(RecordValidationError, match="ph_level"):
            await create_record(
                test_db,
                SoilData,
                {"farm_id": "FM001", "measurement_date": date(2024, 3, 5), "ph_level": Decimal("15")},
                clock=clock,
                ids=ids,
            )
