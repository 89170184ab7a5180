"""
Soil Analysis — sample bands, quality scoring and recommendations.

Two independent scores exist for a sample:

  soil_quality_score       weighted points out of 100 (pH 30, organic
                           matter 25, NPK 25, physical structure 20)
                           reported as Excellent/Good/Fair/Poor/Very Poor
  evaluate_soil_condition  GOOD/MODERATE/BAD from pH, nutrients, organic
                           matter, moisture and conductivity; missing
                           measurements shrink the maximum instead of
                           counting as zero
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from dateutil.relativedelta import relativedelta

from core.identifiers import IdentifierGenerator
from core.numbers import to_decimal
from db.enums import NutrientLevel, PhBand, SoilCondition
from db.records import stamp_created, stamp_updated

D = Decimal

PH_BANDS = (
    (D("4.5"), PhBand.VERY_ACIDIC),
    (D("6.0"), PhBand.ACIDIC),
    (D("6.8"), PhBand.SLIGHTLY_ACIDIC),
    (D("7.2"), PhBand.NEUTRAL),
    (D("8.0"), PhBand.SLIGHTLY_ALKALINE),
    (D("9.0"), PhBand.ALKALINE),
)

# nutrient -> upper bounds for VERY_LOW, LOW, MEDIUM, HIGH (mg/kg)
NUTRIENT_THRESHOLDS = {
    "nitrogen": (D("20"), D("40"), D("80"), D("150")),
    "phosphorus": (D("10"), D("25"), D("50"), D("100")),
    "potassium": (D("80"), D("150"), D("300"), D("500")),
}

_NUTRIENT_BANDS = (NutrientLevel.VERY_LOW, NutrientLevel.LOW, NutrientLevel.MEDIUM, NutrientLevel.HIGH)


# ── Lifecycle ──────────────────────────────────────────────────────────────


def on_create(sample, now: datetime, ids: IdentifierGenerator) -> None:
    stamp_created(sample, now, ids)
    if sample.measurement_date is None:
        sample.measurement_date = now.date()
    if sample.next_test_due is None:
        sample.next_test_due = sample.measurement_date + relativedelta(years=1)


def on_update(sample, now: datetime) -> None:
    stamp_updated(sample, now)


def generate_sample_code(farm_code: str | None, measured_on: date, ids: IdentifierGenerator) -> str:
    """SOIL_<first 5 chars of farm code>_<yyyymmdd>_<3 digits>."""
    farm_part = (farm_code or "FARM")[:5].upper()
    return f"SOIL_{farm_part}_{measured_on.strftime('%Y%m%d')}_{ids.random_digits(3)}"


# ── Bands ──────────────────────────────────────────────────────────────────


def ph_band(sample) -> PhBand | None:
    ph = to_decimal(sample.ph_level)
    if ph is None:
        return None
    for upper, band in PH_BANDS:
        if ph < upper:
            return band
    return PhBand.VERY_ALKALINE


def nutrient_level(nutrient: str, value) -> NutrientLevel | None:
    value = to_decimal(value)
    if value is None:
        return None
    for upper, band in zip(NUTRIENT_THRESHOLDS[nutrient], _NUTRIENT_BANDS):
        if value < upper:
            return band
    return NutrientLevel.VERY_HIGH


def nitrogen_level(sample) -> NutrientLevel | None:
    return nutrient_level("nitrogen", sample.nitrogen_content)


def phosphorus_level(sample) -> NutrientLevel | None:
    return nutrient_level("phosphorus", sample.phosphorus_content)


def potassium_level(sample) -> NutrientLevel | None:
    return nutrient_level("potassium", sample.potassium_content)


# ── Predicates ─────────────────────────────────────────────────────────────


def is_test_due(sample, today: date) -> bool:
    return sample.next_test_due is not None and today >= sample.next_test_due


def is_test_overdue(sample, today: date) -> bool:
    return sample.next_test_due is not None and today > sample.next_test_due


def has_salinity_issue(sample) -> bool:
    ec = to_decimal(sample.electrical_conductivity)
    return ec is not None and ec > 2


def has_low_organic_matter(sample) -> bool:
    organic = to_decimal(sample.organic_matter)
    return organic is not None and organic < 2


def is_well_drained(sample) -> bool:
    porosity = to_decimal(sample.porosity)
    return porosity is not None and porosity > 40


# ── Quality score ──────────────────────────────────────────────────────────


def _ph_points(band: PhBand) -> int:
    if band in (PhBand.NEUTRAL, PhBand.SLIGHTLY_ACIDIC):
        return 30
    if band in (PhBand.SLIGHTLY_ALKALINE, PhBand.ACIDIC):
        return 20
    return 10


def _organic_points(organic: Decimal) -> int:
    if organic >= 5:
        return 25
    if organic >= 3:
        return 20
    if organic >= 2:
        return 15
    if organic >= 1:
        return 10
    return 5


def _physical_points(porosity: Decimal, density: Decimal) -> int:
    if porosity > 40 and density < D("1.4"):
        return 20
    if porosity > 30 and density < D("1.6"):
        return 15
    if porosity > 20 and density < D("1.8"):
        return 10
    return 5


def soil_quality_score(sample) -> str:
    band = ph_band(sample)
    if band is None:
        return "Incomplete Data"

    score, maximum = _ph_points(band), 30

    organic = to_decimal(sample.organic_matter)
    if organic is not None:
        score += _organic_points(organic)
        maximum += 25

    npk = ((nitrogen_level(sample), 8), (phosphorus_level(sample), 8), (potassium_level(sample), 9))
    if all(level is not None for level, _ in npk):
        score += sum(points for level, points in npk if level in (NutrientLevel.MEDIUM, NutrientLevel.HIGH))
        maximum += 25

    porosity, density = to_decimal(sample.porosity), to_decimal(sample.bulk_density)
    if porosity is not None and density is not None:
        score += _physical_points(porosity, density)
        maximum += 20

    percentage = score * 100 / maximum
    if percentage >= 80:
        return "Excellent"
    if percentage >= 65:
        return "Good"
    if percentage >= 50:
        return "Fair"
    if percentage >= 35:
        return "Poor"
    return "Very Poor"


# ── Condition evaluation ───────────────────────────────────────────────────


def _within(value: Decimal, low: str, high: str) -> bool:
    return D(low) <= value <= D(high)


def _condition_ph(ph: Decimal) -> int:
    if _within(ph, "6.0", "7.5"):
        return 25
    if _within(ph, "5.5", "8.0"):
        return 15
    if _within(ph, "4.5", "8.5"):
        return 5
    return 0


def _condition_nutrients(n: Decimal, p: Decimal, k: Decimal) -> int:
    if _within(n, "40", "150") and _within(p, "25", "100") and _within(k, "150", "500"):
        return 30
    if _within(n, "20", "200") and _within(p, "15", "120") and _within(k, "100", "600"):
        return 20
    if n >= 10 and p >= 10 and k >= 50:
        return 10
    return 0


def _condition_organic(organic: Decimal) -> int:
    if organic >= 4:
        return 20
    if organic >= 3:
        return 15
    if organic >= 2:
        return 10
    if organic >= 1:
        return 5
    return 0


def _condition_moisture(moisture: Decimal) -> int:
    if _within(moisture, "25", "45"):
        return 15
    if _within(moisture, "20", "60"):
        return 10
    if _within(moisture, "10", "70"):
        return 5
    return 0


def _condition_conductivity(ec: Decimal) -> int:
    if ec < D("0.8"):
        return 10
    if ec < 2:
        return 8
    if ec < 4:
        return 5
    if ec < 8:
        return 2
    return 0


def condition_scores(sample) -> dict[str, int | None]:
    """Points per component; None where the measurement is missing."""
    ph = to_decimal(sample.ph_level)
    n, p, k = (to_decimal(v) for v in (sample.nitrogen_content, sample.phosphorus_content, sample.potassium_content))
    organic = to_decimal(sample.organic_matter)
    moisture = to_decimal(sample.moisture_content)
    ec = to_decimal(sample.electrical_conductivity)
    return {
        "ph": _condition_ph(ph) if ph is not None else None,
        "nutrients": _condition_nutrients(n, p, k) if None not in (n, p, k) else None,
        "organic_matter": _condition_organic(organic) if organic is not None else None,
        "moisture": _condition_moisture(moisture) if moisture is not None else None,
        "electrical_conductivity": _condition_conductivity(ec) if ec is not None else None,
    }


CONDITION_MAXIMUMS = {
    "ph": 25,
    "nutrients": 30,
    "organic_matter": 20,
    "moisture": 15,
    "electrical_conductivity": 10,
}


def evaluate_soil_condition(sample) -> SoilCondition:
    scores = condition_scores(sample)
    if scores["ph"] is None:
        return SoilCondition.BAD

    earned = sum(value for value in scores.values() if value is not None)
    maximum = sum(CONDITION_MAXIMUMS[name] for name, value in scores.items() if value is not None)
    percentage = earned * 100 / maximum
    if percentage >= 75:
        return SoilCondition.GOOD
    if percentage >= 50:
        return SoilCondition.MODERATE
    return SoilCondition.BAD


def soil_recommendations(sample) -> list[str]:
    recommendations = []

    ph = to_decimal(sample.ph_level)
    if ph is not None:
        if ph < D("5.5"):
            recommendations.append("Apply agricultural lime to raise soil pH")
        elif ph > 8:
            recommendations.append("Apply sulfur or organic matter to lower soil pH")
        elif _within(ph, "6.0", "7.5"):
            recommendations.append("Maintain current pH levels with regular monitoring")

    nitrogen = to_decimal(sample.nitrogen_content)
    if nitrogen is not None and nitrogen < 40:
        recommendations.append("Apply nitrogen-rich fertilizer or plant legumes")
    phosphorus = to_decimal(sample.phosphorus_content)
    if phosphorus is not None and phosphorus < 25:
        recommendations.append("Apply phosphate fertilizer to improve root development")
    potassium = to_decimal(sample.potassium_content)
    if potassium is not None and potassium < 150:
        recommendations.append("Apply potash fertilizer to improve plant resilience")

    if has_low_organic_matter(sample):
        recommendations.append("Add compost or manure to increase organic matter")

    moisture = to_decimal(sample.moisture_content)
    if moisture is not None:
        if moisture < 20:
            recommendations.append("Improve irrigation to raise soil moisture")
        elif moisture > 60:
            recommendations.append("Improve drainage to reduce waterlogging")

    if has_salinity_issue(sample):
        recommendations.extend(
            [
                "Leach salts with good quality irrigation water",
                "Improve drainage to prevent salt accumulation",
                "Consider salt-tolerant crop varieties",
            ]
        )

    if not recommendations and evaluate_soil_condition(sample) is SoilCondition.GOOD:
        recommendations.extend(
            [
                "Continue current soil management practices",
                "Test soil annually to track changes",
                "Rotate crops to maintain soil health",
            ]
        )
    return recommendations


def condition_report(sample) -> dict:
    condition = evaluate_soil_condition(sample)
    return {
        "condition": condition.name,
        "description": condition.description,
        "scores": condition_scores(sample),
        "recommendations": soil_recommendations(sample),
    }
