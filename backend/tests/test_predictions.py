"""
Unit Tests — Production predictions and irrigation predictions.
"""

from datetime import datetime
from decimal import Decimal

import pytest

NOW = datetime(2024, 3, 5, 14, 7)


class TestAccuracy:
    def test_accuracy_from_relative_error(self):
        from ml import predictions

        assert predictions.accuracy(Decimal("100"), Decimal("90")) == Decimal("90.00")
        assert predictions.accuracy(Decimal("100"), Decimal("110")) == Decimal("90.00")

    def test_accuracy_clamped_at_zero(self):
        """Errors larger than the prediction itself floor at zero."""
        from ml import predictions

        assert predictions.accuracy(Decimal("100"), Decimal("250")) == Decimal("0.00")

    def test_accuracy_undefined_without_positive_prediction(self):
        from ml import predictions

        assert predictions.accuracy(Decimal("0"), Decimal("10")) is None
        assert predictions.accuracy(Decimal("100"), None) is None

    def test_accuracy_level_bands(self):
        """Bands are inclusive; the lower band wins on a boundary."""
        from db.enums import AccuracyLevel
        from db.models import ProductionPrediction
        from ml import predictions

        def level(value):
            return predictions.accuracy_level(ProductionPrediction(accuracy_achieved=value))

        assert level(Decimal("40")) is AccuracyLevel.VERY_LOW
        assert level(Decimal("59.99")) is AccuracyLevel.LOW
        assert level(Decimal("85")) is AccuracyLevel.HIGH
        assert level(Decimal("92")) is AccuracyLevel.VERY_HIGH
        assert level(None) is AccuracyLevel.MEDIUM


class TestReviewWorkflow:
    def _prediction(self, **fields):
        from db.enums import ValidationStatus
        from db.models import ProductionPrediction

        defaults = {"id": "PP620000ABCDEF", "validation_status": ValidationStatus.PENDING, "published": False}
        defaults.update(fields)
        return ProductionPrediction(**defaults)

    def test_validate_then_publish(self):
        from db.enums import ValidationStatus
        from ml import predictions

        prediction = self._prediction()
        predictions.publish(prediction)
        assert prediction.published is False

        predictions.validate(prediction, "analyst-7", NOW)
        assert prediction.validation_status is ValidationStatus.VALIDATED
        assert prediction.validated_by == "analyst-7"
        assert prediction.validation_date == NOW

        predictions.publish(prediction)
        assert prediction.published is True
        predictions.unpublish(prediction)
        assert prediction.published is False

    def test_reject_only_pending(self):
        from db.enums import ValidationStatus
        from ml import predictions

        prediction = self._prediction(validation_status=ValidationStatus.VALIDATED)
        predictions.reject(prediction, "analyst-7", NOW)
        assert prediction.validation_status is ValidationStatus.VALIDATED

    def test_interval(self):
        from ml import predictions

        prediction = self._prediction(
            actual_value=Decimal("95"),
            prediction_interval_min=Decimal("90"),
            prediction_interval_max=Decimal("110"),
        )
        assert predictions.is_within_interval(prediction) is True
        assert predictions.is_within_interval(self._prediction()) is None


@pytest.mark.asyncio
class TestPredictionLifecycle:
    async def test_actual_value_sets_accuracy(self, test_db, clock, ids):
        from db.enums import PredictionType, ValidationStatus
        from db.models import ProductionPrediction
        from db.store import create_record, update_record

        prediction = await create_record(
            test_db,
            ProductionPrediction,
            {
                "crop_id": "CR001",
                "year": 2024,
                "prediction_type": PredictionType.YIELD,
                "predicted_value": Decimal("100"),
            },
            clock=clock,
            ids=ids,
        )
        assert prediction.validation_status is ValidationStatus.PENDING
        assert prediction.accuracy_achieved is None
        assert prediction.prediction_code.startswith("PRED240305")

        clock.advance(days=90)
        await update_record(test_db, prediction, {"actual_value": Decimal("90")}, clock=clock)

        assert prediction.accuracy_achieved == Decimal("90.00")
        assert prediction.last_updated == clock()


class TestIrrigationPredictions:
    def _prediction(self, stress):
        from db.models import IrrigationPrediction

        return IrrigationPrediction(farm_id="FM1", water_stress_risk=Decimal(stress))

    def test_moderate_stress_is_high_alert(self):
        from db.enums import IrrigationAlertLevel
        from ml import irrigation

        prediction = irrigation.recompute(self._prediction("65"))
        assert prediction.predicted_yield_impact == Decimal("-15")
        assert prediction.alert_level is IrrigationAlertLevel.HIGH
        assert irrigation.irrigation_urgency(prediction) == "Irrigate within the next 24 hours"

    def test_low_stress(self):
        from db.enums import IrrigationAlertLevel
        from ml import irrigation

        prediction = irrigation.recompute(self._prediction("20"))
        assert prediction.predicted_yield_impact == Decimal("5")
        assert prediction.alert_level is IrrigationAlertLevel.LOW
        assert irrigation.requires_immediate_irrigation(prediction) is False

    def test_severe_stress_is_critical(self):
        from db.enums import IrrigationAlertLevel
        from ml import irrigation

        prediction = irrigation.recompute(self._prediction("90"))
        assert prediction.alert_level is IrrigationAlertLevel.CRITICAL
        assert irrigation.requires_immediate_irrigation(prediction) is True

    def test_recorded_yield_impact_drives_alert(self):
        """A recorded impact is kept and can raise the level on its own."""
        from db.enums import IrrigationAlertLevel
        from db.models import IrrigationPrediction
        from ml import irrigation

        prediction = IrrigationPrediction(water_stress_risk=Decimal("10"), predicted_yield_impact=Decimal("-45"))
        irrigation.recompute(prediction)
        assert prediction.predicted_yield_impact == Decimal("-45")
        assert prediction.alert_level is IrrigationAlertLevel.CRITICAL
