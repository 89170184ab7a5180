"""
Unit Tests — Supply-chain stages (quantity conservation, losses, summaries).
"""

from datetime import datetime
from decimal import Decimal

import pytest
from sqlalchemy import func, select


def _payload(**overrides):
    from db.enums import SupplyChainStage

    payload = {
        "crop_production_id": "CP001",
        "stage": SupplyChainStage.STORAGE,
        "location": "Kigali Depot",
        "quantity_in": Decimal("1000"),
        "quantity_out": Decimal("950"),
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
class TestStageLifecycle:
    async def test_loss_inferred_from_quantities(self, test_db, clock, ids):
        """Missing produce becomes the loss when no loss was recorded."""
        from db.models import SupplyChain
        from db.store import create_record

        stage = await create_record(test_db, SupplyChain, _payload(), clock=clock, ids=ids)

        assert stage.loss_quantity == Decimal("50.00")
        assert stage.loss_percentage == Decimal("5.00")
        assert stage.stage_order == 3
        assert stage.stage_start_date == clock()
        assert stage.tracking_code.startswith("TRK620000")

    async def test_explicit_loss_kept(self, test_db, clock, ids):
        """A recorded loss is not overwritten and sets the loss percentage."""
        from db.models import SupplyChain
        from db.store import create_record

        stage = await create_record(
            test_db, SupplyChain, _payload(loss_quantity=Decimal("30")), clock=clock, ids=ids
        )

        assert stage.loss_quantity == Decimal("30")
        assert stage.loss_percentage == Decimal("3.00")
        assert stage.loss_inferred is False

    async def test_inferred_loss_follows_quantity_out(self, test_db, clock, ids):
        """Raising quantity_out later shrinks an inferred loss instead of failing."""
        from db.models import SupplyChain
        from db.store import create_record, update_record

        stage = await create_record(test_db, SupplyChain, _payload(), clock=clock, ids=ids)
        assert stage.loss_inferred is True

        await update_record(test_db, stage, {"quantity_out": Decimal("980")}, clock=clock)

        assert stage.loss_quantity == Decimal("20.00")
        assert stage.loss_percentage == Decimal("2.00")
        assert stage.loss_inferred is True

    async def test_inferred_loss_cleared_when_nothing_missing(self, test_db, clock, ids):
        from db.models import SupplyChain
        from db.store import create_record, update_record

        stage = await create_record(test_db, SupplyChain, _payload(), clock=clock, ids=ids)
        await update_record(test_db, stage, {"quantity_out": Decimal("1000")}, clock=clock)

        assert stage.loss_quantity == Decimal("0")
        assert stage.loss_percentage == Decimal("0.00")
        assert stage.loss_inferred is False

    async def test_recorded_loss_replaces_inferred_one(self, test_db, clock, ids):
        """Once a loss is recorded it survives later quantity changes."""
        from db.models import SupplyChain
        from db.store import create_record, update_record

        stage = await create_record(test_db, SupplyChain, _payload(), clock=clock, ids=ids)
        await update_record(test_db, stage, {"loss_quantity": Decimal("40")}, clock=clock)

        assert stage.loss_quantity == Decimal("40")
        assert stage.loss_percentage == Decimal("4.00")
        assert stage.loss_inferred is False

        await update_record(test_db, stage, {"quantity_out": Decimal("900")}, clock=clock)

        assert stage.loss_quantity == Decimal("40")
        assert stage.loss_percentage == Decimal("4.00")

    async def test_recorded_loss_still_checked_on_update(self, test_db, clock, ids):
        from core.errors import InvariantViolationError
        from db.models import SupplyChain
        from db.store import create_record, update_record

        stage = await create_record(
            test_db, SupplyChain, _payload(loss_quantity=Decimal("30")), clock=clock, ids=ids
        )

        with pytest.raises(InvariantViolationError, match="plus Loss Quantity \\(30\\)"):
            await update_record(test_db, stage, {"quantity_out": Decimal("980")}, clock=clock)

        assert stage.quantity_out == Decimal("950")

    async def test_inference_flag_is_read_only(self, test_db, clock, ids):
        from core.errors import RecordValidationError
        from db.models import SupplyChain
        from db.store import create_record

        with pytest.raises(RecordValidationError, match="loss_inferred"):
            await create_record(test_db, SupplyChain, _payload(loss_inferred=True), clock=clock, ids=ids)

    async def test_create_rejects_unconserved_quantities(self, test_db, clock, ids):
        """Out plus loss above in is refused and nothing is inserted."""
        from core.errors import InvariantViolationError
        from db.models import SupplyChain
        from db.store import create_record

        with pytest.raises(InvariantViolationError, match="plus Loss Quantity"):
            await create_record(
                test_db, SupplyChain, _payload(loss_quantity=Decimal("100")), clock=clock, ids=ids
            )

        count = await test_db.scalar(select(func.count()).select_from(SupplyChain))
        assert count == 0

    async def test_update_violation_restores_previous_values(self, test_db, clock, ids):
        """A rejected update leaves the stage exactly as it was."""
        from core.errors import InvariantViolationError
        from db.models import SupplyChain
        from db.store import create_record, update_record

        stage = await create_record(test_db, SupplyChain, _payload(), clock=clock, ids=ids)
        updated_at = stage.updated_at
        clock.advance(hours=2)

        with pytest.raises(InvariantViolationError, match="cannot exceed Quantity In"):
            await update_record(test_db, stage, {"quantity_out": Decimal("1200")}, clock=clock)

        assert stage.quantity_out == Decimal("950")
        assert stage.loss_quantity == Decimal("50.00")
        assert stage.updated_at == updated_at


class TestQuantityChecks:
    def test_loss_above_quantity_in(self):
        from core.errors import InvariantViolationError
        from db.models import SupplyChain
        from supply_chain import stages

        stage = SupplyChain(quantity_in=Decimal("10"), loss_quantity=Decimal("11"))
        with pytest.raises(InvariantViolationError, match="Loss Quantity \\(11\\) cannot exceed"):
            stages.check_quantities(stage)

    def test_missing_quantity_in_skips_checks(self):
        from db.models import SupplyChain
        from supply_chain import stages

        stages.check_quantities(SupplyChain(quantity_out=Decimal("5")))


class TestStageViews:
    def _stage(self, **fields):
        from db.enums import QualityStatus, SupplyChainStage
        from db.models import SupplyChain

        defaults = {
            "stage": SupplyChainStage.TRANSPORT,
            "location": "Huye",
            "unit": "KG",
            "quantity_in": Decimal("1000"),
            "quantity_out": Decimal("950"),
            "loss_quantity": Decimal("50"),
            "loss_percentage": Decimal("5.00"),
            "quality_status": QualityStatus.GOOD,
            "stage_start_date": datetime(2024, 3, 1, 8, 0),
            "stage_end_date": datetime(2024, 3, 3, 20, 30),
        }
        defaults.update(fields)
        return SupplyChain(**defaults)

    def test_neighbouring_stages(self):
        from db.enums import StageCategory, SupplyChainStage
        from supply_chain import stages

        stage = self._stage()
        assert stages.next_stage(stage) is SupplyChainStage.DISTRIBUTION
        assert stages.previous_stage(stage) is SupplyChainStage.PACKAGING
        assert stages.stage_category(stage) is StageCategory.DISTRIBUTION_PHASE
        assert stages.is_logistics_stage(stage) is True
        assert stages.next_stage(self._stage(stage=SupplyChainStage.RETAIL)) is None

    def test_loss_thresholds(self):
        """Exactly five percent is not yet a high loss."""
        from supply_chain import stages

        assert stages.has_losses(self._stage()) is True
        assert stages.has_high_losses(self._stage()) is False
        assert stages.has_high_losses(self._stage(loss_percentage=Decimal("5.01"))) is True

    def test_quality_issues(self):
        from db.enums import QualityStatus
        from supply_chain import stages

        assert stages.has_quality_issues(self._stage()) is False
        assert stages.has_quality_issues(self._stage(quality_status=QualityStatus.POOR)) is True

    def test_duration_and_rates(self):
        from supply_chain import stages

        stage = self._stage(cost_incurred=Decimal("25000"))
        assert stages.duration_hours(stage) == 60
        assert stages.duration_days(stage) == 2
        assert stages.efficiency_rate(stage) == Decimal("95.00")
        assert stages.cost_per_unit(stage) == Decimal("25.0000")

    def test_formatting(self):
        from supply_chain import stages

        stage = self._stage()
        assert stages.formatted_loss(stage) == "50 KG (5.00%)"
        assert stages.formatted_quantity_flow(stage) == "1000.00 KG → 950.00 KG"
        assert stages.timeline_summary(stage) == "01/03/2024 08:00 - 03/03/2024 20:30 (60 hours)"
        assert stages.stage_summary(stage) == "Transport at Huye - Completed"
        assert stages.performance_summary(stage) == "Efficiency: 95.00%, Losses: 50 KG (5.00%), Quality: Good"

    def test_open_stage_formatting(self):
        from supply_chain import stages

        stage = self._stage(stage_end_date=None, loss_quantity=Decimal("0"))
        assert stages.formatted_end_date(stage) == "Not completed"
        assert stages.formatted_loss(stage) == "No losses"
        assert stages.is_in_progress(stage) is True
        assert stages.duration_hours(stage) == 0
