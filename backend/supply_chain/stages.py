"""
Supply Chain Stages — quantity conservation and loss tracking per stage.

Each record covers one stage (harvest, storage, transport, ...) of one crop
production. Quantities must be conserved:

    quantity_out + loss_quantity <= quantity_in

A violation raises InvariantViolationError before anything is written.
When no loss is recorded, the missing quantity (quantity_in - quantity_out)
becomes the loss and is re-derived on every write until a loss is recorded
explicitly. loss_percentage always follows the stored loss_quantity.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from core.errors import InvariantViolationError
from core.identifiers import IdentifierGenerator
from core.numbers import ZERO, money, percent, ratio, to_decimal
from db.enums import StageCategory, SupplyChainStage
from db.records import changed, stamp_created, stamp_updated

HIGH_LOSS_PERCENT = Decimal("5")
DATE_FORMAT = "%d/%m/%Y %H:%M"


def _quantity(value) -> Decimal:
    return to_decimal(value) or ZERO


# ── Lifecycle ──────────────────────────────────────────────────────────────


def check_quantities(stage) -> None:
    """Raise InvariantViolationError when the stage loses or creates produce."""
    quantity_in = to_decimal(stage.quantity_in)
    if quantity_in is None:
        return
    out = _quantity(stage.quantity_out)
    loss = _quantity(stage.loss_quantity)

    if out > 0 and out > quantity_in:
        raise InvariantViolationError(f"Quantity Out ({out}) cannot exceed Quantity In ({quantity_in})")
    if loss > 0 and loss > quantity_in:
        raise InvariantViolationError(f"Loss Quantity ({loss}) cannot exceed Quantity In ({quantity_in})")
    if (out > 0 or loss > 0) and out + loss > quantity_in:
        raise InvariantViolationError(
            f"Quantity Out ({out}) plus Loss Quantity ({loss}) cannot exceed Quantity In ({quantity_in})"
        )


def _loss_supplied(stage) -> bool:
    """A positive loss counts as recorded unless this module put it there."""
    if _quantity(stage.loss_quantity) <= 0:
        return False
    return changed(stage, "loss_quantity") or not stage.loss_inferred


def _infer_loss(stage, quantity_in: Decimal) -> None:
    out = _quantity(stage.quantity_out)
    missing = quantity_in - out
    if out > 0 and missing > 0:
        stage.loss_quantity = money(missing)
        stage.loss_inferred = True
    elif stage.loss_inferred:
        stage.loss_quantity = ZERO
        stage.loss_inferred = False


def recompute(stage):
    if stage.stage is not None:
        stage.stage_order = stage.stage.order

    quantity_in = _quantity(stage.quantity_in)
    if quantity_in > 0:
        if _loss_supplied(stage):
            stage.loss_inferred = False
        else:
            _infer_loss(stage, quantity_in)
    check_quantities(stage)

    if quantity_in > 0:
        stage.loss_percentage = percent(_quantity(stage.loss_quantity), quantity_in)
    return stage


def on_create(stage, now: datetime, ids: IdentifierGenerator) -> None:
    stamp_created(stage, now, ids)
    if stage.stage_start_date is None:
        stage.stage_start_date = now
    recompute(stage)


def on_update(stage, now: datetime) -> None:
    stamp_updated(stage, now)
    recompute(stage)


# ── Predicates ─────────────────────────────────────────────────────────────


def is_completed(stage) -> bool:
    return stage.stage_end_date is not None


def is_in_progress(stage) -> bool:
    return stage.stage_start_date is not None and stage.stage_end_date is None


def has_quality_issues(stage) -> bool:
    return stage.quality_status is not None and not stage.quality_status.is_acceptable


def has_losses(stage) -> bool:
    return _quantity(stage.loss_quantity) > 0


def has_high_losses(stage) -> bool:
    loss = to_decimal(stage.loss_percentage)
    return loss is not None and loss > HIGH_LOSS_PERCENT


def is_first_stage(stage) -> bool:
    return stage.stage is SupplyChainStage.HARVEST


def is_last_stage(stage) -> bool:
    return stage.stage is SupplyChainStage.RETAIL


def is_processing_stage(stage) -> bool:
    return stage.stage in (SupplyChainStage.PROCESSING, SupplyChainStage.PACKAGING)


def is_logistics_stage(stage) -> bool:
    return stage.stage in (SupplyChainStage.TRANSPORT, SupplyChainStage.DISTRIBUTION)


# ── Derived views ──────────────────────────────────────────────────────────


def next_stage(stage) -> SupplyChainStage | None:
    return stage.stage.next_stage() if stage.stage else None


def previous_stage(stage) -> SupplyChainStage | None:
    return stage.stage.previous_stage() if stage.stage else None


def stage_category(stage) -> StageCategory:
    return StageCategory.for_stage(stage.stage)


def duration_hours(stage) -> int:
    if stage.stage_start_date is None or stage.stage_end_date is None:
        return 0
    return int((stage.stage_end_date - stage.stage_start_date).total_seconds() // 3600)


def duration_days(stage) -> int:
    return duration_hours(stage) // 24


def efficiency_rate(stage) -> Decimal | None:
    """Share of incoming produce that left the stage, as a percentage."""
    return percent(_quantity(stage.quantity_out), stage.quantity_in)


def cost_per_unit(stage) -> Decimal | None:
    if stage.cost_incurred is None:
        return None
    return ratio(stage.cost_incurred, stage.quantity_in)


def formatted_start_date(stage) -> str:
    return stage.stage_start_date.strftime(DATE_FORMAT) if stage.stage_start_date else "Not set"


def formatted_end_date(stage) -> str:
    return stage.stage_end_date.strftime(DATE_FORMAT) if stage.stage_end_date else "Not completed"


def formatted_quantity_flow(stage) -> str:
    unit = stage.unit or "KG"
    quantity_in = to_decimal(stage.quantity_in)
    out = to_decimal(stage.quantity_out)
    left = f"{quantity_in:.2f} {unit}" if quantity_in is not None else "N/A"
    right = f"{out:.2f} {unit}" if out is not None else "N/A"
    return f"{left} → {right}"


def formatted_loss(stage) -> str:
    if not has_losses(stage):
        return "No losses"
    loss = _quantity(stage.loss_quantity)
    share = to_decimal(stage.loss_percentage) or ZERO
    return f"{loss:.0f} {stage.unit or 'KG'} ({share:.2f}%)"


def stage_summary(stage) -> str:
    label = stage.stage.label if stage.stage else "Unknown"
    state = "Completed" if is_completed(stage) else "In Progress"
    return f"{label} at {stage.location} - {state}"


def performance_summary(stage) -> str:
    efficiency = efficiency_rate(stage)
    efficiency_text = f"{efficiency:.2f}%" if efficiency is not None else "N/A"
    quality = stage.quality_status.label if stage.quality_status else "Unknown"
    return f"Efficiency: {efficiency_text}, Losses: {formatted_loss(stage)}, Quality: {quality}"


def timeline_summary(stage) -> str:
    return f"{formatted_start_date(stage)} - {formatted_end_date(stage)} ({duration_hours(stage)} hours)"
