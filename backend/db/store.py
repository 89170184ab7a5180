"""
Record Write Path — validation, lifecycle hooks and identifier uniqueness.

Every insert and update goes through here so derived fields never drift
from their inputs:

  create_record  validate payload -> build -> on_create -> unique ids -> flush
  update_record  validate merged state -> apply -> on_update -> flush
  save_record    on_update for a record already changed in place -> flush

A failed update restores the record's previous values before the error
propagates; a failed create never reaches the session.
"""

from __future__ import annotations

from typing import Any, Callable

import structlog
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from alerts import food_security
from core.clock import Clock, system_clock
from core.config import get_settings
from core.errors import IdentifierCollisionError, RecordValidationError
from core.identifiers import IdentifierGenerator
from db import models
from db.records import assign_identifiers, code_attr, column_names, restore, snapshot
from db.schemas import validate_state
from environment import climate, monitoring, soil, weather
from farm import crops, fertilizer, holdings, irrigation, production
from inventory import stock
from market import buyers, prices, transactions
from ml import advisories, predictions, recommendations
from ml import irrigation as irrigation_predictions
from policy import programs
from supply_chain import stages

logger = structlog.get_logger()

READ_ONLY_FIELDS = {"id", "created_at", "updated_at"}

# model -> module exposing on_create(record, now, ids) / on_update(record, now)
LIFECYCLE = {
    models.AIRecommendation: advisories,
    models.Buyer: buyers,
    models.ClimateImpact: climate,
    models.Crop: crops,
    models.CropProduction: production,
    models.EnvironmentalData: monitoring,
    models.Farm: holdings,
    models.Farmer: holdings,
    models.FertilizerUsage: fertilizer,
    models.FoodSecurityAlert: food_security,
    models.Inventory: stock,
    models.IrrigationData: irrigation,
    models.IrrigationPrediction: irrigation_predictions,
    models.MarketPrice: prices,
    models.PolicyData: programs,
    models.ProductionPrediction: predictions,
    models.ResourceRecommendation: recommendations,
    models.SoilData: soil,
    models.SupplyChain: stages,
    models.Transaction: transactions,
    models.WeatherData: weather,
}


def _lifecycle(model: type):
    try:
        return LIFECYCLE[model]
    except KeyError:
        raise ValueError(f"No lifecycle registered for {model.__name__}") from None


def _check_fields(model: type, data: dict[str, Any]) -> None:
    allowed = set(column_names(model)) - READ_ONLY_FIELDS - set(getattr(model, "__read_only__", ()))
    errors = [
        {"loc": (name,), "msg": "Unknown or read-only field", "type": "unknown_field"}
        for name in data
        if name not in allowed
    ]
    if errors:
        raise RecordValidationError(model.__name__, errors)


def _validate(model: type, data: dict[str, Any], state: dict[str, Any]) -> None:
    try:
        _check_fields(model, data)
        validate_state(model, state)
    except RecordValidationError as exc:
        logger.warning("record.validation_failed", entity=model.__name__, errors=len(exc.errors))
        raise


async def _identifier_taken(db: AsyncSession, record) -> bool:
    model = type(record)
    condition = model.id == record.id
    attr = code_attr(model)
    if attr and getattr(record, attr):
        condition = or_(condition, getattr(model, attr) == getattr(record, attr))
    result = await db.execute(select(model.id).where(condition).limit(1))
    return result.first() is not None


async def _ensure_unique_identifiers(db: AsyncSession, record, payload: dict, now, ids: IdentifierGenerator) -> None:
    max_attempts = get_settings().id_max_attempts
    attempt = 1
    attr = code_attr(type(record))
    while await _identifier_taken(db, record):
        logger.warning(
            "record.identifier_collision",
            entity=type(record).__name__,
            record_id=record.id,
            attempt=attempt,
        )
        if attempt >= max_attempts:
            raise IdentifierCollisionError(type(record).__name__, attempt)
        record.id = None
        if attr and attr not in payload:
            setattr(record, attr, None)
        assign_identifiers(record, now, ids)
        attempt += 1


async def get_record(db: AsyncSession, model: type, record_id: str):
    return await db.get(model, record_id)


async def create_record(
    db: AsyncSession,
    model: type,
    payload: dict[str, Any],
    *,
    clock: Clock = system_clock,
    ids: IdentifierGenerator | None = None,
):
    """Validate, derive and insert a new record; returns the flushed instance."""
    _validate(model, payload, payload)
    ids = ids or IdentifierGenerator()
    now = clock()

    record = model(**payload)
    _lifecycle(model).on_create(record, now, ids)
    await _ensure_unique_identifiers(db, record, payload, now, ids)

    db.add(record)
    await db.flush()
    logger.info("record.created", entity=model.__name__, record_id=record.id)
    return record


async def _apply(db: AsyncSession, record, previous: dict, mutate: Callable[[], None], clock: Clock) -> None:
    model = type(record)
    try:
        mutate()
        _lifecycle(model).on_update(record, clock())
    except Exception as exc:
        restore(record, previous)
        logger.warning("record.update_rejected", entity=model.__name__, record_id=record.id, error=str(exc))
        raise
    await db.flush()


async def update_record(
    db: AsyncSession,
    record,
    changes: dict[str, Any],
    *,
    clock: Clock = system_clock,
):
    """Apply `changes` and recompute derived fields, or change nothing at all."""
    model = type(record)
    previous = snapshot(record)
    _validate(model, changes, {**previous, **changes})

    def mutate() -> None:
        for name, value in changes.items():
            setattr(record, name, value)

    await _apply(db, record, previous, mutate, clock)
    logger.info("record.updated", entity=model.__name__, record_id=record.id, fields=sorted(changes))
    return record


async def save_record(db: AsyncSession, record, *, clock: Clock = system_clock):
    """Persist a record changed in place (e.g. by a transition) after recomputing it."""
    model = type(record)
    previous = snapshot(record)
    await _apply(db, record, previous, lambda: None, clock)
    logger.info("record.saved", entity=model.__name__, record_id=record.id)
    return record
