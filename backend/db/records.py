"""
Record stamping shared by every lifecycle hook.

Column defaults only apply at flush time; hooks run before that, so
`apply_column_defaults` fills them on the transient instance first and the
derived-field logic sees the same values the database will.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import inspect

from core.identifiers import IdentifierGenerator


def entity_name(record) -> str:
    return type(record).__name__


def code_attr(model) -> str | None:
    return getattr(model, "__code_attr__", None)


def column_names(model) -> list[str]:
    return [column.key for column in inspect(model).mapper.column_attrs]


def apply_column_defaults(record) -> None:
    for column in type(record).__table__.columns:
        default = column.default
        if default is None or not default.is_scalar:
            continue
        if getattr(record, column.key) is None:
            setattr(record, column.key, default.arg)


def assign_identifiers(record, now: datetime, ids: IdentifierGenerator) -> None:
    """Fill the primary key and business code when they are not set."""
    entity = entity_name(record)
    if not record.id:
        record.id = ids.record_id(entity, now)
    attr = code_attr(type(record))
    if attr and not getattr(record, attr):
        setattr(record, attr, ids.business_code(entity, now))


def stamp_created(record, now: datetime, ids: IdentifierGenerator) -> None:
    apply_column_defaults(record)
    assign_identifiers(record, now, ids)
    record.created_at = now
    record.updated_at = now


def stamp_updated(record, now: datetime) -> None:
    record.updated_at = now


def snapshot(record) -> dict:
    return {name: getattr(record, name) for name in column_names(type(record))}


def restore(record, values: dict) -> None:
    for name, value in values.items():
        setattr(record, name, value)


def changed(record, *names: str) -> bool:
    """True when any of `names` was assigned a different value since the last flush.

    A transient record counts every attribute it was given as changed.
    """
    attrs = inspect(record).attrs
    return any(attrs[name].history.has_changes() for name in names)
