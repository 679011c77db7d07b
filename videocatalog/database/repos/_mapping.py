# videocatalog/database/repos/_mapping.py
from __future__ import annotations

from dataclasses import fields, MISSING
from typing import Any, Dict, Type, TypeVar

from videocatalog.domain.policies.field_rules import is_zero

R = TypeVar("R")

PERSISTENCE_OWNED = ("id", "created_at", "updated_at", "deleted_at")


def to_domain(row: Any, record_cls: Type[R]) -> R:
    """ORM row -> domain record. NULL columns fall back to the record's zero value."""
    kwargs: Dict[str, Any] = {}
    for f in fields(record_cls):
        value = getattr(row, f.name, None)
        if value is None and f.default is not MISSING:
            value = f.default
        kwargs[f.name] = value
    kwargs["id"] = str(row.id) if row.id is not None else ""
    return record_cls(**kwargs)


def column_values(record: Any) -> Dict[str, Any]:
    """
    Columns a record supplies: every non-persistence field carrying a
    non-zero value. Zero values mean "not supplied" and are left to the
    column default on insert, or to the stored value on update.
    """
    out: Dict[str, Any] = {}
    for f in fields(record):
        if f.name in PERSISTENCE_OWNED:
            continue
        value = getattr(record, f.name)
        if is_zero(value):
            continue
        out[f.name] = value
    return out
