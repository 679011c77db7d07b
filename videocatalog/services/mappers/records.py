# videocatalog/services/mappers/records.py
from __future__ import annotations

from dataclasses import fields
from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel

R = TypeVar("R")


def record_from_payload(record_cls: Type[R], payload: BaseModel, **overrides: Any) -> R:
    """
    Build a domain record from a request schema.
    Unknown keys are dropped; missing/null keys keep the record's zero value.
    """
    names = {f.name for f in fields(record_cls)}
    data: Dict[str, Any] = {
        k: v for k, v in payload.model_dump().items() if k in names and v is not None
    }
    data.update(overrides)
    return record_cls(**data)
