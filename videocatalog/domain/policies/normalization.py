# videocatalog/domain/policies/normalization.py
from __future__ import annotations

from dataclasses import replace
from typing import TypeVar

from videocatalog.common.strings.sanitize import normalize_text

R = TypeVar("R")


def normalize_record(record: R) -> R:
    """
    Return a copy of `record` with each of its TEXT_FIELDS trimmed and
    HTML-escaped. Empty fields are normalized too; id, numbers, flags and
    timestamps are left untouched.
    """
    text_fields = getattr(record, "TEXT_FIELDS", ())
    changes = {name: normalize_text(getattr(record, name)) for name in text_fields}
    return replace(record, **changes)
