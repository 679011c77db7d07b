# videocatalog/domain/policies/field_rules.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional
from uuid import UUID

from videocatalog.domain.enums import CastMemberType, UpdateCheck
from videocatalog.domain.errors import RecordValidationError

RULE_KEY = "rule"

NAME_MIN_LEN = 3
NAME_MAX_LEN = 255

_UUID_RE = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE)


@dataclass(frozen=True)
class FieldRule:
    """
    Declarative rule attached to a record field (through dataclass field metadata).

    check:            raises RecordValidationError when the value is not acceptable
    required:         the field must carry a non-zero value on create
    required_message: reported when a required field is empty; when None the
                      empty value is handed to `check` instead, so the check's
                      own message is reported
    on_update:        how the field is re-checked for Action.update
    """
    check: Callable[[Any], None]
    required: bool = False
    required_message: Optional[str] = None
    on_update: UpdateCheck = UpdateCheck.if_present


def rule(
    check: Callable[[Any], None],
    *,
    required: bool = False,
    required_message: Optional[str] = None,
    on_update: UpdateCheck = UpdateCheck.if_present,
) -> Mapping[str, FieldRule]:
    """Build the `metadata=` mapping for a dataclass field."""
    return {
        RULE_KEY: FieldRule(
            check=check,
            required=required,
            required_message=required_message,
            on_update=on_update,
        )
    }


def is_zero(value: Any) -> bool:
    """
    True when a field holds its "not supplied" value: None, "" or 0.
    Booleans are never zero (False is a real value for is_active/opened).
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0
    return False


# ---------- reusable checks ----------

def check_uuid(value: Any) -> None:
    """Canonical 8-4-4-4-12 hex form only; no braces, urn prefix or bare hex."""
    if isinstance(value, UUID):
        return
    if not isinstance(value, str) or not _UUID_RE.fullmatch(value):
        raise RecordValidationError("Invalid id")


def length_between(min_len: int, max_len: int, message: str) -> Callable[[Any], None]:
    def _check(value: Any) -> None:
        if not isinstance(value, str) or not (min_len <= len(value) <= max_len):
            raise RecordValidationError(message)

    return _check


def name_length(entity: str, field_name: str = "name") -> Callable[[Any], None]:
    return length_between(
        NAME_MIN_LEN,
        NAME_MAX_LEN,
        f"{entity} {field_name} must be between {NAME_MIN_LEN} and {NAME_MAX_LEN} characters",
    )


def check_cast_member_type(value: Any) -> None:
    valid = {t.value for t in CastMemberType}
    if isinstance(value, bool) or not isinstance(value, int) or value not in valid:
        raise RecordValidationError("CastMember type must be 1 (Director) or 2 (Actor)")
