# videocatalog/domain/policies/record_validation.py
from __future__ import annotations

from dataclasses import fields
from typing import Any, Iterator, Tuple

from videocatalog.domain.enums import Action, UpdateCheck
from videocatalog.domain.errors import RecordValidationError
from videocatalog.domain.policies.field_rules import RULE_KEY, FieldRule, check_uuid, is_zero


def iter_field_rules(record: Any) -> Iterator[Tuple[str, FieldRule]]:
    """Yield (field_name, rule) for every rule-bearing field, in declaration order."""
    for f in fields(record):
        r = f.metadata.get(RULE_KEY)
        if r is not None:
            yield f.name, r


def _apply_create(r: FieldRule, value: Any) -> None:
    if is_zero(value):
        if not r.required:
            return
        if r.required_message is not None:
            raise RecordValidationError(r.required_message)
    r.check(value)


def _apply_update(r: FieldRule, value: Any) -> None:
    if r.on_update == UpdateCheck.never:
        return
    if r.on_update == UpdateCheck.if_present:
        if not is_zero(value):
            r.check(value)
        return
    _apply_create(r, value)


def validate(record: Any, action: Action | str = Action.create) -> None:
    """
    Check a record against the rules declared on its fields.

    Fail-fast: the first violated rule is raised as RecordValidationError and
    nothing else is checked. Order is: id, then the record-level
    "update at least one of" requirement (update only), then fields in
    declaration order.
    """
    action = Action(action)

    check_uuid(record.id)

    if action == Action.update:
        required_any = getattr(record, "UPDATE_REQUIRES_ANY", ())
        if required_any and all(is_zero(getattr(record, name)) for name in required_any):
            raise RecordValidationError(
                getattr(record, "UPDATE_REQUIRES_ANY_MESSAGE", "Must update at least one field")
            )

    apply = _apply_update if action == Action.update else _apply_create
    for name, r in iter_field_rules(record):
        apply(r, getattr(record, name))
