from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, Tuple
from uuid import uuid4

import pytest

from videocatalog.domain.entities.category import Category
from videocatalog.domain.entities.video import Video
from videocatalog.domain.enums import UpdateCheck
from videocatalog.domain.errors import RecordValidationError
from videocatalog.domain.policies.field_rules import rule, is_zero, length_between, check_uuid
from videocatalog.domain.policies.normalization import normalize_record
from videocatalog.domain.policies.record_validation import validate, iter_field_rules


@dataclass
class Sample:
    TEXT_FIELDS: ClassVar[Tuple[str, ...]] = ("label",)

    id: str = ""
    label: str = field(default="", metadata=rule(length_between(2, 4, "bad label"), on_update=UpdateCheck.never))
    code: str = field(
        default="", metadata=rule(length_between(1, 1, "bad code"), required=True, on_update=UpdateCheck.always)
    )
    note: str = field(default="", metadata=rule(length_between(3, 5, "bad note")))


def test_is_zero():
    assert is_zero(None) and is_zero("") and is_zero(0)
    assert not is_zero(False)
    assert not is_zero(" ")
    assert not is_zero(3)


def test_check_uuid():
    check_uuid(str(uuid4()))
    check_uuid(uuid4())
    for bad in (
        "",
        "abc",
        None,
        "123e4567-e89b-12d3-a456-42661417400",
        "123e4567e89b12d3a456426614174000",
        "{123e4567-e89b-12d3-a456-426614174000}",
        "urn:uuid:123e4567-e89b-12d3-a456-426614174000",
    ):
        with pytest.raises(RecordValidationError, match="Invalid id"):
            check_uuid(bad)


def test_optional_fields_skip_when_empty():
    validate(Sample(id=str(uuid4()), code="x"))
    with pytest.raises(RecordValidationError, match="bad note"):
        validate(Sample(id=str(uuid4()), code="x", note="no"))


def test_update_modes():
    rid = str(uuid4())
    # never: label is not looked at on update
    validate(Sample(id=rid, label="far too long", code="x"), "update")
    # always: empty code is handed to its check
    with pytest.raises(RecordValidationError, match="bad code"):
        validate(Sample(id=rid), "update")
    # if_present: empty note skipped, bad note rejected
    with pytest.raises(RecordValidationError, match="bad note"):
        validate(Sample(id=rid, code="x", note="ab"), "update")


def test_unknown_action_is_a_programming_error():
    with pytest.raises(ValueError):
        validate(Sample(id=str(uuid4()), code="x"), "upsert")


def test_rules_follow_declaration_order():
    assert [name for name, _ in iter_field_rules(Video())] == [
        "title", "description", "year_launched", "rating", "duration",
    ]


def test_normalize_record_touches_only_text_fields():
    ts = datetime(2024, 1, 1)
    c = Category(id="  keep  ", name="  <b>Hi</b>  ", description=" a & b ", is_active=False, created_at=ts)
    out = normalize_record(c)
    assert out.name == "&lt;b&gt;Hi&lt;/b&gt;"
    assert out.description == "a &amp; b"
    assert out.id == "  keep  "
    assert out.is_active is False
    assert out.created_at is ts
    # original untouched
    assert c.name == "  <b>Hi</b>  "


def test_normalize_record_video():
    v = normalize_record(Video(title=" <i>T</i> ", description="", duration=5))
    assert v.title == "&lt;i&gt;T&lt;/i&gt;"
    assert v.description == ""
    assert v.duration == 5


def test_normalize_record_uses_declared_text_fields():
    s = normalize_record(Sample(label="  ab "))
    assert s.label == "ab"
