from uuid import uuid4

import pytest

from videocatalog.domain.entities.category import Category
from videocatalog.domain.entities.genre import Genre
from videocatalog.domain.errors import RecordValidationError
from videocatalog.domain.policies.normalization import normalize_record
from videocatalog.domain.policies.record_validation import validate


def _id() -> str:
    return str(uuid4())


def test_empty_category_is_invalid():
    with pytest.raises(RecordValidationError):
        validate(Category())


def test_category_fully_filled():
    c = normalize_record(Category(id=_id(), name="name", description="description", is_active=True))
    validate(c)


def test_category_only_required_fields():
    validate(normalize_record(Category(id=_id(), name="name")))


def test_category_id_must_be_uuid():
    with pytest.raises(RecordValidationError, match="Invalid id"):
        validate(Category(id="abc", name="valid name"))


def test_category_name_is_required():
    with pytest.raises(RecordValidationError, match="Category name is required"):
        validate(normalize_record(Category(id=_id(), name="   ")))


@pytest.mark.parametrize("name", ["ab", "a" * 256])
def test_category_name_length(name):
    with pytest.raises(RecordValidationError, match="Category name must be between 3 and 255 characters"):
        validate(Category(id=_id(), name=name))


@pytest.mark.parametrize("name", ["abc", "a" * 255])
def test_category_name_length_bounds_pass(name):
    validate(Category(id=_id(), name=name))


def test_category_description_checked_only_when_present():
    validate(Category(id=_id(), name="name", description=""))
    with pytest.raises(RecordValidationError, match="Category description must be between 3 and 255"):
        validate(Category(id=_id(), name="name", description="ab"))


def test_category_update_uses_the_same_rules():
    with pytest.raises(RecordValidationError, match="Category name is required"):
        validate(Category(id=_id(), description="just a description"), "update")
    validate(Category(id=_id(), name="renamed"), "update")


def test_category_reports_first_failure_only():
    # bad id and bad name: id is checked first
    with pytest.raises(RecordValidationError, match="Invalid id"):
        validate(Category(id="nope", name="x"))


def test_genre_rules():
    with pytest.raises(RecordValidationError):
        validate(Genre())
    validate(normalize_record(Genre(id=_id(), name="name", is_active=False)))
    with pytest.raises(RecordValidationError, match="Invalid id"):
        validate(Genre(id="id", name="name"))
    with pytest.raises(RecordValidationError, match="Genre name is required"):
        validate(Genre(id=_id()))
    with pytest.raises(RecordValidationError, match="Genre name must be between 3 and 255 characters"):
        validate(Genre(id=_id(), name="ab"))


def test_escaping_counts_towards_length():
    # "<>" becomes "&lt;&gt;" (8 chars) once normalized
    validate(normalize_record(Genre(id=_id(), name="<>")))
