# videocatalog/domain/policies/video_rules.py
from __future__ import annotations

from datetime import date
from typing import Any, Optional

from videocatalog.common.strings.splitters import count_words
from videocatalog.domain.enums import VideoRating
from videocatalog.domain.errors import RecordValidationError

TITLE_MIN_LEN = 3
TITLE_MAX_LEN = 255
DESCRIPTION_MIN_LEN = 15
DESCRIPTION_MIN_WORDS = 10
FIRST_FILM_YEAR = 1895

RATINGS = tuple(r.value for r in VideoRating)


def validate_title(length: int) -> None:
    if length < TITLE_MIN_LEN or length > TITLE_MAX_LEN:
        raise RecordValidationError("Title length must be between 3 and 255 characters")


def validate_description(length: int, word_count: int) -> None:
    if length < DESCRIPTION_MIN_LEN or word_count < DESCRIPTION_MIN_WORDS:
        raise RecordValidationError("Description must have at least 10 words and 15 characters")


def validate_year_launched(year: int, *, today: Optional[date] = None) -> None:
    current = (today or date.today()).year
    if year < FIRST_FILM_YEAR or year > current:
        raise RecordValidationError("Year launched must be between 1895 and current year")


def validate_rating(rating: str) -> None:
    # exact, case-sensitive match; "99" or "l" are not ratings
    if not isinstance(rating, str) or rating not in RATINGS:
        raise RecordValidationError("Rating must be a valid value")


def validate_duration(duration: int) -> None:
    if duration < 1:
        raise RecordValidationError("Duration must be greater than 0")


# ---------- field adapters (value -> sub-check) ----------

def check_title(value: Any) -> None:
    validate_title(len(value or ""))


def check_description(value: Any) -> None:
    text = value or ""
    validate_description(len(text), count_words(text))


def check_year_launched(value: Any) -> None:
    validate_year_launched(value or 0)


def check_rating(value: Any) -> None:
    validate_rating(value or "")


def check_duration(value: Any) -> None:
    validate_duration(value or 0)
