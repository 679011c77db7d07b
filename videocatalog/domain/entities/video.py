# videocatalog/domain/entities/video.py
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import ClassVar, Optional, Tuple

from videocatalog.domain.policies.field_rules import rule
from videocatalog.domain.policies.video_rules import (
    check_title,
    check_description,
    check_year_launched,
    check_rating,
    check_duration,
)


@dataclass
class Video:
    """
    Core catalog entry.

    On create every rated field is checked, empty ones included (they fail
    their own check). On update only the fields that carry a value are
    checked, and at least one of them must.
    """
    ENTITY: ClassVar[str] = "Video"
    TEXT_FIELDS: ClassVar[Tuple[str, ...]] = ("title", "description")
    UPDATE_REQUIRES_ANY: ClassVar[Tuple[str, ...]] = (
        "title", "description", "year_launched", "rating", "duration",
    )
    UPDATE_REQUIRES_ANY_MESSAGE: ClassVar[str] = "Video must update at least one field"

    id: str = ""
    title: str = field(default="", metadata=rule(check_title, required=True))
    description: str = field(default="", metadata=rule(check_description, required=True))
    year_launched: int = field(default=0, metadata=rule(check_year_launched, required=True))
    rating: str = field(default="", metadata=rule(check_rating, required=True))
    duration: int = field(default=0, metadata=rule(check_duration, required=True))
    opened: Optional[bool] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    def as_dict(self):
        return asdict(self)
