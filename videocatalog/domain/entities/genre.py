# videocatalog/domain/entities/genre.py
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import ClassVar, Optional, Tuple

from videocatalog.domain.enums import UpdateCheck
from videocatalog.domain.policies.field_rules import rule, name_length


@dataclass
class Genre:
    ENTITY: ClassVar[str] = "Genre"
    TEXT_FIELDS: ClassVar[Tuple[str, ...]] = ("name",)
    UPDATE_REQUIRES_ANY: ClassVar[Tuple[str, ...]] = ()

    id: str = ""
    name: str = field(
        default="",
        metadata=rule(
            name_length("Genre"),
            required=True,
            required_message="Genre name is required",
            on_update=UpdateCheck.always,
        ),
    )
    is_active: Optional[bool] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    def as_dict(self):
        return asdict(self)
