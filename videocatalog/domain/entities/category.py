# videocatalog/domain/entities/category.py
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import ClassVar, Optional, Tuple

from videocatalog.domain.enums import UpdateCheck
from videocatalog.domain.policies.field_rules import rule, name_length


@dataclass
class Category:
    """
    A video category. `is_active` left as None lets storage apply its default (true).
    Name uniqueness is enforced by the database, not here.
    """
    ENTITY: ClassVar[str] = "Category"
    TEXT_FIELDS: ClassVar[Tuple[str, ...]] = ("name", "description")
    UPDATE_REQUIRES_ANY: ClassVar[Tuple[str, ...]] = ()

    id: str = ""
    name: str = field(
        default="",
        metadata=rule(
            name_length("Category"),
            required=True,
            required_message="Category name is required",
            on_update=UpdateCheck.always,
        ),
    )
    description: str = field(
        default="",
        metadata=rule(name_length("Category", "description")),
    )
    is_active: Optional[bool] = None

    # Persistence-owned
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    def as_dict(self):
        return asdict(self)
