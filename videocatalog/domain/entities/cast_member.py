# videocatalog/domain/entities/cast_member.py
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import ClassVar, Optional, Tuple

from videocatalog.domain.enums import CastMemberType, UpdateCheck
from videocatalog.domain.policies.field_rules import rule, name_length, check_cast_member_type


@dataclass
class CastMember:
    """
    A director or actor.

    On update the name is taken as-is (no length re-check) while a supplied
    type must still be 1 or 2; at least one of the two has to be given.
    """
    ENTITY: ClassVar[str] = "CastMember"
    TEXT_FIELDS: ClassVar[Tuple[str, ...]] = ("name",)
    UPDATE_REQUIRES_ANY: ClassVar[Tuple[str, ...]] = ("name", "type")
    UPDATE_REQUIRES_ANY_MESSAGE: ClassVar[str] = "CastMember must update at least name or type"

    id: str = ""
    name: str = field(
        default="",
        metadata=rule(
            name_length("CastMember"),
            required=True,
            required_message="CastMember name is required",
            on_update=UpdateCheck.never,
        ),
    )
    type: int = field(
        default=0,
        metadata=rule(
            check_cast_member_type,
            required=True,
            required_message="CastMember type is required",
            on_update=UpdateCheck.if_present,
        ),
    )

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @property
    def type_label(self) -> Optional[str]:
        try:
            return CastMemberType(self.type).name
        except ValueError:
            return None

    def as_dict(self):
        return asdict(self)
