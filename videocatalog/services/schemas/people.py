from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CastMemberBase(BaseModel):
    # JSON true or "1" is malformed input, not a type
    model_config = ConfigDict(strict=True)

    name: Optional[str] = None
    type: Optional[int] = Field(default=None, description="1 = Director, 2 = Actor")


class CastMemberCreate(CastMemberBase):
    id: Optional[str] = None


class CastMemberUpdate(CastMemberBase):
    pass


class CastMemberRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    type: int
    type_label: Optional[str] = Field(default=None, description="director | actor")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
