from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class VideoBase(BaseModel):
    model_config = ConfigDict(strict=True)

    title: Optional[str] = None
    description: Optional[str] = None
    year_launched: Optional[int] = None
    opened: Optional[bool] = None
    rating: Optional[str] = Field(default=None, description="L | 10 | 12 | 14 | 16 | 18")
    duration: Optional[int] = Field(default=None, description="Minutes")


class VideoCreate(VideoBase):
    id: Optional[str] = None


class VideoUpdate(VideoBase):
    pass


class VideoRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str
    year_launched: int
    opened: bool = False
    rating: str
    duration: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
