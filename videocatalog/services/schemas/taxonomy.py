from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


# ---------- Category ----------

class CategoryBase(BaseModel):
    model_config = ConfigDict(strict=True)

    name: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None


class CategoryCreate(CategoryBase):
    # accepted only so it can be refused with a clear message; ids are server-assigned
    id: Optional[str] = None


class CategoryUpdate(CategoryBase):
    pass


class CategoryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str = ""
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# ---------- Genre ----------

class GenreBase(BaseModel):
    model_config = ConfigDict(strict=True)

    name: Optional[str] = None
    is_active: Optional[bool] = None


class GenreCreate(GenreBase):
    id: Optional[str] = None


class GenreUpdate(GenreBase):
    pass


class GenreRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
