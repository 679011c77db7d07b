# videocatalog/database/models/taxonomy.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import Boolean, String, Index, text
from sqlalchemy.orm import Mapped, mapped_column

from videocatalog.database.core.main import Base
from videocatalog.database.core.service_object import ServiceObject


# =======================
# Categories
# =======================
class Category(ServiceObject, Base):
    __tablename__ = "category"
    __table_args__ = (
        # unique among live rows only, so a soft-deleted name can be reused
        Index("uq_category_name_live", "name", unique=True, postgresql_where=text("deleted_at IS NULL")),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(255))
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("true"))

    def __repr__(self) -> str:
        return f"<Category id={self.id} name={self.name!r}>"


# =======================
# Genres
# =======================
class Genre(ServiceObject, Base):
    __tablename__ = "genre"
    __table_args__ = (
        Index("uq_genre_name_live", "name", unique=True, postgresql_where=text("deleted_at IS NULL")),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("true"))

    def __repr__(self) -> str:
        return f"<Genre id={self.id} name={self.name!r}>"
