# videocatalog/database/models/media.py
from __future__ import annotations

from sqlalchemy import Boolean, CheckConstraint, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from videocatalog.database.core.main import Base
from videocatalog.database.core.service_object import ServiceObject


class Video(ServiceObject, Base):
    __tablename__ = "video"
    __table_args__ = (
        CheckConstraint("rating IN ('L', '10', '12', '14', '16', '18')", name="rating_valid"),
        CheckConstraint("duration > 0", name="duration_positive"),
        CheckConstraint("year_launched >= 1895", name="year_launched_min"),
        Index("ix_video_title", "title"),
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    year_launched: Mapped[int] = mapped_column(Integer, nullable=False)
    opened: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("false"))
    rating: Mapped[str] = mapped_column(String(2), nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)  # minutes

    def __repr__(self) -> str:
        return f"<Video id={self.id} title={self.title!r}>"
