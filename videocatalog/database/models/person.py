# videocatalog/database/models/person.py
from __future__ import annotations

from sqlalchemy import CheckConstraint, Index, SmallInteger, String, text
from sqlalchemy.orm import Mapped, mapped_column

from videocatalog.database.core.main import Base
from videocatalog.database.core.service_object import ServiceObject


class CastMember(ServiceObject, Base):
    """
    Directors (type=1) and actors (type=2).
    """
    __tablename__ = "cast_member"
    __table_args__ = (
        CheckConstraint("type IN (1, 2)", name="type_director_or_actor"),
        Index("uq_cast_member_name_live", "name", unique=True, postgresql_where=text("deleted_at IS NULL")),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[int] = mapped_column(SmallInteger, nullable=False)

    def __repr__(self) -> str:
        return f"<CastMember id={self.id} name={self.name!r} type={self.type}>"
