# videocatalog/database/repos/catalog_repo.py
from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, ClassVar, Generic, Iterator, List, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from videocatalog.common.logging import get_logger
from videocatalog.database.repos._mapping import column_values, to_domain
from videocatalog.domain.errors import NotFoundError, PersistenceError

logger = get_logger(__name__)

R = TypeVar("R")


class SqlAlchemyCatalogRepo(Generic[R]):
    """
    CRUD over one catalog table, speaking domain records in and out.

    - soft-deleted rows are invisible: reads, updates and deletes on them
      raise NotFoundError exactly like a missing id
    - any other storage failure surfaces as PersistenceError
    - writes run inside a SAVEPOINT so a failed flush leaves the
      request session usable
    """
    model: ClassVar[Type[Any]]
    record_cls: ClassVar[Type[Any]]
    search_column: ClassVar[str] = "name"

    def __init__(self, session: Session) -> None:
        self.db = session

    @property
    def entity(self) -> str:
        return self.record_cls.ENTITY

    # -------- queries --------

    def _live(self) -> Select:
        return select(self.model).where(self.model.deleted_at.is_(None))

    def _get_live(self, record_id: UUID | str) -> Any:
        try:
            rid = record_id if isinstance(record_id, UUID) else UUID(str(record_id))
        except ValueError:
            raise NotFoundError(self.entity, record_id) from None
        row = self.db.execute(self._live().where(self.model.id == rid).limit(1)).scalars().first()
        if row is None:
            raise NotFoundError(self.entity, record_id)
        return row

    @contextmanager
    def _savepoint(self, action: str) -> Iterator[None]:
        # changes must be made inside the block: begin_nested() flushes pending state first
        try:
            with self.db.begin_nested():
                yield
        except SQLAlchemyError as e:
            logger.error("%s %s failed: %s", self.entity, action, e)
            raise PersistenceError(f"Could not {action} {self.entity}") from e

    # -------- CRUD --------

    def create(self, record: R) -> R:
        row = self.model(id=UUID(str(record.id)), **column_values(record))
        with self._savepoint("create"):
            self.db.add(row)
        self.db.refresh(row)
        return to_domain(row, self.record_cls)

    def find_all(self, q: Optional[str] = None, limit: Optional[int] = None) -> List[R]:
        col = getattr(self.model, self.search_column)
        stmt = self._live()
        q = (q or "").strip().lower()
        if q:
            # autoescape: % and _ in q match literally
            stmt = stmt.where(func.lower(col).contains(q, autoescape=True))
        stmt = stmt.order_by(col.asc())
        if limit:
            stmt = stmt.limit(limit)
        rows = self.db.execute(stmt).scalars().all()
        return [to_domain(r, self.record_cls) for r in rows]

    def find_by_id(self, record_id: UUID | str) -> R:
        return to_domain(self._get_live(record_id), self.record_cls)

    def update(self, record: R) -> R:
        """Apply the fields the record supplies; zero-valued fields keep their stored value."""
        row = self._get_live(record.id)
        with self._savepoint("update"):
            for k, v in column_values(record).items():
                setattr(row, k, v)
        self.db.refresh(row)
        return to_domain(row, self.record_cls)

    def delete(self, record_id: UUID | str) -> None:
        row = self._get_live(record_id)
        with self._savepoint("delete"):
            row.deleted_at = datetime.now(timezone.utc)
