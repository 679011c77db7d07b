# videocatalog/services/catalog/service.py
from __future__ import annotations

from dataclasses import replace
from typing import Generic, List, Optional, TypeVar
from uuid import UUID, uuid4

from videocatalog.common.logging import get_logger
from videocatalog.database.repos.catalog_repo import SqlAlchemyCatalogRepo
from videocatalog.database.repos.people_repo import CastMemberRepo
from videocatalog.domain.entities.cast_member import CastMember
from videocatalog.domain.enums import Action, CastMemberType
from videocatalog.domain.errors import NotFoundError, RecordValidationError
from videocatalog.domain.policies.normalization import normalize_record
from videocatalog.domain.policies.record_validation import validate

logger = get_logger(__name__)

R = TypeVar("R")


class CatalogService(Generic[R]):
    """
    Orchestrates one request against one entity:
    normalize text -> validate for the action -> hand to the repo.

    Ids are always generated here on create; a record that arrives with
    an id of its own is rejected.
    """

    def __init__(self, repo: SqlAlchemyCatalogRepo[R]) -> None:
        self.repo = repo

    @property
    def entity(self) -> str:
        return self.repo.entity

    def _validated(self, record: R, action: Action) -> R:
        record = normalize_record(record)
        try:
            validate(record, action)
        except RecordValidationError as e:
            logger.warning("%s %s rejected: %s", self.entity, action, e.message)
            raise
        return record

    def create(self, record: R) -> R:
        if record.id:
            raise RecordValidationError("id is assigned by the server")
        record = self._validated(replace(record, id=str(uuid4())), Action.create)
        created = self.repo.create(record)
        logger.info("%s created: %s", self.entity, created.id)
        return created

    def list(self, q: Optional[str] = None, limit: Optional[int] = None) -> List[R]:
        rows = self.repo.find_all(q=q, limit=limit)
        logger.debug("%s list requested, %d found", self.entity, len(rows))
        return rows

    def get(self, record_id: UUID | str) -> R:
        try:
            return self.repo.find_by_id(record_id)
        except NotFoundError:
            logger.warning("%s %s requested but not found", self.entity, record_id)
            raise

    def update(self, record_id: UUID | str, record: R) -> R:
        record = self._validated(replace(record, id=str(record_id)), Action.update)
        try:
            updated = self.repo.update(record)
        except NotFoundError:
            logger.warning("Attempt to update a missing %s %s", self.entity, record_id)
            raise
        logger.info("%s updated: %s", self.entity, record_id)
        return updated

    def delete(self, record_id: UUID | str) -> None:
        try:
            self.repo.delete(record_id)
        except NotFoundError:
            logger.warning("Attempt to delete a missing %s %s", self.entity, record_id)
            raise
        logger.info("%s deleted: %s", self.entity, record_id)


class CastMemberService(CatalogService[CastMember]):
    repo: CastMemberRepo

    def list_by_type(self, member_type: CastMemberType) -> List[CastMember]:
        return self.repo.list_by_type(member_type)
