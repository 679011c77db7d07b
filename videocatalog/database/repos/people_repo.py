# videocatalog/database/repos/people_repo.py
from __future__ import annotations

from typing import List

from videocatalog.database.models.person import CastMember as DBCastMember
from videocatalog.database.repos._mapping import to_domain
from videocatalog.database.repos.catalog_repo import SqlAlchemyCatalogRepo
from videocatalog.domain.entities.cast_member import CastMember
from videocatalog.domain.enums import CastMemberType


class CastMemberRepo(SqlAlchemyCatalogRepo[CastMember]):
    model = DBCastMember
    record_cls = CastMember

    def list_by_type(self, member_type: CastMemberType | int) -> List[CastMember]:
        stmt = (
            self._live()
            .where(DBCastMember.type == int(member_type))
            .order_by(DBCastMember.name.asc())
        )
        return [to_domain(r, CastMember) for r in self.db.execute(stmt).scalars().all()]
