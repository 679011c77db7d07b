# videocatalog/services/api/routers/cast_members.py
from __future__ import annotations

from http import HTTPStatus
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from videocatalog.common.settings import get_settings
from videocatalog.domain.entities.cast_member import CastMember
from videocatalog.domain.enums import CastMemberType
from videocatalog.services.api.deps import get_cast_member_service
from videocatalog.services.api.errors import domain_errors_as_http
from videocatalog.services.catalog.service import CastMemberService
from videocatalog.services.mappers.records import record_from_payload
from videocatalog.services.schemas import CastMemberCreate, CastMemberUpdate, CastMemberRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/cast-members", tags=["cast-members"])


@router.post("", response_model=CastMemberRead, status_code=HTTPStatus.CREATED)
def create_cast_member(
    payload: CastMemberCreate,
    svc: CastMemberService = Depends(get_cast_member_service),
) -> CastMemberRead:
    with domain_errors_as_http():
        obj = svc.create(record_from_payload(CastMember, payload))
    return CastMemberRead.model_validate(obj)


@router.get("", response_model=List[CastMemberRead])
def list_cast_members(
    member_type: Optional[int] = Query(None, alias="type", ge=1, le=2, description="1 = Director, 2 = Actor"),
    q: Optional[str] = Query(None),
    limit: Optional[int] = Query(None, ge=1, le=1000),
    svc: CastMemberService = Depends(get_cast_member_service),
) -> List[CastMemberRead]:
    with domain_errors_as_http():
        if member_type is not None:
            rows = svc.list_by_type(CastMemberType(member_type))
        else:
            rows = svc.list(q=q, limit=limit)
    return [CastMemberRead.model_validate(m) for m in rows]


@router.get("/{cast_member_id}", response_model=CastMemberRead)
def get_cast_member(
    cast_member_id: UUID,
    svc: CastMemberService = Depends(get_cast_member_service),
) -> CastMemberRead:
    with domain_errors_as_http():
        obj = svc.get(cast_member_id)
    return CastMemberRead.model_validate(obj)


@router.put("/{cast_member_id}", response_model=CastMemberRead)
def update_cast_member(
    cast_member_id: UUID,
    payload: CastMemberUpdate,
    svc: CastMemberService = Depends(get_cast_member_service),
) -> CastMemberRead:
    with domain_errors_as_http():
        obj = svc.update(cast_member_id, record_from_payload(CastMember, payload))
    return CastMemberRead.model_validate(obj)


@router.delete("/{cast_member_id}", status_code=HTTPStatus.NO_CONTENT)
def delete_cast_member(
    cast_member_id: UUID,
    svc: CastMemberService = Depends(get_cast_member_service),
) -> None:
    with domain_errors_as_http():
        svc.delete(cast_member_id)
    return None
