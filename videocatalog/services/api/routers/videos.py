# videocatalog/services/api/routers/videos.py
from __future__ import annotations

from http import HTTPStatus
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from videocatalog.common.settings import get_settings
from videocatalog.domain.entities.video import Video
from videocatalog.services.api.deps import get_video_service
from videocatalog.services.api.errors import domain_errors_as_http
from videocatalog.services.catalog.service import CatalogService
from videocatalog.services.mappers.records import record_from_payload
from videocatalog.services.schemas import VideoCreate, VideoUpdate, VideoRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/videos", tags=["videos"])


@router.post("", response_model=VideoRead, status_code=HTTPStatus.CREATED)
def create_video(
    payload: VideoCreate,
    svc: CatalogService[Video] = Depends(get_video_service),
) -> VideoRead:
    with domain_errors_as_http():
        obj = svc.create(record_from_payload(Video, payload))
    return VideoRead.model_validate(obj)


@router.get("", response_model=List[VideoRead])
def list_videos(
    q: Optional[str] = Query(None, description="Case-insensitive substring of the title"),
    limit: Optional[int] = Query(None, ge=1, le=1000),
    svc: CatalogService[Video] = Depends(get_video_service),
) -> List[VideoRead]:
    with domain_errors_as_http():
        rows = svc.list(q=q, limit=limit)
    return [VideoRead.model_validate(v) for v in rows]


@router.get("/{video_id}", response_model=VideoRead)
def get_video(video_id: UUID, svc: CatalogService[Video] = Depends(get_video_service)) -> VideoRead:
    with domain_errors_as_http():
        obj = svc.get(video_id)
    return VideoRead.model_validate(obj)


@router.put("/{video_id}", response_model=VideoRead)
def update_video(
    video_id: UUID,
    payload: VideoUpdate,
    svc: CatalogService[Video] = Depends(get_video_service),
) -> VideoRead:
    # partial update: only supplied fields are checked and written
    with domain_errors_as_http():
        obj = svc.update(video_id, record_from_payload(Video, payload))
    return VideoRead.model_validate(obj)


@router.delete("/{video_id}", status_code=HTTPStatus.NO_CONTENT)
def delete_video(video_id: UUID, svc: CatalogService[Video] = Depends(get_video_service)) -> None:
    with domain_errors_as_http():
        svc.delete(video_id)
    return None
