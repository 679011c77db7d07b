# videocatalog/services/api/routers/genres.py
from __future__ import annotations

from http import HTTPStatus
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from videocatalog.common.settings import get_settings
from videocatalog.domain.entities.genre import Genre
from videocatalog.services.api.deps import get_genre_service
from videocatalog.services.api.errors import domain_errors_as_http
from videocatalog.services.catalog.service import CatalogService
from videocatalog.services.mappers.records import record_from_payload
from videocatalog.services.schemas import GenreCreate, GenreUpdate, GenreRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/genres", tags=["genres"])


@router.post("", response_model=GenreRead, status_code=HTTPStatus.CREATED)
def create_genre(
    payload: GenreCreate,
    svc: CatalogService[Genre] = Depends(get_genre_service),
) -> GenreRead:
    with domain_errors_as_http():
        obj = svc.create(record_from_payload(Genre, payload))
    return GenreRead.model_validate(obj)


@router.get("", response_model=List[GenreRead])
def list_genres(
    q: Optional[str] = Query(None),
    limit: Optional[int] = Query(None, ge=1, le=1000),
    svc: CatalogService[Genre] = Depends(get_genre_service),
) -> List[GenreRead]:
    with domain_errors_as_http():
        rows = svc.list(q=q, limit=limit)
    return [GenreRead.model_validate(g) for g in rows]


@router.get("/{genre_id}", response_model=GenreRead)
def get_genre(genre_id: UUID, svc: CatalogService[Genre] = Depends(get_genre_service)) -> GenreRead:
    with domain_errors_as_http():
        obj = svc.get(genre_id)
    return GenreRead.model_validate(obj)


@router.put("/{genre_id}", response_model=GenreRead)
def update_genre(
    genre_id: UUID,
    payload: GenreUpdate,
    svc: CatalogService[Genre] = Depends(get_genre_service),
) -> GenreRead:
    with domain_errors_as_http():
        obj = svc.update(genre_id, record_from_payload(Genre, payload))
    return GenreRead.model_validate(obj)


@router.delete("/{genre_id}", status_code=HTTPStatus.NO_CONTENT)
def delete_genre(genre_id: UUID, svc: CatalogService[Genre] = Depends(get_genre_service)) -> None:
    with domain_errors_as_http():
        svc.delete(genre_id)
    return None
