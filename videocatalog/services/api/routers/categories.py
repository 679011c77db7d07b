# videocatalog/services/api/routers/categories.py
from __future__ import annotations

from http import HTTPStatus
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from videocatalog.common.settings import get_settings
from videocatalog.domain.entities.category import Category
from videocatalog.services.api.deps import get_category_service
from videocatalog.services.api.errors import domain_errors_as_http
from videocatalog.services.catalog.service import CatalogService
from videocatalog.services.mappers.records import record_from_payload
from videocatalog.services.schemas import CategoryCreate, CategoryUpdate, CategoryRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/categories", tags=["categories"])


@router.post("", response_model=CategoryRead, status_code=HTTPStatus.CREATED)
def create_category(
    payload: CategoryCreate,
    svc: CatalogService[Category] = Depends(get_category_service),
) -> CategoryRead:
    with domain_errors_as_http():
        obj = svc.create(record_from_payload(Category, payload))
    return CategoryRead.model_validate(obj)


@router.get("", response_model=List[CategoryRead])
def list_categories(
    q: Optional[str] = Query(None, description="Case-insensitive substring of the name"),
    limit: Optional[int] = Query(None, ge=1, le=1000),
    svc: CatalogService[Category] = Depends(get_category_service),
) -> List[CategoryRead]:
    with domain_errors_as_http():
        rows = svc.list(q=q, limit=limit)
    return [CategoryRead.model_validate(c) for c in rows]


@router.get("/{category_id}", response_model=CategoryRead)
def get_category(
    category_id: UUID,
    svc: CatalogService[Category] = Depends(get_category_service),
) -> CategoryRead:
    with domain_errors_as_http():
        obj = svc.get(category_id)
    return CategoryRead.model_validate(obj)


@router.put("/{category_id}", response_model=CategoryRead)
def update_category(
    category_id: UUID,
    payload: CategoryUpdate,
    svc: CatalogService[Category] = Depends(get_category_service),
) -> CategoryRead:
    with domain_errors_as_http():
        obj = svc.update(category_id, record_from_payload(Category, payload))
    return CategoryRead.model_validate(obj)


@router.delete("/{category_id}", status_code=HTTPStatus.NO_CONTENT)
def delete_category(
    category_id: UUID,
    svc: CatalogService[Category] = Depends(get_category_service),
) -> None:
    with domain_errors_as_http():
        svc.delete(category_id)
    return None
