# videocatalog/services/api/deps.py
from __future__ import annotations
from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session

from videocatalog.database.core.main import SessionLocal
from videocatalog.database.repos.people_repo import CastMemberRepo
from videocatalog.database.repos.taxonomy_repo import CategoryRepo, GenreRepo
from videocatalog.database.repos.video_repo import VideoRepo
from videocatalog.domain.entities.category import Category
from videocatalog.domain.entities.genre import Genre
from videocatalog.domain.entities.video import Video
from videocatalog.services.catalog.service import CatalogService, CastMemberService


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def transactional_session(db: Session = Depends(get_db)) -> Generator[Session, None, None]:
    """
    Request-scoped transaction. Any repo/service using this session
    participates in the same transaction.

    Usage in routers:
      def endpoint(svc: CatalogService = Depends(get_category_service)):
          ...
    """
    # Session.begin() commits on normal exit and rolls back if an exception bubbles out.
    with db.begin():
        yield db


def get_category_service(db: Session = Depends(transactional_session)) -> CatalogService[Category]:
    return CatalogService(CategoryRepo(db))


def get_genre_service(db: Session = Depends(transactional_session)) -> CatalogService[Genre]:
    return CatalogService(GenreRepo(db))


def get_cast_member_service(db: Session = Depends(transactional_session)) -> CastMemberService:
    return CastMemberService(CastMemberRepo(db))


def get_video_service(db: Session = Depends(transactional_session)) -> CatalogService[Video]:
    return CatalogService(VideoRepo(db))
