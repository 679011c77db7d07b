# videocatalog/database/repos/taxonomy_repo.py
from __future__ import annotations

from videocatalog.database.models.taxonomy import Category as DBCategory, Genre as DBGenre
from videocatalog.database.repos.catalog_repo import SqlAlchemyCatalogRepo
from videocatalog.domain.entities.category import Category
from videocatalog.domain.entities.genre import Genre


class CategoryRepo(SqlAlchemyCatalogRepo[Category]):
    model = DBCategory
    record_cls = Category


class GenreRepo(SqlAlchemyCatalogRepo[Genre]):
    model = DBGenre
    record_cls = Genre
