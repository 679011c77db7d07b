# videocatalog/database/repos/video_repo.py
from __future__ import annotations

from videocatalog.database.models.media import Video as DBVideo
from videocatalog.database.repos.catalog_repo import SqlAlchemyCatalogRepo
from videocatalog.domain.entities.video import Video


class VideoRepo(SqlAlchemyCatalogRepo[Video]):
    model = DBVideo
    record_cls = Video
    search_column = "title"
