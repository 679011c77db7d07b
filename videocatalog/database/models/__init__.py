# videocatalog/database/models/__init__.py

from videocatalog.database.core.main import Base
from videocatalog.database.models.taxonomy import (
    Category,
    Genre,
)
from videocatalog.database.models.person import CastMember
from videocatalog.database.models.media import Video

__all__ = [
    "Base",
    "Category",
    "Genre",
    "CastMember",
    "Video",
]
