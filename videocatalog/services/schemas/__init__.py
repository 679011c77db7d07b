from videocatalog.services.schemas.taxonomy import (
    CategoryCreate,
    CategoryUpdate,
    CategoryRead,
    GenreCreate,
    GenreUpdate,
    GenreRead,
)
from videocatalog.services.schemas.people import (
    CastMemberCreate,
    CastMemberUpdate,
    CastMemberRead,
)
from videocatalog.services.schemas.media import (
    VideoCreate,
    VideoUpdate,
    VideoRead,
)
__all__ = [
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryRead",
    "GenreCreate",
    "GenreUpdate",
    "GenreRead",
    "CastMemberCreate",
    "CastMemberUpdate",
    "CastMemberRead",
    "VideoCreate",
    "VideoUpdate",
    "VideoRead",
]
