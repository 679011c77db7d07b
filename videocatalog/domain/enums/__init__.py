from videocatalog.domain.enums.action import Action
from videocatalog.domain.enums.cast_member_type import CastMemberType
from videocatalog.domain.enums.update_check import UpdateCheck
from videocatalog.domain.enums.video_rating import VideoRating
__all__ = [
    "Action",
    "CastMemberType",
    "UpdateCheck",
    "VideoRating",
]
