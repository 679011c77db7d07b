from __future__ import annotations
from enum import IntEnum

class CastMemberType(IntEnum):
    director = 1
    actor = 2
