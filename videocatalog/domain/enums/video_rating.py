from __future__ import annotations
from enum import StrEnum

class VideoRating(StrEnum):
    """Age ratings; values are the exact strings accepted on the wire."""
    general = "L"
    age_10 = "10"
    age_12 = "12"
    age_14 = "14"
    age_16 = "16"
    age_18 = "18"
