from __future__ import annotations
from enum import StrEnum

class Action(StrEnum):
    create = "create"
    update = "update"
