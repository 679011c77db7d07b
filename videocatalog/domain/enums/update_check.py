from __future__ import annotations
from enum import StrEnum

class UpdateCheck(StrEnum):
    """How a field is re-checked when a record is validated for an update."""
    always = "always"          # same rule as on create, even if the field is empty
    if_present = "if_present"  # checked only when the field carries a non-zero value
    never = "never"            # not checked on update
