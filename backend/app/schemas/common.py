"""
Shared schema pieces.
"""

from pydantic import BaseModel, model_validator
from typing import ClassVar, Tuple


class PartialUpdate(BaseModel):
    """Base for update payloads where omitted fields stay untouched.

    Fields listed in ``non_nullable`` may be omitted but not sent as null,
    since the matching columns are NOT NULL.
    """
    non_nullable: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        nulled = [
            name for name in self.non_nullable
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if nulled:
            raise ValueError(f"{', '.join(nulled)} cannot be null")
        return self
