"""
Sword Tracker Backend: Shared Schema Building Blocks
====================================================

What:  Base classes and annotated types every request/response schema uses.
How:
    - CamelModel: JSON keys are camelCase (`userId`), Python attributes are
      snake_case (`user_id`). Both spellings are accepted on input.
    - ResponseModel: CamelModel that can be built straight from ORM rows.
    - PartialUpdate: allow-listed PATCH payloads. Unknown keys are rejected,
      explicit nulls are rejected for non-nullable columns, and `changes()`
      returns only the keys the client actually sent.
    - UtcDatetime: datetimes normalized to aware UTC (naive input means UTC).
"""

from datetime import datetime
from typing import Annotated, Any, ClassVar, Dict, FrozenSet

from pydantic import AfterValidator, BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from sword_tracker.clock import ensure_utc

UtcDatetime = Annotated[datetime, AfterValidator(ensure_utc)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResponseModel(CamelModel):
    model_config = ConfigDict(from_attributes=True)


class PartialUpdate(CamelModel):
    """
    Base for PATCH payloads.

    Subclasses declare every mutable attribute as an optional field and list
    the ones backed by NOT NULL columns in NON_NULLABLE.
    """

    model_config = ConfigDict(extra="forbid")

    NON_NULLABLE: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_for_required_columns(self) -> "PartialUpdate":
        nulled = sorted(
            name for name in self.model_fields_set & self.NON_NULLABLE
            if getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"{', '.join(nulled)} cannot be null")
        return self

    def changes(self) -> Dict[str, Any]:
        """Field name → new value, for the keys present in the request only."""
        return self.model_dump(exclude_unset=True)
