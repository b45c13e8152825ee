"""Shared base for records decoded from model replies."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class RecordModel(BaseModel):
    """Lenient base: unknown keys dropped, ``null`` replaced by the field default.

    Models routinely answer ``"linkedin": null`` or ``"year": 2020``; both
    should land as the empty/str value rather than fail the whole record.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name is not None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value
