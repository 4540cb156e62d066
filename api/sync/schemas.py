"""
Sync API schemas (request models).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

SHEET_TYPES = ("menu", "hours", "location")


class SyncRequest(BaseModel):
    business_id: str
    sheet: str = Field(..., min_length=1)
    # Rows that are not lists are skipped by the transforms.
    values: list[Any]
    # Sent by the sheet script; only logged.
    timestamp: Any = None

    @field_validator("business_id", mode="before")
    @classmethod
    def _business_id_to_text(cls, value: Any) -> str:
        # Numbers are accepted (sheet scripts often send numeric ids) and stored as text.
        if isinstance(value, bool) or value is None:
            raise ValueError("business_id is required.")
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if isinstance(value, (int, float)):
            if not value:
                raise ValueError("business_id is required.")
            return str(value)
        if isinstance(value, str) and value.strip():
            return value.strip()
        raise ValueError("business_id is required.")
