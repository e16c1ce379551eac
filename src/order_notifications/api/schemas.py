"""Pydantic request/response models for the order events webhook.

API schemas are separate from the domain's ChangeEvent (anti-corruption
pattern).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Request Models
# ---------------------------------------------------------------------------
class OrderRecordPayload(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: str = Field(..., min_length=1, examples=["0b6f5c1e-8a44-4d1f-9a63-2d1c1f0e9b10"])


class OrderChangeEventRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str = Field(..., examples=["INSERT"], description="Database operation: INSERT, UPDATE or DELETE")
    record: OrderRecordPayload
    table: str | None = Field(None, examples=["orders"])
    old_record: dict[str, Any] | None = None


# ---------------------------------------------------------------------------
# Response Models
# ---------------------------------------------------------------------------
class SuccessResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    error: str
