"""
Pydantic schemas for parking slots.
"""

from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class AddSlotsIn(BaseModel):
    # Older dashboard builds send the amount as "slot_number".
    count: int = Field(..., ge=1, le=500, validation_alias=AliasChoices("count", "slot_number"))
    size: Literal["motorcycle", "car"]


class ParkingSlotOut(BaseModel):
    id: int
    slot_number: int
    vehicle_type: str
    is_available: bool = True

    model_config = ConfigDict(from_attributes=True)
