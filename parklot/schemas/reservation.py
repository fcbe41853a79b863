"""
Pydantic schemas for reservations and their history snapshots.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands back naive values; everything is stored in UTC.
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


class ReservationCreate(BaseModel):
    user_id: str = Field(..., min_length=3, max_length=255)
    license_plate: str = Field(..., min_length=1, max_length=32)
    in_time: datetime
    out_time: datetime
    vehicle_type: Literal["motorcycle", "car"]
    price: float = Field(..., ge=0)
    slot: int = Field(..., ge=1)


class _StoredTimes(BaseModel):
    @field_validator("in_time", "out_time", "created_at", mode="after", check_fields=False)
    @classmethod
    def _utc_times(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(value)


class ReservationOut(_StoredTimes):
    id: str
    user_id: str
    license_plate: str
    in_time: datetime
    out_time: datetime
    vehicle_type: str
    price: float
    slot: int
    arrived: bool = False
    dqr: bool = False
    exit_id: str
    status: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ReservationSlotOut(BaseModel):
    id: str
    slot: int
    vehicle_type: str

    model_config = ConfigDict(from_attributes=True)


class HistoryOut(_StoredTimes):
    id: str
    user_id: str
    license_plate: str
    in_time: datetime
    out_time: datetime
    vehicle_type: str
    price: float
    slot: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
