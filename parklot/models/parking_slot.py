"""
ORM model for physical parking slots.
"""

from __future__ import annotations

from sqlalchemy import Boolean, CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from . import Base

VEHICLE_TYPES = ("motorcycle", "car")


class ParkingSlot(Base):
    __tablename__ = "parking_slots"
    __table_args__ = (
        CheckConstraint("slot_number >= 1", name="ck_parking_slots_slot_number_positive"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    slot_number: Mapped[int] = mapped_column(Integer, unique=True, index=True, nullable=False)
    vehicle_type: Mapped[str] = mapped_column(String(16), nullable=False)
    # Not consulted for occupancy; see services.occupancy.
    is_available: Mapped[bool] = mapped_column(Boolean, default=True)
