"""
ORM model for the reservation history archive used by reporting.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from . import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ReservationHistory(Base):
    __tablename__ = "reservation_history"
    # Lookup index for the content match; duplicates are prevented by the archiver, not the schema.
    __table_args__ = (
        Index("ix_reservation_history_natural", "user_id", "license_plate", "in_time", "slot"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    license_plate: Mapped[str] = mapped_column(String(32), nullable=False)
    in_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    out_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    vehicle_type: Mapped[str] = mapped_column(String(16), index=True, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    slot: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True, default=_utcnow)
