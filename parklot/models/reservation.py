"""
ORM model for active reservations.

A row lives here from booking until the exit gate validates its exit token
or the expiry sweep removes it as a no-show. The row id doubles as the
entry token.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from . import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Reservation(Base):
    __tablename__ = "reservations"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    license_plate: Mapped[str] = mapped_column(String(32), nullable=False)
    in_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    out_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True, nullable=False)
    vehicle_type: Mapped[str] = mapped_column(String(16), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    slot: Mapped[int] = mapped_column(Integer, index=True, nullable=False)
    arrived: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    dqr: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    exit_id: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)
    status: Mapped[str] = mapped_column(String(16), index=True, default="BOOKED", nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)
