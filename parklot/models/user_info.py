"""
ORM model for end-user (driver) accounts.

Rows are created by the mobile client's sign-up flow; this backend only
lists, counts and verifies them.
"""

from __future__ import annotations

from datetime import date, datetime
import uuid

from sqlalchemy import Boolean, Date, DateTime, JSON, String
from sqlalchemy.orm import Mapped, mapped_column, validates

from . import Base


class UserInfo(Base):
    __tablename__ = "user_info"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255))
    dob: Mapped[date] = mapped_column(Date)
    name: Mapped[str] = mapped_column(String(255))
    contact: Mapped[str] = mapped_column(String(32))
    profile_image_url: Mapped[str] = mapped_column(String(1024))
    # {"front_image_url": ..., "back_image_url": ...}
    license: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    # {"block", "lot", "subdivision", "barangay", "municipality", "province"}
    address: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    verified: Mapped[bool] = mapped_column(Boolean, default=False, index=True)
    reset_password_token: Mapped[str | None] = mapped_column(String(255), nullable=True)
    reset_password_expires: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @validates("email")
    def _lower_email(self, _key: str, value: str) -> str:
        return value.strip().lower() if value else value
