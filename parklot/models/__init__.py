"""
SQLAlchemy model base class for the parking-lot backend.

This package defines ORM models for parking slots, active reservations,
the reservation history archive, admin accounts and end-user accounts.
All models should inherit from the declarative `Base` defined here.
"""

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""

    pass


from .parking_slot import ParkingSlot  # noqa: E402,F401
from .reservation import Reservation  # noqa: E402,F401
from .reservation_history import ReservationHistory  # noqa: E402,F401
from .admin import Admin  # noqa: E402,F401
from .user_info import UserInfo  # noqa: E402,F401

__all__ = [
    "Base",

    # Parking
    "ParkingSlot",
    "Reservation",
    "ReservationHistory",

    # Accounts
    "Admin",
    "UserInfo",
]
