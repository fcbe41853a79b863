"""
Service layer for the parking-lot backend.

This package contains the reservation lifecycle, the gate checks, the slot
occupancy projection and the reporting helpers used by the API routers.
"""

from .occupancy import reconcile_occupancy
from .reservation_lifecycle import ReservationState, book_reservation, sweep_expired

__all__ = ["reconcile_occupancy", "ReservationState", "book_reservation", "sweep_expired"]
