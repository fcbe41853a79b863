"""
Entry and exit gate validation for the kiosk scanners.

The entry ticket carries the reservation id, the exit ticket carries the
reservation's exit token. Both gates report failures with distinct messages
so the kiosk can tell a reused ticket from an unknown one.
"""

from __future__ import annotations

import uuid

from sqlalchemy.orm import Session

from ..models.reservation import Reservation
from ..schemas.reservation import ReservationOut
from .reservation_lifecycle import AlreadyArrived, mark_arrived, mark_exited


class GateError(Exception):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def is_valid_reservation_id(raw: str | None) -> bool:
    if not raw:
        return False
    try:
        uuid.UUID(raw)
    except (TypeError, ValueError):
        return False
    return True


def validate_entry(db: Session, reservation_id: str) -> Reservation:
    if not is_valid_reservation_id(reservation_id):
        raise GateError(400, "Invalid ID format")
    reservation = db.get(Reservation, str(uuid.UUID(reservation_id)))
    if reservation is None:
        raise GateError(404, "ID not found")
    try:
        return mark_arrived(db, reservation)
    except AlreadyArrived:
        raise GateError(400, "ID has already been used")


def validate_exit(db: Session, exit_id: str) -> ReservationOut:
    """Delete the reservation holding ``exit_id`` and return its last contents."""
    exit_id = (exit_id or "").strip()
    if not exit_id:
        raise GateError(400, "exit_id is required")
    reservation = db.query(Reservation).filter(Reservation.exit_id == exit_id).first()
    if reservation is None:
        raise GateError(404, "exit_id not found")
    snapshot = ReservationOut.model_validate(reservation)
    mark_exited(db, reservation)
    return snapshot
