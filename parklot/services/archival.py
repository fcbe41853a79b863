"""
Reservation history archival.

History rows are matched on business content, not on an identifier: a
reservation is copied only when no history row carries the same owner,
plate, time window, vehicle type, price and slot.
"""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from ..models.reservation import Reservation
from ..models.reservation_history import ReservationHistory


logger = logging.getLogger("ReservationArchive")

HISTORY_FIELDS = ("user_id", "license_plate", "in_time", "out_time", "vehicle_type", "price", "slot")


@dataclass
class ArchiveResult:
    reservations: list[Reservation] = field(default_factory=list)
    archived: list[ReservationHistory] = field(default_factory=list)

    @property
    def archived_count(self) -> int:
        return len(self.archived)


def _utc(dt: datetime.datetime) -> datetime.datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=datetime.timezone.utc)
    return dt.astimezone(datetime.timezone.utc)


def natural_key(reservation: Reservation | ReservationHistory) -> tuple:
    return (
        reservation.user_id,
        reservation.license_plate,
        _utc(reservation.in_time),
        _utc(reservation.out_time),
        reservation.vehicle_type,
        float(reservation.price),
        int(reservation.slot),
    )


def _pending_match(db: Session, reservation: Reservation) -> Optional[ReservationHistory]:
    # Rows staged earlier in this session are not visible to queries until flushed.
    key = natural_key(reservation)
    for obj in db.new:
        if isinstance(obj, ReservationHistory) and natural_key(obj) == key:
            return obj
    return None


def find_history_match(db: Session, reservation: Reservation) -> Optional[ReservationHistory]:
    pending = _pending_match(db, reservation)
    if pending is not None:
        return pending
    query = db.query(ReservationHistory)
    for name in HISTORY_FIELDS:
        query = query.filter(getattr(ReservationHistory, name) == getattr(reservation, name))
    return query.first()


def archive_reservation(
    db: Session,
    reservation: Reservation,
    *,
    archived_at: Optional[datetime.datetime] = None,
) -> Optional[ReservationHistory]:
    """Stage a history copy of ``reservation`` unless one exists. Caller commits."""
    if find_history_match(db, reservation) is not None:
        return None
    row = ReservationHistory(
        **{name: getattr(reservation, name) for name in HISTORY_FIELDS},
        created_at=archived_at or datetime.datetime.now(datetime.timezone.utc),
    )
    db.add(row)
    return row


def archive_reservations(db: Session, reservations: Iterable[Reservation]) -> list[ReservationHistory]:
    archived: list[ReservationHistory] = []
    for reservation in reservations:
        row = archive_reservation(db, reservation)
        if row is not None:
            archived.append(row)
    if archived:
        db.commit()
        logger.info("Archived reservations into history count=%s", len(archived))
    return archived


def archive_active_reservations(db: Session) -> ArchiveResult:
    reservations = db.query(Reservation).order_by(Reservation.in_time.asc()).all()
    result = ArchiveResult(reservations=reservations)
    if reservations:
        result.archived = archive_reservations(db, reservations)
    return result
