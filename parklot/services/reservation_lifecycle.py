"""
Reservation state machine.

States::

    BOOKED --mark_arrived--> ARRIVED --mark_exited--> EXITED
      |                                                 ^
      +---------------------mark_exited-----------------+
      +--mark_expired--> EXPIRED

``EXITED`` and ``EXPIRED`` are terminal: the active row is deleted when it
reaches them. ``ARCHIVED`` is the state of the snapshot copied into the
history table; archiving never changes the active row.

Every transition fires the registered transition hooks before the row is
deleted, so an archive hook still sees the full reservation.
"""

from __future__ import annotations

import datetime
import enum
import logging
from typing import Callable, Optional

from sqlalchemy.orm import Session

from ..core.config import archive_on_transition
from ..core.security import generate_exit_token
from ..models.parking_slot import ParkingSlot
from ..models.reservation import Reservation
from .archival import archive_reservation


logger = logging.getLogger("ReservationLifecycle")


class ReservationState(str, enum.Enum):
    BOOKED = "BOOKED"
    ARRIVED = "ARRIVED"
    EXITED = "EXITED"
    EXPIRED = "EXPIRED"
    ARCHIVED = "ARCHIVED"


# Exit from BOOKED is allowed: the exit gate does not require a prior entry scan.
_TRANSITIONS: dict[ReservationState, set[ReservationState]] = {
    ReservationState.BOOKED: {ReservationState.ARRIVED, ReservationState.EXITED, ReservationState.EXPIRED},
    ReservationState.ARRIVED: {ReservationState.EXITED},
    ReservationState.EXITED: set(),
    ReservationState.EXPIRED: set(),
    ReservationState.ARCHIVED: set(),
}


class LifecycleError(Exception):
    """Raised when a reservation cannot move to the requested state."""


class IllegalTransition(LifecycleError):
    def __init__(self, current: ReservationState, target: ReservationState) -> None:
        super().__init__(f"Cannot move reservation from {current.value} to {target.value}")
        self.current = current
        self.target = target


class AlreadyArrived(IllegalTransition):
    pass


class BookingError(LifecycleError):
    status_code = 400


class SlotNotFound(BookingError):
    status_code = 404


class SlotOccupied(BookingError):
    status_code = 409


TransitionHook = Callable[[Session, Reservation, ReservationState, ReservationState], None]
_hooks: list[TransitionHook] = []


def register_transition_hook(hook: TransitionHook) -> None:
    if hook not in _hooks:
        _hooks.append(hook)


def unregister_transition_hook(hook: TransitionHook) -> None:
    if hook in _hooks:
        _hooks.remove(hook)


def ensure_utc(dt: datetime.datetime) -> datetime.datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=datetime.timezone.utc)
    return dt.astimezone(datetime.timezone.utc)


def current_state(reservation: Reservation) -> ReservationState:
    # Only the arrived flag decides; the status column is informational.
    if reservation.arrived:
        return ReservationState.ARRIVED
    return ReservationState.BOOKED


def can_transition(current: ReservationState, target: ReservationState) -> bool:
    return target in _TRANSITIONS.get(current, set())


def _transition(db: Session, reservation: Reservation, target: ReservationState) -> ReservationState:
    current = current_state(reservation)
    if not can_transition(current, target):
        if current == ReservationState.ARRIVED and target == ReservationState.ARRIVED:
            raise AlreadyArrived(current, target)
        raise IllegalTransition(current, target)
    for hook in list(_hooks):
        hook(db, reservation, current, target)
    logger.info(
        "Reservation transition id=%s slot=%s %s->%s",
        reservation.id,
        reservation.slot,
        current.value,
        target.value,
    )
    return current


def is_expired_no_show(reservation: Reservation, now: Optional[datetime.datetime] = None) -> bool:
    now = ensure_utc(now or datetime.datetime.now(datetime.timezone.utc))
    if reservation.arrived:
        return False
    return ensure_utc(reservation.out_time) <= now


def book_reservation(
    db: Session,
    *,
    user_id: str,
    license_plate: str,
    in_time: datetime.datetime,
    out_time: datetime.datetime,
    vehicle_type: str,
    price: float,
    slot: int,
) -> Reservation:
    """Create a BOOKED reservation after checking the slot is free."""
    in_time = ensure_utc(in_time)
    out_time = ensure_utc(out_time)
    if out_time <= in_time:
        raise BookingError("out_time must be after in_time")
    slot_row = db.query(ParkingSlot).filter(ParkingSlot.slot_number == slot).first()
    if slot_row is None:
        raise SlotNotFound(f"Parking slot {slot} not found")
    if slot_row.vehicle_type != vehicle_type:
        raise BookingError(f"Parking slot {slot} is reserved for {slot_row.vehicle_type}")
    taken = db.query(Reservation.id).filter(Reservation.slot == slot).first()
    if taken is not None:
        raise SlotOccupied(f"Parking slot {slot} already has an active reservation")

    reservation = Reservation(
        user_id=user_id.strip().lower(),
        license_plate=license_plate.strip().upper(),
        in_time=in_time,
        out_time=out_time,
        vehicle_type=vehicle_type,
        price=price,
        slot=slot,
        arrived=False,
        dqr=False,
        exit_id=generate_exit_token(),
        status=ReservationState.BOOKED.value,
    )
    db.add(reservation)
    db.commit()
    db.refresh(reservation)
    logger.info("Reservation booked id=%s slot=%s plate=%s", reservation.id, slot, reservation.license_plate)
    return reservation


def mark_arrived(db: Session, reservation: Reservation) -> Reservation:
    _transition(db, reservation, ReservationState.ARRIVED)
    reservation.arrived = True
    reservation.status = ReservationState.ARRIVED.value
    db.add(reservation)
    db.commit()
    db.refresh(reservation)
    return reservation


def mark_exited(db: Session, reservation: Reservation) -> None:
    _transition(db, reservation, ReservationState.EXITED)
    db.delete(reservation)
    db.commit()


def mark_expired(db: Session, reservation: Reservation, *, commit: bool = True) -> None:
    _transition(db, reservation, ReservationState.EXPIRED)
    db.delete(reservation)
    if commit:
        db.commit()


def sweep_expired(db: Session, now: Optional[datetime.datetime] = None) -> list[str]:
    """Delete non-arrived reservations whose out_time has passed. Returns removed ids."""
    now = ensure_utc(now or datetime.datetime.now(datetime.timezone.utc))
    candidates = (
        db.query(Reservation)
        .filter(Reservation.arrived.is_(False), Reservation.out_time <= now)
        .all()
    )
    removed: list[str] = []
    for reservation in candidates:
        if not is_expired_no_show(reservation, now):
            continue
        removed.append(reservation.id)
        mark_expired(db, reservation, commit=False)
    if removed:
        db.commit()
        logger.info("Expired no-show reservations removed count=%s", len(removed))
    return removed


def archive_before_leaving(
    db: Session,
    reservation: Reservation,
    current: ReservationState,
    target: ReservationState,
) -> None:
    """Transition hook: snapshot reservations into history as they leave the active store."""
    if target not in {ReservationState.EXITED, ReservationState.EXPIRED}:
        return
    if not archive_on_transition():
        return
    archive_reservation(db, reservation)


register_transition_hook(archive_before_leaving)
