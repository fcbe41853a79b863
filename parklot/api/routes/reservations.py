"""
Reservation endpoints: booking, the dashboard's reservation tables and the
occupied-slot counters.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session

from ...core.db import get_db
from ...models.parking_slot import ParkingSlot
from ...models.reservation import Reservation
from ...models.user_info import UserInfo
from ...schemas.reservation import ReservationCreate, ReservationOut, ReservationSlotOut
from ...services.occupancy import count_arrived_by_category
from ...services.reservation_lifecycle import BookingError, book_reservation, sweep_expired
from ...services.user_directory import users_with_reservations


router = APIRouter(tags=["reservations"])


@router.get("/reservations")
def list_reservation_slots(db: Session = Depends(get_db)) -> List[dict]:
    rows = db.query(Reservation).order_by(Reservation.slot.asc()).all()
    return [ReservationSlotOut.model_validate(row).model_dump() for row in rows]


@router.post("/api/reservations", status_code=201)
def create_reservation(payload: ReservationCreate, db: Session = Depends(get_db)) -> dict:
    try:
        reservation = book_reservation(db, **payload.model_dump())
    except BookingError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc))
    return {
        "message": "Reservation created successfully",
        "reservation": ReservationOut.model_validate(reservation).model_dump(mode="json"),
    }


@router.get("/api/data")
def users_with_pending_reservations(db: Session = Depends(get_db)) -> List[dict]:
    users = db.query(UserInfo).order_by(UserInfo.name.asc()).all()
    pending = (
        db.query(Reservation)
        .filter(Reservation.arrived.is_(False))
        .order_by(Reservation.in_time.asc())
        .all()
    )
    return users_with_reservations(users, pending)


@router.get("/api/parked")
def users_with_parked_vehicles(db: Session = Depends(get_db)) -> List[dict]:
    # Reading this table also clears expired no-shows.
    sweep_expired(db)
    users = db.query(UserInfo).order_by(UserInfo.name.asc()).all()
    reservations = db.query(Reservation).order_by(Reservation.in_time.asc()).all()
    return users_with_reservations(users, reservations)


@router.get("/api/reservation-count")
def pending_reservation_count(db: Session = Depends(get_db)) -> dict:
    total = db.query(func.count(Reservation.id)).filter(Reservation.arrived.is_(False)).scalar() or 0
    return {"total_reservations": int(total)}


@router.get("/occupied-slots-count")
def occupied_slots_count(db: Session = Depends(get_db)) -> dict:
    slots = db.query(ParkingSlot).all()
    arrived = db.query(Reservation).filter(Reservation.arrived.is_(True)).all()
    return {"occupied_slots": count_arrived_by_category(slots, arrived)}
