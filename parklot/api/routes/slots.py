"""
Parking slot inventory and occupancy endpoints.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ...core.db import get_db
from ...models.parking_slot import ParkingSlot
from ...models.reservation import Reservation
from ...schemas.parking import AddSlotsIn, ParkingSlotOut
from ...services.occupancy import (
    SlotOccupancy,
    count_available_by_category,
    reconcile_occupancy,
    total_available,
)
from ...services.slots import add_slots, delete_slot


router = APIRouter(tags=["parking-slots"])


def _occupancy_view(db: Session) -> List[SlotOccupancy]:
    slots = db.query(ParkingSlot).order_by(ParkingSlot.slot_number.asc()).all()
    reservations = db.query(Reservation).order_by(Reservation.created_at.asc()).all()
    return reconcile_occupancy(slots, reservations)


@router.post("/add-slot", status_code=201)
def add_parking_slots(payload: AddSlotsIn, db: Session = Depends(get_db)) -> dict:
    slots = add_slots(db, count=payload.count, vehicle_type=payload.size)
    first = slots[0].slot_number
    return {
        "message": f"{payload.count} {payload.size} parking slots added successfully starting from slot {first}",
        "slot_numbers": [slot.slot_number for slot in slots],
    }


@router.get("/get-parking-slots")
def list_parking_slots(db: Session = Depends(get_db)) -> List[dict]:
    slots = db.query(ParkingSlot).order_by(ParkingSlot.slot_number.asc()).all()
    return [ParkingSlotOut.model_validate(slot).model_dump() for slot in slots]


@router.delete("/delete-parking-slot")
def delete_parking_slot(
    slot_number: Optional[int] = Query(None),
    db: Session = Depends(get_db),
) -> dict:
    if slot_number is None:
        raise HTTPException(status_code=400, detail="Slot number is required.")
    if not delete_slot(db, slot_number):
        raise HTTPException(status_code=404, detail="Parking slot not found.")
    return {"message": f"Parking slot {slot_number} deleted successfully."}


@router.get("/parking-slots-info")
def parking_slots_info(db: Session = Depends(get_db)) -> List[dict]:
    return [item.to_dict() for item in _occupancy_view(db)]


@router.get("/api/parkingslot")
def parking_slot_status(db: Session = Depends(get_db)) -> List[dict]:
    return [item.to_dict() for item in _occupancy_view(db)]


@router.get("/available-parking-slots-count")
def available_slots_count(db: Session = Depends(get_db)) -> dict:
    counts = count_available_by_category(_occupancy_view(db))
    return {
        "available_motorcycle_slots": counts["motorcycle"],
        "available_car_slots": counts["car"],
    }


@router.get("/available-parking-slots-total")
def available_slots_total(db: Session = Depends(get_db)) -> dict:
    return {"total_available_slots": total_available(_occupancy_view(db))}
