"""
Parking slot inventory helpers.
"""

from __future__ import annotations

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from ..models.parking_slot import ParkingSlot


logger = logging.getLogger("ParkingSlots")


def next_slot_numbers(existing: set[int], start: int, count: int) -> list[int]:
    """Allocate ``count`` numbers from ``start`` upwards, skipping taken ones."""
    allocated: list[int] = []
    candidate = max(1, start)
    while len(allocated) < count:
        if candidate not in existing:
            allocated.append(candidate)
        candidate += 1
    return allocated


def add_slots(db: Session, *, count: int, vehicle_type: str) -> list[ParkingSlot]:
    last = db.query(func.max(ParkingSlot.slot_number)).scalar()
    start = (last or 0) + 1
    existing = {row[0] for row in db.query(ParkingSlot.slot_number).filter(ParkingSlot.slot_number >= start).all()}
    slots = [ParkingSlot(slot_number=n, vehicle_type=vehicle_type, is_available=True) for n in next_slot_numbers(existing, start, count)]
    db.add_all(slots)
    db.commit()
    logger.info("Added parking slots count=%s type=%s first=%s", count, vehicle_type, slots[0].slot_number if slots else None)
    return slots


def delete_slot(db: Session, slot_number: int) -> bool:
    slot = db.query(ParkingSlot).filter(ParkingSlot.slot_number == slot_number).first()
    if slot is None:
        return False
    db.delete(slot)
    db.commit()
    return True
