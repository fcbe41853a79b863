"""
Slot occupancy projection.

Occupancy is never read from ``ParkingSlot.is_available``. It is derived on
every call by joining slots to active reservations on the slot number. All
functions here are pure: they take the two collections and return plain
values, so they work equally on ORM rows and on test doubles.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol

from ..models.parking_slot import VEHICLE_TYPES

OCCUPIED = "occupied"
AVAILABLE = "available"


class SlotLike(Protocol):
    slot_number: int
    vehicle_type: str


class ReservationLike(Protocol):
    id: str
    slot: int
    arrived: bool


@dataclass(frozen=True)
class SlotOccupancy:
    slot_number: int
    vehicle_type: str
    status: str
    reservation_id: Optional[str] = None
    arrived: Optional[bool] = None

    @property
    def occupied(self) -> bool:
        return self.status == OCCUPIED

    def to_dict(self) -> dict:
        out = {
            "slot_number": self.slot_number,
            "status": self.status,
            "vehicle_type": self.vehicle_type,
        }
        if self.occupied:
            out["reservation_id"] = self.reservation_id
            out["arrived"] = self.arrived
        return out


def _by_slot(reservations: Iterable[ReservationLike]) -> dict[int, ReservationLike]:
    # Two reservations on one slot is a booking fault; the later row wins.
    index: dict[int, ReservationLike] = {}
    for reservation in reservations:
        index[reservation.slot] = reservation
    return index


def reconcile_occupancy(
    slots: Iterable[SlotLike],
    reservations: Iterable[ReservationLike],
) -> list[SlotOccupancy]:
    index = _by_slot(reservations)
    view: list[SlotOccupancy] = []
    for slot in slots:
        match = index.get(slot.slot_number)
        if match is None:
            view.append(SlotOccupancy(slot.slot_number, slot.vehicle_type, AVAILABLE))
            continue
        view.append(
            SlotOccupancy(
                slot.slot_number,
                slot.vehicle_type,
                OCCUPIED,
                reservation_id=match.id,
                arrived=bool(match.arrived),
            )
        )
    return view


def count_available_by_category(view: Iterable[SlotOccupancy]) -> dict[str, int]:
    counts = {vehicle_type: 0 for vehicle_type in VEHICLE_TYPES}
    for item in view:
        if item.occupied:
            continue
        if item.vehicle_type in counts:
            counts[item.vehicle_type] += 1
    return counts


def total_available(view: Iterable[SlotOccupancy]) -> int:
    return sum(1 for item in view if not item.occupied)


def count_arrived_by_category(
    slots: Iterable[SlotLike],
    reservations: Iterable[ReservationLike],
) -> dict[str, int]:
    """Arrived reservations grouped by their slot's vehicle type.

    Reservations pointing at a slot that no longer exists are dropped,
    like an inner join would.
    """
    slot_types = {slot.slot_number: slot.vehicle_type for slot in slots}
    counts: dict[str, int] = {}
    for reservation in reservations:
        if not reservation.arrived:
            continue
        vehicle_type = slot_types.get(reservation.slot)
        if vehicle_type is None:
            continue
        counts[vehicle_type] = counts.get(vehicle_type, 0) + 1
    return counts
