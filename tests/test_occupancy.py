from dataclasses import dataclass

from parklot.services.occupancy import (
    AVAILABLE,
    OCCUPIED,
    count_arrived_by_category,
    count_available_by_category,
    reconcile_occupancy,
    total_available,
)


@dataclass
class _Slot:
    slot_number: int
    vehicle_type: str


@dataclass
class _Reservation:
    id: str
    slot: int
    arrived: bool = False


def _lot():
    return [_Slot(1, "car"), _Slot(2, "car"), _Slot(3, "motorcycle")]


def test_reserved_slot_is_occupied_and_others_available():
    view = reconcile_occupancy(_lot(), [_Reservation("r1", 2, arrived=True)])

    assert [item.status for item in view] == [AVAILABLE, OCCUPIED, AVAILABLE]
    assert view[1].reservation_id == "r1"
    assert view[1].arrived is True
    assert view[1].to_dict() == {
        "slot_number": 2,
        "status": "occupied",
        "vehicle_type": "car",
        "reservation_id": "r1",
        "arrived": True,
    }
    assert view[0].to_dict() == {"slot_number": 1, "status": "available", "vehicle_type": "car"}


def test_booked_but_not_arrived_still_occupies_slot():
    view = reconcile_occupancy(_lot(), [_Reservation("r1", 3)])
    assert view[2].occupied
    assert view[2].arrived is False


def test_available_plus_occupied_partitions_inventory():
    slots = _lot()
    view = reconcile_occupancy(slots, [_Reservation("r1", 1), _Reservation("r2", 3)])
    occupied = [item for item in view if item.occupied]
    assert total_available(view) + len(occupied) == len(slots)
    assert total_available(view) == 1


def test_reservation_for_missing_slot_is_ignored():
    view = reconcile_occupancy(_lot(), [_Reservation("r1", 99)])
    assert all(item.status == AVAILABLE for item in view)
    assert len(view) == 3


def test_later_reservation_wins_on_double_booked_slot():
    view = reconcile_occupancy(_lot(), [_Reservation("first", 1), _Reservation("second", 1)])
    assert view[0].reservation_id == "second"


def test_available_counts_per_category():
    view = reconcile_occupancy(_lot(), [_Reservation("r1", 1)])
    assert count_available_by_category(view) == {"motorcycle": 1, "car": 1}


def test_available_counts_empty_lot():
    assert count_available_by_category([]) == {"motorcycle": 0, "car": 0}
    assert total_available([]) == 0


def test_arrived_counts_join_on_slot_type():
    reservations = [
        _Reservation("r1", 1, arrived=True),
        _Reservation("r2", 2, arrived=False),
        _Reservation("r3", 3, arrived=True),
        _Reservation("r4", 42, arrived=True),
    ]
    assert count_arrived_by_category(_lot(), reservations) == {"car": 1, "motorcycle": 1}


def test_single_car_reserved_in_two_slot_lot():
    view = reconcile_occupancy([_Slot(1, "car"), _Slot(2, "motorcycle")], [_Reservation("r1", 1)])
    assert [(item.slot_number, item.status) for item in view] == [(1, OCCUPIED), (2, AVAILABLE)]
    assert count_available_by_category(view) == {"motorcycle": 1, "car": 0}
