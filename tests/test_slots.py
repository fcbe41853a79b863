from tests.helpers import add_reservation, add_slot, client


def test_add_slot_numbers_continue_after_highest():
    add_slot(1)
    add_slot(5)
    with client() as c:
        resp = c.post("/add-slot", json={"count": 3, "size": "motorcycle"})
        assert resp.status_code == 201
        assert resp.json()["slot_numbers"] == [6, 7, 8]

        slots = c.get("/get-parking-slots").json()
        assert [s["slot_number"] for s in slots] == [1, 5, 6, 7, 8]
        assert slots[-1]["vehicle_type"] == "motorcycle"


def test_add_slot_accepts_legacy_count_field():
    with client() as c:
        resp = c.post("/add-slot", json={"slot_number": 2, "size": "car"})
        assert resp.status_code == 201
        assert resp.json()["slot_numbers"] == [1, 2]


def test_add_slot_rejects_unknown_size():
    with client() as c:
        resp = c.post("/add-slot", json={"count": 1, "size": "truck"})
        assert resp.status_code == 400


def test_delete_slot():
    add_slot(1)
    with client() as c:
        assert c.delete("/delete-parking-slot").status_code == 400
        assert c.delete("/delete-parking-slot", params={"slot_number": 9}).status_code == 404
        resp = c.delete("/delete-parking-slot", params={"slot_number": 1})
        assert resp.status_code == 200
        assert c.get("/get-parking-slots").json() == []


def test_occupancy_endpoints():
    add_slot(1, "car")
    add_slot(2, "car")
    add_slot(3, "motorcycle")
    booked = add_reservation(slot=1)
    add_reservation(slot=3, vehicle_type="motorcycle", arrived=True, license_plate="MC01")
    with client() as c:
        info = c.get("/parking-slots-info").json()
        assert [s["status"] for s in info] == ["occupied", "available", "occupied"]
        assert info[0]["reservation_id"] == booked.id
        assert info[0]["arrived"] is False
        assert "reservation_id" not in info[1]

        assert c.get("/api/parkingslot").json() == info
        assert c.get("/available-parking-slots-count").json() == {
            "available_motorcycle_slots": 0,
            "available_car_slots": 1,
        }
        assert c.get("/available-parking-slots-total").json() == {"total_available_slots": 1}
        assert c.get("/occupied-slots-count").json() == {"occupied_slots": {"motorcycle": 1}}
        assert c.get("/api/reservation-count").json() == {"total_reservations": 1}

        listed = c.get("/reservations").json()
        assert [r["slot"] for r in listed] == [1, 3]
