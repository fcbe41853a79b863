import datetime

from parklot.core.db import SessionLocal
from parklot.models.reservation import Reservation
from parklot.models.reservation_history import ReservationHistory
from parklot.services.archival import archive_active_reservations, natural_key
from parklot.services.reservation_sweeper import sweep_once
from tests.helpers import UTC, add_reservation, add_slot, client, count_rows, history_rows


def test_history_endpoint_is_idempotent():
    add_slot(1)
    add_slot(2)
    add_reservation(slot=1, price=40.0)
    add_reservation(slot=2, price=60.0, license_plate="XYZ789")
    with client() as c:
        first = c.get("/reservation/history")
        assert first.status_code == 200
        assert first.json()["archived_count"] == 2
        assert len(first.json()["all_reservations"]) == 2

        second = c.get("/reservation/history")
        assert second.status_code == 200
        assert second.json()["archived_count"] == 0
    assert count_rows(ReservationHistory) == 2
    # Archiving never touches the active store.
    assert count_rows(Reservation) == 2


def test_history_endpoint_without_reservations():
    with client() as c:
        resp = c.get("/reservation/history")
        assert resp.status_code == 404
        assert resp.json() == {"message": "No reservations to save."}


def test_rearchiving_adds_nothing():
    add_slot(1)
    add_slot(2)
    start = datetime.datetime(2026, 10, 20, 8, 0, tzinfo=UTC)
    end = start + datetime.timedelta(hours=2)
    # Same owner, plate, window, type and price on two slots: different slot keeps them apart.
    add_reservation(slot=1, in_time=start, out_time=end)
    add_reservation(slot=2, in_time=start, out_time=end)
    with SessionLocal() as db:
        assert archive_active_reservations(db).archived_count == 2
        assert archive_active_reservations(db).archived_count == 0


def test_history_copy_matches_reservation_content():
    add_slot(3)
    reservation = add_reservation(slot=3, price=12.5, license_plate="PLT001")
    with SessionLocal() as db:
        archive_active_reservations(db)
    rows = history_rows()
    assert len(rows) == 1
    assert natural_key(rows[0]) == natural_key(reservation)
    assert rows[0].created_at is not None


def test_sweep_once_archives_before_expiring():
    add_slot(1)
    now = datetime.datetime.now(UTC)
    add_reservation(slot=1, in_time=now - datetime.timedelta(hours=4), out_time=now - datetime.timedelta(hours=2))
    with SessionLocal() as db:
        result = sweep_once(db)
    assert result == {"archived": 1, "expired": 1}
    assert count_rows(Reservation) == 0
    assert count_rows(ReservationHistory) == 1


def test_report_endpoints_read_history():
    add_slot(1, "car")
    add_slot(2, "motorcycle")
    add_reservation(slot=1, price=100.0, in_time=datetime.datetime(2026, 3, 1, 8, tzinfo=UTC))
    add_reservation(
        slot=2,
        price=20.0,
        vehicle_type="motorcycle",
        in_time=datetime.datetime(2026, 4, 1, 8, tzinfo=UTC),
    )
    with client() as c:
        assert c.get("/api/reservations/total-revenue").status_code == 404
        c.get("/reservation/history")

        revenue = c.get("/api/reservations/total-revenue")
        assert revenue.json() == {"total_revenue": 120.0}

        charts = c.get("/api/charts").json()
        assert charts["reservation_count"] == [{"month": 3, "count": 1}, {"month": 4, "count": 1}]

        stats = c.get("/api/statistics").json()
        assert stats["total"] == {"count": 2, "revenue": 120.0}
        assert stats["daily"]["count"] == 2

        by_type = c.get("/api/statistics-chart", params={"vehicle_type": "motorcycle"}).json()
        assert len(by_type) == 1
        assert by_type[0]["vehicle_type"] == "motorcycle"
        assert by_type[0]["total_price"] == 20.0
