import datetime
import uuid
from typing import Optional

from fastapi.testclient import TestClient

from parklot.core.db import SessionLocal
from parklot.main import create_app
from parklot.models.parking_slot import ParkingSlot
from parklot.models.reservation import Reservation
from parklot.models.reservation_history import ReservationHistory
from parklot.models.user_info import UserInfo

UTC = datetime.timezone.utc


def client() -> TestClient:
    app = create_app()
    return TestClient(app)


def add_slot(slot_number: int, vehicle_type: str = "car") -> None:
    with SessionLocal() as db:
        db.add(ParkingSlot(slot_number=slot_number, vehicle_type=vehicle_type, is_available=True))
        db.commit()


def add_reservation(
    *,
    slot: int,
    user_id: str = "driver@example.com",
    license_plate: str = "ABC123",
    vehicle_type: str = "car",
    price: float = 50.0,
    arrived: bool = False,
    in_time: Optional[datetime.datetime] = None,
    out_time: Optional[datetime.datetime] = None,
    exit_id: Optional[str] = None,
) -> Reservation:
    now = datetime.datetime.now(UTC)
    in_time = in_time or now + datetime.timedelta(hours=1)
    out_time = out_time or in_time + datetime.timedelta(hours=2)
    reservation = Reservation(
        id=str(uuid.uuid4()),
        user_id=user_id,
        license_plate=license_plate,
        in_time=in_time,
        out_time=out_time,
        vehicle_type=vehicle_type,
        price=price,
        slot=slot,
        arrived=arrived,
        dqr=False,
        exit_id=exit_id or uuid.uuid4().hex,
        status="ARRIVED" if arrived else "BOOKED",
    )
    with SessionLocal() as db:
        db.add(reservation)
        db.commit()
        db.refresh(reservation)
        db.expunge(reservation)
    return reservation


def add_user(email: str, *, name: str = "Juan Dela Cruz", verified: bool = False) -> None:
    with SessionLocal() as db:
        db.add(
            UserInfo(
                email=email,
                password_hash="x",
                dob=datetime.date(1990, 1, 1),
                name=name,
                contact="09170000000",
                profile_image_url="https://img.example.com/u.png",
                license={"front_image_url": "f.png", "back_image_url": "b.png"},
                verified=verified,
            )
        )
        db.commit()


def count_rows(model) -> int:
    with SessionLocal() as db:
        return db.query(model).count()


def history_rows() -> list[ReservationHistory]:
    with SessionLocal() as db:
        rows = db.query(ReservationHistory).all()
        for row in rows:
            db.expunge(row)
        return rows
