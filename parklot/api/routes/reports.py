"""
Reporting endpoints over the reservation history archive.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.encoders import jsonable_encoder
from sqlalchemy.orm import Session

from ...core.db import get_db
from ...models.reservation_history import ReservationHistory
from ...models.user_info import UserInfo
from ...schemas.reservation import ReservationOut
from ...services.archival import archive_active_reservations
from ...services.reports import monthly_chart, summarize_periods, total_revenue, vehicle_type_chart
from ...services.user_directory import users_with_reservations


router = APIRouter(tags=["reports"])


@router.get("/reservation/history")
def archive_reservation_history(db: Session = Depends(get_db)) -> dict:
    result = archive_active_reservations(db)
    if not result.reservations:
        raise HTTPException(status_code=404, detail="No reservations to save.")
    return {
        "message": "All reservations retrieved successfully. New reservations saved to history.",
        "archived_count": result.archived_count,
        "all_reservations": [ReservationOut.model_validate(r).model_dump(mode="json") for r in result.reservations],
    }


@router.get("/api/reservation-history")
def users_with_history(db: Session = Depends(get_db)) -> List[dict]:
    users = db.query(UserInfo).order_by(UserInfo.name.asc()).all()
    history = db.query(ReservationHistory).order_by(ReservationHistory.in_time.asc()).all()
    return users_with_reservations(users, history)


@router.get("/api/reservations/total-revenue")
def reservations_total_revenue(db: Session = Depends(get_db)) -> dict:
    revenue = total_revenue(db)
    if revenue is None:
        raise HTTPException(status_code=404, detail="No revenue data found")
    return {"total_revenue": revenue}


@router.get("/api/charts")
def history_charts(db: Session = Depends(get_db)) -> dict:
    return monthly_chart(db.query(ReservationHistory).all())


@router.get("/api/statistics")
def history_statistics(db: Session = Depends(get_db)) -> dict:
    return summarize_periods(db.query(ReservationHistory).all())


@router.get("/api/statistics-chart")
def history_statistics_chart(
    vehicle_type: Optional[str] = Query(None),
    db: Session = Depends(get_db),
) -> List[dict]:
    query = db.query(ReservationHistory).order_by(ReservationHistory.created_at.asc())
    if vehicle_type:
        query = query.filter(ReservationHistory.vehicle_type == vehicle_type)
    return jsonable_encoder(vehicle_type_chart(query.all(), vehicle_type))
