"""
Gate endpoints scanned by the entrance and exit kiosks.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ...core.db import get_db
from ...schemas.reservation import ReservationOut
from ...services.gate import GateError, validate_entry, validate_exit


router = APIRouter(prefix="/api", tags=["gates"])


def _gate_failure(exc: GateError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail={"valid": False, "message": exc.message})


@router.get("/validate-id/{reservation_id}")
def validate_entry_ticket(reservation_id: str, db: Session = Depends(get_db)) -> dict:
    try:
        reservation = validate_entry(db, reservation_id)
    except GateError as exc:
        raise _gate_failure(exc)
    return {
        "valid": True,
        "message": "ID is valid and reservation updated successfully",
        "reservation": ReservationOut.model_validate(reservation).model_dump(mode="json"),
    }


@router.get("/validate-exit-id/{exit_id}")
def validate_exit_ticket(exit_id: str, db: Session = Depends(get_db)) -> dict:
    try:
        snapshot = validate_exit(db, exit_id)
    except GateError as exc:
        raise _gate_failure(exc)
    return {
        "valid": True,
        "message": "exit_id is valid and reservation deleted successfully",
        "reservation": snapshot.model_dump(mode="json"),
    }
