"""
Joins end-user accounts with their reservations for the dashboard tables.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from ..models.user_info import UserInfo
from ..schemas.reservation import HistoryOut, ReservationOut
from ..schemas.user import UserOut


def _owner_key(value: str | None) -> str:
    return (value or "").strip().lower()


def users_with_reservations(users: Iterable[UserInfo], reservations: Sequence) -> list[dict]:
    """One entry per user with the reservations whose ``user_id`` is the user's email.

    Accepts active reservations or history rows.
    """
    grouped: dict[str, list] = {}
    for reservation in reservations:
        grouped.setdefault(_owner_key(reservation.user_id), []).append(reservation)
    out: list[dict] = []
    for user in users:
        owned = grouped.get(_owner_key(user.email), [])
        entry = UserOut.model_validate(user).model_dump(mode="json")
        entry["reservations"] = [_reservation_dict(r) for r in owned]
        out.append(entry)
    return out


def _reservation_dict(row) -> dict:
    schema = ReservationOut if hasattr(row, "exit_id") else HistoryOut
    return schema.model_validate(row).model_dump(mode="json")
