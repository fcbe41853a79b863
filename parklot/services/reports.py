"""
Revenue and volume reporting over the reservation history archive.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ..models.reservation_history import ReservationHistory

PERIODS = ("daily", "weekly", "monthly", "yearly")


def _utc(dt: datetime.datetime) -> datetime.datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=datetime.timezone.utc)
    return dt.astimezone(datetime.timezone.utc)


def _wall_clock(now: Optional[datetime.datetime]):
    """Split ``now`` into a naive wall time and a function that localizes wall times.

    Naive values are server-local. Each period start is localized on its own
    date so a DST change inside the period gets that date's offset.
    """
    if now is None:
        now = datetime.datetime.now()
    if now.tzinfo is None:
        return now, lambda wall: wall.astimezone()
    tz = now.tzinfo
    return now.replace(tzinfo=None), lambda wall: wall.replace(tzinfo=tz)


def period_starts(now: Optional[datetime.datetime] = None) -> dict[str, datetime.datetime]:
    """Start of the current day, week (Sunday), month and year as aware datetimes."""
    wall, localize = _wall_clock(now)
    start_of_day = datetime.datetime(wall.year, wall.month, wall.day)
    # weekday(): Monday == 0 ... Sunday == 6
    start_of_week = start_of_day - datetime.timedelta(days=(wall.weekday() + 1) % 7)
    return {
        "daily": localize(start_of_day),
        "weekly": localize(start_of_week),
        "monthly": localize(start_of_day.replace(day=1)),
        "yearly": localize(start_of_day.replace(month=1, day=1)),
    }


def _bucket(rows: list[ReservationHistory]) -> dict:
    return {"count": len(rows), "revenue": round(sum(float(r.price) for r in rows), 2)}


def summarize_periods(
    rows: Iterable[ReservationHistory],
    now: Optional[datetime.datetime] = None,
) -> dict:
    rows = list(rows)
    starts = {name: _utc(start) for name, start in period_starts(now).items()}
    out: dict = {}
    for name in PERIODS:
        since = starts[name]
        out[name] = _bucket([r for r in rows if r.created_at is not None and _utc(r.created_at) >= since])
    out["total"] = _bucket(rows)
    return out


def monthly_chart(rows: Iterable[ReservationHistory]) -> dict:
    """Count and total price per calendar month (1-12) of ``in_time``, across years."""
    counts: dict[int, int] = {}
    totals: dict[int, float] = {}
    for row in rows:
        month = _utc(row.in_time).month
        counts[month] = counts.get(month, 0) + 1
        totals[month] = totals.get(month, 0.0) + float(row.price)
    return {
        "reservation_count": [{"month": m, "count": counts[m]} for m in sorted(counts)],
        "total_reservation_price": [{"month": m, "total_price": round(totals[m], 2)} for m in sorted(totals)],
    }


def vehicle_type_chart(rows: Iterable[ReservationHistory], vehicle_type: Optional[str] = None) -> list[dict]:
    groups: dict[str, dict] = {}
    for row in rows:
        if vehicle_type and row.vehicle_type != vehicle_type:
            continue
        group = groups.setdefault(
            row.vehicle_type,
            {"vehicle_type": row.vehicle_type, "total_price": 0.0, "reservations": []},
        )
        group["total_price"] += float(row.price)
        group["reservations"].append(
            {"vehicle_type": row.vehicle_type, "price": row.price, "created_at": row.created_at}
        )
    for group in groups.values():
        group["total_price"] = round(group["total_price"], 2)
    return [groups[key] for key in sorted(groups)]


def total_revenue(db: Session) -> Optional[float]:
    """Sum of archived prices, or None when the history is empty."""
    count, total = db.query(func.count(ReservationHistory.id), func.sum(ReservationHistory.price)).one()
    if not count:
        return None
    return round(float(total or 0.0), 2)
