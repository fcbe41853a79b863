"""
Background sweeper that archives active reservations and removes expired
no-shows on a fixed interval, independent of dashboard traffic.
"""

from __future__ import annotations

import datetime
import logging
import threading
from typing import Optional

from sqlalchemy.orm import Session

from ..core.config import settings
from ..core.db import session_scope
from .archival import archive_active_reservations
from .reservation_lifecycle import sweep_expired


def sweep_once(db: Session, logger: Optional[logging.Logger] = None, now: Optional[datetime.datetime] = None) -> dict:
    logger = logger or logging.getLogger("ReservationSweeper")
    # Archive first so expired rows are in history before they are deleted.
    archived = archive_active_reservations(db).archived_count
    expired = sweep_expired(db, now)
    if archived or expired:
        logger.info("Sweep cycle archived=%s expired=%s", archived, len(expired))
    return {"archived": archived, "expired": len(expired)}


def run_reservation_sweeper(stop_event: threading.Event) -> None:
    logger = logging.getLogger("ReservationSweeper")
    interval_sec = max(30, int(settings.reservation_sweeper_interval_sec))
    logger.info("Reservation sweeper started (interval=%ss)", interval_sec)
    while not stop_event.is_set():
        try:
            with session_scope() as db:
                sweep_once(db, logger)
        except Exception as exc:
            logger.exception("Reservation sweeper cycle failed: %s", exc)
        stop_event.wait(interval_sec)
    logger.info("Reservation sweeper stopped")
