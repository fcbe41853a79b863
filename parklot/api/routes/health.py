"""
Liveness endpoint with a database ping.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session

from ...core.config import get_app_env
from ...core.db import get_db
from ...core.errors import log_exception


router = APIRouter(tags=["health"])


@router.get("/health")
def health(request: Request, db: Session = Depends(get_db)):
    database = "ok"
    try:
        db.execute(text("SELECT 1"))
    except Exception as exc:
        log_exception(logging.getLogger("health"), "Database ping failed", exc=exc)
        database = "error"
    thread = getattr(request.app.state, "reservation_sweeper_thread", None)
    body = {
        "status": "ok" if database == "ok" else "degraded",
        "env": get_app_env(),
        "database": database,
        "reservation_sweeper": bool(thread and thread.is_alive()),
        "time_utc": datetime.now(timezone.utc).isoformat(),
    }
    return JSONResponse(status_code=200 if database == "ok" else 503, content=body)
