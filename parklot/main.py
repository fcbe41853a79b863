"""
Entry point for the parking-lot reservation backend.

This module creates the FastAPI application, includes all API routers,
installs the error handlers and CORS middleware, and starts the
reservation sweeper. Run with:

    uvicorn parklot.main:app --reload

"""

from __future__ import annotations

import logging
import os
import threading

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.db import engine, SessionLocal
from .models import Base
from .services.admin_seed import seed_superadmin
from .services.reservation_sweeper import run_reservation_sweeper
from .scripts.run_migrations import run_migrations_to_head

from .api import api_router
from .core.config import cors_origins, get_app_env
from .core.errors import install_exception_handlers, log_exception


def _flag(name: str) -> bool:
    return os.getenv(name, "true").lower() in {"1", "true", "yes"}


def create_app() -> FastAPI:
    app = FastAPI(title="Parking Lot Reservation Backend", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_exception_handlers(app)
    app.include_router(api_router)
    app.state.reservation_sweeper_stop = None
    app.state.reservation_sweeper_thread = None

    @app.on_event("startup")
    def _init_db() -> None:
        logger = logging.getLogger("startup")
        env = get_app_env()
        if _flag("AUTO_CREATE_DB"):
            try:
                Base.metadata.create_all(bind=engine)
            except Exception as exc:
                log_exception(logger, "DB create_all failed", exc=exc)
                if env == "prod":
                    raise
        if _flag("AUTO_RUN_MIGRATIONS"):
            try:
                run_migrations_to_head()
            except Exception as exc:
                log_exception(logger, "DB migrations failed", exc=exc)
                if env == "prod":
                    raise
        if _flag("AUTO_SEED_ADMIN_USER"):
            try:
                with SessionLocal() as db:
                    seed_superadmin(db)
            except Exception as exc:
                log_exception(logger, "Seed superadmin failed", exc=exc)
                if env == "prod":
                    raise
        if _flag("ENABLE_RESERVATION_SWEEPER"):
            stop_event = threading.Event()
            thread = threading.Thread(
                target=run_reservation_sweeper,
                args=(stop_event,),
                daemon=True,
                name="reservation-sweeper",
            )
            thread.start()
            app.state.reservation_sweeper_stop = stop_event
            app.state.reservation_sweeper_thread = thread

    @app.on_event("shutdown")
    def _shutdown() -> None:
        stop_event = getattr(app.state, "reservation_sweeper_stop", None)
        if stop_event:
            stop_event.set()
        thread = getattr(app.state, "reservation_sweeper_thread", None)
        if thread:
            thread.join(timeout=5)

    return app


app = create_app()
