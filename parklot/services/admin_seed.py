"""
Bootstrap seed for the first superadmin account.
"""

from __future__ import annotations

import logging
import os

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from ..core.security import hash_password
from ..models.admin import Admin


def seed_superadmin(db: Session) -> None:
    logger = logging.getLogger("admin-seed")
    username = (os.getenv("PARKLOT_ADMIN_USERNAME") or "admin").strip()
    password = (os.getenv("PARKLOT_ADMIN_PASSWORD") or "").strip()
    email = (os.getenv("PARKLOT_ADMIN_EMAIL") or f"{username}@localhost").strip().lower()

    if not username:
        logger.warning("Skipping admin seed: empty PARKLOT_ADMIN_USERNAME")
        return
    if not password:
        logger.warning("Skipping admin seed: PARKLOT_ADMIN_PASSWORD is empty")
        return

    existing = (
        db.query(Admin)
        .filter(or_(func.lower(Admin.username) == username.lower(), func.lower(Admin.email) == email))
        .first()
    )
    if existing:
        if not existing.is_superadmin:
            existing.is_superadmin = True
            db.add(existing)
            db.commit()
            logger.info("Promoted existing admin to superadmin username=%s", existing.username)
        return

    db.add(
        Admin(
            username=username,
            email=email,
            password_hash=hash_password(password),
            first_name="Super",
            last_name="Admin",
            is_superadmin=True,
        )
    )
    db.commit()
    logger.info("Seeded superadmin username=%s", username)
