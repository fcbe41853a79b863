"""
Boundary auth for dashboard endpoints.

Auth is disabled by default: callers identify themselves with plain
``username`` query/body parameters, as the kiosk and dashboard clients
always have. With ``PARKLOT_AUTH_DISABLED=false`` dashboard routes require
a bearer token issued by ``POST /login``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from fastapi import Header, HTTPException

from .security import decode_admin_token


@dataclass
class AdminContext:
    username: str
    admin_id: Optional[str] = None
    is_superadmin: bool = False


def auth_disabled() -> bool:
    return os.getenv("PARKLOT_AUTH_DISABLED", "true").lower() in {"1", "true", "yes"}


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    if not authorization.lower().startswith("bearer "):
        return None
    token = authorization.split(" ", 1)[1].strip()
    return token or None


def _context_from_token(token: str) -> AdminContext:
    try:
        claims = decode_admin_token(token)
    except Exception:
        raise HTTPException(status_code=401, detail="Invalid token")
    return AdminContext(
        username=str(claims["sub"]),
        admin_id=str(claims.get("admin_id") or "") or None,
        is_superadmin=bool(claims.get("superadmin")),
    )


def get_optional_admin(authorization: Optional[str] = Header(None)) -> Optional[AdminContext]:
    if auth_disabled():
        return None
    token = extract_bearer_token(authorization)
    if not token:
        return None
    return _context_from_token(token)


def require_admin(authorization: Optional[str] = Header(None)) -> Optional[AdminContext]:
    if auth_disabled():
        return None
    token = extract_bearer_token(authorization)
    if not token:
        raise HTTPException(status_code=401, detail="Missing bearer token")
    return _context_from_token(token)
