"""
Security helpers: admin password hashing, admin access tokens and the
opaque exit tokens printed on parking tickets.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
import os
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any

HASH_ALGO = "pbkdf2_sha256"


def _b64url_encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _b64url_decode(value: str) -> bytes:
    padding = "=" * (-len(value) % 4)
    return base64.urlsafe_b64decode(value + padding)


def _hash_rounds() -> int:
    try:
        return max(1000, int(os.getenv("PARKLOT_PASSWORD_HASH_ROUNDS", "120000")))
    except Exception:
        return 120000


def _derive(password: str, salt: str, rounds: int) -> str:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("ascii"), rounds).hex()


def hash_password(password: str) -> str:
    if not password:
        raise ValueError("Password cannot be empty")
    salt = secrets.token_hex(16)
    rounds = _hash_rounds()
    return f"{HASH_ALGO}${rounds}${salt}${_derive(password, salt, rounds)}"


def verify_password(password: str, encoded: str | None) -> bool:
    if not password or not encoded:
        return False
    try:
        algo, rounds_raw, salt, expected_hex = encoded.split("$", 3)
        rounds = int(rounds_raw)
    except Exception:
        return False
    if algo != HASH_ALGO:
        return False
    return secrets.compare_digest(_derive(password, salt, rounds), expected_hex)


def _token_secret() -> str:
    secret = (os.getenv("PARKLOT_JWT_SECRET") or "").strip()
    if secret:
        return secret
    env = (os.getenv("PARKLOT_ENV") or os.getenv("APP_ENV") or "dev").strip().lower()
    if env == "prod":
        return ""
    return "dev-jwt-secret-change-me"


def _token_ttl() -> timedelta:
    try:
        minutes = max(1, int(os.getenv("PARKLOT_JWT_EXP_MIN", "720")))
    except Exception:
        minutes = 720
    return timedelta(minutes=minutes)


def _sign(signing_input: str, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), signing_input.encode("ascii"), hashlib.sha256).digest()


def create_admin_token(*, username: str, admin_id: str, is_superadmin: bool) -> str:
    """Issue an HS256 JWT for a logged-in admin."""
    secret = _token_secret()
    if not secret:
        raise RuntimeError("PARKLOT_JWT_SECRET is required when auth is enabled")
    now = datetime.now(timezone.utc)
    claims = {
        "sub": username,
        "admin_id": admin_id,
        "superadmin": bool(is_superadmin),
        "iat": int(now.timestamp()),
        "exp": int((now + _token_ttl()).timestamp()),
    }
    segments = [
        _b64url_encode(json.dumps(part, separators=(",", ":")).encode("utf-8"))
        for part in ({"alg": "HS256", "typ": "JWT"}, claims)
    ]
    signing_input = ".".join(segments)
    return f"{signing_input}.{_b64url_encode(_sign(signing_input, secret))}"


def decode_admin_token(token: str) -> dict[str, Any]:
    secret = _token_secret()
    if not secret:
        raise ValueError("JWT secret not configured")
    try:
        header_b64, claims_b64, signature_b64 = token.split(".")
    except ValueError:
        raise ValueError("Malformed token") from None
    if not secrets.compare_digest(_sign(f"{header_b64}.{claims_b64}", secret), _b64url_decode(signature_b64)):
        raise ValueError("Invalid signature")
    claims = json.loads(_b64url_decode(claims_b64).decode("utf-8"))
    if not isinstance(claims, dict) or not claims.get("sub"):
        raise ValueError("Invalid claims")
    exp = int(claims.get("exp") or 0)
    if exp <= int(datetime.now(timezone.utc).timestamp()):
        raise ValueError("Token expired")
    return claims


def generate_exit_token() -> str:
    """Opaque token printed on the exit ticket."""
    return secrets.token_urlsafe(18)
