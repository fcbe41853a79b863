"""
Per-process request throttling for the dashboard and kiosk endpoints.

Each client gets one token bucket per endpoint group. Clients are told
apart by their bearer token when they send one, otherwise by address, so
two kiosks behind one gateway share a bucket unless auth is enabled.
"""

from __future__ import annotations

import hashlib
import os
import threading
import time
from dataclasses import dataclass, field
from typing import Optional

from fastapi import Header, HTTPException, Request

from .auth import extract_bearer_token
from .config import get_app_env


@dataclass(frozen=True)
class RateLimitPolicy:
    enabled: bool
    rps: float = 5.0
    burst: int = 20


def _float_env(name: str, default: float, minimum: float) -> float:
    try:
        return max(float(os.getenv(name, default)), minimum)
    except ValueError:
        return default


def current_policy() -> RateLimitPolicy:
    """Policy from the environment, read per request."""
    flag = (os.getenv("RATE_LIMIT_ENABLED") or "").strip().lower()
    if flag in {"1", "true", "yes"}:
        enabled = True
    elif flag in {"0", "false", "no"}:
        enabled = False
    else:
        enabled = get_app_env() == "prod"
    return RateLimitPolicy(
        enabled=enabled,
        rps=_float_env("RATE_LIMIT_RPS", 5.0, 0.1),
        burst=int(_float_env("RATE_LIMIT_BURST", 20, 1)),
    )


def _path_group(path: str) -> str:
    # "/api/validate-id/<id>" and "/api/validate-exit-id/<id>" share one bucket per gate.
    parts = [p for p in path.split("/") if p]
    if len(parts) >= 2 and parts[0] == "api":
        return f"/api/{parts[1]}"
    if parts:
        return f"/{parts[0]}"
    return "/"


def client_key(request: Request, authorization: Optional[str]) -> str:
    token = extract_bearer_token(authorization)
    if token:
        who = "tok:" + hashlib.sha256(token.encode("utf-8")).hexdigest()[:16]
    else:
        who = "ip:" + (request.client.host if request.client else "unknown")
    return f"{who}|{_path_group(request.url.path)}"


@dataclass
class _Bucket:
    tokens: float
    refilled_at: float = field(default_factory=time.monotonic)


class TokenBucketLimiter:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._buckets: dict[str, _Bucket] = {}

    def take(self, key: str, policy: RateLimitPolicy) -> Optional[float]:
        """Consume one token. Returns None when allowed, else seconds until the next token."""
        now = time.monotonic()
        with self._lock:
            bucket = self._buckets.get(key)
            if bucket is None:
                bucket = self._buckets[key] = _Bucket(tokens=float(policy.burst), refilled_at=now)
            bucket.tokens = min(float(policy.burst), bucket.tokens + (now - bucket.refilled_at) * policy.rps)
            bucket.refilled_at = now
            if bucket.tokens >= 1.0:
                bucket.tokens -= 1.0
                return None
            return max((1.0 - bucket.tokens) / policy.rps, 0.1)

    def reset(self) -> None:
        with self._lock:
            self._buckets.clear()


_limiter = TokenBucketLimiter()


def rate_limit_dependency(request: Request, authorization: Optional[str] = Header(None)) -> None:
    policy = current_policy()
    if not policy.enabled:
        return
    wait = _limiter.take(client_key(request, authorization), policy)
    if wait is not None:
        raise HTTPException(
            status_code=429,
            detail="Too Many Requests",
            headers={"Retry-After": str(max(1, int(wait)))},
        )
