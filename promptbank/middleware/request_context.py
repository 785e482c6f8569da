"""Per-request bookkeeping: request id, rate limit, timing and the access log line.

The limiter itself is ``check_rate_limit``, a plain function over a dict so
tests can drive it with explicit timestamps.
"""

import logging
import threading
import time
import uuid
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from ..core.config import settings
from ..core.logging_config import request_id_var
from ..core.token_factory import decode_token
from ..exceptions import ErrorCode

logger = logging.getLogger(__name__)

Bucket = dict[str, tuple[float, float]]

# key -> (tokens left, time of last refill)
_rate_buckets: Bucket = {}
_rate_lock = threading.Lock()

_SWEEP_INTERVAL = 100
_IDLE_SECONDS = 120.0
_calls_since_sweep = 0

_UNLIMITED_PATHS = frozenset({"/", "/health", "/docs", "/redoc", "/openapi.json"})


def _sweep(bucket: Bucket, now: float) -> None:
    idle = [key for key, (_, seen) in bucket.items() if now - seen > _IDLE_SECONDS]
    for key in idle:
        del bucket[key]


def check_rate_limit(
    bucket: Bucket,
    key: str,
    max_per_minute: int,
    now: Optional[float] = None,
) -> tuple[bool, float]:
    """Take one token from ``key``'s bucket.

    The bucket holds at most ``max_per_minute`` tokens and refills
    continuously at that rate. ``max_per_minute <= 0`` disables limiting.

    Returns:
        ``(True, 0.0)`` when the request may proceed, otherwise
        ``(False, seconds_until_next_token)``.
    """
    global _calls_since_sweep

    if max_per_minute <= 0:
        return True, 0.0
    now = time.monotonic() if now is None else now

    _calls_since_sweep += 1
    if _calls_since_sweep >= _SWEEP_INTERVAL:
        _calls_since_sweep = 0
        _sweep(bucket, now)

    per_second = max_per_minute / 60.0
    tokens, last = bucket.get(key, (float(max_per_minute), now))
    tokens = min(float(max_per_minute), tokens + (now - last) * per_second)

    if tokens < 1.0:
        bucket[key] = (tokens, now)
        return False, (1.0 - tokens) / per_second

    bucket[key] = (tokens - 1.0, now)
    return True, 0.0


def client_key(request: Request) -> str:
    """``user:<id>`` for a request with a valid token, else ``ip:<address>``."""
    scheme, _, credentials = request.headers.get("authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials:
        payload = decode_token(credentials.strip(), settings.jwt_secret_key, settings.jwt_algorithm)
        if payload is not None:
            return f"user:{payload.sub}"

    forwarded = request.headers.get("x-forwarded-for", "")
    address = forwarded.split(",")[0].strip() or (request.client.host if request.client else "")
    return f"ip:{address or 'unknown'}"


def _too_many_requests(retry_after: float, request_id: str) -> JSONResponse:
    return JSONResponse(
        status_code=429,
        content={
            "error": ErrorCode.RATE_LIMITED.value,
            "message": "Too many requests",
            "details": {"retry_after": round(retry_after, 1)},
        },
        headers={"Retry-After": str(int(retry_after) + 1), "X-Request-ID": request_id},
    )


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex[:16]
        request_id_var.set(request_id)
        path = request.url.path

        if path not in _UNLIMITED_PATHS:
            key = client_key(request)
            with _rate_lock:
                allowed, retry_after = check_rate_limit(_rate_buckets, key, settings.rate_limit_per_minute)
            if not allowed:
                logger.warning("Rate limited", extra={"client": key, "path": path})
                return _too_many_requests(retry_after, request_id)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 1)

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{elapsed_ms}ms"
        logger.info(
            "%s %s %s", request.method, path, response.status_code,
            extra={"method": request.method, "path": path,
                   "status_code": response.status_code, "duration_ms": elapsed_ms},
        )
        return response
