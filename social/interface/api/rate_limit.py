"""Per-client token bucket rate limiting.

One limiter is created with the app and shared by every request. Each
client IP owns a bucket holding up to ``burst`` tokens, refilled at
``rate`` tokens per second; a request spends one token or is rejected with
429. Buckets are read and updated under a single lock.
"""

import asyncio
import time
from collections.abc import Callable

import logfire
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp


class TokenBucket:
    """Token bucket for a single client."""

    def __init__(self, rate: float, burst: int, now: float) -> None:
        self.rate = rate
        self.burst = burst
        self.tokens = float(burst)
        self.updated_at = now

    def take(self, now: float) -> bool:
        """Refill for the time elapsed since the last call, then spend a token.

        Returns:
            True if a token was available
        """
        elapsed = max(0.0, now - self.updated_at)
        self.tokens = min(float(self.burst), self.tokens + elapsed * self.rate)
        self.updated_at = now

        if self.tokens >= 1:
            self.tokens -= 1
            return True
        return False


class RateLimiter:
    """Process-wide registry of token buckets keyed by client."""

    def __init__(
        self,
        rate: float,
        burst: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize rate limiter.

        Args:
            rate: Tokens added per second
            burst: Bucket capacity
            clock: Monotonic time source in seconds
        """
        self.rate = rate
        self.burst = burst
        self._clock = clock
        self._buckets: dict[str, TokenBucket] = {}
        self._lock = asyncio.Lock()

    async def allow(self, key: str) -> bool:
        """Spend a token from ``key``'s bucket, creating the bucket if needed.

        Args:
            key: Client identifier (source IP)

        Returns:
            True if the request may proceed
        """
        async with self._lock:
            now = self._clock()
            bucket = self._buckets.get(key)
            if bucket is None:
                bucket = TokenBucket(self.rate, self.burst, now)
                self._buckets[key] = bucket
            return bucket.take(now)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests from clients whose bucket is empty."""

    def __init__(
        self,
        app: ASGIApp,
        limiter: RateLimiter,
        exempt_paths: tuple[str, ...] = ("/health",),
    ) -> None:
        super().__init__(app)
        self.limiter = limiter
        self.exempt_paths = exempt_paths

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.exempt_paths:
            return await call_next(request)

        client_host = request.client.host if request.client else "unknown"
        if not await self.limiter.allow(client_host):
            logfire.warn(
                "Rate limit exceeded", client_host=client_host, path=request.url.path
            )
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={"detail": "Too many requests"},
            )

        return await call_next(request)
