"""
In-memory rate limiting for the generation endpoint
One token bucket per client address
"""

import time
from dataclasses import dataclass
from threading import Lock
from typing import Dict, Tuple

from fastapi import HTTPException, Request, status

from wordpass.config import Settings
from wordpass.logging_config import log_rate_limited


@dataclass
class RateLimitConfig:
    """Rate limit configuration"""
    requests_per_minute: int = 60
    burst_size: int = 10
    max_tracked_clients: int = 10000
    max_idle_seconds: int = 3600

    @classmethod
    def from_settings(cls, active_settings: Settings) -> "RateLimitConfig":
        return cls(
            requests_per_minute=active_settings.RATE_LIMIT_PER_MINUTE,
            burst_size=active_settings.RATE_LIMIT_BURST,
        )


class RateLimiter:
    """
    Token bucket rate limiter
    Buckets refill continuously at requests_per_minute / 60 tokens per second
    """

    def __init__(self, config: RateLimitConfig = None, clock=time.monotonic):
        self.config = config or RateLimitConfig()
        self._clock = clock
        self._buckets: Dict[str, Tuple[float, float]] = {}
        self._lock = Lock()

    def is_allowed(self, client: str) -> bool:
        """Consume one token for client; False when the bucket is empty"""
        with self._lock:
            now = self._clock()
            if client not in self._buckets and len(self._buckets) >= self.config.max_tracked_clients:
                self._prune(now)

            last_update, tokens = self._buckets.get(
                client, (now, float(self.config.burst_size))
            )

            tokens_per_second = self.config.requests_per_minute / 60.0
            tokens = min(
                float(self.config.burst_size),
                tokens + (now - last_update) * tokens_per_second,
            )

            if tokens >= 1:
                self._buckets[client] = (now, tokens - 1)
                return True

            self._buckets[client] = (now, tokens)
            return False

    def _prune(self, now: float):
        """
        Make room for one more client
        Drops idle buckets first, then the least recently seen ones. Caller holds the lock.
        """
        stale = [
            client for client, (last_update, _) in self._buckets.items()
            if now - last_update > self.config.max_idle_seconds
        ]
        for client in stale:
            del self._buckets[client]

        overflow = len(self._buckets) - self.config.max_tracked_clients + 1
        if overflow > 0:
            oldest = sorted(self._buckets, key=lambda client: self._buckets[client][0])
            for client in oldest[:overflow]:
                del self._buckets[client]

    @property
    def tracked_clients(self) -> int:
        with self._lock:
            return len(self._buckets)


def enforce_rate_limit(request: Request) -> None:
    """FastAPI dependency: 429 once the caller's bucket is empty"""
    limiter: RateLimiter = request.app.state.rate_limiter
    client = request.client.host if request.client else "unknown"

    if not limiter.is_allowed(client):
        log_rate_limited(client)
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail={"error": "rate_limited", "message": "Too many requests"},
        )
