"""
Fixed-window rate limiter backed by the Django cache.

Each identifier (usually a client IP) gets an entry {count, reset_time}.
The first hit opens a window of `window_seconds`; once `limit` hits have
been counted, further hits are denied until the window expires. Expired
entries count as absent and are also dropped by the cache TTL.

The limiter is a bookkeeping utility, not a security boundary. With the
default local-memory cache it is per process.
"""
import logging
import math
import time
from dataclasses import dataclass
from datetime import datetime, timezone

from django.conf import settings
from django.core.cache import caches
from rest_framework import status
from rest_framework.response import Response

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateLimitResult:
    allowed: bool
    remaining: int
    reset_time: float

    @property
    def reset_at(self) -> datetime:
        return datetime.fromtimestamp(self.reset_time, tz=timezone.utc)

    def retry_after(self, now: float) -> int:
        return max(0, math.ceil(self.reset_time - now))


class RateLimiter:
    def __init__(self, namespace, limit, window_seconds, clock=time.time, cache_alias=None):
        self.namespace = namespace
        self.limit = limit
        self.window_seconds = window_seconds
        self.clock = clock
        self.cache = caches[cache_alias or settings.RATE_LIMIT_CACHE]

    def _key(self, identifier):
        return f"ratelimit:{self.namespace}:{identifier}"

    def hit(self, identifier) -> RateLimitResult:
        """Count one attempt for `identifier` and report whether it is allowed."""
        now = self.clock()
        key = self._key(identifier)
        entry = self.cache.get(key)

        if entry is None or entry['reset_time'] <= now:
            reset_time = now + self.window_seconds
            self.cache.set(key, {'count': 1, 'reset_time': reset_time}, timeout=self.window_seconds)
            return RateLimitResult(True, self.limit - 1, reset_time)

        if entry['count'] >= self.limit:
            logger.info(f"Rate limit exceeded for {self.namespace}:{identifier}")
            return RateLimitResult(False, 0, entry['reset_time'])

        entry['count'] += 1
        self.cache.set(key, entry, timeout=max(1, math.ceil(entry['reset_time'] - now)))
        return RateLimitResult(True, self.limit - entry['count'], entry['reset_time'])

    def rejection(self, result, message):
        """429 response for a denied hit, with Retry-After and the reset time."""
        response = Response({
            'error': message,
            'resetTime': result.reset_at.isoformat().replace('+00:00', 'Z'),
            'remaining': 0,
        }, status=status.HTTP_429_TOO_MANY_REQUESTS)
        response['Retry-After'] = str(result.retry_after(self.clock()))
        return response


def contact_limiter():
    return RateLimiter('contact', settings.CONTACT_RATE_LIMIT, settings.CONTACT_RATE_WINDOW_SECONDS)


def login_limiter():
    return RateLimiter('login', settings.LOGIN_RATE_LIMIT, settings.LOGIN_RATE_WINDOW_SECONDS)
