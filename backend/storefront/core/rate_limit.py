"""
Rate limiting for the Storefront API
Uses in-memory storage with sliding window algorithm
"""
import logging
import time
from typing import Dict, Tuple
from collections import defaultdict
from fastapi import Request, HTTPException, status

from storefront.core.auth import user_from_token
from storefront.core.config import settings

logger = logging.getLogger(__name__)


class RateLimiter:
    """
    In-memory rate limiter using sliding window algorithm.

    State is per process; several workers each keep their own window.
    """

    def __init__(self, cleanup_interval: int = 60):
        # {identifier: [timestamp, ...]}
        self._requests: Dict[str, list] = defaultdict(list)
        self._last_cleanup = time.time()
        self._cleanup_interval = cleanup_interval

    def _cleanup_old_entries(self, window_seconds: int = 60):
        """Remove entries older than the largest window we care about"""
        now = time.time()

        if now - self._last_cleanup < self._cleanup_interval:
            return

        cutoff = now - window_seconds * 2

        for identifier in list(self._requests.keys()):
            self._requests[identifier] = [
                ts for ts in self._requests[identifier] if ts > cutoff
            ]
            if not self._requests[identifier]:
                del self._requests[identifier]

        self._last_cleanup = now

    def is_allowed(
        self,
        identifier: str,
        max_requests: int,
        window_seconds: int = 60
    ) -> Tuple[bool, int, int]:
        """
        Check if a request is allowed under the rate limit.

        Returns:
            Tuple of (is_allowed, remaining_requests, retry_after_seconds)
        """
        self._cleanup_old_entries(window_seconds)

        now = time.time()
        window_start = now - window_seconds

        requests_in_window = [ts for ts in self._requests[identifier] if ts > window_start]
        self._requests[identifier] = requests_in_window

        if len(requests_in_window) >= max_requests:
            oldest_timestamp = min(requests_in_window)
            retry_after = int(oldest_timestamp + window_seconds - now) + 1
            return False, 0, retry_after

        remaining = max_requests - len(requests_in_window) - 1
        self._requests[identifier].append(now)

        return True, remaining, 0

    def reset(self):
        """Forget every tracked request"""
        self._requests.clear()


# Global rate limiter instance
rate_limiter = RateLimiter()


def _client_ip(request: Request) -> str:
    """Client IP; X-Forwarded-For is only honoured behind a trusted proxy"""
    if settings.TRUST_PROXY_HEADERS:
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            return forwarded_for.split(',')[0].strip()

    if request.client:
        return request.client.host

    return "unknown"


def _client_identifier(request: Request, per_user: bool = False) -> str:
    """
    Bucket key for a request

    per_user endpoints key on the user id of a valid access token. Anything
    else (including unauthenticated endpoints such as sign-in) keys on the
    client IP, so rotating junk Authorization headers gains nothing.
    """
    if per_user:
        credentials = request.headers.get("Authorization", "")
        if credentials.startswith("Bearer "):
            try:
                user = user_from_token(credentials[len("Bearer "):])
                return f"user:{user.id}"
            except HTTPException:
                pass

    return f"ip:{_client_ip(request)}"


def rate_limit(max_requests: int, window_seconds: int = 60, per_user: bool = False):
    """
    Dependency factory for per-endpoint rate limits.

    Usage:
        @router.post("/login")
        async def login(_: None = Depends(rate_limit(10))):
            ...

        @router.post("/checkout")
        async def checkout(_: None = Depends(rate_limit(5, per_user=True))):
            ...
    """
    async def check(request: Request) -> None:
        identifier = f"endpoint:{request.url.path}:{_client_identifier(request, per_user)}"

        is_allowed, _remaining, retry_after = rate_limiter.is_allowed(
            identifier=identifier,
            max_requests=max_requests,
            window_seconds=window_seconds
        )

        if not is_allowed:
            logger.warning("Rate limit exceeded for %s", identifier)
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail=f"Too many requests. Try again in {retry_after} seconds.",
                headers={
                    "X-RateLimit-Limit": str(max_requests),
                    "X-RateLimit-Remaining": "0",
                    "Retry-After": str(retry_after),
                }
            )

    return check
