"""
HTTP request guards: rate limiting per client.

The limiter is read from app.state so each app (and each test) owns its own
buckets; a None limiter disables limiting.
"""

from __future__ import annotations

from fastapi import Request, Response

from tokenhealth.api_server.rate_limit import RateLimiter

ANONYMOUS_CLIENT = "anonymous"


def client_identifier(request: Request) -> str:
    """Client host, or a shared bucket when the host is unknown."""
    return request.client.host if request.client else ANONYMOUS_CLIENT


def enforce_rate_limit(request: Request, response: Response) -> None:
    """Dependency: consume one token for the caller and set X-RateLimit-* headers."""
    limiter: RateLimiter | None = getattr(request.app.state, "rate_limiter", None)
    if limiter is None:
        return
    result = limiter.enforce(client_identifier(request))
    response.headers["X-RateLimit-Limit"] = str(result.limit)
    response.headers["X-RateLimit-Remaining"] = str(result.remaining)
