"""
Application-level exceptions.

The scoring core never raises for missing or malformed data; these exist only
at the service and CLI boundaries (unreadable payloads, rate limiting).
"""

from __future__ import annotations


class TokenHealthError(Exception):
    """Base class for TokenHealthScan boundary errors."""


class PayloadError(TokenHealthError):
    """Scan payload is unreadable or not a JSON object."""


class RateLimitExceeded(TokenHealthError):
    """Client exhausted its request bucket; retry after `retry_after` seconds."""

    def __init__(self, identifier: str, retry_after: int) -> None:
        super().__init__(f"Rate limit exceeded for {identifier}; retry after {retry_after}s")
        self.identifier = identifier
        self.retry_after = retry_after
