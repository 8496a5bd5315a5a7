"""
Pytest fixtures for TokenHealthScan tests.

Fixed clocks for freshness and rate-limit tests; FastAPI TestClient over a
fresh app per test with an injected rate limiter.
"""

from __future__ import annotations

import copy
from datetime import datetime, timezone

import pytest

FIXED_NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)

# Every section populated; scores are worked out in test_scan_pipeline.
FULL_PAYLOAD = {
    "token_address": "0xabc",
    "securityData": {
        "ownership_renounced": True,
        "can_mint": False,
        "audit_status": "verified",
        "is_liquidity_locked": True,
        "liquidity_lock_info": "6 months",
    },
    "webacyData": {"riskScore": 20},
    "goplusData": {"owner_address": "0x0000000000000000000000000000000000000000", "is_honeypot": "0", "can_take_back_ownership": "0"},
    "priceData": {
        "current_price_usd": 1.2,
        "trading_volume_24h_usd": 2_000_000,
        "market_cap_usd": 200_000_000,
        "price_change_24h": 2.0,
    },
    "tokenData": {"total_supply": "500000000", "verified_contract": True, "possible_spam": False},
    "statsData": {"total_supply": "500000000"},
    "pairsData": {"total_liquidity_usd": 1_000_000},
    "ownersData": {"gini_coefficient": 0.5, "concentration_risk": "Medium"},
    "twitterFollowers": 12_000,
    "discordMembers": 0,
    "telegramMembers": 800,
    "githubData": {
        "commits_30d": 15,
        "total_issues": 10,
        "closed_issues": 9,
        "stars": 200,
        "forks": 10,
        "last_push": "2026-01-12T12:00:00Z",
    },
}


class FakeClock:
    """Monotonic clock the test advances by hand."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def client():
    """TestClient with rate limiting disabled."""
    from fastapi.testclient import TestClient

    from tokenhealth.api_server.server import create_app
    from tokenhealth.config import Settings

    return TestClient(create_app(Settings(rate_limit_enabled=False)))


@pytest.fixture
def limited_client(fake_clock):
    """TestClient whose limiter allows 2 requests per 60s on a fake clock."""
    from fastapi.testclient import TestClient

    from tokenhealth.api_server.rate_limit import RateLimiter
    from tokenhealth.api_server.server import create_app
    from tokenhealth.config import Settings

    limiter = RateLimiter(max_requests=2, window_seconds=60, clock=fake_clock)
    return TestClient(create_app(Settings(), rate_limiter=limiter))


@pytest.fixture
def full_payload() -> dict:
    return copy.deepcopy(FULL_PAYLOAD)
