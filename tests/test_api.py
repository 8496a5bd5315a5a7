"""
Tests for the scoring API (FastAPI TestClient).
"""

from __future__ import annotations

NOW = "2026-01-15T12:00:00Z"


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_score_full_payload(client, full_payload):
    r = client.post("/api/score", params={"now": NOW}, json=full_payload)
    assert r.status_code == 200
    body = r.json()
    assert body["token_address"] == "0xabc"
    assert body["security"] == {"score": 100, "available": True}
    assert body["community"] == {"score": 48, "available": True}
    assert body["score_total"] == 80
    assert body["confidence"] == 100
    assert body["liquidity_locked_days"] == 180
    assert body["distribution_score"] == "Good"


def test_score_empty_payload(client):
    """Missing categories come back as score 0, available false; no token_address key."""
    r = client.post("/api/score", json={})
    assert r.status_code == 200
    body = r.json()
    assert "token_address" not in body
    assert body["security"] == {"score": 0, "available": False}
    assert body["development"] == {"score": 25, "available": True}
    assert body["score_total"] == 23


def test_score_rejects_non_object(client):
    r = client.post("/api/score", json=[1, 2, 3])
    assert r.status_code == 400
    assert "JSON object" in r.json()["detail"]


def test_score_rejects_bad_now(client):
    r = client.post("/api/score", params={"now": "yesterday"}, json={})
    assert r.status_code == 400
    assert r.json()["detail"] == "now must be an ISO-8601 timestamp"


def test_rate_limit_headers_and_429(limited_client, fake_clock):
    first = limited_client.post("/api/score", json={})
    assert first.status_code == 200
    assert first.headers["X-RateLimit-Limit"] == "2"
    assert first.headers["X-RateLimit-Remaining"] == "1"

    second = limited_client.post("/api/score", json={})
    assert second.headers["X-RateLimit-Remaining"] == "0"

    blocked = limited_client.post("/api/score", json={})
    assert blocked.status_code == 429
    assert blocked.json() == {"detail": "Rate limit exceeded"}
    assert blocked.headers["Retry-After"] == "30"

    fake_clock.advance(30)
    assert limited_client.post("/api/score", json={}).status_code == 200


def test_health_not_rate_limited(limited_client):
    for _ in range(5):
        assert limited_client.get("/health").status_code == 200


def test_score_github_counts_not_lists(client):
    """Non-list commits / issues in a raw GitHub section still score."""
    body = {"githubData": {"stargazers_count": 50, "pushed_at": "2026-01-14T12:00:00Z", "commits": 12, "issues": 7}}
    r = client.post("/api/score", params={"now": NOW}, json=body)
    assert r.status_code == 200
    assert r.json()["development"] == {"score": 90, "available": True}
