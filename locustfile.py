"""
Load test for POST /api/score.

    locust -f locustfile.py --host http://localhost:8000

Set RATE_LIMIT_ENABLED=0 on the server, or every user hits 429 after the first window.
"""

import random

from locust import HttpUser, between, task

PAYLOADS = [
    {
        "token_address": "0x6982508145454ce325ddbe47a25d4ec3d2311933",
        "securityData": {"ownership_renounced": True, "can_mint": False, "honeypot_detected": False},
        "priceData": {"trading_volume_24h_usd": 2_500_000, "market_cap_usd": 450_000_000, "price_change_24h": 3.2},
        "tokenData": {"total_supply": "420690000000000", "verified_contract": True, "possible_spam": False},
        "twitterFollowers": 120_000,
        "telegramMembers": 30_000,
    },
    {
        "token_address": "0x95ad61b0a150d79219dcf64e1e6cc01f0b64c4ce",
        "webacyData": {"riskScore": 35},
        "priceData": {"trading_volume_24h_usd": 80_000, "market_cap_usd": 4_000_000, "price_change_24h": -27.5},
        "githubData": {"commits_30d": 3, "total_issues": 10, "closed_issues": 7, "stars": 40, "forks": 6},
        "discordMembers": 1200,
    },
    {"token_address": "0xdeadbeef00000000000000000000000000000000"},
]


class TokenHealthUser(HttpUser):
    wait_time = between(1, 2)

    @task
    def score_token(self):
        self.client.post("/api/score", json=random.choice(PAYLOADS))

    @task
    def health(self):
        self.client.get("/health")
