"""
Tests for run_token_scan: payload bag -> ScanResult.
"""

from __future__ import annotations

from tokenhealth.analytics.scan_pipeline import ScanResult, run_token_scan
from tokenhealth.scoring import (
    CommunitySignals,
    Computed,
    ConfidenceEvidence,
    DevelopmentSignals,
    MarketSignals,
    SecuritySignals,
    TokenomicsSignals,
    Unavailable,
    calculate_community_score,
    calculate_confidence_score,
    calculate_development_score,
    calculate_liquidity_score,
    calculate_overall_score,
    calculate_security_score,
    calculate_tokenomics_score,
    parse_liquidity_lock_days,
)


def test_full_payload(fixed_now, full_payload):
    result = run_token_scan(full_payload, now=fixed_now)
    assert isinstance(result, ScanResult)
    assert result.security == Computed(100)
    assert result.liquidity == Computed(75)
    assert result.tokenomics == Computed(75)
    assert result.community == Computed(48)
    assert result.development == Computed(100)
    # (100 + 75 + 75 + 48 + 100) / 5 = 79.6
    assert result.score_total == 80
    assert result.confidence == 100
    assert result.liquidity_locked_days == 180
    assert result.distribution_score == "Good"
    assert result.token_address == "0xabc"


def test_empty_payload_degrades(fixed_now):
    """Nothing known: community base 20 and no-repo 25 are the only scores."""
    result = run_token_scan({}, now=fixed_now)
    assert isinstance(result.security, Unavailable)
    assert isinstance(result.liquidity, Unavailable)
    assert isinstance(result.tokenomics, Unavailable)
    assert result.community == Computed(20)
    assert result.development == Computed(25)
    assert result.score_total == 23
    assert result.confidence == 0
    assert result.liquidity_locked_days == 0
    assert result.distribution_score == "Unknown"


def test_to_dict_collapses_unavailable(fixed_now):
    out = run_token_scan({}, now=fixed_now).to_dict()
    assert "token_address" not in out
    assert out["security"] == {"score": 0, "available": False}
    assert out["community"] == {"score": 20, "available": True}
    assert out["score_total"] == 23
    assert set(out) == {
        "security",
        "liquidity",
        "tokenomics",
        "community",
        "development",
        "score_total",
        "confidence",
        "liquidity_locked_days",
        "distribution_score",
    }


def test_unavailable_category_does_not_drag_total(fixed_now, full_payload):
    """Missing security data is excluded from the mean, not counted as 0."""
    payload = {key: value for key, value in full_payload.items() if key not in ("securityData", "webacyData", "goplusData")}
    result = run_token_scan(payload, now=fixed_now)
    assert isinstance(result.security, Unavailable)
    # (75 + 75 + 48 + 100) / 4 = 74.5
    assert result.score_total == 75
    assert result.liquidity_locked_days == 0


def test_goplus_overrides_primary_security(fixed_now):
    """GoPlus honeypot flag beats the primary record's clean verdict."""
    payload = {
        "securityData": {"ownership_renounced": True, "honeypot_detected": False},
        "goplusData": {"is_honeypot": "1"},
    }
    assert run_token_scan(payload, now=fixed_now).security == Computed(25)


def test_raw_provider_sections(fixed_now):
    """Raw GoPlus, Webacy, GitHub and CoinGecko shapes are adapted per section."""
    payload = {
        "goplus_data": {
            "owner_address": "0x1234",
            "is_mintable": "1",
            "is_honeypot": "0",
            "trust_list": "1",
            "lp_holders": [{"is_locked": 1}],
        },
        "webacy_data": {"overallRisk": 55},
        "price_data": {
            "market_data": {
                "total_volume": {"usd": 50_000},
                "market_cap": {"usd": 5_000_000},
                "price_change_percentage_24h": 30,
            }
        },
        "github_data": {
            "stargazers_count": 5,
            "forks_count": 0,
            "pushed_at": "2025-12-01T00:00:00Z",
            "commits": [{"sha": "a"}, {"sha": "b"}],
            "issues": [{"state": "closed"}, {"state": "open"}],
        },
    }
    result = run_token_scan(payload, now=fixed_now)
    # Webacy 55: renounced False, mint True, honeypot False, freeze False, medium.
    # GoPlus: renounced False, mint True, honeypot False, audit verified.
    # 20 + 15 + 10 + 5 = 50
    assert result.security == Computed(50)
    # 30 + 5 + 5
    assert result.liquidity == Computed(40)
    # Tokenomics from market only: 40 - 5
    assert result.tokenomics == Computed(35)
    # 20 + commits 10 + ratio 0.5 -> 15 + stars 5 + 45 days -> 8
    assert result.development == Computed(58)
    # Locked per lp_holders but no lock description: 0 days
    assert result.liquidity_locked_days == 0


def test_non_mapping_sections_ignored(fixed_now):
    payload = {"securityData": "oops", "priceData": [1, 2], "githubData": 7, "twitterFollowers": "lots"}
    result = run_token_scan(payload, now=fixed_now)
    assert isinstance(result.security, Unavailable)
    assert isinstance(result.liquidity, Unavailable)
    assert result.development == Computed(25)
    assert result.community == Computed(20)


def test_github_counts_instead_of_lists(fixed_now):
    """A commit count and a non-list issues value are scored, not raised on."""
    payload = {
        "githubData": {
            "stargazers_count": 50,
            "pushed_at": "2026-01-14T12:00:00Z",
            "commits": 12,
            "issues": 7,
        }
    }
    result = run_token_scan(payload, now=fixed_now)
    # 20 + commits 30 + no issues 15 + stars 10 + fresh 15
    assert result.development == Computed(90)


def test_same_input_same_output(fixed_now, full_payload):
    """Two scans of identical input with a pinned now are identical."""
    first = run_token_scan(full_payload, now=fixed_now)
    second = run_token_scan(full_payload, now=fixed_now)
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_scorers_repeatable(fixed_now):
    """Every scorer returns the same result for the same input."""
    security = SecuritySignals(ownership_renounced=True, can_mint=False, webacy_severity="Medium")
    market = MarketSignals(volume_24h_usd=250_000, market_cap_usd=30_000_000, price_change_24h_pct=12.0)
    tokenomics = TokenomicsSignals(total_supply="2e12", verified_contract=True)
    community = CommunitySignals(twitter_followers=1500, telegram_members=20_000)
    development = DevelopmentSignals(commits_30d=7, total_issues=4, closed_issues=3, stars=12, last_push="2026-01-01T00:00:00Z")
    evidence = ConfidenceEvidence(has_total_supply=True, has_current_price=True)
    calls = [
        lambda: calculate_security_score(security),
        lambda: calculate_liquidity_score(market),
        lambda: calculate_tokenomics_score(tokenomics, market),
        lambda: calculate_community_score(community),
        lambda: calculate_development_score(development, now=fixed_now),
        lambda: calculate_overall_score([Computed(40), Unavailable(), Computed(71)]),
        lambda: calculate_confidence_score(evidence),
        lambda: parse_liquidity_lock_days(True, "2 years"),
    ]
    for call in calls:
        assert call() == call()
