"""
Tests for the liquidity, tokenomics and community scorers.
"""

from __future__ import annotations

import pytest

from tokenhealth.scoring.community import calculate_community_score
from tokenhealth.scoring.liquidity import calculate_liquidity_score
from tokenhealth.scoring.models import (
    CommunitySignals,
    Computed,
    MarketSignals,
    TokenomicsSignals,
    Unavailable,
)
from tokenhealth.scoring.tokenomics import calculate_tokenomics_score

# --- Liquidity ---


def test_liquidity_missing_market_unavailable():
    """No market record -> Unavailable (0 at the boundary)."""
    score = calculate_liquidity_score(None)
    assert isinstance(score, Unavailable)
    assert score.value_or(0) == 0


def test_liquidity_empty_market_is_base():
    """Market record with no numbers -> base 30."""
    assert calculate_liquidity_score(MarketSignals()) == Computed(30)


@pytest.mark.parametrize(
    "volume,market_cap,expected",
    [
        (2_000_000, 200_000_000, 75),
        (1_000_000, 100_000_000, 55),  # bounds are exclusive
        (150_000, 20_000_000, 55),
        (50_000, 5_000_000, 40),
        (10_000, 1_000_000, 30),
        (-5, -100, 30),
    ],
)
def test_liquidity_tiers(volume, market_cap, expected):
    """Base 30 + one volume tier + one market-cap tier."""
    market = MarketSignals(volume_24h_usd=volume, market_cap_usd=market_cap)
    assert calculate_liquidity_score(market) == Computed(expected)


def test_liquidity_numeric_strings_and_junk():
    """Numeric strings count; junk reads as missing."""
    assert calculate_liquidity_score(MarketSignals(volume_24h_usd="2000000")) == Computed(55)
    assert calculate_liquidity_score(MarketSignals(volume_24h_usd="lots")) == Computed(30)


def test_liquidity_monotonic_in_volume():
    """Raising volume with market cap fixed never lowers the score."""
    volumes = [-1, 0, 5_000, 10_000, 10_001, 99_999, 100_001, 999_999, 1_000_001, 1e12]
    scores = [
        calculate_liquidity_score(MarketSignals(volume_24h_usd=v, market_cap_usd=50_000_000)).value
        for v in volumes
    ]
    assert scores == sorted(scores)


# --- Tokenomics ---


def test_tokenomics_nothing_unavailable():
    """Neither tokenomics nor market data -> Unavailable."""
    assert isinstance(calculate_tokenomics_score(None, None), Unavailable)


def test_tokenomics_empty_is_base():
    """Empty record -> base 40."""
    assert calculate_tokenomics_score(TokenomicsSignals()) == Computed(40)


def test_tokenomics_best_case():
    """Low supply +15, verified +10, stable price +10 -> 75."""
    signals = TokenomicsSignals(total_supply="500000000", verified_contract=True, price_change_24h_pct=2.0)
    assert calculate_tokenomics_score(signals) == Computed(75)


def test_tokenomics_penalties():
    """Huge supply -10, spam -20, volatile -5 -> 5."""
    signals = TokenomicsSignals(total_supply=2e12, possible_spam=True, price_change_24h_pct=-30.0)
    assert calculate_tokenomics_score(signals) == Computed(5)


@pytest.mark.parametrize("supply", [5e9, "abc", 0, "0", None, 1e12])
def test_tokenomics_supply_without_adjustment(supply):
    """Mid-range, malformed, zero and missing supply add nothing."""
    assert calculate_tokenomics_score(TokenomicsSignals(total_supply=supply)) == Computed(40)


@pytest.mark.parametrize("change,expected", [(4.99, 50), (-4.99, 50), (5, 40), (10, 40), (20, 40), (20.01, 35), (-25, 35)])
def test_tokenomics_volatility_bands(change, expected):
    """< 5% +10; > 20% -5; 5-20% is a neutral zone."""
    assert calculate_tokenomics_score(TokenomicsSignals(price_change_24h_pct=change)) == Computed(expected)


def test_tokenomics_price_change_from_market():
    """Market record supplies the price change when tokenomics has none."""
    assert calculate_tokenomics_score(None, MarketSignals(price_change_24h_pct=1.0)) == Computed(50)
    assert calculate_tokenomics_score(TokenomicsSignals(), MarketSignals(price_change_24h_pct=25)) == Computed(35)


def test_tokenomics_own_price_change_wins():
    """Tokenomics' own price change is used before the market's."""
    signals = TokenomicsSignals(price_change_24h_pct=1.0)
    assert calculate_tokenomics_score(signals, MarketSignals(price_change_24h_pct=50)) == Computed(50)


# --- Community ---


def test_community_single_platform_example():
    """Discord 5000 only: 20 + 10 + single-platform 5 = 35."""
    signals = CommunitySignals(twitter_followers=0, discord_members=5000, telegram_members=0)
    assert calculate_community_score(signals) == Computed(35)


def test_community_no_presence_is_base():
    """Zero everywhere (or no record) -> base 20, still computed."""
    assert calculate_community_score(CommunitySignals()) == Computed(20)
    assert calculate_community_score(None) == Computed(20)


def test_community_max_clamps_to_100():
    """25 + 20 + 15 + 20 + base 20 = 100."""
    signals = CommunitySignals(twitter_followers=250_000, discord_members=60_000, telegram_members=75_000)
    assert calculate_community_score(signals) == Computed(100)


def test_community_two_platforms():
    """Twitter 1000 (+10), Telegram 999 (+3), two platforms (+10) -> 43."""
    signals = CommunitySignals(twitter_followers=1000, telegram_members=999)
    assert calculate_community_score(signals) == Computed(43)


@pytest.mark.parametrize(
    "followers,expected",
    [(1, 30), (999, 30), (1_000, 35), (9_999, 35), (10_000, 40), (49_999, 40), (50_000, 45), (99_999, 45), (100_000, 50)],
)
def test_community_twitter_tiers(followers, expected):
    """Inclusive thresholds; single-platform bonus +5 on top of base 20."""
    assert calculate_community_score(CommunitySignals(twitter_followers=followers)) == Computed(expected)


def test_community_negative_counts_not_presence():
    """Negative counts do not count as a platform."""
    assert calculate_community_score(CommunitySignals(twitter_followers=-10)) == Computed(20)


def test_community_from_dict_zero_defaults():
    """Missing / null / junk counts read as 0."""
    signals = CommunitySignals.from_dict({"twitterFollowers": None, "discord_members": "1200", "telegramMembers": "x"})
    assert signals == CommunitySignals(twitter_followers=0, discord_members=1200, telegram_members=0)
