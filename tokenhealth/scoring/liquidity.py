"""
Liquidity scorer: base 30 plus one volume tier and one market-cap tier.
"""

from __future__ import annotations

from tokenhealth.scoring.models import Computed, MarketSignals, Score, Unavailable
from tokenhealth.scoring.normalize import clamp_score, coerce_number
from tokenhealth.tokenhealth_logging import get_logger

logger = get_logger(__name__)

BASE_SCORE = 30

# (exclusive lower bound in USD, points); first match wins, highest first.
VOLUME_TIERS = (
    (1_000_000, 25),
    (100_000, 15),
    (10_000, 5),
)
MARKET_CAP_TIERS = (
    (100_000_000, 20),
    (10_000_000, 10),
    (1_000_000, 5),
)


def tier_points(value: float | None, tiers: tuple[tuple[float, int], ...]) -> int:
    """Points for the highest tier whose bound value strictly exceeds; 0 if none or missing."""
    if value is None:
        return 0
    for bound, points in tiers:
        if value > bound:
            return points
    return 0


def calculate_liquidity_score(market: MarketSignals | None) -> Score:
    """Score 24h volume and market cap. No market record at all is Unavailable."""
    if market is None:
        logger.debug("liquidity_score_unavailable")
        return Unavailable("no_market_data")

    volume = coerce_number(market.volume_24h_usd)
    market_cap = coerce_number(market.market_cap_usd)
    score = BASE_SCORE + tier_points(volume, VOLUME_TIERS) + tier_points(market_cap, MARKET_CAP_TIERS)

    result = clamp_score(score)
    logger.debug("liquidity_score_result", score=result, volume_24h_usd=volume, market_cap_usd=market_cap)
    return Computed(result)
