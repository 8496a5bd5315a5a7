"""
Community scorer: follower tiers per platform plus a multi-platform bonus.

Base 20. Each platform contributes its highest matching tier (thresholds are
inclusive, the last tier is "any presence"). Counts are zero-defaulted, so this
scorer always produces a score.
"""

from __future__ import annotations

from tokenhealth.scoring.models import CommunitySignals, Computed, Score
from tokenhealth.scoring.normalize import clamp_score
from tokenhealth.tokenhealth_logging import get_logger

logger = get_logger(__name__)

BASE_SCORE = 20

# (inclusive lower bound, points); a bound of 1 encodes "> 0".
TWITTER_TIERS = ((100_000, 25), (50_000, 20), (10_000, 15), (1_000, 10), (1, 5))
DISCORD_TIERS = ((50_000, 20), (10_000, 15), (5_000, 10), (1_000, 8), (1, 5))
TELEGRAM_TIERS = ((50_000, 15), (10_000, 12), (5_000, 8), (1_000, 6), (1, 3))

# Number of platforms with a nonzero audience -> bonus.
MULTI_PLATFORM_BONUS = {3: 20, 2: 10, 1: 5, 0: 0}


def _tier(count: int, tiers: tuple[tuple[int, int], ...]) -> int:
    for bound, points in tiers:
        if count >= bound:
            return points
    return 0


def calculate_community_score(signals: CommunitySignals | None) -> Score:
    """Score social reach across Twitter, Discord and Telegram."""
    signals = signals or CommunitySignals()
    twitter = signals.twitter_followers or 0
    discord = signals.discord_members or 0
    telegram = signals.telegram_members or 0

    platforms = sum(1 for count in (twitter, discord, telegram) if count > 0)
    score = (
        BASE_SCORE
        + _tier(twitter, TWITTER_TIERS)
        + _tier(discord, DISCORD_TIERS)
        + _tier(telegram, TELEGRAM_TIERS)
        + MULTI_PLATFORM_BONUS[platforms]
    )

    result = clamp_score(score)
    logger.debug("community_score_result", score=result, platforms=platforms)
    return Computed(result)
