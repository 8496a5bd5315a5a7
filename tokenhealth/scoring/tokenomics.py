"""
Tokenomics scorer: supply size, contract verification, spam flag and 24h volatility.

Base 40. Unlike the other scorers, a very large supply and a spam flag are
penalties, not just missing bonuses. Volatility between the stable and
volatile bands (5% to 20%) gets no adjustment.
"""

from __future__ import annotations

from tokenhealth.scoring.models import Computed, MarketSignals, Score, TokenomicsSignals, Unavailable
from tokenhealth.scoring.normalize import clamp_score, coerce_number, get_valid_supply_value
from tokenhealth.tokenhealth_logging import get_logger

logger = get_logger(__name__)

BASE_SCORE = 40

LOW_SUPPLY_THRESHOLD = 1e9
LOW_SUPPLY_POINTS = 15
HIGH_SUPPLY_THRESHOLD = 1e12
HIGH_SUPPLY_PENALTY = 10

VERIFIED_CONTRACT_POINTS = 10
POSSIBLE_SPAM_PENALTY = 20

STABLE_CHANGE_PCT = 5
STABLE_POINTS = 10
VOLATILE_CHANGE_PCT = 20
VOLATILE_PENALTY = 5


def _supply_adjustment(total_supply: float | str | None) -> int:
    supply = get_valid_supply_value(total_supply)
    if supply is None:
        return 0
    if supply < LOW_SUPPLY_THRESHOLD:
        return LOW_SUPPLY_POINTS
    if supply > HIGH_SUPPLY_THRESHOLD:
        return -HIGH_SUPPLY_PENALTY
    return 0


def _volatility_adjustment(price_change_pct: float | None) -> int:
    change = coerce_number(price_change_pct)
    if change is None:
        return 0
    change = abs(change)
    if change < STABLE_CHANGE_PCT:
        return STABLE_POINTS
    if change > VOLATILE_CHANGE_PCT:
        return -VOLATILE_PENALTY
    return 0


def calculate_tokenomics_score(
    tokenomics: TokenomicsSignals | None,
    market: MarketSignals | None = None,
) -> Score:
    """
    Score tokenomics. The 24h price change comes from the tokenomics record,
    falling back to the market record. Unavailable only when both are missing.
    """
    if tokenomics is None and market is None:
        logger.debug("tokenomics_score_unavailable")
        return Unavailable("no_tokenomics_data")

    price_change = tokenomics.price_change_24h_pct if tokenomics is not None else None
    if price_change is None and market is not None:
        price_change = market.price_change_24h_pct

    score = BASE_SCORE
    if tokenomics is not None:
        score += _supply_adjustment(tokenomics.total_supply)
        if tokenomics.verified_contract is True:
            score += VERIFIED_CONTRACT_POINTS
        if tokenomics.possible_spam is True:
            score -= POSSIBLE_SPAM_PENALTY
    score += _volatility_adjustment(price_change)

    result = clamp_score(score)
    logger.debug(
        "tokenomics_score_result",
        score=result,
        total_supply=tokenomics.total_supply if tokenomics is not None else None,
        price_change_24h_pct=price_change,
    )
    return Computed(result)
