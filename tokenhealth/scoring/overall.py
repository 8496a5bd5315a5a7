"""
Overall aggregator: mean of the category scores that could be computed.

Unavailable categories (and anything non-numeric or negative) are excluded
from both numerator and denominator; they never count as 0. With nothing
available the overall score is 0.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping

from tokenhealth.scoring.models import Computed, Unavailable
from tokenhealth.scoring.normalize import round_half_up
from tokenhealth.tokenhealth_logging import get_logger

logger = get_logger(__name__)

CATEGORIES = ("security", "liquidity", "tokenomics", "community", "development")
NO_CATEGORIES_SCORE = 0


def _usable(score: Any) -> float | None:
    if isinstance(score, Computed):
        return float(score.value)
    if isinstance(score, Unavailable) or isinstance(score, bool):
        return None
    if isinstance(score, (int, float)) and math.isfinite(score) and score >= 0:
        return float(score)
    return None


def calculate_overall_score(scores: Mapping[str, Any] | Iterable[Any]) -> int:
    """
    Round(mean) of available category scores.

    Accepts a mapping of category -> score or any iterable of scores; items may
    be Computed / Unavailable or plain numbers (None, NaN and negatives are
    treated as unavailable). Order does not matter.
    """
    values = scores.values() if isinstance(scores, Mapping) else scores
    usable = [v for v in (_usable(s) for s in values) if v is not None]
    if not usable:
        logger.debug("overall_score_no_categories")
        return NO_CATEGORIES_SCORE
    result = round_half_up(sum(usable) / len(usable))
    logger.debug("overall_score_result", score=result, categories_used=len(usable))
    return result
