"""
Scoring core: pure, deterministic category scorers.

Folds partial provider signals into five bounded category scores, one overall
score and an independent confidence score. No I/O and no shared state; safe to
call from any number of threads.
"""

from tokenhealth.scoring.models import (
    CommunitySignals,
    Computed,
    DevelopmentSignals,
    MarketSignals,
    Score,
    SecuritySignals,
    TokenomicsSignals,
    Unavailable,
)
from tokenhealth.scoring.security import calculate_security_score, merge_security_signals
from tokenhealth.scoring.liquidity import calculate_liquidity_score
from tokenhealth.scoring.tokenomics import calculate_tokenomics_score
from tokenhealth.scoring.community import calculate_community_score
from tokenhealth.scoring.development import (
    DEFAULT_DEVELOPMENT_SCORE_NO_REPO,
    calculate_development_score,
)
from tokenhealth.scoring.overall import CATEGORIES, calculate_overall_score
from tokenhealth.scoring.confidence import ConfidenceEvidence, calculate_confidence_score
from tokenhealth.scoring.lock_parser import (
    NOMINAL_LOCK_DAYS_UNSPECIFIED,
    parse_liquidity_lock_days,
)

__all__ = [
    "CommunitySignals",
    "Computed",
    "DevelopmentSignals",
    "MarketSignals",
    "Score",
    "SecuritySignals",
    "TokenomicsSignals",
    "Unavailable",
    "calculate_security_score",
    "merge_security_signals",
    "calculate_liquidity_score",
    "calculate_tokenomics_score",
    "calculate_community_score",
    "DEFAULT_DEVELOPMENT_SCORE_NO_REPO",
    "calculate_development_score",
    "CATEGORIES",
    "calculate_overall_score",
    "ConfidenceEvidence",
    "calculate_confidence_score",
    "NOMINAL_LOCK_DAYS_UNSPECIFIED",
    "parse_liquidity_lock_days",
]
