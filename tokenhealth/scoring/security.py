"""
Security scorer: additive 0-100 score from audit signals.

Starts at 0; each positive piece of evidence adds a fixed weight. Missing
signals add nothing and are never penalized. A record with no scored signal at
all is Unavailable rather than 0.

When two sources report the same signal (a primary audit record and a
GoPlus-style secondary scan), merge_security_signals resolves them field by
field before scoring.
"""

from __future__ import annotations

from dataclasses import replace

from tokenhealth.scoring.models import (
    SECURITY_SCORED_FIELDS,
    Computed,
    Score,
    SecuritySignals,
    Unavailable,
)
from tokenhealth.scoring.normalize import clamp_score
from tokenhealth.tokenhealth_logging import get_logger

logger = get_logger(__name__)

OWNERSHIP_RENOUNCED_POINTS = 25
NO_MINT_POINTS = 20
NO_HONEYPOT_POINTS = 20
NO_FREEZE_AUTHORITY_POINTS = 15
AUDIT_VERIFIED_POINTS = 10

AUDIT_VERIFIED = "verified"
UNKNOWN_LABEL = "unknown"

# Third-party severity -> points; unlisted severities (high, unknown) add nothing.
SEVERITY_POINTS = {
    "low": 10,
    "medium": 5,
}

# Field-by-field precedence when both sources are present.
#   "secondary": secondary value wins when it is not None, else primary.
#   "primary":   primary value wins when it is not None, else secondary.
MERGE_PRECEDENCE = {
    "ownership_renounced": "secondary",
    "can_mint": "secondary",
    "honeypot_detected": "secondary",
    "freeze_authority": "secondary",
    "audit_status": "secondary",
    "webacy_severity": "primary",
    "is_liquidity_locked": "secondary",
    "liquidity_lock_info": "secondary",
}


def _is_known(value: object) -> bool:
    if value is None:
        return False
    return not (isinstance(value, str) and value.lower() == UNKNOWN_LABEL)


def merge_security_signals(
    primary: SecuritySignals | None,
    secondary: SecuritySignals | None,
) -> SecuritySignals | None:
    """
    Merge two security records by MERGE_PRECEDENCE.

    Either side may be None; returns None only when both are. A None or
    "unknown" value never overrides a known one. The secondary
    (GoPlus-style scan) overrides the primary for on-chain signals; the
    third-party severity stays with the primary source that produced it.
    """
    if primary is None:
        return secondary
    if secondary is None:
        return primary
    merged: dict[str, object] = {}
    for name, winner in MERGE_PRECEDENCE.items():
        first, second = (secondary, primary) if winner == "secondary" else (primary, secondary)
        value = getattr(first, name)
        merged[name] = value if _is_known(value) else getattr(second, name)
    return replace(primary, **merged)


def has_security_evidence(signals: SecuritySignals | None) -> bool:
    """True when at least one scored field is present; "unknown" labels are not evidence."""
    if signals is None:
        return False
    for name in SECURITY_SCORED_FIELDS:
        if _is_known(getattr(signals, name)):
            return True
    return False


def calculate_security_score(signals: SecuritySignals | None) -> Score:
    """
    Score security signals.

    +25 ownership renounced, +20 cannot mint, +20 no honeypot, +15 no freeze
    authority, +10 verified audit, +10 / +5 for Low / Medium third-party
    severity. Clamped to [0, 100].
    """
    if not has_security_evidence(signals):
        logger.debug("security_score_unavailable")
        return Unavailable("no_security_data")

    score = 0
    if signals.ownership_renounced is True:
        score += OWNERSHIP_RENOUNCED_POINTS
    if signals.can_mint is False:
        score += NO_MINT_POINTS
    if signals.honeypot_detected is False:
        score += NO_HONEYPOT_POINTS
    if signals.freeze_authority is False:
        score += NO_FREEZE_AUTHORITY_POINTS
    if (signals.audit_status or "").lower() == AUDIT_VERIFIED:
        score += AUDIT_VERIFIED_POINTS
    score += SEVERITY_POINTS.get((signals.webacy_severity or "").lower(), 0)

    result = clamp_score(score)
    logger.debug(
        "security_score_result",
        score=result,
        ownership_renounced=signals.ownership_renounced,
        can_mint=signals.can_mint,
        honeypot_detected=signals.honeypot_detected,
        webacy_severity=signals.webacy_severity,
    )
    return Computed(result)
