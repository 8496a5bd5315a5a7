"""
Provider adapters: raw third-party JSON -> scoring signals.

Each adapter takes the decoded response body of one upstream API and returns
the signal record the scorers consume. Adapters are forgiving: a missing or
malformed field becomes None, and a missing payload becomes None (or the
zero-defaulted record for community data). Nothing here does I/O.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from tokenhealth.scoring.models import DevelopmentSignals, MarketSignals, SecuritySignals
from tokenhealth.scoring.normalize import coerce_number
from tokenhealth.tokenhealth_logging import get_logger

logger = get_logger(__name__)

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
GOPLUS_TRUE = "1"

AUDIT_VERIFIED = "verified"
AUDIT_UNVERIFIED = "unverified"
AUDIT_UNKNOWN = "unknown"

# Webacy overall risk (0-100) thresholds for derived signals.
WEBACY_HIGH_RISK = 70
WEBACY_MEDIUM_RISK = 40
WEBACY_RENOUNCED_BELOW = 30
WEBACY_MINTABLE_ABOVE = 50
WEBACY_FREEZE_ABOVE = 60
WEBACY_HONEYPOT_ABOVE = 70

DISTRIBUTION_TEXT = {
    "Low": "Excellent",
    "Medium": "Good",
    "High": "Fair",
    "Very High": "Poor",
}
DISTRIBUTION_UNKNOWN = "Unknown"


def _is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _goplus_flag(token_data: Mapping[str, Any], key: str) -> bool | None:
    """GoPlus encodes booleans as "1"/"0" strings; absent -> None."""
    if key not in token_data or token_data[key] is None:
        return None
    return str(token_data[key]).strip() == GOPLUS_TRUE


def security_signals_from_goplus(token_data: Mapping[str, Any] | None) -> SecuritySignals | None:
    """
    Map one GoPlus token-security record (the value under result[<address>]).

    owner_address equal to the zero address means ownership is renounced;
    trust_list "1" means a verified audit. Liquidity lock is read from
    lp_holders (any locked holder) unless the record carries it directly.
    """
    if not isinstance(token_data, Mapping):
        return None

    owner = str(token_data.get("owner_address") or "").strip().lower()
    ownership_renounced = (owner == ZERO_ADDRESS) if owner else None

    if "trust_list" in token_data and token_data["trust_list"] is not None:
        audit_status = AUDIT_VERIFIED if str(token_data["trust_list"]).strip() == GOPLUS_TRUE else AUDIT_UNVERIFIED
    else:
        audit_status = AUDIT_UNKNOWN

    is_locked = token_data.get("is_liquidity_locked")
    if not isinstance(is_locked, bool):
        holders = token_data.get("lp_holders")
        if _is_list(holders) and holders:
            is_locked = any(
                isinstance(h, Mapping) and str(h.get("is_locked", "")).strip() == GOPLUS_TRUE for h in holders
            )
        else:
            is_locked = None
    lock_info = token_data.get("liquidity_lock_info")

    return SecuritySignals(
        ownership_renounced=ownership_renounced,
        can_mint=_goplus_flag(token_data, "is_mintable"),
        honeypot_detected=_goplus_flag(token_data, "is_honeypot"),
        freeze_authority=_goplus_flag(token_data, "can_take_back_ownership"),
        audit_status=audit_status,
        is_liquidity_locked=is_locked,
        liquidity_lock_info=lock_info if isinstance(lock_info, str) else None,
    )


def security_signals_from_webacy(data: Mapping[str, Any] | None) -> SecuritySignals | None:
    """
    Map a Webacy token-risk response.

    With an overall risk score, severity is the explicit `severity` or derived
    from the score (>= 70 high, >= 40 medium, else low), and the on-chain flags
    are conservative guesses from the same score. Without one (legacy format)
    only severity "unknown" is known.
    """
    if not isinstance(data, Mapping):
        return None

    risk = coerce_number(data.get("riskScore"))
    if risk is None:
        risk = coerce_number(data.get("overallRisk"))
    if risk is None:
        logger.debug("webacy_legacy_format", keys=sorted(data.keys())[:10])
        return SecuritySignals(webacy_severity=AUDIT_UNKNOWN)

    severity = data.get("severity")
    if not isinstance(severity, str) or not severity.strip():
        if risk >= WEBACY_HIGH_RISK:
            severity = "high"
        elif risk >= WEBACY_MEDIUM_RISK:
            severity = "medium"
        else:
            severity = "low"

    return SecuritySignals(
        ownership_renounced=risk < WEBACY_RENOUNCED_BELOW,
        can_mint=risk > WEBACY_MINTABLE_ABOVE,
        honeypot_detected=risk > WEBACY_HONEYPOT_ABOVE,
        freeze_authority=risk > WEBACY_FREEZE_ABOVE,
        webacy_severity=severity.strip(),
    )


def development_signals_from_github(
    repo: Mapping[str, Any] | None,
    commits: Sequence[Any] | None = None,
    issues: Sequence[Any] | None = None,
) -> DevelopmentSignals | None:
    """
    Map GitHub REST responses: the repository object, commits since 30 days
    ago, and issues (state=all). Pull requests in the issues list are skipped.
    A precomputed commit count is accepted in place of the commit list; any
    other non-list commits or issues value counts as none.
    No repository -> None (the development scorer's "no repo" case).
    """
    if not isinstance(repo, Mapping):
        return None

    open_issues = 0
    closed_issues = 0
    for issue in issues if _is_list(issues) else ():
        if not isinstance(issue, Mapping) or issue.get("pull_request"):
            continue
        state = issue.get("state")
        if state == "open":
            open_issues += 1
        elif state == "closed":
            closed_issues += 1

    pushed_at = repo.get("pushed_at")
    return DevelopmentSignals(
        commits_30d=len(commits) if _is_list(commits) else coerce_number(commits) or 0,
        total_issues=open_issues + closed_issues,
        open_issues=open_issues,
        closed_issues=closed_issues,
        stars=coerce_number(repo.get("stargazers_count")) or 0,
        forks=coerce_number(repo.get("forks_count")) or 0,
        last_push=pushed_at if isinstance(pushed_at, str) else None,
        is_archived=repo.get("archived") is True,
        is_fork=repo.get("fork") is True,
    )


def market_signals_from_price(price_data: Mapping[str, Any] | None) -> MarketSignals | None:
    """
    Map a price payload: either the flattened record (trading_volume_24h_usd,
    market_cap_usd, price_change_24h) or a CoinGecko coin response with a
    market_data block. A null price change stays None.
    """
    if not isinstance(price_data, Mapping):
        return None
    market_data = price_data.get("market_data")
    if isinstance(market_data, Mapping):

        def usd(key: str) -> float | None:
            block = market_data.get(key)
            return coerce_number(block.get("usd")) if isinstance(block, Mapping) else coerce_number(block)

        return MarketSignals(
            volume_24h_usd=usd("total_volume"),
            market_cap_usd=usd("market_cap"),
            price_change_24h_pct=coerce_number(market_data.get("price_change_percentage_24h")),
        )
    return MarketSignals.from_dict(price_data)


def get_distribution_score_text(concentration_risk: str | None) -> str:
    """Holder concentration risk -> display text (Low -> Excellent ... Very High -> Poor)."""
    if not concentration_risk:
        return DISTRIBUTION_UNKNOWN
    return DISTRIBUTION_TEXT.get(concentration_risk, DISTRIBUTION_UNKNOWN)
