"""
Scan pipeline: provider payloads -> category scores, overall, confidence.

Single entrypoint for the API and CLI. Takes the payload bag the
orchestration layer assembles from upstream APIs (camelCase or snake_case
section names), adapts each section to signals, runs every scorer and returns
a ScanResult. Raw provider shapes (GoPlus, Webacy, GitHub, CoinGecko) and
already-normalized records are both accepted per section.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from tokenhealth.analytics.providers import (
    development_signals_from_github,
    get_distribution_score_text,
    market_signals_from_price,
    security_signals_from_goplus,
    security_signals_from_webacy,
)
from tokenhealth.scoring.community import calculate_community_score
from tokenhealth.scoring.confidence import ConfidenceEvidence, calculate_confidence_score
from tokenhealth.scoring.development import calculate_development_score
from tokenhealth.scoring.liquidity import calculate_liquidity_score
from tokenhealth.scoring.lock_parser import parse_liquidity_lock_days
from tokenhealth.scoring.models import (
    CommunitySignals,
    DevelopmentSignals,
    Score,
    SecuritySignals,
    TokenomicsSignals,
)
from tokenhealth.scoring.overall import calculate_overall_score
from tokenhealth.scoring.security import calculate_security_score, merge_security_signals
from tokenhealth.scoring.tokenomics import calculate_tokenomics_score
from tokenhealth.tokenhealth_logging import bind_token, get_logger

logger = get_logger(__name__)

# Keys that mark a section as a raw provider response rather than a normalized record.
_GOPLUS_RAW_KEYS = ("is_mintable", "is_honeypot", "owner_address", "trust_list", "can_take_back_ownership")
_WEBACY_RAW_KEYS = ("riskScore", "overallRisk")
_GITHUB_RAW_KEYS = ("stargazers_count", "pushed_at", "forks_count")


def _section(payload: Mapping[str, Any], camel: str, snake: str) -> Mapping[str, Any] | None:
    value = payload.get(camel)
    if value is None:
        value = payload.get(snake)
    return value if isinstance(value, Mapping) else None


def _is_raw(section: Mapping[str, Any] | None, keys: tuple[str, ...]) -> bool:
    return section is not None and any(k in section for k in keys)


def _security_signals(payload: Mapping[str, Any]) -> SecuritySignals | None:
    """
    Merge security sources, lowest precedence first: Webacy, the primary
    security record, then GoPlus.
    """
    webacy_data = _section(payload, "webacyData", "webacy_data")
    goplus_data = _section(payload, "goplusData", "goplus_data")
    primary_data = _section(payload, "securityData", "security_data")

    webacy = (
        security_signals_from_webacy(webacy_data)
        if _is_raw(webacy_data, _WEBACY_RAW_KEYS)
        else SecuritySignals.from_dict(webacy_data)
    )
    goplus = (
        security_signals_from_goplus(goplus_data)
        if _is_raw(goplus_data, _GOPLUS_RAW_KEYS)
        else SecuritySignals.from_dict(goplus_data)
    )
    primary = SecuritySignals.from_dict(primary_data)
    return merge_security_signals(merge_security_signals(webacy, primary), goplus)


def _development_signals(payload: Mapping[str, Any]) -> DevelopmentSignals | None:
    github = _section(payload, "githubData", "github_data")
    if _is_raw(github, _GITHUB_RAW_KEYS):
        return development_signals_from_github(github, github.get("commits"), github.get("issues"))
    return DevelopmentSignals.from_dict(github)


@dataclass(frozen=True)
class ScanResult:
    """Scores for one token scan. Category scores keep Unavailable until to_dict()."""

    security: Score
    liquidity: Score
    tokenomics: Score
    community: Score
    development: Score
    score_total: int
    confidence: int
    liquidity_locked_days: int
    distribution_score: str
    token_address: str | None = None

    def category_scores(self) -> dict[str, Score]:
        return {
            "security": self.security,
            "liquidity": self.liquidity,
            "tokenomics": self.tokenomics,
            "community": self.community,
            "development": self.development,
        }

    def to_dict(self) -> dict[str, Any]:
        """Outbound record; Unavailable categories become score 0 with available=False."""
        out: dict[str, Any] = {}
        if self.token_address:
            out["token_address"] = self.token_address
        for name, score in self.category_scores().items():
            out[name] = {"score": score.value_or(0), "available": score.available}
        out["score_total"] = self.score_total
        out["confidence"] = self.confidence
        out["liquidity_locked_days"] = self.liquidity_locked_days
        out["distribution_score"] = self.distribution_score
        return out


def run_token_scan(payload: Mapping[str, Any], *, now: datetime | None = None) -> ScanResult:
    """
    Score one token from its provider payload bag.

    Never raises on missing or malformed sections; each scorer degrades to its
    documented fallback. `now` pins the development freshness calculation.
    """
    token_address = payload.get("token_address") or payload.get("tokenAddress")
    token_address = str(token_address).strip() if token_address else None
    log = bind_token(token_address, __name__) if token_address else logger
    log.info("token_scan_start", sections=sorted(k for k, v in payload.items() if isinstance(v, Mapping)))

    token_data = _section(payload, "tokenData", "token_data")
    price_data = _section(payload, "priceData", "price_data")
    owners_data = _section(payload, "ownersData", "owners_data")

    security_signals = _security_signals(payload)
    market = market_signals_from_price(price_data)
    tokenomics = TokenomicsSignals.from_dict(token_data)
    community = CommunitySignals.from_dict(payload)
    development = _development_signals(payload)

    security = calculate_security_score(security_signals)
    liquidity = calculate_liquidity_score(market)
    tokenomics_score = calculate_tokenomics_score(tokenomics, market)
    community_score = calculate_community_score(community)
    development_score = calculate_development_score(development, now=now)

    score_total = calculate_overall_score(
        (security, liquidity, tokenomics_score, community_score, development_score)
    )
    confidence = calculate_confidence_score(
        ConfidenceEvidence.from_payloads(
            stats=_section(payload, "statsData", "stats_data"),
            pairs=_section(payload, "pairsData", "pairs_data"),
            owners=owners_data,
            metadata=token_data,
            price=price_data,
        )
    )
    locked_days = (
        parse_liquidity_lock_days(security_signals.is_liquidity_locked, security_signals.liquidity_lock_info)
        if security_signals is not None
        else 0
    )
    concentration = owners_data.get("concentration_risk") if owners_data is not None else None

    result = ScanResult(
        security=security,
        liquidity=liquidity,
        tokenomics=tokenomics_score,
        community=community_score,
        development=development_score,
        score_total=score_total,
        confidence=confidence,
        liquidity_locked_days=locked_days,
        distribution_score=get_distribution_score_text(concentration if isinstance(concentration, str) else None),
        token_address=token_address,
    )
    log.info(
        "token_scan_done",
        score_total=score_total,
        confidence=confidence,
        unavailable=[name for name, s in result.category_scores().items() if not s.available],
    )
    return result
