"""
Signal records and score types for the scoring core.

Signals are the raw, possibly-partial inputs one category scorer consumes.
Every field may be missing; None always means "no evidence", never "bad".
Construct directly or from the snake_case JSON records the orchestration
layer assembles (from_dict). from_dict never raises on junk values: anything
that is not the expected type is read as missing.

Scores are a small sum type: Computed(value) when a category could be scored,
Unavailable(reason) when its inputs were absent. Only the outbound boundary
(ScanResult.to_dict) collapses Unavailable to 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from tokenhealth.scoring.normalize import SCORE_MAX, SCORE_MIN, coerce_number


# -----------------------------------------------------------------------------
# Score sum type
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class Computed:
    """A category score that was computed; value in [0, 100]."""

    value: int

    def __post_init__(self) -> None:
        if not SCORE_MIN <= self.value <= SCORE_MAX:
            raise ValueError(f"score {self.value} outside [{SCORE_MIN}, {SCORE_MAX}]")

    @property
    def available(self) -> bool:
        return True

    def value_or(self, default: int = 0) -> int:
        return self.value


@dataclass(frozen=True)
class Unavailable:
    """A category whose inputs were entirely missing; distinct from a 0 score."""

    reason: str = "no_data"

    @property
    def available(self) -> bool:
        return False

    def value_or(self, default: int = 0) -> int:
        return default


Score = Computed | Unavailable


# -----------------------------------------------------------------------------
# Field readers (never raise)
# -----------------------------------------------------------------------------


def _bool(value: Any) -> bool | None:
    return value if isinstance(value, bool) else None


def _str(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    text = value.strip()
    return text or None


def _first(data: Mapping[str, Any], *keys: str) -> Any:
    """Return the first non-None value among keys."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


def _count(value: Any) -> int:
    number = coerce_number(value)
    return int(number) if number is not None else 0


# -----------------------------------------------------------------------------
# Signals
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class SecuritySignals:
    """On-chain security audit signals (GoPlus / Webacy style)."""

    ownership_renounced: bool | None = None
    can_mint: bool | None = None
    honeypot_detected: bool | None = None
    freeze_authority: bool | None = None
    audit_status: str | None = None
    webacy_severity: str | None = None
    # Not scored here; carried for the liquidity-lock parser.
    is_liquidity_locked: bool | None = None
    liquidity_lock_info: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> SecuritySignals | None:
        if not isinstance(data, Mapping):
            return None
        return cls(
            ownership_renounced=_bool(data.get("ownership_renounced")),
            can_mint=_bool(data.get("can_mint")),
            honeypot_detected=_bool(data.get("honeypot_detected")),
            freeze_authority=_bool(data.get("freeze_authority")),
            audit_status=_str(data.get("audit_status")),
            webacy_severity=_str(data.get("webacy_severity")),
            is_liquidity_locked=_bool(data.get("is_liquidity_locked")),
            liquidity_lock_info=_str(data.get("liquidity_lock_info")),
        )


# Fields that feed the security score; used for "any evidence at all".
SECURITY_SCORED_FIELDS = (
    "ownership_renounced",
    "can_mint",
    "honeypot_detected",
    "freeze_authority",
    "audit_status",
    "webacy_severity",
)


@dataclass(frozen=True)
class MarketSignals:
    """Market data from price / market aggregators."""

    volume_24h_usd: float | None = None
    market_cap_usd: float | None = None
    price_change_24h_pct: float | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> MarketSignals | None:
        if not isinstance(data, Mapping):
            return None
        return cls(
            volume_24h_usd=coerce_number(_first(data, "trading_volume_24h_usd", "volume_24h_usd")),
            market_cap_usd=coerce_number(data.get("market_cap_usd")),
            price_change_24h_pct=coerce_number(_first(data, "price_change_24h", "price_change_24h_pct")),
        )


@dataclass(frozen=True)
class TokenomicsSignals:
    """Supply and contract metadata (Moralis style)."""

    total_supply: float | str | None = None
    verified_contract: bool | None = None
    possible_spam: bool | None = None
    price_change_24h_pct: float | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> TokenomicsSignals | None:
        if not isinstance(data, Mapping):
            return None
        supply = data.get("total_supply")
        return cls(
            total_supply=supply if isinstance(supply, (int, float, str)) and not isinstance(supply, bool) else None,
            verified_contract=_bool(data.get("verified_contract")),
            possible_spam=_bool(data.get("possible_spam")),
            price_change_24h_pct=coerce_number(_first(data, "price_change_24h", "price_change_24h_pct")),
        )


@dataclass(frozen=True)
class CommunitySignals:
    """Social reach; unknown counts are 0, never None."""

    twitter_followers: int = 0
    discord_members: int = 0
    telegram_members: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> CommunitySignals:
        if not isinstance(data, Mapping):
            return cls()
        return cls(
            twitter_followers=_count(_first(data, "twitter_followers", "twitterFollowers")),
            discord_members=_count(_first(data, "discord_members", "discordMembers")),
            telegram_members=_count(_first(data, "telegram_members", "telegramMembers")),
        )


@dataclass(frozen=True)
class DevelopmentSignals:
    """Code repository activity (GitHub style)."""

    commits_30d: float | None = None
    total_issues: float | None = None
    open_issues: float | None = None
    closed_issues: float | None = None
    stars: float | None = None
    forks: float | None = None
    last_push: str | None = None
    """ISO-8601 timestamp of the last push."""
    is_archived: bool = False
    is_fork: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> DevelopmentSignals | None:
        if not isinstance(data, Mapping):
            return None
        return cls(
            commits_30d=coerce_number(data.get("commits_30d")),
            total_issues=coerce_number(data.get("total_issues")),
            open_issues=coerce_number(data.get("open_issues")),
            closed_issues=coerce_number(data.get("closed_issues")),
            stars=coerce_number(data.get("stars")),
            forks=coerce_number(data.get("forks")),
            last_push=_str(data.get("last_push")),
            is_archived=data.get("is_archived") is True,
            is_fork=data.get("is_fork") is True,
        )

