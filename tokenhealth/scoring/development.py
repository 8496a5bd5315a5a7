"""
Development scorer: repository activity, issue hygiene, engagement and freshness.

No repository at all yields the fixed DEFAULT_DEVELOPMENT_SCORE_NO_REPO (25)
rather than Unavailable: a token without public code still gets a cautious
development score. Otherwise base 20 plus four sub-scores, minus penalties for
archived repos and inactive forks.

Freshness depends on the current time; callers (and tests) pass `now`.
"""

from __future__ import annotations

from datetime import datetime, timezone

from tokenhealth.scoring.models import Computed, DevelopmentSignals, Score
from tokenhealth.scoring.normalize import clamp_score, coerce_number
from tokenhealth.tokenhealth_logging import get_logger

logger = get_logger(__name__)

DEFAULT_DEVELOPMENT_SCORE_NO_REPO = 25
BASE_SCORE = 20

# (exclusive lower bound on commits in 30 days, points)
COMMIT_TIERS = ((20, 40), (10, 30), (5, 20), (0, 10))

# (exclusive lower bound on closed/total ratio, points)
ISSUE_RESOLUTION_TIERS = ((0.8, 25), (0.6, 20), (0.4, 15), (0.2, 10))
NO_ISSUES_POINTS = 15

# (stars bound, forks bound, points); either exceeding its bound matches.
ENGAGEMENT_TIERS = ((1000, 100, 20), (100, 20, 15), (10, 5, 10), (0, 0, 5))

# (exclusive upper bound on days since last push, points)
FRESHNESS_TIERS = ((7, 15), (30, 12), (90, 8), (180, 4))

ARCHIVED_PENALTY = 20
INACTIVE_FORK_PENALTY = 10

SECONDS_PER_DAY = 86400


def parse_iso8601(value: str | None) -> datetime | None:
    """Parse an ISO-8601 timestamp ("Z" suffix allowed); naive values are UTC. None if unparseable."""
    if not value:
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def days_since(timestamp: str | None, now: datetime) -> float | None:
    """Fractional days between timestamp and now; None if timestamp is missing or invalid."""
    pushed = parse_iso8601(timestamp)
    if pushed is None:
        return None
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return (now - pushed).total_seconds() / SECONDS_PER_DAY


def _commit_points(commits: float) -> int:
    for bound, points in COMMIT_TIERS:
        if commits > bound:
            return points
    return 0


def _issue_points(total: float, closed: float) -> int:
    if total <= 0:
        return NO_ISSUES_POINTS
    ratio = closed / total
    for bound, points in ISSUE_RESOLUTION_TIERS:
        if ratio > bound:
            return points
    return 0


def _engagement_points(stars: float, forks: float) -> int:
    for star_bound, fork_bound, points in ENGAGEMENT_TIERS:
        if stars > star_bound or forks > fork_bound:
            return points
    return 0


def _freshness_points(days: float | None) -> int:
    if days is None:
        return 0
    for bound, points in FRESHNESS_TIERS:
        if days < bound:
            return points
    return 0


def calculate_development_score(
    signals: DevelopmentSignals | None,
    *,
    now: datetime | None = None,
) -> Score:
    """
    Score repository activity.

    Commits (max 40), issue resolution (max 25, flat 15 with no issues),
    stars/forks (max 20), push freshness (max 15). Archived: -20. Fork with no
    commits in 30 days: -10. Clamped to [0, 100].
    """
    if signals is None:
        logger.debug("development_score_no_repo", score=DEFAULT_DEVELOPMENT_SCORE_NO_REPO)
        return Computed(DEFAULT_DEVELOPMENT_SCORE_NO_REPO)

    now = now or datetime.now(timezone.utc)
    commits = coerce_number(signals.commits_30d) or 0
    total_issues = coerce_number(signals.total_issues) or 0
    closed_issues = coerce_number(signals.closed_issues) or 0
    stars = coerce_number(signals.stars) or 0
    forks = coerce_number(signals.forks) or 0
    days = days_since(signals.last_push, now)

    score = BASE_SCORE
    score += _commit_points(commits)
    score += _issue_points(total_issues, closed_issues)
    score += _engagement_points(stars, forks)
    score += _freshness_points(days)

    if signals.is_archived:
        score -= ARCHIVED_PENALTY
    if signals.is_fork and not commits:
        score -= INACTIVE_FORK_PENALTY

    result = clamp_score(score)
    logger.debug(
        "development_score_result",
        score=result,
        commits_30d=commits,
        total_issues=total_issues,
        closed_issues=closed_issues,
        stars=stars,
        forks=forks,
        days_since_push=round(days, 2) if days is not None else None,
        is_archived=signals.is_archived,
        is_fork=signals.is_fork,
    )
    return Computed(result)
