"""
Confidence estimator: weighted share of high-value evidence that was present.

Independent of the category scores. Five presence checks over the raw
provider payloads, weighted 20 / 25 / 30 / 15 / 10 (sum 100):

    total supply         (stats payload, must be truthy)
    total liquidity USD  (pairs payload, key present)
    gini coefficient     (owners payload, key present)
    verified-contract    (metadata payload, key present)
    current price USD    (price payload, key present)

confidence = round(100 * earned / possible), where possible is the weight of
every check and earned the weight of those that passed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from tokenhealth.scoring.normalize import round_half_up
from tokenhealth.tokenhealth_logging import get_logger

logger = get_logger(__name__)

TOTAL_SUPPLY_WEIGHT = 20
LIQUIDITY_WEIGHT = 25
CONCENTRATION_WEIGHT = 30
VERIFIED_CONTRACT_WEIGHT = 15
PRICE_WEIGHT = 10


@dataclass(frozen=True)
class ConfidenceEvidence:
    """Presence flags for the evidence the confidence score weighs."""

    has_total_supply: bool = False
    has_total_liquidity: bool = False
    has_concentration_metric: bool = False
    has_verified_contract_flag: bool = False
    has_current_price: bool = False

    @classmethod
    def from_payloads(
        cls,
        *,
        stats: Mapping[str, Any] | None = None,
        pairs: Mapping[str, Any] | None = None,
        owners: Mapping[str, Any] | None = None,
        metadata: Mapping[str, Any] | None = None,
        price: Mapping[str, Any] | None = None,
    ) -> ConfidenceEvidence:
        """
        Derive presence flags from raw provider payloads. Total supply must be
        truthy (a "0" placeholder string still counts, an int 0 does not); the
        other fields only need the key, even with a null value.
        """

        def has_key(payload: Mapping[str, Any] | None, key: str) -> bool:
            return isinstance(payload, Mapping) and key in payload

        return cls(
            has_total_supply=isinstance(stats, Mapping) and bool(stats.get("total_supply")),
            has_total_liquidity=has_key(pairs, "total_liquidity_usd"),
            has_concentration_metric=has_key(owners, "gini_coefficient"),
            has_verified_contract_flag=has_key(metadata, "verified_contract"),
            has_current_price=has_key(price, "current_price_usd"),
        )

    def checks(self) -> tuple[tuple[str, int, bool], ...]:
        """(name, weight, present) per check, in the order listed above."""
        return (
            ("total_supply", TOTAL_SUPPLY_WEIGHT, self.has_total_supply),
            ("total_liquidity_usd", LIQUIDITY_WEIGHT, self.has_total_liquidity),
            ("gini_coefficient", CONCENTRATION_WEIGHT, self.has_concentration_metric),
            ("verified_contract", VERIFIED_CONTRACT_WEIGHT, self.has_verified_contract_flag),
            ("current_price_usd", PRICE_WEIGHT, self.has_current_price),
        )


def calculate_confidence_score(evidence: ConfidenceEvidence | None) -> int:
    """Return confidence in [0, 100]; 0 when no evidence record or no possible weight."""
    if evidence is None:
        return 0
    checks = evidence.checks()
    possible = sum(weight for _, weight, _ in checks)
    earned = sum(weight for _, weight, present in checks if present)
    if possible == 0:
        return 0
    result = round_half_up(100 * earned / possible)
    logger.debug(
        "confidence_score_result",
        score=result,
        missing=[name for name, _, present in checks if not present],
    )
    return result
