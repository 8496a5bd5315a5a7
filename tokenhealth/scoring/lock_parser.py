"""
Liquidity-lock duration parser.

Turns a free-text lock description ("180 days", "6 months", "2 years",
"Not Locked") into whole days. Rules, first match wins:

1. not locked, no description, or "Not Locked"  -> 0
2. "<n> day(s)"                                 -> n
3. "<n> month(s)"                               -> n * 30
4. "<n> year(s)"                                -> n * 365
5. locked but no duration found                 -> NOMINAL_LOCK_DAYS_UNSPECIFIED
"""

from __future__ import annotations

import re
from typing import Any

NOT_LOCKED_TEXT = "Not Locked"
NOMINAL_LOCK_DAYS_UNSPECIFIED = 1
DAYS_PER_MONTH = 30
DAYS_PER_YEAR = 365

_UNIT_PATTERNS = (
    (re.compile(r"(\d+)\s*days?", re.IGNORECASE), 1),
    (re.compile(r"(\d+)\s*months?", re.IGNORECASE), DAYS_PER_MONTH),
    (re.compile(r"(\d+)\s*years?", re.IGNORECASE), DAYS_PER_YEAR),
)


def parse_liquidity_lock_days(is_locked: bool | None, lock_info: Any) -> int:
    """Return the number of days liquidity is locked for."""
    if not is_locked or lock_info is None:
        return 0
    text = str(lock_info)
    if not text or text == NOT_LOCKED_TEXT:
        return 0
    for pattern, multiplier in _UNIT_PATTERNS:
        match = pattern.search(text)
        if match:
            return int(match.group(1)) * multiplier
    return NOMINAL_LOCK_DAYS_UNSPECIFIED
