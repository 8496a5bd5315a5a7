"""
Environment variable loading for TokenHealthScan.

- LOG_LEVEL / LOG_FORMAT: structlog level and renderer (json | console)
- TOKENHEALTH_API_HOST / TOKENHEALTH_API_PORT: uvicorn bind address
- RATE_LIMIT_ENABLED / RATE_LIMIT_MAX_REQUESTS / RATE_LIMIT_WINDOW_SECONDS: per-client bucket
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from tokenhealth.tokenhealth_logging import get_logger

logger = get_logger(__name__)

# Project root: config is tokenhealth/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8000
DEFAULT_RATE_LIMIT_MAX_REQUESTS = 60
DEFAULT_RATE_LIMIT_WINDOW_SECONDS = 60

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def load_tokenhealth_env() -> None:
    """Load .env from project root. Safe to call multiple times; existing env wins."""
    load_dotenv(_ENV_PATH, override=False)


def env_str(name: str, default: str) -> str:
    """Return stripped env value, or default when unset/blank."""
    load_tokenhealth_env()
    return (os.getenv(name) or "").strip() or default


def env_int(name: str, default: int, *, minimum: int = 1) -> int:
    """
    Return env value as int. Malformed or below-minimum values fall back to
    default with a warning; never raises.
    """
    raw = env_str(name, "")
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("config_invalid_int", name=name, value=raw, default=default)
        return default
    if value < minimum:
        logger.warning("config_below_minimum", name=name, value=value, minimum=minimum, default=default)
        return default
    return value


def env_bool(name: str, default: bool) -> bool:
    """Return env flag (1/true/yes/on, 0/false/no/off); unknown values keep default."""
    raw = env_str(name, "").lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    return default
