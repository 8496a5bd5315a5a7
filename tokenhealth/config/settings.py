"""
Application settings.

Typed, read-once view over the environment for the API server, rate limiter
and logging. The scoring core takes no settings.
"""

from __future__ import annotations

from dataclasses import dataclass

from tokenhealth.config.env import (
    DEFAULT_API_HOST,
    DEFAULT_API_PORT,
    DEFAULT_RATE_LIMIT_MAX_REQUESTS,
    DEFAULT_RATE_LIMIT_WINDOW_SECONDS,
    env_bool,
    env_int,
    env_str,
)


@dataclass(frozen=True)
class Settings:
    """Service configuration resolved from env / .env."""

    log_level: str = "INFO"
    log_format: str = "json"
    api_host: str = DEFAULT_API_HOST
    api_port: int = DEFAULT_API_PORT
    rate_limit_enabled: bool = True
    rate_limit_max_requests: int = DEFAULT_RATE_LIMIT_MAX_REQUESTS
    rate_limit_window_seconds: int = DEFAULT_RATE_LIMIT_WINDOW_SECONDS


def get_settings() -> Settings:
    """Return settings built from the current environment."""
    return Settings(
        log_level=env_str("LOG_LEVEL", "INFO").upper(),
        log_format=env_str("LOG_FORMAT", "json").lower(),
        api_host=env_str("TOKENHEALTH_API_HOST", DEFAULT_API_HOST),
        api_port=env_int("TOKENHEALTH_API_PORT", DEFAULT_API_PORT),
        rate_limit_enabled=env_bool("RATE_LIMIT_ENABLED", True),
        rate_limit_max_requests=env_int("RATE_LIMIT_MAX_REQUESTS", DEFAULT_RATE_LIMIT_MAX_REQUESTS),
        rate_limit_window_seconds=env_int("RATE_LIMIT_WINDOW_SECONDS", DEFAULT_RATE_LIMIT_WINDOW_SECONDS),
    )
