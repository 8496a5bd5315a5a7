"""
Configuration management for TokenHealthScan.

Loads settings from environment variables and an optional .env file.
"""

from tokenhealth.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
