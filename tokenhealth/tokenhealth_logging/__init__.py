"""
Structured logging for TokenHealthScan.

JSON logs with timestamp, event_type, token and score context.
Use get_logger() in all modules; entrypoints call configure_structlog()
with the resolved Settings.
"""

from tokenhealth.tokenhealth_logging.logger import bind_token, configure_structlog, get_logger

__all__ = ["bind_token", "configure_structlog", "get_logger"]
