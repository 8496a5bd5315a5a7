"""
Main entrypoint: TokenHealthScan scoring API.

Runs the FastAPI app with uvicorn using host/port/log settings
(TOKENHEALTH_API_HOST, TOKENHEALTH_API_PORT, LOG_LEVEL, LOG_FORMAT; .env supported).

Equivalent: uvicorn tokenhealth.api_server.app:app --host 0.0.0.0 --port 8000
"""

from tokenhealth.config import get_settings
from tokenhealth.tokenhealth_logging import configure_structlog, get_logger

logger = get_logger("main")


def main() -> None:
    """Start the scoring API in the main thread."""
    import uvicorn

    settings = get_settings()
    configure_structlog(settings.log_format, settings.log_level)

    from tokenhealth.api_server.app import app

    logger.info("main_server_starting", host=settings.api_host, port=settings.api_port)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
