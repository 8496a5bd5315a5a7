"""
FastAPI server: token health scoring over HTTP.

POST /api/score runs the scan pipeline on a provider payload bag and returns
category scores, overall score and confidence. Stateless apart from the
per-client rate limiter held on app.state.
"""

from __future__ import annotations

from typing import Any, Mapping

from fastapi import Body, Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from tokenhealth import __version__
from tokenhealth.analytics.scan_pipeline import run_token_scan
from tokenhealth.api_server.middleware import enforce_rate_limit
from tokenhealth.api_server.rate_limit import RateLimiter
from tokenhealth.config import Settings, get_settings
from tokenhealth.core.exceptions import PayloadError, RateLimitExceeded
from tokenhealth.scoring.development import parse_iso8601
from tokenhealth.tokenhealth_logging import configure_structlog, get_logger

logger = get_logger(__name__)


# -----------------------------------------------------------------------------
# Response models
# -----------------------------------------------------------------------------


class CategoryScoreModel(BaseModel):
    """One category: score (0 when unavailable) and whether it could be computed."""

    score: int = Field(..., ge=0, le=100, description="Category score (0–100)")
    available: bool = Field(..., description="False when the category's inputs were missing")


class ScanResponse(BaseModel):
    """POST /api/score response."""

    token_address: str | None = Field(None, description="Token address echoed from the payload")
    security: CategoryScoreModel
    liquidity: CategoryScoreModel
    tokenomics: CategoryScoreModel
    community: CategoryScoreModel
    development: CategoryScoreModel
    score_total: int = Field(..., ge=0, le=100, description="Mean of available category scores")
    confidence: int = Field(..., ge=0, le=100, description="Share of high-value evidence present")
    liquidity_locked_days: int = Field(..., ge=0, description="Parsed liquidity lock duration")
    distribution_score: str = Field(..., description="Holder distribution text")


# -----------------------------------------------------------------------------
# App factory and routes
# -----------------------------------------------------------------------------


def build_rate_limiter(settings: Settings) -> RateLimiter | None:
    if not settings.rate_limit_enabled:
        return None
    return RateLimiter(settings.rate_limit_max_requests, settings.rate_limit_window_seconds)


def create_app(
    settings: Settings | None = None,
    rate_limiter: RateLimiter | None = None,
) -> FastAPI:
    """
    Build the scoring API. rate_limiter overrides the one built from settings
    (tests inject a limiter with a fake clock).
    """
    settings = settings or get_settings()
    configure_structlog(settings.log_format, settings.log_level)
    app = FastAPI(
        title="TokenHealthScan API",
        description="Token health scoring: five category scores, overall score and confidence.",
        version=__version__,
    )
    app.state.rate_limiter = rate_limiter if rate_limiter is not None else build_rate_limiter(settings)

    @app.post(
        "/api/score",
        response_model=ScanResponse,
        response_model_exclude_none=True,
        dependencies=[Depends(enforce_rate_limit)],
    )
    def score_token(
        payload: Any = Body(..., description="Provider payload bag (securityData, priceData, githubData, ...)"),
        now: str | None = Query(None, description="ISO-8601 time for freshness scoring; defaults to server time"),
    ) -> dict[str, Any]:
        """Score one token from its provider payloads."""
        if not isinstance(payload, Mapping):
            raise PayloadError("payload must be a JSON object")
        pinned_now = None
        if now is not None:
            pinned_now = parse_iso8601(now)
            if pinned_now is None:
                raise HTTPException(status_code=400, detail="now must be an ISO-8601 timestamp")
        return run_token_scan(payload, now=pinned_now).to_dict()

    @app.get("/health")
    def health() -> dict[str, str]:
        """Liveness check: API is up."""
        return {"status": "ok"}

    @app.exception_handler(PayloadError)
    def payload_error_handler(request: Request, exc: PayloadError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(RateLimitExceeded)
    def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
        return JSONResponse(
            status_code=429,
            content={"detail": "Rate limit exceeded"},
            headers={"Retry-After": str(exc.retry_after)},
        )

    @app.exception_handler(HTTPException)
    def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        """Consistent JSON error response for HTTPException."""
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    logger.info(
        "api_app_created",
        rate_limit_enabled=app.state.rate_limiter is not None,
        rate_limit_max_requests=settings.rate_limit_max_requests,
        rate_limit_window_seconds=settings.rate_limit_window_seconds,
    )
    return app


app = create_app()
