"""
Health check API endpoints.

GET /ping   - Simple liveness check
GET /health - Configured provider and classification rate limiter state

Neither endpoint calls the LLM.
"""

import time

from fastapi import APIRouter
from pydantic import BaseModel

from triage_ai import __version__
from triage_ai.api.models.responses import HealthResponse, RateLimiterStatus
from triage_ai.config.settings import settings
from triage_ai.engine.classifier import rate_limiter

router = APIRouter()

# Track service start time for uptime calculation
_start_time = time.time()


class PingResponse(BaseModel):
    """Simple ping response for liveness checks."""

    status: str = "ok"
    uptime_seconds: float


@router.get("/ping", response_model=PingResponse)
async def ping() -> PingResponse:
    return PingResponse(status="ok", uptime_seconds=round(time.time() - _start_time, 2))


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Report configuration and rate limiter counters.

    Status is "degraded" when the bucket is empty, meaning rate-limited
    classification requests are currently being skipped.
    """
    stats = rate_limiter.statistics()
    return HealthResponse(
        status="healthy" if stats.available_tokens > 0 else "degraded",
        version=__version__,
        provider=settings.llm_provider,
        model=settings.openai_model,
        rate_limiter=RateLimiterStatus(
            token_limit=rate_limiter.token_limit,
            tokens_per_period=rate_limiter.tokens_per_period,
            replenishment_period_seconds=rate_limiter.replenishment_period,
            available_tokens=stats.available_tokens,
            total_successful_leases=stats.total_successful_leases,
            total_failed_leases=stats.total_failed_leases,
        ),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
