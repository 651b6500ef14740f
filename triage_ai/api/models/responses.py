from typing import Optional

from pydantic import BaseModel

from triage_ai.engine.ticket_types import TicketType


class ClassifyTicketResponse(BaseModel):
    """Assigned ticket type; null when no label was produced."""

    ticket_type: Optional[TicketType] = None


class RateLimiterStatus(BaseModel):
    token_limit: int
    tokens_per_period: int
    replenishment_period_seconds: float
    available_tokens: int
    total_successful_leases: int
    total_failed_leases: int


class HealthResponse(BaseModel):
    """Service health without contacting the LLM."""

    status: str
    version: str
    provider: str
    model: str
    rate_limiter: RateLimiterStatus
    uptime_seconds: float
