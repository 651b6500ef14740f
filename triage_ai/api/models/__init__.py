from .requests import ClassifyTicketRequest
from .responses import ClassifyTicketResponse, HealthResponse, RateLimiterStatus

__all__ = ["ClassifyTicketRequest", "ClassifyTicketResponse", "HealthResponse", "RateLimiterStatus"]
