from .classifier import ClassificationRequest, TicketClassifier, classifier, rate_limiter
from .rate_limiter import RateLimiterStatistics, TokenBucketRateLimiter
from .ticket_types import UNKNOWN_TICKET_TYPE, TicketType, parse_ticket_type

__all__ = [
    "ClassificationRequest",
    "TicketClassifier",
    "classifier",
    "rate_limiter",
    "RateLimiterStatistics",
    "TokenBucketRateLimiter",
    "UNKNOWN_TICKET_TYPE",
    "TicketType",
    "parse_ticket_type",
]
