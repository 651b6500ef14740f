"""
Ticket classification API endpoint.

POST /classify - Assign a ticket type to a customer message.

A null ticket_type is a normal response: the model found no label, the
response was unusable, or the classification rate limit was exhausted.
"""

import logging

from fastapi import APIRouter

from triage_ai.api.errors import ErrorResponse
from triage_ai.api.models.requests import ClassifyTicketRequest
from triage_ai.api.models.responses import ClassifyTicketResponse
from triage_ai.engine.classifier import classifier

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/classify",
    response_model=ClassifyTicketResponse,
    responses={
        503: {"model": ErrorResponse, "description": "LLM provider not configured"},
    },
)
async def classify_ticket(request: ClassifyTicketRequest) -> ClassifyTicketResponse:
    """Classify a ticket message into one of the known ticket types."""
    ticket_type = await classifier.classify(
        request.ticket_text, enforce_rate_limit=request.enforce_rate_limit
    )
    logger.debug("Classification: %s", ticket_type.value if ticket_type else None)
    return ClassifyTicketResponse(ticket_type=ticket_type)
