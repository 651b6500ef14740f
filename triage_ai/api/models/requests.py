from pydantic import BaseModel


class ClassifyTicketRequest(BaseModel):
    """Ticket text to classify."""

    ticket_text: str  # Passed through verbatim, empty allowed
    enforce_rate_limit: bool = True
