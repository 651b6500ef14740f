"""Closed set of ticket type labels the classifier may assign."""

from enum import Enum
from typing import List, Optional

# Offered to the model as an escape hatch; never a storable TicketType
UNKNOWN_TICKET_TYPE = "Unknown"


class TicketType(str, Enum):
    QUESTION = "Question"
    IDEA = "Idea"
    COMPLAINT = "Complaint"
    RETURNS = "Returns"


_TICKET_TYPES_BY_NAME = {ticket_type.value: ticket_type for ticket_type in TicketType}


def ticket_type_names() -> List[str]:
    """Label names in declaration order, as shown to the model."""
    return list(_TICKET_TYPES_BY_NAME)


def parse_ticket_type(value: Optional[str]) -> Optional[TicketType]:
    """
    Map a model-supplied label onto TicketType.

    Matching is exact and case-sensitive. Anything outside the closed set,
    including "Unknown", maps to None.
    """
    if not isinstance(value, str):
        return None
    return _TICKET_TYPES_BY_NAME.get(value)
