"""
Prompt templates for ticket classification.
"""

# =============================================================================
# TICKET CLASSIFICATION PROMPT
# =============================================================================

CLASSIFY_TICKET_PROMPT = """You are part of a customer support ticketing system.
Your job is to assign a ticket type based on the customer message. This helps support agents
understand the context quickly so they can help the customer efficiently.

Here are the details of a support ticket.

Customer Message:

{ticket_text}

Classification rules:

1. Assign the customer message to one of the following types:
     {ticket_types}

2. There should be ONLY ONE type assigned to the customer message.

3. If you cannot confidently assign any ticket type, set the '{unknown}' ticket type.

Respond as JSON in the following form: {{
    "TicketType": "string"
}}"""
