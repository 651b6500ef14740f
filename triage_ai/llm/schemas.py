"""
Pydantic models for validating LLM responses.

These describe the response shape requested from the model. Label
membership is checked by the engine, not here, so that an out-of-set
label is distinguishable from a malformed response in the logs.
"""

from pydantic import BaseModel, ConfigDict, Field


class TicketTypeLLMResponse(BaseModel):
    """
    Expected response structure from ticket classification calls.

    The LLM must return JSON of the form {"TicketType": "<label>"}.
    """

    model_config = ConfigDict(populate_by_name=True)

    ticket_type: str = Field(
        ...,
        alias="TicketType",
        description="Exactly one ticket type name, or Unknown",
    )
