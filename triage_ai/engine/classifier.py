"""
Ticket classification engine.

Assigns one TicketType to a customer message using the configured LLM.
Every non-classification outcome collapses to None at the API boundary:

- rate limit denied (load shedding, logged at DEBUG only)
- response could not be decoded into {"TicketType": "..."}
- label outside the closed set, including "Unknown"
- backend call raised

The causes are distinguishable only through the metric_type of the log
record emitted for each.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from triage_ai.config.settings import settings
from triage_ai.llm.base import StructuredOutputError
from triage_ai.llm.prompts import CLASSIFY_TICKET_PROMPT
from triage_ai.llm.schemas import TicketTypeLLMResponse
from triage_ai.llm.scope import ClassificationScope, ScopeFactory
from triage_ai.utils.metrics import log_metric, timed_operation

from .rate_limiter import TokenBucketRateLimiter
from .ticket_types import UNKNOWN_TICKET_TYPE, TicketType, parse_ticket_type, ticket_type_names

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassificationRequest:
    """Input for a single classification call."""

    ticket_text: str

    def render_prompt(self) -> str:
        return CLASSIFY_TICKET_PROMPT.format(
            ticket_text=self.ticket_text,
            ticket_types=", ".join([*ticket_type_names(), UNKNOWN_TICKET_TYPE]),
            unknown=UNKNOWN_TICKET_TYPE,
        )


class TicketClassifier:
    """Classifies ticket text behind a shared token bucket."""

    def __init__(
        self,
        rate_limiter: TokenBucketRateLimiter,
        scope_factory: Optional[ScopeFactory] = None,
    ):
        self.rate_limiter = rate_limiter
        self.scope_factory = scope_factory or ScopeFactory(logger_name=logger.name)

    async def classify(self, ticket_text: str, enforce_rate_limit: bool) -> Optional[TicketType]:
        """
        Classify a customer message.

        Args:
            ticket_text: Message text, passed to the model unchanged
            enforce_rate_limit: If True, skip classification when no token is available

        Returns:
            The assigned TicketType, or None if no label was produced for any reason

        Raises:
            ProviderConfigurationError: If the LLM provider cannot be built from settings
        """
        if enforce_rate_limit and not self.rate_limiter.try_acquire():
            log_metric("classification_rate_limited", level=logging.DEBUG)
            return None

        request = ClassificationRequest(ticket_text=ticket_text)
        async with self.scope_factory.create_scope() as scope:
            return await self._classify_in_scope(scope, request)

    async def _classify_in_scope(
        self, scope: ClassificationScope, request: ClassificationRequest
    ) -> Optional[TicketType]:
        chat = scope.chat
        try:
            with timed_operation(
                "ticket_classification", provider=chat.provider_name, model=chat.model_name
            ):
                parsed = await chat.complete_structured(
                    request.render_prompt(), TicketTypeLLMResponse
                )
        except StructuredOutputError as e:
            scope.logger.warning(
                "Ticket classification response could not be decoded",
                extra={
                    "metric_type": "classification_decode_failed",
                    "schema": e.schema_name,
                    "error": str(e),
                },
            )
            return None
        except Exception as e:
            # Backend and transport failures are reported as "no result", same as decode failures
            scope.logger.error(
                "Ticket classification backend call failed",
                extra={
                    "metric_type": "classification_backend_failed",
                    "provider": chat.provider_name,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
            )
            return None

        ticket_type = parse_ticket_type(parsed.ticket_type)
        if ticket_type is None:
            scope.logger.info(
                "Ticket classification returned no recognized label",
                extra={
                    "metric_type": "classification_unrecognized_label",
                    "label": parsed.ticket_type,
                    "is_unknown": parsed.ticket_type == UNKNOWN_TICKET_TYPE,
                },
            )
        return ticket_type


# Process-wide limiter and classifier
rate_limiter = TokenBucketRateLimiter.from_settings(settings)
classifier = TicketClassifier(rate_limiter=rate_limiter)
