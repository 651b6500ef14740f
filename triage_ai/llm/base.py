"""Base interface for chat-completion providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from triage_ai.utils.json_extractor import JSONExtractionError, extract_json

ModelT = TypeVar("ModelT", bound=BaseModel)


class ProviderConfigurationError(Exception):
    """Raised when a provider cannot be constructed from the current settings."""


class StructuredOutputError(Exception):
    """Raised when a response cannot be decoded into the requested schema."""

    def __init__(self, message: str, schema_name: str, raw_content: Optional[str] = None):
        super().__init__(message)
        self.schema_name = schema_name
        self.raw_content = raw_content


@dataclass
class LLMResponse:
    """Plain-text completion result."""

    content: str
    model: str
    provider: str
    usage: Dict[str, int] = field(default_factory=dict)
    raw_response: Optional[Dict[str, Any]] = None


class BaseLLMProvider(ABC):
    """
    Chat capability consumed by the engine.

    Implementations own their transport resources and must release them in
    aclose(). A provider instance is not shared between concurrent calls.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        ...

    @property
    @abstractmethod
    def model_name(self) -> str:
        ...

    @abstractmethod
    async def complete(
        self,
        system_prompt: Optional[str],
        user_prompt: str,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        json_mode: bool = False,
    ) -> LLMResponse:
        """Generate a plain-text completion."""

    async def complete_structured(self, prompt: str, schema: Type[ModelT]) -> ModelT:
        """
        Ask for a JSON object and validate it against a pydantic schema.

        Default implementation uses JSON mode and local extraction; providers
        with native structured output override this.

        Raises:
            StructuredOutputError: If the content is not a JSON object or fails validation
        """
        response = await self.complete(system_prompt=None, user_prompt=prompt, json_mode=True)
        return decode_structured(response.content, schema)

    async def aclose(self) -> None:
        """Release transport resources. No-op by default."""


def decode_structured(content: Optional[str], schema: Type[ModelT]) -> ModelT:
    """Validate raw JSON-mode content against schema."""
    try:
        payload = extract_json(content)
    except JSONExtractionError as e:
        raise StructuredOutputError(
            f"Response is not a JSON object: {e}",
            schema_name=schema.__name__,
            raw_content=content,
        ) from e

    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise StructuredOutputError(
            f"Response does not match {schema.__name__}: {e.error_count()} validation error(s)",
            schema_name=schema.__name__,
            raw_content=content,
        ) from e
