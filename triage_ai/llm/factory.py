"""LLM provider factory."""

import logging
from typing import Callable, Dict, Optional

from triage_ai.config.settings import settings

from .base import BaseLLMProvider, ProviderConfigurationError
from .openai_provider import OpenAIProvider

logger = logging.getLogger(__name__)

_PROVIDERS: Dict[str, Callable[[], BaseLLMProvider]] = {
    "openai": OpenAIProvider,
}


def create_provider(name: Optional[str] = None) -> BaseLLMProvider:
    """
    Build a fresh provider instance.

    Args:
        name: Provider name; defaults to settings.llm_provider

    Raises:
        ProviderConfigurationError: Unknown provider or missing credentials
    """
    provider_name = (name or settings.llm_provider).strip().lower()
    builder = _PROVIDERS.get(provider_name)
    if builder is None:
        raise ProviderConfigurationError(
            f"Unknown LLM provider: {provider_name} (available: {', '.join(sorted(_PROVIDERS))})"
        )
    return builder()
