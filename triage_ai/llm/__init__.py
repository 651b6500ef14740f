from .base import BaseLLMProvider, LLMResponse, ProviderConfigurationError, StructuredOutputError
from .factory import create_provider
from .scope import ClassificationScope, ScopeFactory

__all__ = [
    "BaseLLMProvider",
    "LLMResponse",
    "ProviderConfigurationError",
    "StructuredOutputError",
    "create_provider",
    "ClassificationScope",
    "ScopeFactory",
]
