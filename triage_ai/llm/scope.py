"""Per-call execution scope around a chat provider."""

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Callable

from .base import BaseLLMProvider
from .factory import create_provider


@dataclass(frozen=True)
class ClassificationScope:
    """What a single classification call may use: a chat provider and a logger."""

    chat: BaseLLMProvider
    logger: logging.Logger


class ScopeFactory:
    """
    Creates one short-lived scope per call.

    The provider (and its HTTP connection pool) is built on entry and closed
    on exit, whether the body returns, raises, or is cancelled.
    """

    def __init__(
        self,
        provider_factory: Callable[[], BaseLLMProvider] = create_provider,
        logger_name: str = __name__,
    ):
        self._provider_factory = provider_factory
        self.logger_name = logger_name

    @asynccontextmanager
    async def create_scope(self) -> AsyncIterator[ClassificationScope]:
        provider = self._provider_factory()
        try:
            yield ClassificationScope(chat=provider, logger=logging.getLogger(self.logger_name))
        finally:
            await provider.aclose()
