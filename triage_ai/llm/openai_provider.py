"""OpenAI LLM provider using LangChain."""

import logging
import time
from typing import List, Optional, Type

import httpx
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI
from openai import LengthFinishReasonError
from pydantic import ValidationError

from triage_ai.config.settings import settings

from .base import (
    BaseLLMProvider,
    LLMResponse,
    ModelT,
    ProviderConfigurationError,
    StructuredOutputError,
)

logger = logging.getLogger(__name__)


class OpenAIProvider(BaseLLMProvider):
    """
    OpenAI (or OpenAI-compatible) provider using LangChain.

    The chat client and its private httpx.AsyncClient are built on first use
    and closed by aclose(), so an instance should live no longer than the
    scope that created it. Requests are made exactly once (max_retries=0).
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        native_structured_output: Optional[bool] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key or settings.openai_api_key
        self._model = model or settings.openai_model
        self._temperature = temperature if temperature is not None else settings.openai_temperature
        self._max_tokens = max_tokens if max_tokens is not None else settings.openai_max_tokens
        self._base_url = base_url or settings.openai_base_url
        self._timeout = timeout_seconds if timeout_seconds is not None else settings.llm_timeout_seconds
        self._native_structured_output = (
            native_structured_output
            if native_structured_output is not None
            else settings.llm_native_structured_output
        )
        self._transport = transport
        self._http_client: Optional[httpx.AsyncClient] = None
        self._client: Optional[ChatOpenAI] = None

        if not self.api_key:
            raise ProviderConfigurationError(
                "OPENAI_API_KEY not provided (set via environment or .env file)"
            )

        logger.debug("Initialized OpenAI provider with model: %s", self._model)

    @property
    def provider_name(self) -> str:
        return "openai"

    @property
    def model_name(self) -> str:
        return self._model

    async def get_client(self) -> ChatOpenAI:
        """Return the chat client, building it and its HTTP client on first use."""
        if self._client is not None:
            return self._client

        http_client = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)
        try:
            client = ChatOpenAI(
                model=self._model,
                openai_api_key=self.api_key,
                base_url=self._base_url,
                temperature=self._temperature,
                max_tokens=self._max_tokens,
                timeout=self._timeout,
                max_retries=0,
                http_async_client=http_client,
            )
        except Exception:
            await http_client.aclose()
            raise

        self._http_client = http_client
        self._client = client
        return client

    async def complete(
        self,
        system_prompt: Optional[str],
        user_prompt: str,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        json_mode: bool = False,
    ) -> LLMResponse:
        client = await self.get_client()
        bind_kwargs = {}
        if temperature is not None:
            bind_kwargs["temperature"] = temperature
        if max_tokens is not None:
            bind_kwargs["max_tokens"] = max_tokens
        if json_mode:
            bind_kwargs["response_format"] = {"type": "json_object"}
        runnable = client.bind(**bind_kwargs) if bind_kwargs else client

        start_time = time.perf_counter()
        response = await runnable.ainvoke(_build_messages(system_prompt, user_prompt))

        usage_metadata = response.usage_metadata or {}
        usage = {
            "prompt_tokens": usage_metadata.get("input_tokens", 0),
            "completion_tokens": usage_metadata.get("output_tokens", 0),
            "total_tokens": usage_metadata.get("total_tokens", 0),
        }
        logger.info(
            "LLM call completed",
            extra={
                "metric_type": "llm_call",
                "provider": "openai",
                "model": self._model,
                "latency_ms": round((time.perf_counter() - start_time) * 1000, 2),
                "input_tokens": usage["prompt_tokens"],
                "output_tokens": usage["completion_tokens"],
                "structured": False,
            },
        )

        return LLMResponse(
            content=response.content if isinstance(response.content, str) else str(response.content),
            model=self._model,
            provider="openai",
            usage=usage,
            raw_response={"response_metadata": getattr(response, "response_metadata", None)},
        )

    async def complete_structured(self, prompt: str, schema: Type[ModelT]) -> ModelT:
        if not self._native_structured_output:
            return await super().complete_structured(prompt, schema)

        client = await self.get_client()
        structured_client = client.with_structured_output(
            schema,
            method="json_schema",
            include_raw=True,
        )

        start_time = time.perf_counter()
        try:
            result = await structured_client.ainvoke([HumanMessage(content=prompt)])
        except (ValidationError, LengthFinishReasonError) as e:
            # The SDK parses json_schema responses itself and raises before
            # include_raw can report a parsing_error.
            raise StructuredOutputError(
                f"Structured output did not match {schema.__name__}: {e}",
                schema_name=schema.__name__,
            ) from e
        latency_ms = round((time.perf_counter() - start_time) * 1000, 2)

        parsed = result.get("parsed")
        parsing_error = result.get("parsing_error")
        raw = result.get("raw")
        raw_content = getattr(raw, "content", None)

        logger.info(
            "LLM call completed",
            extra={
                "metric_type": "llm_call",
                "provider": "openai",
                "model": self._model,
                "latency_ms": latency_ms,
                "structured": True,
                "parsed": parsed is not None,
            },
        )

        if parsing_error is not None or parsed is None:
            raise StructuredOutputError(
                f"Structured output did not match {schema.__name__}: {parsing_error}",
                schema_name=schema.__name__,
                raw_content=raw_content if isinstance(raw_content, str) else None,
            )
        return parsed

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()


def _build_messages(system_prompt: Optional[str], user_prompt: str) -> List[BaseMessage]:
    messages: List[BaseMessage] = []
    if system_prompt:
        messages.append(SystemMessage(content=system_prompt))
    messages.append(HumanMessage(content=user_prompt))
    return messages
