"""Shared fixtures for triage-ai tests."""

from typing import List, Optional

import httpx
import pytest

from triage_ai.engine.classifier import TicketClassifier
from triage_ai.engine.rate_limiter import TokenBucketRateLimiter
from triage_ai.llm.base import BaseLLMProvider, LLMResponse
from triage_ai.llm.openai_provider import OpenAIProvider
from triage_ai.llm.scope import ScopeFactory


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeProvider(BaseLLMProvider):
    """In-memory chat provider that answers every prompt with fixed content."""

    def __init__(self, content: str = '{"TicketType": "Question"}', error: Optional[Exception] = None):
        self.content = content
        self.error = error
        self.prompts: List[str] = []
        self.closed = False

    @property
    def provider_name(self) -> str:
        return "fake"

    @property
    def model_name(self) -> str:
        return "fake-model"

    async def complete(self, system_prompt, user_prompt, temperature=None, max_tokens=None, json_mode=False):
        self.prompts.append(user_prompt)
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.content, model="fake-model", provider="fake")

    async def aclose(self) -> None:
        self.closed = True


class RecordingProviderFactory:
    """Provider factory that remembers every provider it built."""

    def __init__(self, content: str = '{"TicketType": "Question"}', error: Optional[Exception] = None):
        self.content = content
        self.error = error
        self.providers: List[FakeProvider] = []

    def __call__(self) -> FakeProvider:
        provider = FakeProvider(content=self.content, error=self.error)
        self.providers.append(provider)
        return provider

    @property
    def call_count(self) -> int:
        return sum(len(p.prompts) for p in self.providers)


def chat_completion_body(content: str, finish_reason: str = "stop") -> dict:
    """Minimal OpenAI chat.completion payload."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-test",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content, "refusal": None},
                "logprobs": None,
                "finish_reason": finish_reason,
            }
        ],
        "usage": {"prompt_tokens": 42, "completion_tokens": 5, "total_tokens": 47},
    }


class HttpProviderFactory:
    """Builds real OpenAI providers whose requests are answered in-process."""

    def __init__(self, content: str, finish_reason: str = "stop"):
        self.content = content
        self.finish_reason = finish_reason
        self.requests: List[httpx.Request] = []
        self.providers: List[OpenAIProvider] = []

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(200, json=chat_completion_body(self.content, self.finish_reason))

    def __call__(self) -> OpenAIProvider:
        provider = OpenAIProvider(
            api_key="sk-test",
            model="gpt-test",
            base_url="http://llm.test/v1",
            native_structured_output=True,
            transport=httpx.MockTransport(self.handle),
        )
        self.providers.append(provider)
        return provider


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def limiter(clock):
    """Full bucket with default parameters and a frozen clock."""
    return TokenBucketRateLimiter(clock=clock)


@pytest.fixture
def provider_factory():
    return RecordingProviderFactory()


@pytest.fixture
def make_classifier(limiter):
    """Build a classifier whose provider answers with the given content."""

    def _make(content: str = '{"TicketType": "Question"}', error: Optional[Exception] = None, rate_limiter=None):
        factory = RecordingProviderFactory(content=content, error=error)
        classifier = TicketClassifier(
            rate_limiter=rate_limiter or limiter,
            scope_factory=ScopeFactory(provider_factory=factory),
        )
        return classifier, factory

    return _make


@pytest.fixture
def http_provider_factory():
    """Factory class whose providers answer every request with the given content."""
    return HttpProviderFactory
