"""Shared fixtures and test doubles for resume_chat tests."""

from typing import List, Optional, Sequence

import pytest

from resume_chat.contexts.conversation.message import Message
from resume_chat.contexts.conversation.renderers import ChatRenderer
from resume_chat.contexts.generation.fallback_responder import FallbackResponder
from resume_chat.contexts.generation.transports import Transport
from resume_chat.contexts.knowledge.resume_store import ResumeStore
from resume_chat.contexts.retrieval.context_retriever import ContextRetriever
from resume_chat.exceptions import TransportError
from resume_chat.utils.llm import LLMProvider, LLMResponse


class RecordingRenderer(ChatRenderer):
    """Renderer that records every call as an event tuple."""

    def __init__(self):
        self.events: List[tuple] = []

    def render_message(self, message: Message) -> None:
        self.events.append(("message", message))

    def show_typing(self) -> None:
        self.events.append(("typing",))

    def hide_typing(self) -> None:
        self.events.append(("hide_typing",))

    def show_examples(self, questions: Sequence[str]) -> None:
        self.events.append(("examples", tuple(questions)))

    def clear(self) -> None:
        self.events.append(("clear",))


class StubTransport(Transport):
    """Transport returning a canned reply, or raising TransportError when failing."""

    name = "stub"

    def __init__(self, reply: str = "Remote answer", fail: bool = False):
        self.reply = reply
        self.fail = fail
        self.calls: List[tuple] = []

    async def send(self, message: str, context: str) -> str:
        self.calls.append((message, context))
        if self.fail:
            raise TransportError("Proxy request failed", status_code=503)
        return self.reply


class StubProvider(LLMProvider):
    """LLM provider that records prompts and returns a canned response."""

    _provider_prefix = "stub"

    def __init__(self, content: str = "Stub answer", error: Optional[Exception] = None):
        self.content = content
        self.error = error
        self.calls: List[tuple] = []
        self.update_model("test-model")

    def _call_api(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        self.calls.append((system_prompt, user_prompt))
        if self.error is not None:
            raise self.error
        return LLMResponse(
            content=self.content, model=self.model, input_tokens=12, output_tokens=7
        )


@pytest.fixture
def store() -> ResumeStore:
    """Store holding the built-in default record, with no source."""
    return ResumeStore()


@pytest.fixture
def retriever(store) -> ContextRetriever:
    return ContextRetriever(store)


@pytest.fixture
def responder(store) -> FallbackResponder:
    return FallbackResponder(store)


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()
