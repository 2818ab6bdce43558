"""
Remote model transports.

A transport turns a (message, context) pair into answer text with exactly one remote
attempt. Every failure surfaces as TransportError; callers never see httpx or SDK
exceptions.

- ProxyTransport: POSTs {message, context} to the backend proxy, which builds the
  prompt server-side
- ProviderTransport: calls an LLM provider in-process, building the prompt client-side
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Optional

import httpx

from resume_chat.contexts.retrieval.prompt_builder import PromptBuilder
from resume_chat.exceptions import TransportError
from resume_chat.utils.llm import LLMProvider

DEFAULT_PROXY_PATH = "/chat"
EMPTY_PROXY_REPLY = "No response."


class Transport(ABC):
    """Abstract base for remote transports."""

    name: str

    @abstractmethod
    async def send(self, message: str, context: str) -> str:
        """
        Ask the remote model once.

        Raises:
            TransportError: On any failure
        """
        pass


class ProxyTransport(Transport):
    """
    HTTP transport to the backend proxy.

    Request: POST {endpoint} with JSON {"message", "context"}
    Response: 200 with JSON {"response": "..."}; anything else is a failure.

    Attributes:
        endpoint: base_url + path (an empty base leaves a relative path, which fails
                  at send time and triggers the fallback)
        timeout: Client timeout in seconds (None = wait indefinitely)
    """

    name = "proxy"

    def __init__(
        self,
        base_url: str = "",
        path: str = DEFAULT_PROXY_PATH,
        timeout: Optional[float] = None,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.endpoint = f"{(base_url or '').rstrip('/')}{path}"
        self.timeout = timeout
        self._http_transport = http_transport

    async def send(self, message: str, context: str) -> str:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._http_transport
            ) as client:
                response = await client.post(
                    self.endpoint, json={"message": message, "context": context}
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"Proxy request failed: {type(e).__name__}") from e

        if response.status_code != 200:
            raise TransportError("Proxy request failed", status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError("Proxy returned invalid JSON") from e

        if not isinstance(data, dict):
            raise TransportError("Proxy returned an unexpected payload")

        text = data.get("response")
        if text and not isinstance(text, str):
            raise TransportError("Proxy returned an unexpected payload")
        return text or EMPTY_PROXY_REPLY


class ProviderTransport(Transport):
    """
    In-process transport calling an LLM provider directly.

    The blocking SDK call runs in a worker thread so the event loop stays free.

    Attributes:
        provider: LLMProvider instance
        builder: PromptBuilder used to assemble the (system, user) prompt pair
    """

    def __init__(self, provider: LLMProvider, builder: Optional[PromptBuilder] = None):
        self.provider = provider
        self.builder = builder or PromptBuilder()
        self.name = provider.name

    async def send(self, message: str, context: str) -> str:
        system_prompt, user_prompt = self.builder.build_messages(message, context)
        try:
            response = await asyncio.to_thread(self.provider.generate, system_prompt, user_prompt)
        except Exception as e:
            # SDKs raise their own hierarchies; all of them mean "remote call failed"
            raise TransportError(f"{self.name} call failed: {type(e).__name__}") from e

        text = (response.content or "").strip()
        if not text:
            raise TransportError(f"{self.name} returned an empty response")
        return text
