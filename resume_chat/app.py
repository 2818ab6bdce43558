"""
Component wiring.

Builds the store -> retriever -> generator -> session chain from settings. The
generator is handed to the session explicitly; nothing swaps another component's
responder at runtime.

Usage:
    from resume_chat.app import start_session

    session = await start_session()
    reply = await session.send("What projects have you worked on?")
"""

from functools import partial
from typing import Callable, Optional

from loguru import logger
from omegaconf import DictConfig

from resume_chat.config import load_settings
from resume_chat.contexts.conversation.chat_session import ChatSession
from resume_chat.contexts.conversation.renderers import ChatRenderer
from resume_chat.contexts.generation.fallback_responder import FallbackResponder
from resume_chat.contexts.generation.response_generator import ResponseGenerator
from resume_chat.contexts.generation.transports import (
    ProviderTransport,
    ProxyTransport,
    Transport,
)
from resume_chat.contexts.knowledge.resume_store import ResumeStore
from resume_chat.contexts.retrieval.context_retriever import ContextRetriever
from resume_chat.contexts.retrieval.prompt_builder import PromptBuilder
from resume_chat.utils.llm import LLMProvider, get_provider


def build_store(settings: DictConfig) -> ResumeStore:
    return ResumeStore(source=settings.resume.source or None)


def build_prompt_builder(settings: DictConfig) -> PromptBuilder:
    return PromptBuilder(max_context_length=settings.retrieval.max_context_length)


def provider_factory(settings: DictConfig) -> Callable[[], LLMProvider]:
    """Zero-argument factory for the configured LLM provider (used by the proxy server)."""
    return partial(
        get_provider,
        provider_name=settings.llm.provider,
        model=settings.llm.model,
        temperature=settings.generation.temperature,
        max_tokens=settings.generation.max_tokens,
    )


def build_transport(settings: DictConfig, builder: PromptBuilder) -> Optional[Transport]:
    """
    Build the remote transport for transport.mode.

    Returns:
        Transport, or None for local-only answers ("none" mode, or a provider that
        cannot be created because its key or SDK is missing)
    """
    mode = settings.transport.mode
    if mode == "none":
        return None

    if mode == "proxy":
        proxy = settings.transport.proxy
        if not proxy.base_url:
            logger.warning("No PROXY_BASE_URL configured; remote calls will fall back locally")
        return ProxyTransport(base_url=proxy.base_url, path=proxy.path, timeout=proxy.timeout)

    try:
        provider = provider_factory(settings)()
    except (ValueError, ImportError) as e:
        logger.warning(f"LLM provider unavailable, answering locally: {e}")
        return None
    return ProviderTransport(provider, builder)


def build_session(
    settings: Optional[DictConfig] = None,
    renderer: Optional[ChatRenderer] = None,
    store: Optional[ResumeStore] = None,
) -> ChatSession:
    """
    Assemble a ChatSession (without loading the résumé document).

    Args:
        settings: Loaded settings (default: load_settings())
        renderer: Display surface (default: NullRenderer)
        store: Pre-built store to share (default: built from settings)
    """
    settings = settings if settings is not None else load_settings()
    store = store if store is not None else build_store(settings)
    builder = build_prompt_builder(settings)

    retriever = ContextRetriever(store, max_general_skills=settings.retrieval.max_general_skills)
    generator = ResponseGenerator(
        fallback=FallbackResponder(store),
        transport=build_transport(settings, builder),
    )
    return ChatSession(retriever, generator, renderer=renderer)


async def start_session(
    settings: Optional[DictConfig] = None, renderer: Optional[ChatRenderer] = None
) -> ChatSession:
    """Build a session and make its one résumé load attempt."""
    session = build_session(settings, renderer)
    await session.retriever.store.load()
    return session
