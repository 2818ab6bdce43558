"""Integration tests for building sessions from settings."""

import asyncio
import json

import pytest

from resume_chat.app import build_session, start_session
from resume_chat.config import ENV_OVERRIDES, load_settings
from resume_chat.contexts.generation.transports import ProxyTransport


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for env_var in [*ENV_OVERRIDES, "RESUME_CHAT_CONFIG", "OPENAI_API_KEY", "ANTHROPIC_API_KEY"]:
        monkeypatch.delenv(env_var, raising=False)


@pytest.mark.integration
def test_offline_session_has_no_transport():
    session = build_session(load_settings(overrides={"transport.mode": "none"}))
    assert session.generator.transport is None


@pytest.mark.integration
def test_proxy_session_endpoint():
    settings = load_settings(overrides={"transport.proxy.base_url": "https://api.example.test/"})
    transport = build_session(settings).generator.transport

    assert isinstance(transport, ProxyTransport)
    assert transport.endpoint == "https://api.example.test/chat"


@pytest.mark.integration
def test_provider_without_key_answers_locally():
    settings = load_settings(overrides={"transport.mode": "provider", "llm.provider": "openai"})
    assert build_session(settings).generator.transport is None


@pytest.mark.integration
def test_session_components_share_one_store():
    session = build_session(load_settings(overrides={"transport.mode": "none"}))
    assert session.retriever.store is session.generator.fallback.store


@pytest.mark.integration
def test_start_session_loads_source(tmp_path):
    source = tmp_path / "resume.json"
    source.write_text(json.dumps({"personalInfo": {"name": "Jane Doe", "title": "Data Engineer"}}))
    settings = load_settings(
        overrides={"transport.mode": "none", "resume.source": str(source)}
    )

    session = asyncio.run(start_session(settings))
    reply = asyncio.run(session.send("Who are you?"))

    assert reply.content.startswith("I'm Jane Doe, a Data Engineer.")
