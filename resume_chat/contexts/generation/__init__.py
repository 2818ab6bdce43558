"""
Generation Context

Responsibilities:
- Sends question and context to a remote model through a pluggable transport
- Falls back to a local deterministic responder when the remote call fails
- Serves the backend proxy that holds the provider key

Owns: Transports, ResponseGenerator, FallbackResponder, proxy handler
Never: Decides which résumé content is relevant
"""

from resume_chat.contexts.generation.fallback_responder import FallbackResponder
from resume_chat.contexts.generation.proxy import ProxyResponse, handle_proxy_request
from resume_chat.contexts.generation.response_generator import ResponseGenerator
from resume_chat.contexts.generation.transports import (
    ProviderTransport,
    ProxyTransport,
    Transport,
)

__all__ = [
    "FallbackResponder",
    "ResponseGenerator",
    "Transport",
    "ProxyTransport",
    "ProviderTransport",
    "ProxyResponse",
    "handle_proxy_request",
]
