"""
Two-tier answer generation.

Resolution order for each question:
1. The configured remote transport (one attempt, no retry)
2. The local fallback responder, when the transport raises (TransportError or
   anything else) or when no transport is set

generate() therefore always resolves to a display string.
"""

import time
from typing import Optional

from resume_chat.contexts.generation.fallback_responder import FallbackResponder
from resume_chat.contexts.generation.logger import log_remote_response, log_transport_failure
from resume_chat.contexts.generation.transports import Transport

SOURCE_REMOTE = "remote"
SOURCE_FALLBACK = "fallback"


class ResponseGenerator:
    """
    Remote-first responder with a local safety net.

    Attributes:
        transport: Remote transport, or None for local-only answers
        fallback: Local deterministic responder
        last_source: "remote" or "fallback" for the most recent answer (None before any)
    """

    def __init__(self, fallback: FallbackResponder, transport: Optional[Transport] = None):
        self.fallback = fallback
        self.transport = transport
        self.last_source: Optional[str] = None

    async def generate(self, question: str, context: str) -> str:
        """
        Answer a question from its retrieved context.

        Args:
            question: Raw user text
            context: Context block from ContextRetriever

        Returns:
            Non-empty answer text
        """
        if self.transport is not None:
            start = time.time()
            try:
                text = await self.transport.send(question, context)
            except Exception as e:
                # Custom transports may raise anything, not only TransportError
                log_transport_failure(self.transport.name, e)
            else:
                log_remote_response(self.transport.name, text, time.time() - start)
                self.last_source = SOURCE_REMOTE
                return text

        self.last_source = SOURCE_FALLBACK
        return self.fallback.respond(question, context)
