"""
Backend proxy request handler.

Server side of ProxyTransport: receives {message, context}, embeds both in the grounded
prompt template, calls the configured LLM provider with bounded generation settings and
returns {response, usage}. The provider key lives only in the server environment; error
bodies are fixed strings so neither the key nor upstream error text can leak.

Framework-free: handle_proxy_request() maps (method, body) to a ProxyResponse, and
scripts/serve_proxy.py puts it behind http.server.
"""

import json
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Union

from resume_chat.contexts.generation.logger import _log_error, log_proxy_request
from resume_chat.contexts.retrieval.prompt_builder import PromptBuilder
from resume_chat.exceptions import ProxyError
from resume_chat.utils.llm import LLMProvider

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

EMPTY_GENERATION_REPLY = "Sorry, I could not generate a response."

RequestBody = Union[str, bytes, Mapping[str, Any], None]


@dataclass
class ProxyResponse:
    """HTTP response produced by the proxy handler."""

    status_code: int
    body: Optional[Dict[str, Any]] = None
    headers: Dict[str, str] = field(default_factory=dict)

    def body_bytes(self) -> bytes:
        """Serialize the JSON body (empty for bodiless responses)."""
        if self.body is None:
            return b""
        return json.dumps(self.body).encode("utf-8")


def _json_headers() -> Dict[str, str]:
    return {**CORS_HEADERS, "Content-Type": "application/json"}


def _parse_body(body: RequestBody) -> Mapping[str, Any]:
    if isinstance(body, Mapping):
        return body
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    try:
        payload = json.loads(body or "")
    except ValueError:
        raise ProxyError(400, "Invalid JSON body")
    if not isinstance(payload, dict):
        raise ProxyError(400, "Invalid JSON body")
    return payload


def _create_provider(provider_factory: Callable[[], LLMProvider]) -> LLMProvider:
    try:
        return provider_factory()
    except ValueError:
        # Raised by providers when their API key is missing
        raise ProxyError(500, "API key not configured")
    except ImportError:
        raise ProxyError(500, "AI provider not installed")


def handle_proxy_request(
    method: str,
    body: RequestBody,
    provider_factory: Callable[[], LLMProvider],
    builder: Optional[PromptBuilder] = None,
) -> ProxyResponse:
    """
    Handle one proxy request.

    Status codes:
        200: OPTIONS preflight, or successful generation
        400: Malformed JSON body or missing "message"
        405: Any method other than POST/OPTIONS
        500: Provider not configured (missing key or SDK)
        502: Provider call failed

    Args:
        method: HTTP method
        body: Raw request body (str/bytes) or an already-parsed mapping
        provider_factory: Zero-argument callable returning the LLM provider
        builder: PromptBuilder for the server-side template (default settings if None)

    Returns:
        ProxyResponse with JSON body {"response", "usage"} or {"error"}
    """
    method = (method or "").upper()
    if method == "OPTIONS":
        return ProxyResponse(200, None, dict(CORS_HEADERS))
    if method != "POST":
        return ProxyResponse(405, {"error": "Method not allowed"}, dict(CORS_HEADERS))

    start = time.time()
    message = ""
    try:
        payload = _parse_body(body)
        message = payload.get("message")
        if not isinstance(message, str) or not message.strip():
            message = ""
            raise ProxyError(400, "Message is required")
        context = payload.get("context")
        context = context if isinstance(context, str) else ""

        provider = _create_provider(provider_factory)
        system_prompt, user_prompt = (builder or PromptBuilder()).build_messages(message, context)

        try:
            generation = provider.generate(system_prompt, user_prompt)
        except Exception as e:
            # Only the exception type is logged: SDK messages may echo request details
            _log_error(f"{provider.name} call failed: {type(e).__name__}")
            raise ProxyError(502, "Failed to get response from AI service")
    except ProxyError as e:
        log_proxy_request(e.status_code, len(message), time.time() - start)
        return ProxyResponse(e.status_code, {"error": e.message}, _json_headers())

    response = ProxyResponse(
        200,
        {
            "response": (generation.content or "").strip() or EMPTY_GENERATION_REPLY,
            "usage": {
                "model": generation.model,
                "input_tokens": generation.input_tokens,
                "output_tokens": generation.output_tokens,
            },
        },
        _json_headers(),
    )
    log_proxy_request(200, len(message), time.time() - start)
    return response
