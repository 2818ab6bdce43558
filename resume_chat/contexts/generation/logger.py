"""
Generation context logger.

Provides logging interface for the generation context with automatic [generate] prefix.
Provider API keys must never reach these helpers.
"""

from loguru import logger

CONTEXT_PREFIX = "[generate]"


def _log_info(message: str) -> None:
    """Log info message with [generate] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [generate] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [generate] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [generate] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_remote_response(transport_name: str, text: str, elapsed_time: float) -> None:
    """Log a successful remote answer."""
    _log_debug(f"{transport_name} answered ({len(text)} chars, {elapsed_time:.2f}s)")


def log_transport_failure(transport_name: str, error: Exception) -> None:
    """Log a transport failure that is about to be covered by the fallback responder."""
    _log_warning(f"{transport_name} failed, using local responder: {error}")


def log_proxy_request(status_code: int, message_length: int, elapsed_time: float) -> None:
    """Log one handled proxy request."""
    _log_info(f"Proxy request -> {status_code} (message {message_length} chars, {elapsed_time:.2f}s)")
