"""
Conversation context logger.

Provides logging interface for the conversation context with automatic [chat] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[chat]"


def _log_info(message: str) -> None:
    """Log info message with [chat] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [chat] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_turn_ignored(reason: str) -> None:
    _log_debug(f"Ignored send: {reason}")


def log_unexpected_failure(error: Exception) -> None:
    """Log an exception that escaped retrieval/generation, with traceback."""
    logger.opt(exception=error).error(f"{CONTEXT_PREFIX} Turn failed unexpectedly: {error}")
