"""
Retrieval context logger.

Provides logging interface for the retrieval context with automatic [retrieve] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[retrieve]"


def _log_debug(message: str) -> None:
    """Log debug message with [retrieve] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [retrieve] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def log_retrieval(fired: list[str], context_length: int) -> None:
    """Log which triggers fired and how much context was assembled."""
    label = ", ".join(fired) if fired else "general"
    _log_debug(f"Triggers: {label} ({context_length} chars)")


def log_truncation(original_length: int, max_length: int) -> None:
    """Log that context was cut to fit the prompt."""
    _log_warning(f"Context truncated from {original_length} to {max_length} chars")
