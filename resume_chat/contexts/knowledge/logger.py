"""
Knowledge context logger.

Provides logging interface for the knowledge context with automatic [resume] prefix.
All knowledge modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[resume]"


def _log_info(message: str) -> None:
    """Log info message with [resume] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [resume] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [resume] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [resume] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_load_start(source: str) -> None:
    """Log start of the one-shot résumé load."""
    _log_info(f"Loading résumé from {source}")


def log_load_result(source: str, record, elapsed_time: float) -> None:
    """Log a successful load with a short summary of what arrived."""
    _log_success(f"Loaded résumé for '{record.personal.name}' ({elapsed_time:.2f}s)")
    _log_debug(f"  Source: {source}")
    _log_debug(
        f"  {len(record.experience)} experience, {len(record.projects)} projects, "
        f"{len(record.skills)} skill categories, {len(record.education)} education"
    )


def log_load_failure(source: str, error: Exception) -> None:
    """Log a swallowed load failure; the default record stays active."""
    _log_warning(f"Could not load résumé from {source}; keeping built-in record")
    _log_debug(f"  Reason: {error}")
