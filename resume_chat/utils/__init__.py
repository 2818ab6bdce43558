"""
Shared utilities for resume_chat.

Common functionality used across contexts:
- LLM provider abstraction
- Logger setup with provenance
"""

from resume_chat.utils.llm import LLMResponse, get_provider
from resume_chat.utils.logger import setup_logger

__all__ = ["LLMResponse", "get_provider", "setup_logger"]
