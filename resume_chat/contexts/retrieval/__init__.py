"""
Retrieval Context

Responsibilities:
- Decides which parts of the résumé record are relevant to a question
- Renders those parts as a bounded, human-readable context block
- Wraps context and question in the grounded prompt template

Owns: Keyword triggers, ContextRetriever, PromptBuilder
Never: Calls a language model
"""

from resume_chat.contexts.retrieval.context_retriever import ContextRetriever, SearchHit
from resume_chat.contexts.retrieval.prompt_builder import PromptBuilder, extract_question

__all__ = ["ContextRetriever", "SearchHit", "PromptBuilder", "extract_question"]
