"""
resume_chat - Retrieval-grounded chat about a single résumé

Answers visitor questions about one person's résumé by pulling the relevant excerpts
out of a structured record and handing them, with the question, to a hosted language model.

Architecture:
- Knowledge Context: Résumé record model, built-in default, swappable store
- Retrieval Context: Keyword-triggered context selection and prompt assembly
- Generation Context: Remote transports, local fallback responder, backend proxy
- Conversation Context: Message log, loading guard, rendering
"""

__version__ = "0.1.0"
