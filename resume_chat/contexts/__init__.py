"""Bounded contexts of resume_chat: knowledge, retrieval, generation, conversation."""
