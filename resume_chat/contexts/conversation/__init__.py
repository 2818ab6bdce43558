"""
Conversation Context

Responsibilities:
- Owns the message log, loading flag and open/closed state
- Orchestrates retrieval and generation for each user turn
- Reports visible changes to a renderer

Owns: ChatSession, Message, ConversationState, renderers
Never: Talks to the network directly
"""

from resume_chat.contexts.conversation.chat_session import ChatSession
from resume_chat.contexts.conversation.message import ConversationState, Message, Sender
from resume_chat.contexts.conversation.renderers import (
    EXAMPLE_QUESTIONS,
    ChatRenderer,
    ConsoleRenderer,
    NullRenderer,
)

__all__ = [
    "ChatSession",
    "Message",
    "Sender",
    "ConversationState",
    "ChatRenderer",
    "ConsoleRenderer",
    "NullRenderer",
    "EXAMPLE_QUESTIONS",
]
