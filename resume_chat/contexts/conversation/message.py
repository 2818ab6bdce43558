"""Conversation data structures: messages and session state."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List


class Sender(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """
    One entry in the conversation log. Never mutated after it is appended.

    Attributes:
        content: Display text
        sender: Who wrote it
        timestamp: When it was appended
        is_error: True for the apology shown after an unexpected failure
    """

    content: str
    sender: Sender
    timestamp: datetime = field(default_factory=datetime.now)
    is_error: bool = False


@dataclass
class ConversationState:
    """
    UI-facing session state, written only by ChatSession.

    Attributes:
        is_open: Whether the chat panel is shown
        messages: Ordered message log
        is_loading: True while a turn is in flight
    """

    is_open: bool = False
    messages: List[Message] = field(default_factory=list)
    is_loading: bool = False
