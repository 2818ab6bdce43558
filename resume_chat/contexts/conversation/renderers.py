"""
Chat renderers.

ChatSession reports every visible change to a renderer: appended messages, the
transient typing indicator, the example-question seed, and clears.
"""

from abc import ABC, abstractmethod
from typing import Sequence

import typer

from resume_chat.contexts.conversation.message import Message, Sender

EXAMPLE_QUESTIONS = (
    "What programming languages do you know?",
    "Tell me about your experience with React",
    "What projects have you worked on?",
)

TYPING_TEXT = "AI is typing..."


class ChatRenderer(ABC):
    """Abstract display surface for a chat session."""

    @abstractmethod
    def render_message(self, message: Message) -> None:
        pass

    @abstractmethod
    def show_typing(self) -> None:
        pass

    @abstractmethod
    def hide_typing(self) -> None:
        pass

    @abstractmethod
    def show_examples(self, questions: Sequence[str]) -> None:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass


class NullRenderer(ChatRenderer):
    """Renderer that displays nothing (headless sessions)."""

    def render_message(self, message: Message) -> None:
        pass

    def show_typing(self) -> None:
        pass

    def hide_typing(self) -> None:
        pass

    def show_examples(self, questions: Sequence[str]) -> None:
        pass

    def clear(self) -> None:
        pass


class ConsoleRenderer(ChatRenderer):
    """Terminal renderer built on typer's styled echo."""

    def render_message(self, message: Message) -> None:
        if message.sender == Sender.USER:
            typer.secho(f"You: {message.content}", fg=typer.colors.CYAN)
        elif message.is_error:
            typer.secho(f"Assistant: {message.content}", fg=typer.colors.RED)
        else:
            typer.echo(f"Assistant: {message.content}")
        typer.echo("")

    def show_typing(self) -> None:
        typer.secho(TYPING_TEXT, fg=typer.colors.BRIGHT_BLACK, nl=False)

    def hide_typing(self) -> None:
        # Erase the indicator line in place
        typer.echo("\r" + " " * len(TYPING_TEXT) + "\r", nl=False)

    def show_examples(self, questions: Sequence[str]) -> None:
        typer.secho("Try asking:", fg=typer.colors.BLUE, bold=True)
        for i, question in enumerate(questions, 1):
            typer.secho(f'  /{i}  "{question}"', fg=typer.colors.BLUE)
        typer.echo("")

    def clear(self) -> None:
        typer.clear()
