"""
Chat session orchestration.

One user turn is a sequential chain: append the user message, retrieve context,
generate an answer, append the assistant message. Only one turn may be in flight:
a send while a turn is loading is ignored, so answers can never display out of order.
"""

from typing import Optional, Sequence

from resume_chat.contexts.conversation.logger import (
    _log_info,
    log_turn_ignored,
    log_unexpected_failure,
)
from resume_chat.contexts.conversation.message import ConversationState, Message, Sender
from resume_chat.contexts.conversation.renderers import (
    EXAMPLE_QUESTIONS,
    ChatRenderer,
    NullRenderer,
)
from resume_chat.contexts.generation.response_generator import ResponseGenerator
from resume_chat.contexts.retrieval.context_retriever import ContextRetriever

ERROR_REPLY = "Sorry, I encountered an error. Please try again."
NO_DATA_REPLY = "That's something I'm working on and will update in future."


class ChatSession:
    """
    Owns the conversation state and drives retrieval and generation per turn.

    Attributes:
        retriever: ContextRetriever for the question -> context step
        generator: ResponseGenerator for the context -> answer step
        renderer: Display surface notified of every visible change
        examples: Example questions used to seed the display
        state: ConversationState (is_open, messages, is_loading)
    """

    def __init__(
        self,
        retriever: ContextRetriever,
        generator: ResponseGenerator,
        renderer: Optional[ChatRenderer] = None,
        examples: Sequence[str] = EXAMPLE_QUESTIONS,
    ):
        self.retriever = retriever
        self.generator = generator
        self.renderer = renderer or NullRenderer()
        self.examples = tuple(examples)
        self.state = ConversationState()
        self._turn = 0

        self.renderer.show_examples(self.examples)

    @property
    def messages(self) -> list[Message]:
        return list(self.state.messages)

    @property
    def is_loading(self) -> bool:
        return self.state.is_loading

    def open(self) -> None:
        self.state.is_open = True

    def close(self) -> None:
        self.state.is_open = False

    def _append(self, content: str, sender: Sender, is_error: bool = False) -> Message:
        message = Message(content=content, sender=sender, is_error=is_error)
        self.state.messages.append(message)
        self.renderer.render_message(message)
        return message

    async def send(self, text: str) -> Optional[Message]:
        """
        Run one user turn.

        Args:
            text: Raw user input

        Returns:
            The assistant Message, or None if the send was ignored (blank input, a
            turn already in flight, or the conversation was cleared before the answer
            arrived)
        """
        question = (text or "").strip()
        if not question:
            log_turn_ignored("empty input")
            return None
        if self.state.is_loading:
            log_turn_ignored("turn already in flight")
            return None

        self._append(question, Sender.USER)
        self.state.is_loading = True
        turn = self._turn

        is_error = False
        source = "local reply"
        try:
            self.renderer.show_typing()
            context = self.retriever.retrieve(question)
            if not context.strip():
                answer = NO_DATA_REPLY
            else:
                answer = await self.generator.generate(question, context)
                source = self.generator.last_source
        except Exception as e:
            # Anything escaping here is unexpected; keep the session usable
            log_unexpected_failure(e)
            answer, is_error = ERROR_REPLY, True
        finally:
            self.state.is_loading = False

        if turn != self._turn:
            log_turn_ignored("conversation cleared while answering")
            return None

        self.renderer.hide_typing()
        if not is_error:
            _log_info(f"Answered via {source}")
        return self._append(answer, Sender.ASSISTANT, is_error=is_error)

    async def ask_example(self, index: int) -> Optional[Message]:
        """
        Send one of the seeded example questions.

        Args:
            index: 0-based position in self.examples

        Raises:
            IndexError: No example at that position
        """
        return await self.send(self.examples[index])

    def clear(self) -> None:
        """
        Discard the log and typing indicator, then reseed the example questions.

        A turn still in flight keeps the loading guard until its request settles, so
        no second request can start alongside it. Its answer is dropped.
        """
        self._turn += 1
        self.renderer.clear()
        self.state.messages = []
        self.renderer.show_examples(self.examples)
