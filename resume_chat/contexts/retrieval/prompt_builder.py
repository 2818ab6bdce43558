"""
Prompt assembly for résumé question answering.

Wraps retrieved context and the user's question in a fixed instruction template:
persona, grounding rules, the literal context block, then the literal question.
Context longer than max_context_length is tail-truncated before it is embedded.
"""

from typing import Optional, Tuple

from resume_chat.contexts.retrieval.logger import log_truncation

DEFAULT_MAX_CONTEXT_LENGTH = 4000

REFUSAL_SENTENCE = "I can only answer questions based on the information in the resume"
NO_CONTEXT_PLACEHOLDER = "No specific context provided"

# =============================================================================
# PROMPT TEMPLATES
# =============================================================================

SYSTEM_PROMPT = f"""\
You are a helpful and professional AI assistant answering questions about a software engineer's resume. \
Your goal is to help recruiters and potential employers understand the candidate's skills, experience, \
and qualifications.

IMPORTANT RULES:
1. You MUST use ONLY the information provided in the resume context below
2. Do not make up any information or answer questions that are not related to this resume
3. If the answer is not in the context, politely say "{REFUSAL_SENTENCE}"
4. Be professional, concise, and helpful
5. When discussing specific technologies or experiences, reference the actual details from the resume
6. If asked about contact information, direct them to the contact section"""

CONTEXT_HEADER = "Resume Context:\n---\n"
QUESTION_MARKER = "\n---\n\nUser Question: "
PROMPT_FOOTER = "\n\nPlease provide a helpful and accurate response based on the resume information above."


class PromptBuilder:
    """
    Builds the grounded prompt sent to the language model.

    Attributes:
        max_context_length: Characters of context kept (None = unlimited)
        system_prompt: Persona and rules preamble
    """

    def __init__(
        self,
        max_context_length: Optional[int] = DEFAULT_MAX_CONTEXT_LENGTH,
        system_prompt: str = SYSTEM_PROMPT,
    ):
        self.max_context_length = max_context_length
        self.system_prompt = system_prompt

    def truncate_context(self, context: str) -> str:
        """
        Cut context to max_context_length characters, keeping the head.

        Python strings index by code point, so the cut never splits a multi-byte
        character.
        """
        if self.max_context_length is None or len(context) <= self.max_context_length:
            return context
        log_truncation(len(context), self.max_context_length)
        return context[: self.max_context_length]

    def build_messages(self, question: str, context: str) -> Tuple[str, str]:
        """
        Build the prompt as a (system, user) pair for chat-style providers.

        Args:
            question: User question, embedded verbatim
            context: Retrieved context block

        Returns:
            (system_prompt, user_prompt)
        """
        context = self.truncate_context(context or "") or NO_CONTEXT_PLACEHOLDER
        user_prompt = f"{CONTEXT_HEADER}{context}{QUESTION_MARKER}{question}{PROMPT_FOOTER}"
        return self.system_prompt, user_prompt

    def build(self, question: str, context: str) -> str:
        """
        Build the full single-string prompt.

        Args:
            question: User question, embedded verbatim
            context: Retrieved context block

        Returns:
            Prompt text: system preamble, context block, question, closing instruction
        """
        system_prompt, user_prompt = self.build_messages(question, context)
        return f"{system_prompt}\n\n{user_prompt}"


def extract_question(prompt: str) -> Optional[str]:
    """
    Recover the question embedded by PromptBuilder.build().

    The context block is searched from its header onwards so the question marker is
    located after the rules preamble.

    Returns:
        The original question, or None if the prompt was not built by PromptBuilder
    """
    header_at = prompt.find(CONTEXT_HEADER)
    if header_at == -1 or not prompt.endswith(PROMPT_FOOTER):
        return None

    marker_at = prompt.find(QUESTION_MARKER, header_at + len(CONTEXT_HEADER))
    if marker_at == -1:
        return None

    return prompt[marker_at + len(QUESTION_MARKER) : len(prompt) - len(PROMPT_FOOTER)]
