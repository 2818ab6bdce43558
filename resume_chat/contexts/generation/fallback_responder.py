"""
Local deterministic responder.

Used when no remote transport is configured or the remote call fails. Answers from the
active résumé record with canned sentences, trying categories in RESPONDER_TRIGGERS order;
the first category that both matches the question and has data to talk about wins.
Never raises and never returns an empty string.
"""

from typing import Callable, Dict, Optional

from resume_chat.contexts.knowledge.resume_record import ResumeRecord
from resume_chat.contexts.knowledge.resume_store import ResumeStore
from resume_chat.contexts.retrieval.prompt_builder import REFUSAL_SENTENCE
from resume_chat.contexts.retrieval.triggers import RESPONDER_TRIGGERS

SKILLS_LISTED = 8
REDIRECT_SKILLS_LISTED = 5

GREETING_REPLY = (
    "Hello! I'm here to help you learn more about my background and experience. "
    "What would you like to know?"
)


# =============================================================================
# CATEGORY SENTENCES
# =============================================================================
# Each returns None when the record has nothing to say for its category.


def _identity(record: ResumeRecord) -> Optional[str]:
    p = record.personal
    if not p.name:
        return None
    intro = f"I'm {p.name}, a {p.title}." if p.title else f"I'm {p.name}."
    return f"{intro} {p.summary}".strip()


def _experience(record: ResumeRecord) -> Optional[str]:
    if not record.experience:
        return None
    latest = record.experience[0]
    if not (latest.title or latest.company):
        return None
    sentence = "I'm currently working"
    if latest.title:
        sentence += f" as a {latest.title}"
    if latest.company:
        sentence += f" at {latest.company}"
    sentence += f" since {latest.period}." if latest.period else "."
    if latest.description:
        sentence += f" {latest.description}"
    if latest.technologies:
        sentence += f" I have experience with {', '.join(latest.technologies)}."
    return sentence


def _skills(record: ResumeRecord) -> Optional[str]:
    skills = record.all_skills()
    if not skills:
        return None
    return (
        f"I have expertise in various technologies including {', '.join(skills[:SKILLS_LISTED])}. "
        "You can see my complete skill set organized by category in the Skills section above."
    )


def _projects(record: ResumeRecord) -> Optional[str]:
    names = [project.name for project in record.projects if project.name]
    if not names:
        return None
    return (
        f"I've worked on several projects including {', '.join(names)}. "
        "Each project demonstrates different aspects of my technical skills and "
        "problem-solving abilities. You can find detailed information about each project "
        "in the Projects section above."
    )


def _education(record: ResumeRecord) -> Optional[str]:
    degrees = [
        f"a {edu.degree} from {edu.institution} ({edu.year})"
        for edu in record.education
        if edu.degree
    ]
    if not degrees:
        return None
    sentence = f"I hold {' and '.join(degrees)}."
    if record.education[0].details:
        sentence += f" {record.education[0].details}"
    return sentence


def _contact(record: ResumeRecord) -> Optional[str]:
    p = record.personal
    channels = [channel for channel in (p.email, p.phone) if channel]
    if not channels:
        return None
    sentence = f"You can reach me at {' or '.join(channels)}."
    if p.location:
        sentence += f" I'm located in {p.location}."
    return (
        f"{sentence} Feel free to use the contact form or social links provided in the "
        "Contact section."
    )


def _greeting(record: ResumeRecord) -> Optional[str]:
    return GREETING_REPLY


CATEGORY_SENTENCES: Dict[str, Callable[[ResumeRecord], Optional[str]]] = {
    "identity": _identity,
    "experience": _experience,
    "skills": _skills,
    "projects": _projects,
    "education": _education,
    "contact": _contact,
    "greeting": _greeting,
}


class FallbackResponder:
    """
    Network-free responder over the store's active record.

    Attributes:
        store: Source of the active ResumeRecord
    """

    def __init__(self, store: ResumeStore):
        self.store = store

    def respond(self, question: str, context: str = "") -> str:
        """
        Answer a question without calling any model.

        Args:
            question: Raw user text
            context: Retrieved context; quoted back only when the record has no
                     skills or title to build the default redirect from

        Returns:
            Non-empty display string
        """
        record = self.store.record
        question = question or ""

        for trigger in RESPONDER_TRIGGERS:
            if trigger.matches(question):
                sentence = CATEGORY_SENTENCES[trigger.name](record)
                if sentence:
                    return sentence

        return self._redirect(record, context)

    def _redirect(self, record: ResumeRecord, context: str) -> str:
        """Generic reply naming the top skill areas."""
        title = record.personal.title
        skills = record.all_skills()[:REDIRECT_SKILLS_LISTED]

        if skills:
            lead = f"I'm a {title} with experience in" if title else "I have experience in"
            return (
                f"Based on my resume, {lead} {', '.join(skills)}. I've worked on various "
                "projects and have professional experience in software development. "
                "Is there something specific you'd like to know about my background?"
            )
        if title:
            return (
                f"Based on my resume, I'm a {title}. Try asking about my skills, "
                "experience, or projects."
            )
        if context.strip():
            return f"Here is what my resume says:\n{context.strip()}"
        return f"{REFUSAL_SENTENCE}. Try asking about my skills, experience, or projects."
