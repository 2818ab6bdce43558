"""
Keyword-triggered context retrieval.

Maps a free-text question to a human-readable excerpt of the active résumé record.
Each trigger in RETRIEVAL_TRIGGERS is tested independently; the blocks of all triggers
that fire are concatenated in trigger order. When none fires, a general block
(name, title, summary, key skills) is returned instead.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from resume_chat.contexts.knowledge.resume_record import ResumeRecord
from resume_chat.contexts.knowledge.resume_store import ResumeStore
from resume_chat.contexts.retrieval.logger import log_retrieval
from resume_chat.contexts.retrieval.triggers import RETRIEVAL_TRIGGERS


@dataclass(frozen=True)
class SearchHit:
    """
    One match from ContextRetriever.search().

    Attributes:
        kind: "experience", "project" or "skill"
        data: The matching entry (ExperienceEntry, ProjectEntry, or {"category", "skill"})
    """

    kind: str
    data: Any


# =============================================================================
# BLOCK RENDERERS
# =============================================================================


def _label(category: str) -> str:
    """Upper-case the first letter only ("frontend" -> "Frontend", "devOps" -> "DevOps")."""
    return category[:1].upper() + category[1:]


def render_personal(record: ResumeRecord) -> str:
    p = record.personal
    return (
        f"Personal Information: {p.name} - {p.title}\n"
        f"Summary: {p.summary}\n"
        f"Contact: {p.email}, {p.phone}\n\n"
    )


def render_experience(record: ResumeRecord) -> str:
    lines = ["Professional Experience:\n"]
    for exp in record.experience:
        lines.append(f"- {exp.title} at {exp.company} ({exp.period})\n")
        lines.append(f"  Description: {exp.description}\n")
        lines.append(f"  Technologies: {', '.join(exp.technologies)}\n\n")
    return "".join(lines)


def render_skills(record: ResumeRecord) -> str:
    lines = ["Technical Skills:\n"]
    for category, skills in record.skills.items():
        lines.append(f"{_label(category)}: {', '.join(skills)}\n")
    lines.append("\n")
    return "".join(lines)


def render_projects(record: ResumeRecord) -> str:
    lines = ["Projects:\n"]
    for project in record.projects:
        lines.append(f"- {project.name} ({project.category})\n")
        lines.append(f"  Description: {project.description}\n")
        lines.append(f"  Technologies: {', '.join(project.technologies)}\n\n")
    return "".join(lines)


def render_education(record: ResumeRecord) -> str:
    lines = ["Education:\n"]
    for edu in record.education:
        lines.append(f"- {edu.degree} from {edu.institution} ({edu.year})\n")
        lines.append(f"  {edu.details}\n\n")
    return "".join(lines)


def render_general(record: ResumeRecord, max_skills: Optional[int] = None) -> str:
    """Render the block used when no trigger fires."""
    p = record.personal
    skills = record.all_skills()
    if max_skills is not None:
        skills = skills[:max_skills]
    return (
        "General Information:\n"
        f"Name: {p.name}\n"
        f"Title: {p.title}\n"
        f"Summary: {p.summary}\n"
        f"Key Skills: {', '.join(skills)}\n"
    )


BLOCK_RENDERERS: Dict[str, Callable[[ResumeRecord], str]] = {
    "identity": render_personal,
    "experience": render_experience,
    "skills": render_skills,
    "projects": render_projects,
    "education": render_education,
}


# =============================================================================
# RETRIEVER
# =============================================================================


class ContextRetriever:
    """
    Deterministic question -> context mapping over the store's active record.

    Attributes:
        store: Source of the active ResumeRecord (read once per call)
        max_general_skills: Cap on skills listed in the general block (None = all)
    """

    def __init__(self, store: ResumeStore, max_general_skills: Optional[int] = None):
        self.store = store
        self.max_general_skills = max_general_skills

    def retrieve(self, question: str) -> str:
        """
        Assemble the context block for a question.

        Args:
            question: Raw user text (any case, may be empty)

        Returns:
            Context block; empty only when the active record itself is empty
        """
        record = self.store.record
        if record.is_empty():
            log_retrieval([], 0)
            return ""

        question = question or ""
        fired = [t.name for t in RETRIEVAL_TRIGGERS if t.matches(question)]
        if fired:
            context = "".join(BLOCK_RENDERERS[name](record) for name in fired)
        else:
            context = render_general(record, self.max_general_skills)

        log_retrieval(fired, len(context))
        return context

    def search(self, query: str) -> List[SearchHit]:
        """
        Case-insensitive substring search across experience, projects and skills.

        Args:
            query: Text to look for

        Returns:
            Hits in record order: experience first, then projects, then skills
        """
        needle = (query or "").strip().lower()
        if not needle:
            return []

        record = self.store.record
        hits = []

        for exp in record.experience:
            if any(needle in text.lower() for text in (exp.title, exp.company, exp.description)):
                hits.append(SearchHit("experience", exp))

        for project in record.projects:
            if any(needle in text.lower() for text in (project.name, project.description)):
                hits.append(SearchHit("project", project))

        for category, skills in record.skills.items():
            for skill in skills:
                if needle in skill.lower():
                    hits.append(SearchHit("skill", {"category": category, "skill": skill}))

        return hits
