"""
Knowledge Context

Responsibilities:
- Models the résumé record (immutable snapshot, tolerant of any document shape)
- Provides the built-in default record
- Loads a source document once per session and swaps it in atomically

Owns: ResumeRecord, ResumeStore
Never: Decides what is relevant to a question
"""

from resume_chat.contexts.knowledge.resume_record import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
    ResumeRecord,
)
from resume_chat.contexts.knowledge.resume_store import ResumeStore

__all__ = [
    "ResumeRecord",
    "PersonalInfo",
    "ExperienceEntry",
    "ProjectEntry",
    "EducationEntry",
    "ResumeStore",
]
