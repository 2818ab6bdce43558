"""
Résumé record data structures for the Knowledge context.

A ResumeRecord is an immutable snapshot of one person's professional background. Source
documents are accepted in any shape: from_dict() coerces every missing or wrongly-typed
field to an empty value, so attribute access downstream can never raise.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Tuple


# =============================================================================
# COERCION HELPERS
# =============================================================================


def _text(value: Any) -> str:
    """Coerce a scalar to str; containers and None become empty."""
    if value is None or isinstance(value, (dict, list, tuple, set)):
        return ""
    return str(value)


def _text_list(value: Any) -> Tuple[str, ...]:
    """Coerce a sequence of scalars to a tuple of non-empty strings."""
    if isinstance(value, str):
        return (value,) if value else ()
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(text for text in (_text(item) for item in value) if text)


def _paragraph(value: Any) -> str:
    """Coerce a string or list of strings to one paragraph."""
    if isinstance(value, (list, tuple)):
        return " ".join(_text_list(value))
    return _text(value)


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _mappings(value: Any) -> List[Mapping[str, Any]]:
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, Mapping)]


# =============================================================================
# RECORD PARTS
# =============================================================================


@dataclass(frozen=True)
class PersonalInfo:
    """Identity and contact block."""

    name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    summary: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "PersonalInfo":
        data = _mapping(data)
        return cls(
            name=_text(data.get("name")),
            title=_text(data.get("title")),
            email=_text(data.get("email")),
            phone=_text(data.get("phone")),
            location=_text(data.get("location")),
            summary=_text(data.get("summary")),
        )


@dataclass(frozen=True)
class ExperienceEntry:
    """One position, in the order the résumé author listed it."""

    title: str = ""
    company: str = ""
    period: str = ""
    description: str = ""
    details: Tuple[str, ...] = ()
    technologies: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExperienceEntry":
        return cls(
            title=_text(data.get("title")),
            company=_text(data.get("company")),
            period=_text(data.get("period")),
            description=_paragraph(data.get("description")),
            details=_text_list(data.get("details")),
            technologies=_text_list(data.get("technologies")),
        )


@dataclass(frozen=True)
class ProjectEntry:
    """
    One portfolio project.

    Attributes:
        category: Free-form tag (e.g., "web", "ai", "mobile")
    """

    name: str = ""
    category: str = ""
    description: str = ""
    technologies: Tuple[str, ...] = ()
    details: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProjectEntry":
        return cls(
            name=_text(data.get("name")),
            category=_text(data.get("category")),
            description=_paragraph(data.get("description")),
            technologies=_text_list(data.get("technologies")),
            details=_paragraph(data.get("details")),
        )


@dataclass(frozen=True)
class EducationEntry:
    """One degree."""

    degree: str = ""
    institution: str = ""
    year: str = ""
    details: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EducationEntry":
        return cls(
            degree=_text(data.get("degree")),
            institution=_text(data.get("institution")),
            year=_text(data.get("year")),
            details=_paragraph(data.get("details")),
        )


# =============================================================================
# RECORD
# =============================================================================


@dataclass(frozen=True)
class ResumeRecord:
    """
    Immutable résumé snapshot.

    Replaced wholesale by ResumeStore, never mutated in place.

    Attributes:
        personal: Identity and contact block
        experience: Positions, reverse-chronological as authored
        projects: Portfolio projects
        skills: Category name -> skills, in declaration order
        education: Degrees
    """

    personal: PersonalInfo = field(default_factory=PersonalInfo)
    experience: Tuple[ExperienceEntry, ...] = ()
    projects: Tuple[ProjectEntry, ...] = ()
    skills: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    education: Tuple[EducationEntry, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> "ResumeRecord":
        """
        Build a record from a parsed source document.

        Accepts "personalInfo" (the JSON document key) or "personal" for the identity block.
        Anything missing or of the wrong type becomes empty.

        Args:
            data: Parsed JSON/YAML document (any shape)

        Returns:
            ResumeRecord instance
        """
        data = _mapping(data)
        personal = data.get("personalInfo", data.get("personal"))

        skills = {}
        for category, members in _mapping(data.get("skills")).items():
            skills[_text(category)] = _text_list(members)

        return cls(
            personal=PersonalInfo.from_dict(personal),
            experience=tuple(ExperienceEntry.from_dict(e) for e in _mappings(data.get("experience"))),
            projects=tuple(ProjectEntry.from_dict(p) for p in _mappings(data.get("projects"))),
            skills=skills,
            education=tuple(EducationEntry.from_dict(e) for e in _mappings(data.get("education"))),
        )

    def all_skills(self) -> List[str]:
        """Flatten skill categories in declaration order."""
        return [skill for members in self.skills.values() for skill in members]

    def is_empty(self) -> bool:
        """True when there is nothing at all to answer from."""
        personal = self.personal
        has_personal = any(
            (personal.name, personal.title, personal.summary, personal.email, personal.phone)
        )
        return not (
            has_personal or self.experience or self.projects or self.all_skills() or self.education
        )
