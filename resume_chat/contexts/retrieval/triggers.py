"""
Keyword triggers shared by context retrieval and the fallback responder.

Matching is plain lower-cased substring containment, evaluated independently per
trigger, so one question may fire several triggers ("work" fires both EXPERIENCE
and PROJECTS). Greetings match whole words only: "hi" must not fire on "this".
"""

import re
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Trigger:
    """
    Named keyword set.

    Attributes:
        name: Category identifier (e.g., "experience")
        keywords: Lower-case keywords; any one of them fires the trigger
        whole_words: Match keywords on word boundaries instead of as substrings
    """

    name: str
    keywords: Tuple[str, ...]
    whole_words: bool = False

    def matches(self, question: str) -> bool:
        """Test whether the question fires this trigger."""
        lowered = question.lower()
        if self.whole_words:
            return any(re.search(rf"\b{re.escape(word)}\b", lowered) for word in self.keywords)
        return any(word in lowered for word in self.keywords)


# =============================================================================
# TRIGGER DEFINITIONS
# =============================================================================

IDENTITY = Trigger("identity", ("name", "who are you"))
EXPERIENCE = Trigger("experience", ("experience", "work", "job", "career"))
SKILLS = Trigger("skills", ("skill", "technology", "programming", "language"))
PROJECTS = Trigger("projects", ("project", "portfolio", "work"))
EDUCATION = Trigger("education", ("education", "degree", "university", "school"))

CONTACT = Trigger("contact", ("contact", "reach"))
GREETING = Trigger("greeting", ("hello", "hi", "hey"), whole_words=True)

# Order in which retrieved blocks are concatenated
RETRIEVAL_TRIGGERS = (IDENTITY, EXPERIENCE, SKILLS, PROJECTS, EDUCATION)

# Order in which the fallback responder tries categories (first answer wins)
RESPONDER_TRIGGERS = (IDENTITY, EXPERIENCE, SKILLS, PROJECTS, EDUCATION, CONTACT, GREETING)
