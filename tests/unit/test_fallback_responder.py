"""Unit tests for the local deterministic responder."""

import pytest

from resume_chat.contexts.generation.fallback_responder import GREETING_REPLY, FallbackResponder
from resume_chat.contexts.knowledge.resume_record import ResumeRecord
from resume_chat.contexts.knowledge.resume_store import ResumeStore
from resume_chat.contexts.retrieval.prompt_builder import REFUSAL_SENTENCE


def _responder(document) -> FallbackResponder:
    return FallbackResponder(ResumeStore(default=ResumeRecord.from_dict(document)))


@pytest.mark.unit
def test_experience_names_most_recent_role(responder):
    reply = responder.respond("Tell me about your experience with React")

    assert reply.startswith(
        "I'm currently working as a Senior Software Engineer at Tech Company Inc. since 2022 - Present."
    )
    assert reply.endswith("I have experience with JavaScript, Node.js, React, AWS, Docker.")


@pytest.mark.unit
def test_identity(responder):
    reply = responder.respond("Who are you?")
    assert reply.startswith("I'm Your Name, a Software Engineer & AI Enthusiast.")


@pytest.mark.unit
def test_skills_lists_first_eight(responder):
    reply = responder.respond("What technology stack do you like?")

    assert "JavaScript, Python, TypeScript, Java, React, Vue.js, Tailwind CSS, HTML5/CSS3." in reply
    assert "Node.js" not in reply


@pytest.mark.unit
def test_projects(responder):
    reply = responder.respond("Show me your portfolio")
    assert "E-Commerce Platform, AI Chatbot, Task Management App" in reply


@pytest.mark.unit
def test_education(responder):
    reply = responder.respond("Do you have a degree?")
    assert reply.startswith(
        "I hold a Bachelor of Science in Computer Science from University Name (2016 - 2020)."
    )


@pytest.mark.unit
def test_contact(responder):
    reply = responder.respond("How can I contact you?")

    assert "your.email@example.com or +1 (555) 123-4567" in reply
    assert "I'm located in Your City, Country." in reply


@pytest.mark.unit
def test_greeting(responder):
    assert responder.respond("Hello!") == GREETING_REPLY


@pytest.mark.unit
@pytest.mark.parametrize("question", ["What's the weather like?", "", "Which one?"])
def test_unmatched_redirect_names_top_skills(responder, question):
    reply = responder.respond(question)

    assert reply.startswith("Based on my resume, I'm a Software Engineer & AI Enthusiast")
    assert "JavaScript, Python, TypeScript, Java, React." in reply


@pytest.mark.unit
def test_category_without_data_falls_through():
    """Test that a matching category with no data lets later categories answer."""
    responder = _responder(
        {"personalInfo": {"title": "Engineer", "email": "a@b.c"}, "skills": {"core": ["Go"]}}
    )

    # identity has no name, so the contact category answers
    assert responder.respond("What is your name? How do I contact you?").startswith(
        "You can reach me at a@b.c."
    )
    # experience is empty, so the redirect answers
    assert responder.respond("experience").startswith(
        "Based on my resume, I'm a Engineer with experience in Go."
    )


@pytest.mark.unit
def test_experience_without_role_falls_through():
    responder = _responder(
        {
            "personalInfo": {"title": "Engineer"},
            "experience": [{"description": "Did things."}],
            "skills": {"core": ["Go"]},
        }
    )

    reply = responder.respond("Tell me about your experience")

    assert " a  at " not in reply
    assert reply.startswith("Based on my resume, I'm a Engineer with experience in Go.")


@pytest.mark.unit
@pytest.mark.parametrize(
    "entry, expected",
    [
        ({"title": "Consultant"}, "I'm currently working as a Consultant."),
        ({"company": "Acme"}, "I'm currently working at Acme."),
        (
            {"title": "Consultant", "company": "Acme", "period": "2020"},
            "I'm currently working as a Consultant at Acme since 2020.",
        ),
    ],
    ids=["title_only", "company_only", "full"],
)
def test_experience_sentence_skips_missing_parts(entry, expected):
    responder = _responder({"experience": [entry]})
    assert responder.respond("What is your current job?") == expected


@pytest.mark.unit
def test_empty_record_replies():
    empty = FallbackResponder(ResumeStore(default=ResumeRecord()))

    assert empty.respond("experience") == (
        f"{REFUSAL_SENTENCE}. Try asking about my skills, experience, or projects."
    )
    assert empty.respond("anything", "Name: Ada") == "Here is what my resume says:\nName: Ada"


@pytest.mark.unit
def test_never_empty_for_odd_input(responder):
    for question in ["", " ", "\n", "🙂" * 50, "x" * 5000, None]:
        assert responder.respond(question)
