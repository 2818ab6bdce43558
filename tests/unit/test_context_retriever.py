"""Unit tests for keyword-triggered context retrieval."""

import pytest

from resume_chat.contexts.knowledge.resume_record import ResumeRecord
from resume_chat.contexts.knowledge.resume_store import ResumeStore
from resume_chat.contexts.retrieval.context_retriever import ContextRetriever, SearchHit
from resume_chat.contexts.retrieval.triggers import EXPERIENCE, GREETING, PROJECTS


@pytest.mark.unit
@pytest.mark.parametrize(
    "question",
    [
        "What experience do you have?",
        "Where did you WORK before?",
        "Tell me about your last job",
        "How has your career evolved?",
    ],
)
def test_experience_questions_list_every_company(retriever, store, question):
    """Test that every experience trigger emits all experience entries."""
    context = retriever.retrieve(question)

    assert "Professional Experience:" in context
    for entry in store.record.experience:
        assert entry.company in context


@pytest.mark.unit
def test_experience_entry_format(retriever):
    context = retriever.retrieve("experience")

    assert "- Senior Software Engineer at Tech Company Inc. (2022 - Present)\n" in context
    assert "  Technologies: JavaScript, Node.js, React, AWS, Docker\n" in context


@pytest.mark.unit
def test_react_question_includes_react_experience(retriever):
    context = retriever.retrieve("Tell me about your experience with React")

    assert "Professional Experience:" in context
    assert "React" in context
    assert "Projects:" not in context


@pytest.mark.unit
def test_identity_block(retriever):
    context = retriever.retrieve("What is your name?")

    assert context.startswith("Personal Information: Your Name - Software Engineer & AI Enthusiast\n")
    assert "Contact: your.email@example.com, +1 (555) 123-4567" in context


@pytest.mark.unit
def test_skills_block_capitalizes_categories(retriever):
    context = retriever.retrieve("Which programming languages do you use?")

    assert "Technical Skills:\n" in context
    assert "Languages: JavaScript, Python, TypeScript, Java\n" in context
    assert "Frontend: React, Vue.js, Tailwind CSS, HTML5/CSS3\n" in context


@pytest.mark.unit
def test_education_block(retriever):
    context = retriever.retrieve("Where did you go to university?")

    assert context.startswith("Education:\n")
    assert "- Bachelor of Science in Computer Science from University Name (2016 - 2020)" in context


@pytest.mark.unit
def test_work_fires_experience_and_projects(retriever):
    """Test that the shared 'work' keyword emits both blocks, experience first."""
    context = retriever.retrieve("Show me your work")

    assert EXPERIENCE.matches("Show me your work") and PROJECTS.matches("Show me your work")
    assert context.index("Professional Experience:") < context.index("Projects:")


@pytest.mark.unit
def test_blocks_concatenate_in_trigger_order(retriever):
    context = retriever.retrieve("Which school did you attend, and what is your name and skill set?")

    positions = [
        context.index("Personal Information:"),
        context.index("Technical Skills:"),
        context.index("Education:"),
    ]
    assert positions == sorted(positions)


@pytest.mark.unit
@pytest.mark.parametrize("question", ["", "What's the weather like?", "   "])
def test_unmatched_questions_get_general_block(retriever, question):
    context = retriever.retrieve(question)

    assert context.startswith("General Information:\n")
    assert "Name: Your Name\n" in context
    assert "Title: Software Engineer & AI Enthusiast\n" in context
    assert "Key Skills: JavaScript, Python, TypeScript, Java, React" in context


@pytest.mark.unit
def test_general_block_skill_cap(store):
    retriever = ContextRetriever(store, max_general_skills=2)
    assert "Key Skills: JavaScript, Python\n" in retriever.retrieve("hello")


@pytest.mark.unit
def test_thin_record_never_raises():
    """Test that triggers fire safely on a record missing most fields."""
    store = ResumeStore(default=ResumeRecord.from_dict({"personalInfo": {"name": "Ada"}}))
    retriever = ContextRetriever(store)

    assert retriever.retrieve("experience and skills") == "Professional Experience:\nTechnical Skills:\n\n"
    general = retriever.retrieve("anything else")
    assert "Name: Ada\n" in general
    assert "Key Skills: \n" in general


@pytest.mark.unit
def test_empty_record_yields_empty_context():
    store = ResumeStore(default=ResumeRecord())
    assert ContextRetriever(store).retrieve("What is your name?") == ""


@pytest.mark.unit
def test_retrieve_reads_replaced_record(store, retriever):
    store.replace({"personalInfo": {"name": "Grace Hopper", "title": "Rear Admiral"}})
    assert "Name: Grace Hopper" in retriever.retrieve("hello")


@pytest.mark.unit
def test_greeting_trigger_uses_whole_words():
    assert GREETING.matches("Hi there")
    assert not GREETING.matches("Which one is this?")


# =============================================================================
# SEARCH
# =============================================================================


@pytest.mark.unit
def test_search_skill(retriever):
    assert retriever.search("react") == [
        SearchHit("skill", {"category": "frontend", "skill": "React"})
    ]


@pytest.mark.unit
def test_search_experience_and_project(retriever, store):
    hits = retriever.search("startup")
    assert hits == [SearchHit("experience", store.record.experience[1])]

    hits = retriever.search("chatbot")
    assert [hit.kind for hit in hits] == ["project"]
    assert hits[0].data.name == "AI Chatbot"


@pytest.mark.unit
def test_search_empty_query(retriever):
    assert retriever.search("") == []
    assert retriever.search("   ") == []
