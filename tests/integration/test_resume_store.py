"""Integration tests for the one-shot résumé load."""

import asyncio
import json

import httpx
import pytest

from resume_chat.contexts.knowledge.resume_store import ResumeStore
from resume_chat.contexts.retrieval.context_retriever import ContextRetriever

RESUME_URL = "https://example.test/data/resume.json"

REMOTE_DOCUMENT = {
    "personalInfo": {"name": "Jane Doe", "title": "Data Engineer", "summary": "Pipelines."},
    "experience": [
        {
            "title": "Data Engineer",
            "company": "Acme",
            "period": "2021 - Present",
            "description": "Builds pipelines.",
            "details": ["Ran Spark jobs"],
            "technologies": ["Python", "Spark"],
        }
    ],
    "skills": {"languages": ["Python", "SQL"]},
}


class CountingHandler:
    """httpx MockTransport handler returning a fixed response and counting requests."""

    def __init__(self, status_code=200, json_body=None, text=None):
        self.status_code = status_code
        self.json_body = json_body
        self.text = text
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json_body)


def _store(handler) -> ResumeStore:
    return ResumeStore(source=RESUME_URL, http_transport=httpx.MockTransport(handler))


@pytest.mark.integration
def test_successful_fetch_replaces_record():
    handler = CountingHandler(json_body=REMOTE_DOCUMENT)
    store = _store(handler)

    record = asyncio.run(store.load())

    assert record is store.record
    assert store.record.personal.name == "Jane Doe"
    assert store.record.skills == {"languages": ("Python", "SQL")}
    assert handler.requests[0].headers["Cache-Control"] == "no-store"
    assert str(handler.requests[0].url) == RESUME_URL


@pytest.mark.integration
def test_load_attempted_only_once():
    handler = CountingHandler(json_body=REMOTE_DOCUMENT)
    store = _store(handler)

    asyncio.run(store.load())
    asyncio.run(store.load())

    assert len(handler.requests) == 1
    assert store.load_attempted


@pytest.mark.integration
def test_http_error_keeps_default_record():
    store = _store(CountingHandler(status_code=404, json_body={"error": "missing"}))
    default = store.record

    asyncio.run(store.load())

    assert store.record is default
    assert store.load_attempted
    context = ContextRetriever(store).retrieve("What skills do you have?")
    assert "Languages: JavaScript" in context


@pytest.mark.integration
def test_network_failure_keeps_default_record():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    store = ResumeStore(source=RESUME_URL, http_transport=httpx.MockTransport(refuse))
    default = store.record

    asyncio.run(store.load())

    assert store.record is default


@pytest.mark.integration
@pytest.mark.parametrize(
    "handler",
    [
        CountingHandler(text="<html>not json</html>"),
        CountingHandler(json_body=[REMOTE_DOCUMENT]),
    ],
    ids=["invalid_json", "json_list"],
)
def test_malformed_payload_keeps_default_record(handler):
    store = _store(handler)
    default = store.record

    asyncio.run(store.load())

    assert store.record is default


@pytest.mark.integration
def test_json_file_source(tmp_path):
    path = tmp_path / "resume.json"
    path.write_text(json.dumps(REMOTE_DOCUMENT), encoding="utf-8")
    store = ResumeStore(source=path)

    asyncio.run(store.load())

    assert store.record.personal.title == "Data Engineer"
    assert store.record.experience[0].technologies == ("Python", "Spark")


@pytest.mark.integration
def test_yaml_file_source(tmp_path):
    path = tmp_path / "resume.yaml"
    path.write_text(
        "personal:\n"
        "  name: Jane Doe\n"
        "  title: Data Engineer\n"
        "skills:\n"
        "  tools: [Airflow, dbt]\n",
        encoding="utf-8",
    )
    store = ResumeStore(source=path)

    asyncio.run(store.load())

    assert store.record.personal.name == "Jane Doe"
    assert store.record.all_skills() == ["Airflow", "dbt"]


@pytest.mark.integration
def test_missing_file_keeps_default_record(tmp_path):
    store = ResumeStore(source=tmp_path / "absent.json")
    default = store.record

    asyncio.run(store.load())

    assert store.record is default
    assert store.load_attempted


@pytest.mark.integration
def test_no_source_never_loads():
    store = ResumeStore()
    default = store.record

    assert asyncio.run(store.load()) is default
    assert not store.load_attempted


@pytest.mark.integration
def test_replace_is_wholesale(store):
    store.replace({"personalInfo": {"name": "Only A Name"}})

    assert store.record.personal.name == "Only A Name"
    assert store.record.experience == ()
    assert store.record.skills == {}
