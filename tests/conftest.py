"""Shared fixtures for the SelfQuiz test suite."""

import json
from pathlib import Path

import pytest
import requests

from selfquiz_app.core.card_builder import CardBuilder
from selfquiz_app.core.question_sources import QuestionFetchError
from selfquiz_app.core.typesetting import TypesettingTrigger


class RecordingEngine:
    """Typesetting engine that remembers every batch it was handed."""

    def __init__(self, name="recording"):
        self.name = name
        self.batches = []

    def process(self, nodes):
        self.batches.append(list(nodes))


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self._text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._text is not None:
            return json.loads(self._text)
        return self._payload


class FakeSession:
    """Stand-in for ``requests.Session`` answering from a URL table."""

    def __init__(self, routes=None):
        self.routes = routes or {}
        self.requested = []
        self.closed = False

    def get(self, url, timeout=None):
        self.requested.append(url)
        result = self.routes.get(url)
        if isinstance(result, Exception):
            raise result
        if result is None:
            return FakeResponse(status_code=404)
        return result

    def close(self):
        self.closed = True


class DictQuestionSource:
    """In-memory question source keyed by level and knowledge point."""

    def __init__(self, levels=None):
        self.levels = levels or {}
        self.fetches = []

    def get_knowledge_points(self, level):
        return list(self.levels.get(level, {}))

    def get_question_list(self, level, knowledge_point):
        self.fetches.append((level, knowledge_point))
        try:
            payload = self.levels[level][knowledge_point]
        except KeyError as exc:
            raise QuestionFetchError(f"{level}/{knowledge_point} missing") from exc
        if isinstance(payload, Exception):
            raise payload
        return payload


def write_level(data_dir: Path, level: str, knowledge_points: dict) -> None:
    level_dir = data_dir / level
    level_dir.mkdir(parents=True, exist_ok=True)
    (level_dir / "index.json").write_text(
        json.dumps(list(knowledge_points), ensure_ascii=False), encoding="utf-8"
    )
    for name, records in knowledge_points.items():
        (level_dir / f"{name}.json").write_text(
            json.dumps(records, ensure_ascii=False), encoding="utf-8"
        )


@pytest.fixture
def math_engine():
    return RecordingEngine("math")


@pytest.fixture
def highlighter():
    return RecordingEngine("highlight")


@pytest.fixture
def trigger(highlighter, math_engine):
    return TypesettingTrigger(highlighter=highlighter, math_engine=math_engine)


@pytest.fixture
def builder(trigger):
    return CardBuilder(trigger=trigger)


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")


@pytest.fixture
def truefalse_record():
    return {
        "id": "Q1",
        "type": "truefalse",
        "question": "1 + 1 = 2",
        "correct": "对",
        "explanation": "<b>ok</b>",
        "source": "p1",
    }


@pytest.fixture
def single_record():
    return {
        "id": "Q2",
        "type": "single",
        "question": "Pick the even number.",
        "options": ["A. 1", "B. 2", "C. 3", "D. 5"],
        "correct": "B",
        "explanation": "2 is even.",
        "source": "p2",
    }


@pytest.fixture
def reading_record():
    return {
        "id": "R1",
        "type": "reading",
        "question": "Read the program.",
        "code": "int main() { return a < b; }",
        "sub_questions": [
            {
                "type": "truefalse",
                "question": "It compiles.",
                "correct": "×",
                "explanation": "a and b are undeclared.",
            },
            {
                "type": "single",
                "question": "What does it return?",
                "options": ["A. 0", "B. 1"],
                "correct": "A",
                "explanation": "Nothing sensible.",
            },
        ],
        "explanation": "Program reading.",
        "source": "r-src",
    }
