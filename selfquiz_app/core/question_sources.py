"""Where question lists and knowledge-point indexes come from.

Data is laid out by convention: ``<level>/index.json`` lists the knowledge
points of a level and ``<level>/<knowledge point>.json`` holds the question
records of one knowledge point.

Architecture note:
    The server renders from :class:`LocalQuestionSource`, reading the data
    directory it also publishes under ``/data``. The desktop shell and any
    other remote consumer use :class:`HttpQuestionSource` against that URL
    convention, so both paths see the same files.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol
from urllib.parse import quote

import requests

from selfquiz_app.constants.network_constants import (
    DATA_URL_PREFIX,
    KNOWLEDGE_INDEX_FILE,
    REQUEST_TIMEOUT_SECONDS,
)

logger = logging.getLogger(__name__)


class QuestionFetchError(Exception):
    """Raised when a question list cannot be fetched or decoded."""


class QuestionSource(Protocol):
    def get_knowledge_points(self, level: str) -> list[str]:
        ...

    def get_question_list(self, level: str, knowledge_point: str) -> Any:
        ...


def _as_name_list(payload: Any) -> list[str]:
    if not isinstance(payload, list):
        return []
    return [str(name) for name in payload]


class HttpQuestionSource:
    """Fetches data files over HTTP with ``requests``."""

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def index_url(self, level: str) -> str:
        return f"{self.base_url}{DATA_URL_PREFIX}/{quote(level, safe='')}/{KNOWLEDGE_INDEX_FILE}"

    def question_list_url(self, level: str, knowledge_point: str) -> str:
        file_name = quote(knowledge_point, safe="") + ".json"
        return f"{self.base_url}{DATA_URL_PREFIX}/{quote(level, safe='')}/{file_name}"

    def get_knowledge_points(self, level: str) -> list[str]:
        """Knowledge-point names of ``level``; empty on any failure."""
        try:
            payload = self._get_json(self.index_url(level))
        except QuestionFetchError:
            logger.exception("Unable to load knowledge points for level %s", level)
            return []
        return _as_name_list(payload)

    def get_question_list(self, level: str, knowledge_point: str) -> Any:
        return self._get_json(self.question_list_url(level, knowledge_point))

    def close(self) -> None:
        self.session.close()

    def _get_json(self, url: str) -> Any:
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise QuestionFetchError(f"Request to {url} failed: {exc}") from exc
        if not response.ok:
            raise QuestionFetchError(f"Unable to load {url}: HTTP {response.status_code}")
        try:
            return response.json()
        except ValueError as exc:
            raise QuestionFetchError(f"Response from {url} is not valid JSON") from exc


class LocalQuestionSource:
    """Reads the same files straight from a data directory."""

    def __init__(self, data_dir: Path) -> None:
        self.data_dir = Path(data_dir)

    def get_knowledge_points(self, level: str) -> list[str]:
        try:
            payload = self._read_json(level, KNOWLEDGE_INDEX_FILE)
        except QuestionFetchError:
            logger.exception("Unable to load knowledge points for level %s", level)
            return []
        return _as_name_list(payload)

    def get_question_list(self, level: str, knowledge_point: str) -> Any:
        return self._read_json(level, f"{knowledge_point}.json")

    def _resolve(self, level: str, file_name: str) -> Path:
        root = self.data_dir.resolve()
        path = (root / level / file_name).resolve()
        if not path.is_relative_to(root):
            raise QuestionFetchError(f"Path {level}/{file_name} escapes the data directory")
        return path

    def _read_json(self, level: str, file_name: str) -> Any:
        path = self._resolve(level, file_name)
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise QuestionFetchError(f"{path} does not exist") from exc
        except (OSError, ValueError) as exc:
            raise QuestionFetchError(f"Unable to read {path}: {exc}") from exc
