"""Domain models for the self-quiz application."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from bs4 import Tag

if TYPE_CHECKING:
    from selfquiz_app.core.grading import OptionGroup


class QuestionType(str, Enum):
    """Question kinds understood by the card builder."""

    SINGLE = "single"
    TRUE_FALSE = "truefalse"
    READING = "reading"
    PROGRAMMING = "programming"


@dataclass(frozen=True, slots=True)
class QuestionRecord:
    """One quiz item as stored in the data files.

    Records are authored by hand and are not validated: every field except
    ``id`` may be missing, and ``correct`` is whatever the author typed
    (``"B"``, ``"对"``, ``true``...).
    """

    id: str
    type: str | None = None
    question: str = ""
    image: str | None = None
    options: tuple[str, ...] | None = None
    correct: Any = None
    explanation: str | None = None
    source: str | None = None
    code: str | None = None
    sub_questions: tuple[QuestionRecord, ...] = ()
    input: str | None = None
    output: str | None = None
    sample_input: str | None = None
    sample_output: str | None = None

    @property
    def kind(self) -> QuestionType | None:
        try:
            return QuestionType(self.type)
        except ValueError:
            return None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], fallback_id: str = "") -> QuestionRecord:
        """Build a record from a decoded JSON object."""
        options = data.get("options")
        sub_questions = data.get("sub_questions") or ()
        return cls(
            id=str(data.get("id", fallback_id)),
            type=data.get("type"),
            question=data.get("question") or "",
            image=data.get("image"),
            options=tuple(str(option) for option in options) if options is not None else None,
            correct=data.get("correct"),
            explanation=data.get("explanation"),
            source=data.get("source"),
            code=data.get("code"),
            sub_questions=tuple(
                cls.from_mapping(sub, fallback_id=f"{data.get('id', fallback_id)}.{index + 1}")
                for index, sub in enumerate(sub_questions)
                if isinstance(sub, Mapping)
            ),
            input=data.get("input"),
            output=data.get("output"),
            sample_input=data.get("sample_input"),
            sample_output=data.get("sample_output"),
        )


@dataclass(frozen=True, slots=True)
class KnowledgeSelection:
    """The level / knowledge point pair a render call works on."""

    level: str
    knowledge_point: str


@dataclass(slots=True)
class RenderedCard:
    """A built question card and the option lists it owns."""

    card_id: str
    element: Tag
    option_groups: list[OptionGroup] = field(default_factory=list)

    def find_group(self, sub_id: int | None = None) -> OptionGroup | None:
        for group in self.option_groups:
            if group.sub_id == sub_id:
                return group
        return None


@dataclass(frozen=True, slots=True)
class SelectionOutcome:
    """Result of the first (and only) accepted selection in an options list."""

    card_id: str
    sub_id: int | None
    selected_key: str
    correct_key: str
    answer_text: str
    is_correct: bool
