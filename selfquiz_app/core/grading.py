"""Selection and grading state machine for rendered options lists.

Every ``ul.options`` of a card is bound to one :class:`OptionGroup`. The
first accepted selection locks the list for the rest of the card's life,
reveals the matching explanation region and marks a wrong pick.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Any

from bs4 import Tag

from selfquiz_app.constants.quiz_constants import (
    FALSE_KEY,
    FALSE_MARKERS,
    SELECTED_CLASS,
    TRUE_FALSE_ANSWER_TEXT,
    TRUE_KEY,
    TRUE_MARKERS,
)
from selfquiz_app.core.entity_decoder import decode
from selfquiz_app.core.models import SelectionOutcome
from selfquiz_app.core.typesetting import TypesettingTrigger
from selfquiz_app.styling.color_palette import ColorPalette
from selfquiz_app.utils.dom_helpers import (
    add_class,
    remove_class,
    set_inner_html,
    set_style,
    set_text,
)

logger = logging.getLogger(__name__)


class UnknownOptionError(LookupError):
    """Raised when a selection names an option the list does not contain."""


class GroupState(Enum):
    UNANSWERED = auto()
    LOCKED = auto()


class GradingMode(Enum):
    """How the correct answer of a list is interpreted."""

    SINGLE = auto()
    TRUE_FALSE = auto()


def normalize_true_false(value: Any) -> str:
    """Map an authored true/false marker to ``"true"`` or ``"false"``.

    Unknown markers fall back to ``"false"`` with a warning instead of
    failing the render.
    """
    if isinstance(value, bool):
        return TRUE_KEY if value else FALSE_KEY
    marker = "" if value is None else str(value).strip()
    if marker in TRUE_MARKERS:
        return TRUE_KEY
    if marker in FALSE_MARKERS:
        return FALSE_KEY
    logger.warning("Unrecognised true/false answer marker: %r", value)
    return FALSE_KEY


class OptionGroup:
    """One options list: ``UNANSWERED`` until the first pick, then ``LOCKED``."""

    def __init__(
        self,
        card_id: str,
        card_element: Tag,
        list_element: Tag,
        mode: GradingMode,
        correct: Any,
        explanation: str | None,
        source: str | None,
        trigger: TypesettingTrigger,
        sub_id: int | None = None,
    ) -> None:
        self.card_id = card_id
        self.card_element = card_element
        self.list_element = list_element
        self.mode = mode
        self.correct = correct
        self.explanation = explanation
        self.source = source
        self.sub_id = sub_id
        self._trigger = trigger
        self._state = GroupState.UNANSWERED

    @property
    def state(self) -> GroupState:
        return self._state

    @property
    def is_locked(self) -> bool:
        return self._state is GroupState.LOCKED

    @property
    def options(self) -> list[Tag]:
        return self.list_element.find_all("li", recursive=False)

    def find_option(self, key: str) -> Tag | None:
        for option in self.options:
            if option.get("data-option") == key:
                return option
        return None

    def select_key(self, key: str) -> SelectionOutcome | None:
        option = self.find_option(key)
        if option is None:
            raise UnknownOptionError(f"Option {key!r} not found in card {self.card_id!r}")
        return self.select(option)

    def select(self, option: Tag) -> SelectionOutcome | None:
        """Apply a click on ``option``; ``None`` when the list is already locked."""
        if not any(option is existing for existing in self.options):
            raise UnknownOptionError(f"Option does not belong to card {self.card_id!r}")
        if self.is_locked:
            logger.debug("Ignoring selection on locked list of card %s", self.card_id)
            return None

        for existing in self.options:
            remove_class(existing, SELECTED_CLASS)
        set_style(self.list_element, {"pointer-events": "none"})
        self._state = GroupState.LOCKED
        add_class(option, SELECTED_CLASS)

        correct_key, answer_text = self._resolve_correct_answer()
        self._reveal_explanation(answer_text)

        selected_key = str(option.get("data-option", ""))
        is_correct = selected_key == correct_key
        if not is_correct:
            set_style(
                option,
                {
                    "background-color": ColorPalette.INCORRECT_OPTION_BG,
                    "border-color": ColorPalette.INCORRECT_OPTION_BORDER,
                },
            )
        return SelectionOutcome(
            card_id=self.card_id,
            sub_id=self.sub_id,
            selected_key=selected_key,
            correct_key=correct_key,
            answer_text=answer_text,
            is_correct=is_correct,
        )

    def _resolve_correct_answer(self) -> tuple[str, str]:
        if self.mode is GradingMode.TRUE_FALSE:
            normalized = normalize_true_false(self.correct)
            return normalized, TRUE_FALSE_ANSWER_TEXT[normalized]
        correct = "" if self.correct is None else str(self.correct)
        return correct, correct

    def _explanation_region(self) -> Tag | None:
        if self.sub_id is not None:
            return self.card_element.select_one(f".sub-explanation.sub-{self.sub_id}")
        return self.card_element.select_one(".explanation")

    def _reveal_explanation(self, answer_text: str) -> None:
        region = self._explanation_region()
        if region is None:
            logger.warning("Card %s has no explanation region for sub id %s", self.card_id, self.sub_id)
            return
        set_style(region, {"display": "block"})
        answer_slot = region.select_one(".answer-text")
        if answer_slot is not None:
            set_text(answer_slot, answer_text)
        explanation_slot = region.select_one(".explanation-text")
        if explanation_slot is not None:
            set_inner_html(explanation_slot, decode(self.explanation))
            self._trigger.typeset_nodes([explanation_slot])
