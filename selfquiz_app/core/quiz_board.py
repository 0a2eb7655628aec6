"""Results container and render coordination shared between UI and API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from threading import Lock

from bs4 import Tag

from selfquiz_app.constants.ui_constants import (
    EMPTY_LEVEL_MESSAGE,
    EMPTY_QUESTION_LIST_MESSAGE,
    LOAD_FAILED_MESSAGE,
    RESULTS_CONTAINER_ID,
)
from selfquiz_app.core.card_builder import CardBuilder
from selfquiz_app.core.grading import UnknownOptionError
from selfquiz_app.core.models import (
    KnowledgeSelection,
    QuestionRecord,
    RenderedCard,
    SelectionOutcome,
)
from selfquiz_app.core.question_sources import QuestionFetchError, QuestionSource
from selfquiz_app.core.typesetting import TypesettingTrigger
from selfquiz_app.utils.dom_helpers import clear_element, create_element

logger = logging.getLogger(__name__)


class UnknownCardError(LookupError):
    """Raised when a selection targets a card that is not on the board."""


@dataclass(frozen=True, slots=True)
class RenderOutcome:
    """Summary of one ``load_questions`` call."""

    selection: KnowledgeSelection | None
    generation: int
    card_count: int
    placeholder: str | None = None
    applied: bool = True


class QuizBoard:
    """Owns the results container and the cards currently shown in it.

    Every render bumps a generation counter before fetching. A render whose
    fetch completes after a newer render has started is dropped instead of
    being appended to the newer list.
    """

    def __init__(
        self,
        source: QuestionSource,
        trigger: TypesettingTrigger | None = None,
        card_builder: CardBuilder | None = None,
    ) -> None:
        self._lock = Lock()
        self._source = source
        self._trigger = trigger or TypesettingTrigger.with_default_engines()
        self._builder = card_builder or CardBuilder(trigger=self._trigger)
        self._container = create_element(self._builder.document, "div")
        self._container["id"] = RESULTS_CONTAINER_ID
        self._cards: dict[str, RenderedCard] = {}
        self._generation = 0
        self._selection: KnowledgeSelection | None = None

    # --- Read access ---

    @property
    def container(self) -> Tag:
        return self._container

    def get_selection(self) -> KnowledgeSelection | None:
        with self._lock:
            return self._selection

    def render_container_html(self) -> str:
        with self._lock:
            return str(self._container)

    def render_card_html(self, card_id: str) -> str:
        with self._lock:
            return str(self._get_card(card_id).element)

    # --- Rendering ---

    def get_knowledge_points(self, level: str) -> list[str]:
        return self._source.get_knowledge_points(level)

    def load_level(self, level: str) -> list[str]:
        """Load the knowledge points of ``level`` and render the first one."""
        knowledge_points = self.get_knowledge_points(level)
        if not knowledge_points:
            with self._lock:
                generation = self._begin_render(None)
                self._show_placeholder(EMPTY_LEVEL_MESSAGE)
            logger.info("Level %s has no knowledge points (generation %d)", level, generation)
            return []
        self.load_questions(KnowledgeSelection(level=level, knowledge_point=knowledge_points[0]))
        return knowledge_points

    def load_questions(self, selection: KnowledgeSelection) -> RenderOutcome:
        """Replace the board contents with the cards of ``selection``."""
        with self._lock:
            generation = self._begin_render(selection)

        try:
            payload = self._source.get_question_list(selection.level, selection.knowledge_point)
        except QuestionFetchError:
            logger.exception(
                "Failed to load questions for %s / %s",
                selection.level,
                selection.knowledge_point,
            )
            return self._finish_with_placeholder(generation, selection, LOAD_FAILED_MESSAGE)

        if not isinstance(payload, list) or not payload:
            return self._finish_with_placeholder(generation, selection, EMPTY_QUESTION_LIST_MESSAGE)

        cards = [
            self._builder.build(QuestionRecord.from_mapping(item, fallback_id=str(index + 1)))
            for index, item in enumerate(payload)
            if isinstance(item, Mapping)
        ]

        with self._lock:
            if generation != self._generation:
                return self._discard_stale(generation, selection, len(cards))
            for card in cards:
                self._container.append(card.element)
                self._cards[card.card_id] = card
            self._trigger.run_batch(self._container)

        logger.info(
            "Rendered %d card(s) for %s / %s",
            len(cards),
            selection.level,
            selection.knowledge_point,
        )
        return RenderOutcome(selection=selection, generation=generation, card_count=len(cards))

    # --- Answering ---

    def select(self, card_id: str, option_key: str, sub_id: int | None = None) -> SelectionOutcome | None:
        """Apply a click on ``option_key``; ``None`` when that list is already locked."""
        with self._lock:
            card = self._get_card(card_id)
            group = card.find_group(sub_id)
            if group is None:
                raise UnknownOptionError(f"Card {card_id!r} has no options list for sub id {sub_id}")
            outcome = group.select_key(option_key)
            if outcome is not None:
                # The page replaces the answered card whole.
                self._trigger.typeset_nodes([card.element])
            return outcome

    # --- Internal helpers (call with the lock held) ---

    def _get_card(self, card_id: str) -> RenderedCard:
        card = self._cards.get(card_id)
        if card is None:
            raise UnknownCardError(f"Card {card_id!r} is not on the board")
        return card

    def _begin_render(self, selection: KnowledgeSelection | None) -> int:
        self._generation += 1
        self._selection = selection
        self._cards = {}
        clear_element(self._container)
        return self._generation

    def _show_placeholder(self, message: str) -> None:
        self._container.append(
            create_element(self._builder.document, "div", class_name="placeholder", text=message)
        )

    def _finish_with_placeholder(
        self,
        generation: int,
        selection: KnowledgeSelection,
        message: str,
    ) -> RenderOutcome:
        with self._lock:
            if generation != self._generation:
                return self._discard_stale(generation, selection, 0)
            self._show_placeholder(message)
        return RenderOutcome(selection=selection, generation=generation, card_count=0, placeholder=message)

    def _discard_stale(self, generation: int, selection: KnowledgeSelection, card_count: int) -> RenderOutcome:
        logger.info(
            "Dropping stale render %d for %s / %s; board is at generation %d",
            generation,
            selection.level,
            selection.knowledge_point,
            self._generation,
        )
        return RenderOutcome(
            selection=selection,
            generation=generation,
            card_count=card_count,
            applied=False,
        )
