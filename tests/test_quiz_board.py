"""Tests for the quiz board: rendering, placeholders and selection routing."""

import pytest

from conftest import DictQuestionSource, FakeSession
from selfquiz_app.constants.ui_constants import (
    EMPTY_LEVEL_MESSAGE,
    EMPTY_QUESTION_LIST_MESSAGE,
    LOAD_FAILED_MESSAGE,
)
from selfquiz_app.core.grading import UnknownOptionError
from selfquiz_app.core.models import KnowledgeSelection
from selfquiz_app.core.question_sources import HttpQuestionSource, QuestionFetchError
from selfquiz_app.core.quiz_board import QuizBoard, UnknownCardError


def placeholder_text(board):
    placeholder = board.container.select_one(".placeholder")
    return placeholder.get_text() if placeholder is not None else None


def card_ids(board):
    return [card["id"] for card in board.container.select(".question-card")]


@pytest.fixture
def source(single_record, truefalse_record, reading_record):
    return DictQuestionSource(
        {
            "level1": {
                "basics": [single_record, truefalse_record],
                "reading": [reading_record],
                "empty": [],
                "broken": QuestionFetchError("HTTP 500"),
            },
            "level2": {},
        }
    )


@pytest.fixture
def board(source, trigger):
    return QuizBoard(source, trigger=trigger)


class TestLoadQuestions:
    def test_renders_cards_in_order(self, board):
        outcome = board.load_questions(KnowledgeSelection("level1", "basics"))
        assert outcome.applied
        assert outcome.card_count == 2
        assert card_ids(board) == ["Q2", "Q1"]
        cards = board.container.select(".question-card")
        assert [card["id"] for card in cards] == ["Q2", "Q1"]
        assert board.container["id"] == "right-panel"

    def test_runs_typesetting_once_after_batch(self, board, highlighter, math_engine):
        board.load_questions(KnowledgeSelection("level1", "reading"))
        assert len(highlighter.batches) == 1
        assert math_engine.batches == [[board.container]]

    def test_new_render_replaces_previous_cards(self, board):
        board.load_questions(KnowledgeSelection("level1", "basics"))
        board.load_questions(KnowledgeSelection("level1", "reading"))
        assert card_ids(board) == ["R1"]
        assert len(board.container.select(".question-card")) == 1
        with pytest.raises(UnknownCardError):
            board.select("Q1", "true")

    def test_fetch_failure_shows_placeholder(self, board):
        outcome = board.load_questions(KnowledgeSelection("level1", "broken"))
        assert outcome.placeholder == LOAD_FAILED_MESSAGE
        assert placeholder_text(board) == LOAD_FAILED_MESSAGE
        assert card_ids(board) == []

    def test_empty_list_shows_placeholder(self, board):
        outcome = board.load_questions(KnowledgeSelection("level1", "empty"))
        assert outcome.placeholder == EMPTY_QUESTION_LIST_MESSAGE
        assert placeholder_text(board) == EMPTY_QUESTION_LIST_MESSAGE

    def test_non_list_payload_shows_placeholder(self, trigger):
        board = QuizBoard(DictQuestionSource({"level1": {"odd": {"id": "1"}}}), trigger=trigger)
        board.load_questions(KnowledgeSelection("level1", "odd"))
        assert placeholder_text(board) == EMPTY_QUESTION_LIST_MESSAGE

    def test_records_without_id_get_positional_ids(self, trigger):
        board = QuizBoard(
            DictQuestionSource({"level1": {"kp": [{"type": "truefalse", "question": "x"}]}}),
            trigger=trigger,
        )
        board.load_questions(KnowledgeSelection("level1", "kp"))
        assert card_ids(board) == ["1"]


class TestStaleRenders:
    """A render overtaken by a newer one must not touch the board."""

    def test_overtaken_render_is_dropped(self, single_record, reading_record, trigger):
        board = None

        class InterleavingSource(DictQuestionSource):
            def get_question_list(self, level, knowledge_point):
                if knowledge_point == "slow":
                    board.load_questions(KnowledgeSelection(level, "fast"))
                return super().get_question_list(level, knowledge_point)

        source = InterleavingSource({"level1": {"slow": [single_record], "fast": [reading_record]}})
        board = QuizBoard(source, trigger=trigger)

        outcome = board.load_questions(KnowledgeSelection("level1", "slow"))

        assert not outcome.applied
        assert card_ids(board) == ["R1"]
        assert board.get_selection() == KnowledgeSelection("level1", "fast")
        assert outcome.generation == 1


class TestLoadLevel:
    def test_loads_first_knowledge_point(self, board, source):
        assert board.load_level("level1") == ["basics", "reading", "empty", "broken"]
        assert source.fetches == [("level1", "basics")]
        assert board.get_selection() == KnowledgeSelection("level1", "basics")

    def test_level_without_knowledge_points(self, board):
        assert board.load_level("level2") == []
        assert placeholder_text(board) == EMPTY_LEVEL_MESSAGE
        assert board.get_selection() is None

    def test_index_404_yields_empty_list_and_placeholder(self, trigger):
        board = QuizBoard(HttpQuestionSource("http://quiz.test", session=FakeSession()), trigger=trigger)
        assert board.load_level("level1") == []
        assert placeholder_text(board) == EMPTY_LEVEL_MESSAGE


class TestSelect:
    def test_routes_to_card_group(self, board):
        board.load_questions(KnowledgeSelection("level1", "basics"))
        outcome = board.select("Q1", "false")
        assert outcome.card_id == "Q1"
        assert not outcome.is_correct
        assert board.select("Q1", "true") is None

    def test_routes_to_sub_question(self, board):
        board.load_questions(KnowledgeSelection("level1", "reading"))
        outcome = board.select("R1", "A", sub_id=1)
        assert outcome.is_correct
        assert 'class="sub-explanation sub-1" style="display: block"' in board.render_card_html("R1")

    def test_unknown_card(self, board):
        with pytest.raises(UnknownCardError):
            board.select("nope", "A")

    def test_unknown_sub_question(self, board):
        board.load_questions(KnowledgeSelection("level1", "basics"))
        with pytest.raises(UnknownOptionError):
            board.select("Q2", "A", sub_id=4)

    def test_answer_retypesets_whole_card(self, board, math_engine):
        board.load_questions(KnowledgeSelection("level1", "basics"))
        card = board.container.select_one("#Q2")
        math_engine.batches.clear()

        board.select("Q2", "A")

        assert [card] in math_engine.batches

    def test_locked_answer_does_not_retypeset(self, board, math_engine):
        board.load_questions(KnowledgeSelection("level1", "basics"))
        board.select("Q2", "A")
        math_engine.batches.clear()

        assert board.select("Q2", "B") is None
        assert math_engine.batches == []
