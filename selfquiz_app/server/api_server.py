"""FastAPI server exposing the study page, the data files and the answer endpoint."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from threading import Thread

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel
import uvicorn

from selfquiz_app.constants.about import APP_ABOUT_TEXT, APP_NAME, APP_VERSION
from selfquiz_app.constants.network_constants import DATA_URL_PREFIX, DEFAULT_HOST, DEFAULT_PORT
from selfquiz_app.core.grading import UnknownOptionError
from selfquiz_app.core.models import KnowledgeSelection
from selfquiz_app.core.page_renderer import renderer
from selfquiz_app.core.quiz_board import QuizBoard, UnknownCardError

logger = logging.getLogger(__name__)


class AnswerPayload(BaseModel):
    card_id: str
    option: str
    sub_id: int | None = None


def _get_quiz_board_dependency(quiz_board: QuizBoard):
    def dependency() -> QuizBoard:
        return quiz_board

    return dependency


def create_api_app(quiz_board: QuizBoard, data_dir: Path) -> FastAPI:
    """Create a FastAPI application wired to the provided quiz board."""
    app = FastAPI(title=f"{APP_NAME} API", description=APP_ABOUT_TEXT, version=APP_VERSION)
    quiz_board_dep = _get_quiz_board_dependency(quiz_board)

    app.mount(DATA_URL_PREFIX, StaticFiles(directory=data_dir, check_dir=False), name="data")

    @app.get("/", response_class=HTMLResponse)
    def serve_study_page() -> str:
        return renderer.render_study_page()

    @app.get("/api/levels/{level}")
    def open_level(
        level: str,
        board: QuizBoard = Depends(quiz_board_dep),
    ) -> dict[str, object]:
        """Render the first knowledge point of ``level``, or the empty-level placeholder."""
        knowledge_points = board.load_level(level)
        selection = board.get_selection()
        return {
            "level": level,
            "knowledge_points": knowledge_points,
            "knowledge_point": selection.knowledge_point if selection is not None else None,
            "container_html": board.render_container_html(),
        }

    @app.get("/view/{level}", response_class=HTMLResponse)
    def render_level_page(
        level: str,
        board: QuizBoard = Depends(quiz_board_dep),
    ) -> str:
        board.load_level(level)
        return renderer.render_card_document(board.render_container_html())

    @app.get("/api/levels/{level}/knowledge-points")
    def list_knowledge_points(
        level: str,
        board: QuizBoard = Depends(quiz_board_dep),
    ) -> list[str]:
        return board.get_knowledge_points(level)

    @app.get("/api/levels/{level}/knowledge-points/{knowledge_point}/cards", response_class=HTMLResponse)
    def render_cards(
        level: str,
        knowledge_point: str,
        board: QuizBoard = Depends(quiz_board_dep),
    ) -> str:
        board.load_questions(KnowledgeSelection(level=level, knowledge_point=knowledge_point))
        return board.render_container_html()

    @app.get("/view/{level}/{knowledge_point}", response_class=HTMLResponse)
    def render_card_page(
        level: str,
        knowledge_point: str,
        board: QuizBoard = Depends(quiz_board_dep),
    ) -> str:
        board.load_questions(KnowledgeSelection(level=level, knowledge_point=knowledge_point))
        return renderer.render_card_document(board.render_container_html())

    @app.post("/api/answer")
    def submit_answer(
        payload: AnswerPayload,
        board: QuizBoard = Depends(quiz_board_dep),
    ) -> dict[str, object]:
        try:
            outcome = board.select(payload.card_id, payload.option, sub_id=payload.sub_id)
            card_html = board.render_card_html(payload.card_id)
        except (UnknownCardError, UnknownOptionError) as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc

        if outcome is None:
            raise HTTPException(status_code=409, detail="This question has already been answered.")

        return {
            "card_id": outcome.card_id,
            "sub_id": outcome.sub_id,
            "selected": outcome.selected_key,
            "correct_answer": outcome.answer_text,
            "is_correct": outcome.is_correct,
            "card_html": card_html,
        }

    return app


def start_api_server(
    quiz_board: QuizBoard,
    data_dir: Path,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    startup_timeout: float = 5.0,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(quiz_board, data_dir)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="SelfQuizApiServer", daemon=True)
    thread.start()

    # The Qt shell fetches knowledge points as soon as it opens.
    deadline = time.monotonic() + startup_timeout
    while not server.started and thread.is_alive() and time.monotonic() < deadline:
        time.sleep(0.05)
    if server.started:
        logger.info("API server listening on http://%s:%d/", host, port)
    else:
        logger.warning("API server did not report startup within %.1fs", startup_timeout)
    return thread
