"""Application entry point for SelfQuiz."""

from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from selfquiz_app.constants.network_constants import DEFAULT_DATA_DIR, DEFAULT_HOST, DEFAULT_PORT
from selfquiz_app.core.question_sources import HttpQuestionSource, LocalQuestionSource
from selfquiz_app.core.quiz_board import QuizBoard
from selfquiz_app.server.api_server import start_api_server
from selfquiz_app.ui.study_main_window import StudyMainWindow
from selfquiz_app.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, start the API server, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting SelfQuiz…")

    data_dir = Path(__file__).resolve().parent / DEFAULT_DATA_DIR
    quiz_board = QuizBoard(LocalQuestionSource(data_dir))
    start_api_server(quiz_board=quiz_board, data_dir=data_dir, host=DEFAULT_HOST, port=DEFAULT_PORT)
    server_url = f"http://{DEFAULT_HOST}:{DEFAULT_PORT}"
    logger.info("Study page available at %s/", server_url)

    app = QApplication(sys.argv)
    source = HttpQuestionSource(server_url)
    window = StudyMainWindow(source=source, server_url=server_url)
    window.resize(1200, 800)
    window.show()
    exit_code = app.exec()
    source.close()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
