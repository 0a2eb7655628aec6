"""Qt main window: level buttons, knowledge-point list and the card view."""

from __future__ import annotations

import logging
from urllib.parse import quote

from PySide6.QtCore import Qt, QUrl
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QButtonGroup,
    QHBoxLayout,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from selfquiz_app.constants.ui_constants import (
    DEFAULT_LEVEL,
    EMPTY_KNOWLEDGE_LIST_ITEM,
    KNOWLEDGE_LIST_WIDTH,
    LEVELS,
    WINDOW_TITLE,
)
from selfquiz_app.core.question_sources import QuestionSource
from selfquiz_app.styling.styles import Styles

logger = logging.getLogger(__name__)

_KNOWLEDGE_ROLE = Qt.UserRole


class StudyMainWindow(QMainWindow):
    """Navigation shell around the server-rendered question cards."""

    def __init__(self, source: QuestionSource, server_url: str) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.source = source
        self.server_url = server_url.rstrip("/")
        self._current_level = DEFAULT_LEVEL
        self._current_knowledge: str | None = None

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())
        self._load_level(self._current_level)

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        button_row = QHBoxLayout()
        self.level_buttons = QButtonGroup(self)
        self.level_buttons.setExclusive(True)
        for level, label in LEVELS:
            button = QPushButton(label, self)
            button.setCheckable(True)
            button.setChecked(level == DEFAULT_LEVEL)
            button.clicked.connect(lambda _checked=False, value=level: self._handle_level_clicked(value))
            self.level_buttons.addButton(button)
            button_row.addWidget(button)
        button_row.addStretch(1)
        root_layout.addLayout(button_row)

        content_row = QHBoxLayout()
        self.knowledge_list = QListWidget(self)
        self.knowledge_list.setFixedWidth(KNOWLEDGE_LIST_WIDTH)
        self.knowledge_list.itemClicked.connect(self._handle_knowledge_clicked)
        content_row.addWidget(self.knowledge_list)

        self.card_view = QWebEngineView(self)
        content_row.addWidget(self.card_view, stretch=1)
        root_layout.addLayout(content_row, stretch=1)

    def _handle_level_clicked(self, level: str) -> None:
        if level == self._current_level:
            return
        self._current_level = level
        self._load_level(level)

    def _handle_knowledge_clicked(self, item: QListWidgetItem) -> None:
        knowledge_point = item.data(_KNOWLEDGE_ROLE)
        if not knowledge_point or knowledge_point == self._current_knowledge:
            return
        self._show_knowledge_point(knowledge_point)

    def _load_level(self, level: str) -> None:
        self.knowledge_list.clear()
        self._current_knowledge = None

        knowledge_points = self.source.get_knowledge_points(level)
        if not knowledge_points:
            placeholder = QListWidgetItem(EMPTY_KNOWLEDGE_LIST_ITEM)
            placeholder.setFlags(Qt.NoItemFlags)
            self.knowledge_list.addItem(placeholder)
        else:
            for knowledge_point in knowledge_points:
                item = QListWidgetItem(knowledge_point)
                item.setData(_KNOWLEDGE_ROLE, knowledge_point)
                self.knowledge_list.addItem(item)
            self.knowledge_list.setCurrentRow(0)
            self._current_knowledge = knowledge_points[0]

        # The server renders the first knowledge point or the empty-level placeholder.
        logger.info("Showing level %s", level)
        self.card_view.setUrl(QUrl(f"{self.server_url}/view/{quote(level, safe='')}"))

    def _show_knowledge_point(self, knowledge_point: str) -> None:
        self._current_knowledge = knowledge_point
        url = (
            f"{self.server_url}/view/{quote(self._current_level, safe='')}"
            f"/{quote(knowledge_point, safe='')}"
        )
        logger.info("Showing %s / %s", self._current_level, knowledge_point)
        self.card_view.setUrl(QUrl(url))
