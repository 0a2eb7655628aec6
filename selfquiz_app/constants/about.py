"""Static metadata describing SelfQuiz."""

APP_NAME = "SelfQuiz"
APP_VERSION = "0.1"
APP_ABOUT_TEXT = (
    "SelfQuiz is a self-study question bank viewer built with Qt and FastAPI. "
    "Pick a level and a knowledge point, answer the cards, and read the explanation "
    "revealed after each answer."
)
