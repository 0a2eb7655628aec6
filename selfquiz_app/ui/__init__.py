"""Qt UI components for the study application."""

from .study_main_window import StudyMainWindow

__all__ = ["StudyMainWindow"]
