"""Color palette for the SelfQuiz shell and rendered question cards."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    # Shell colors
    TEXT_PRIMARY = ThemeColors(light="#1F2933", dark="#F5F5F5")
    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    BACKGROUND_SECONDARY = ThemeColors(light="#F4F6F8", dark="#2D2D2D")
    BORDER_PRIMARY = ThemeColors(light="#D1D5DB", dark="#555555")
    ACCENT_PRIMARY = ThemeColors(light="#2563EB", dark="#4A9EFF")
    BUTTON_PRIMARY_TEXT = ThemeColors(light="#FFFFFF", dark="#000000")
    BUTTON_HOVER_BG = ThemeColors(light="#E5E7EB", dark="#505050")

    # Card colors (the study page is always light)
    CARD_BG = "#FFFFFF"
    CARD_BORDER = "#E5E7EB"
    OPTION_BG = "#F9FAFB"
    OPTION_HOVER_BG = "#EEF2FF"
    OPTION_SELECTED_BORDER = "#2563EB"
    EXPLANATION_BG = "#F0FDF4"
    EXPLANATION_BORDER = "#BBF7D0"
    PLACEHOLDER_TEXT = "#6B7280"

    # Wrong answer treatment applied inline to the clicked option
    INCORRECT_OPTION_BG = "#f8d7da"
    INCORRECT_OPTION_BORDER = "#f5c6cb"
