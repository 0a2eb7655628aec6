"""Centralized styles for the Qt shell and the rendered study page."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets and page CSS."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Microsoft YaHei', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:checked {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: 1px solid {ColorPalette.ACCENT_PRIMARY.get(theme)};
            }}
            QListWidget {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
            }}
            QListWidget::item:selected {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
            }}
        """

    @staticmethod
    def get_card_css() -> str:
        return f"""
      body {{ font-family: 'Segoe UI', 'Microsoft YaHei', system-ui, sans-serif; margin: 0; padding: 1rem; background: {ColorPalette.BACKGROUND_SECONDARY.light}; color: {ColorPalette.TEXT_PRIMARY.light}; }}
      .layout {{ display: flex; gap: 1rem; }}
      .level-bar {{ display: flex; flex-wrap: wrap; gap: 0.5rem; margin-bottom: 1rem; }}
      .level-btn {{ border: 1px solid {ColorPalette.CARD_BORDER}; border-radius: 4px; padding: 0.4rem 0.9rem; background: {ColorPalette.CARD_BG}; cursor: pointer; }}
      .level-btn.active {{ background: {ColorPalette.ACCENT_PRIMARY.light}; color: #fff; }}
      #knowledge-list {{ list-style: none; margin: 0; padding: 0; min-width: 12rem; }}
      .knowledge-item {{ padding: 0.5rem 0.75rem; cursor: pointer; border-radius: 4px; }}
      .knowledge-item.active {{ background: {ColorPalette.OPTION_HOVER_BG}; font-weight: 600; }}
      #right-panel {{ flex: 1; }}
      .question-card {{ background: {ColorPalette.CARD_BG}; border: 1px solid {ColorPalette.CARD_BORDER}; border-radius: 8px; padding: 1rem 1.25rem; margin-bottom: 1rem; }}
      .question-image {{ max-width: 100%; }}
      .options {{ list-style: none; padding: 0; }}
      .options li {{ background: {ColorPalette.OPTION_BG}; border: 1px solid {ColorPalette.CARD_BORDER}; border-radius: 6px; padding: 0.5rem 0.75rem; margin: 0.4rem 0; cursor: pointer; }}
      .options li:hover {{ background: {ColorPalette.OPTION_HOVER_BG}; }}
      .options li.selected {{ border-color: {ColorPalette.OPTION_SELECTED_BORDER}; }}
      .explanation, .sub-explanation {{ background: {ColorPalette.EXPLANATION_BG}; border: 1px solid {ColorPalette.EXPLANATION_BORDER}; border-radius: 6px; padding: 0.5rem 1rem; }}
      .input-output pre {{ background: {ColorPalette.OPTION_BG}; padding: 0.5rem; }}
      .placeholder {{ color: {ColorPalette.PLACEHOLDER_TEXT}; padding: 2rem; text-align: center; }}
"""
