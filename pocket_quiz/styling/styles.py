"""Centralized styles shared by the Qt window and rendered HTML."""

from .color_palette import ColorPalette


class Styles:
    """Helper class to generate Qt stylesheets and summary CSS."""

    @staticmethod
    def get_main_window_style() -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY};
                color: {ColorPalette.TEXT_PRIMARY};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY};
                color: {ColorPalette.TEXT_PRIMARY};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG};
                color: {ColorPalette.TEXT_PRIMARY};
                border: 1px solid {ColorPalette.BORDER_PRIMARY};
                border-radius: 4px;
                padding: 8px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG};
            }}
            QPushButton:checked {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT};
                border: 1px solid {ColorPalette.BUTTON_PRIMARY_BG};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.TEXT_DISABLED};
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_prompt_css() -> str:
        return """
      .choices { list-style: none; padding-left: 0; margin-top: 0.75rem; }
      .choices li { margin: 0.35rem 0; }
"""

    @staticmethod
    def get_summary_css() -> str:
        return f"""
      .score {{ font-size: 1.3em; margin-bottom: 1rem; }}
      .question-block {{ margin-bottom: 1.25rem; }}
      .prompt {{ font-weight: bold; margin: 0.75rem 0 0.25rem 0; }}
      .choice {{ margin: 0.15rem 0; }}
      .selected-correct {{ font-weight: bold; color: {ColorPalette.SUCCESS}; }}
      .selected-incorrect {{ text-decoration: line-through; color: {ColorPalette.ERROR}; }}
"""
