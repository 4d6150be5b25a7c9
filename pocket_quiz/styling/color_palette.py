"""Color palette for PocketQuiz."""

from __future__ import annotations


class ColorPalette:
    """Centralized color definitions for the application."""

    # Text colors
    TEXT_PRIMARY = "#000000"      # Black
    TEXT_DISABLED = "#CCCCCC"     # Light Gray

    # Background colors
    BACKGROUND_PRIMARY = "#FFFFFF"

    # Status colors, also used for summary marks
    SUCCESS = "#107C10"           # Green
    ERROR = "#D13438"             # Red

    # Border colors
    BORDER_PRIMARY = "#D1D1D1"

    # Button colors
    BUTTON_PRIMARY_BG = "#0078D4"     # Blue
    BUTTON_PRIMARY_TEXT = "#FFFFFF"
    BUTTON_SECONDARY_BG = "#F5F5F5"
    BUTTON_HOVER_BG = "#E8E8E8"
