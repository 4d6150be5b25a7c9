"""Styling module for PocketQuiz."""

from .color_palette import ColorPalette

__all__ = ["ColorPalette"]
