# -*- coding: utf-8 -*-
"""
src/lorebook_reader/core/line_extractor.py

Thin wrapper around the glyph recognizer that always yields a string.
"""

import logging
from typing import Optional

import numpy as np

from .glyph_reader import BitmapFont, GlyphReader
from .models import ColorSample

logger = logging.getLogger(__name__)


class LineExtractor:
    """Reads single lines of a fixed font, normalizing "nothing read" to ""."""

    def __init__(self, font: BitmapFont, recognizer: Optional[GlyphReader] = None):
        self.font = font
        self.recognizer = recognizer if recognizer is not None else GlyphReader()

    def extract_line(
        self,
        buffer: np.ndarray,
        color: ColorSample,
        x: int,
        y: int,
        forward: bool = True,
        backward: bool = False
    ) -> str:
        """
        Reads the line at (x, y) in the given ink color.

        Returns:
            str: The recognized text, or an empty string if nothing was recognized.
        """
        result = self.recognizer.read_line(buffer, self.font, color, x, y, forward, backward)
        if result is None or not result.text:
            return ""
        logger.debug(f"Read '{result.text}' at ({x}, {y}).")
        return result.text
