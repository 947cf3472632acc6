# -*- coding: utf-8 -*-
"""
The Core Detection Package for the Lore Book Reader.

Modules:
- `layout`: calibration constants of the book (offsets, colors, row pitch).
- `pixels`: subimage search, tolerance comparison and perceptual hash.
- `glyph_reader`: bitmap fonts and single-line glyph recognition.
- `color_classifier`: finds the ink color at the start of a text row.
- `line_extractor`: reads a line, normalizing "nothing read" to "".
- `locator`: finds the book rectangle from the marker template.
- `verifier`: checks a capture against the reference template.
- `book_reader`: the orchestrator producing a `LoreBook`.
- `formatter`: renders a `LoreBook` as text or HTML.
"""

from .book_reader import LoreBookReader
from .glyph_reader import BitmapFont, GlyphReader, load_font
from .layout import LORE_BOOK_LAYOUT, BookLayout
from .models import LoreBook, Rect

__all__ = [
    "LoreBookReader",
    "BitmapFont",
    "GlyphReader",
    "load_font",
    "LORE_BOOK_LAYOUT",
    "BookLayout",
    "LoreBook",
    "Rect",
]
