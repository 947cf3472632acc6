# -*- coding: utf-8 -*-
"""
src/lorebook_reader/core/layout.py

Calibration constants for a fixed-layout in-game document.

Every pixel offset the detection and extraction pipeline uses lives in a
single frozen `BookLayout` value. Supporting another document type means
creating another `BookLayout`, not changing the pipeline code.
"""

from dataclasses import dataclass
from typing import Tuple

from .models import ColorSample, Rect

# Per-channel closed interval [low, high].
ColorRange = Tuple[int, int]


@dataclass(frozen=True)
class BookLayout:
    """Pixel geometry and color calibration of one document type."""

    # Marker position relative to the top-left corner of the book.
    offset_x: int = 192
    offset_y: int = 290
    # Fixed size of the book rectangle.
    width: int = 450
    height: int = 320

    # Page numbers: baseline y and the x start for each side.
    page_number_y: int = 309
    page_left_x: int = 12
    page_right_x: int = 424
    page_ink: ColorSample = (0, 0, 0)

    # Body text rows.
    first_row_y: int = 58
    row_pitch: int = 16
    rows_per_column: int = 15
    column_xs: Tuple[int, ...] = (0, 238)

    # Row start color scan.
    scan_width: int = 40
    scan_row_offset: int = 2
    background: Tuple[ColorRange, ColorRange, ColorRange] = (
        (169, 248),  # Red
        (117, 224),  # Green
        (62, 177),   # Blue
    )

    # Region fingerprinted to tell book instances apart.
    title_region: Rect = Rect(110, 8, 200, 8)

    @property
    def line_count(self) -> int:
        """Total number of body lines in a document."""
        return self.rows_per_column * len(self.column_xs)

    def row_y(self, row_index: int) -> int:
        """Baseline y-coordinate of the given row within a column."""
        return self.first_row_y + self.row_pitch * row_index

    def rect_at(self, marker_x: int, marker_y: int) -> Rect:
        """Book rectangle for a marker found at (marker_x, marker_y)."""
        return Rect(marker_x - self.offset_x, marker_y - self.offset_y, self.width, self.height)


LORE_BOOK_LAYOUT = BookLayout()
