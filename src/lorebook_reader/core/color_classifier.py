# -*- coding: utf-8 -*-
"""
src/lorebook_reader/core/color_classifier.py

Finds the ink color of a text row.

Body text is drawn in a handful of warm tones on a parchment background whose
colors fall inside a known per-channel band. The first pixel just above the
baseline that leaves that band is taken to be ink, and its color tells the
glyph reader which pixels make up the text.
"""

import logging

import numpy as np

from .layout import LORE_BOOK_LAYOUT, BookLayout
from .models import NO_TEXT, RowScan, ScanStatus

logger = logging.getLogger(__name__)


def is_background(pixel: np.ndarray, layout: BookLayout = LORE_BOOK_LAYOUT) -> bool:
    """True if every RGB channel of `pixel` lies inside the layout's background band."""
    return all(low <= int(pixel[channel]) <= high for channel, (low, high) in enumerate(layout.background))


def classify_row_start(
    buffer: np.ndarray,
    x: int,
    y: int,
    layout: BookLayout = LORE_BOOK_LAYOUT
) -> RowScan:
    """
    Scans pixels (x + k, y - scan_row_offset) for k in [0, scan_width).

    Args:
        buffer (np.ndarray): RGBA capture of the book.
        x (int): Column where the row starts.
        y (int): Baseline of the row.
        layout (BookLayout): Calibration to use.

    Returns:
        RowScan: FOUND with the (R, G, B) of the first out-of-band pixel, or
        NO_TEXT if the whole run is background. Pixels beyond the buffer edge
        end the scan.
    """
    height, width = buffer.shape[:2]
    row = y - layout.scan_row_offset
    if not 0 <= row < height:
        return NO_TEXT

    for offset in range(layout.scan_width):
        col = x + offset
        if col >= width:
            break
        pixel = buffer[row, col]
        if not is_background(pixel, layout):
            color = (int(pixel[0]), int(pixel[1]), int(pixel[2]))
            logger.debug(f"Ink color {color} found at ({col}, {row}).")
            return RowScan(ScanStatus.FOUND, color)

    return NO_TEXT
