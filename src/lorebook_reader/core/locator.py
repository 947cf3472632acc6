# -*- coding: utf-8 -*-
"""
src/lorebook_reader/core/locator.py

Locates an open lore book on a full-screen capture.

A small marker image cut from a visually unique corner of the book is
searched for on screen. The book's rectangle is then derived from the
marker position using the fixed offsets of the layout.
"""

import logging
from typing import Callable, List, Optional, Tuple

import numpy as np

from .layout import LORE_BOOK_LAYOUT, BookLayout
from .models import Rect
from .pixels import find_subimage

logger = logging.getLogger(__name__)

SubimageSearch = Callable[[np.ndarray, np.ndarray], List[Tuple[int, int]]]


class BookLocator:
    """
    Finds the book rectangle from the marker template.

    Args:
        marker (np.ndarray): RGBA marker template.
        layout (BookLayout): Calibration offsets and book size.
        search (SubimageSearch): Subimage search primitive; defaults to
            `pixels.find_subimage`.
    """

    def __init__(
        self,
        marker: np.ndarray,
        layout: BookLayout = LORE_BOOK_LAYOUT,
        search: Optional[SubimageSearch] = None
    ):
        self.marker = marker
        self.layout = layout
        self.search = search if search is not None else find_subimage

    def locate(self, screen: np.ndarray) -> Optional[Rect]:
        """
        Returns the book rectangle on `screen`, or None if the marker is absent.

        When the marker matches more than once the first match (top-most, then
        left-most) is used and a warning is logged.
        """
        matches = self.search(screen, self.marker)
        if not matches:
            logger.debug("Lore book marker not found on screen.")
            return None

        if len(matches) > 1:
            logger.warning(
                f"More than one possible lore book found ({len(matches)} matches); using the first."
            )

        marker_x, marker_y = matches[0]
        rect = self.layout.rect_at(marker_x, marker_y)
        logger.info(f"Lore book located at {rect}.")
        return rect
