# -*- coding: utf-8 -*-
"""
src/lorebook_reader/core/book_reader.py

The lore book reader: locates the book, verifies the capture and assembles
the transcribed `LoreBook`.

A read cycle is fully synchronous:

    screen -> locate -> capture region -> verify -> title hash
           -> page numbers -> 15 left rows -> 15 right rows -> LoreBook

The reader remembers the last located rectangle (`pos`) so a caller can read
again without searching the whole screen.
"""

import logging
import threading
from typing import Callable, List, Optional

import numpy as np

from ..exceptions import CaptureFailedError, NoBookFoundError
from .color_classifier import classify_row_start
from .glyph_reader import BitmapFont, GlyphReader
from .layout import LORE_BOOK_LAYOUT, BookLayout
from .line_extractor import LineExtractor
from .locator import BookLocator
from .models import LoreBook, MatchStatus, Rect
from .pixels import pixel_hash
from .verifier import MatchVerifier

logger = logging.getLogger(__name__)

# Page number placeholder when no digits were recognized.
UNKNOWN_PAGE = "?"


class LoreBookReader:
    """
    Detects and reads lore books.

    Args:
        marker (np.ndarray): RGBA marker template, used both to locate the
            book and as the reference for verification.
        font (BitmapFont): Font of the page numbers and body text.
        capturer: Object providing `capture_full_screen()` and
            `capture_region(rect)` (see `lorebook_reader.capture.ScreenCapturer`).
        layout (BookLayout): Calibration constants.
        recognizer (Optional[GlyphReader]): Glyph recognition primitive.
        hasher (Callable): Perceptual hash primitive.
    """

    def __init__(
        self,
        marker: np.ndarray,
        font: BitmapFont,
        capturer,
        layout: BookLayout = LORE_BOOK_LAYOUT,
        recognizer: Optional[GlyphReader] = None,
        hasher: Callable[[np.ndarray, Rect], int] = pixel_hash
    ):
        self.marker = marker
        self.capturer = capturer
        self.layout = layout
        self.hasher = hasher
        self.locator = BookLocator(marker, layout)
        self.verifier = MatchVerifier()
        self.extractor = LineExtractor(font, recognizer)

        self.pos: Optional[Rect] = None
        # Reentrant so scan() can hold it across its own locate() and read().
        self._lock = threading.RLock()

    def locate(self, screen: Optional[np.ndarray] = None) -> Optional[Rect]:
        """
        Finds the book on `screen` (or a fresh full-screen capture).

        Updates `pos` on success only; a failed locate keeps the previous position.

        Raises:
            CaptureFailedError: The screen could not be captured.

        Returns:
            Optional[Rect]: The book rectangle, or None if it is not on screen.
        """
        with self._lock:
            if screen is None:
                screen = self.capturer.capture_full_screen()

            rect = self.locator.locate(screen)
            if rect is not None:
                self.pos = rect
            return rect

    def read(self, pos: Optional[Rect] = None) -> Optional[LoreBook]:
        """
        Reads the book at `pos`, or at the last located position if omitted.

        Returns:
            Optional[LoreBook]: The transcribed book, or None if the captured
            region does not show the book at all.

        Raises:
            NoBookFoundError: No position was given and none has been located.
            CaptureFailedError: The region could not be captured.
        """
        with self._lock:
            return self._read(pos)

    def _read(self, pos: Optional[Rect]) -> Optional[LoreBook]:
        if pos is None:
            pos = self.pos
        if pos is None:
            raise NoBookFoundError("No lore book found; locate the book before reading it.")

        image = self.capturer.capture_region(pos)
        if image is None:
            raise CaptureFailedError(f"Failed to capture lore book image at {pos}.")

        match = self.verifier.verify(image, self.marker, self.layout.offset_x, self.layout.offset_y)
        if match.status is MatchStatus.NO_OVERLAP:
            logger.info("Captured region does not contain the lore book.")
            return None

        title_hash = self.hasher(image, self.layout.title_region)

        page_left = self.extractor.extract_line(
            image, self.layout.page_ink, self.layout.page_left_x, self.layout.page_number_y,
            forward=True, backward=False
        )
        page_right = self.extractor.extract_line(
            image, self.layout.page_ink, self.layout.page_right_x, self.layout.page_number_y,
            forward=False, backward=True
        )

        lines: List[str] = [""] * self.layout.line_count
        rows = self.layout.rows_per_column
        for column, column_x in enumerate(self.layout.column_xs):
            for row_index in range(rows):
                lines[column * rows + row_index] = self._read_row(
                    image, column_x, self.layout.row_y(row_index)
                )

        book = LoreBook(
            title="",
            page_left=page_left or UNKNOWN_PAGE,
            page_right=page_right or UNKNOWN_PAGE,
            lines=tuple(lines),
            title_hash=title_hash,
            rows_per_column=self.layout.rows_per_column,
        )
        logger.debug(f"Lore book read: {book}")
        return book

    def scan(self, screen: Optional[np.ndarray] = None) -> Optional[LoreBook]:
        """
        Runs one locate-then-read cycle.

        Returns:
            Optional[LoreBook]: The book, or None if it was not found on screen.
        """
        with self._lock:
            rect = self.locate(screen)
            if rect is None:
                logger.info("Lore book not found.")
                return None
            return self.read(rect)

    def _read_row(self, image: np.ndarray, x: int, y: int) -> str:
        scan = classify_row_start(image, x, y, self.layout)
        if not scan.found:
            return ""
        return self.extractor.extract_line(image, scan.color, x, y, forward=True, backward=False)
