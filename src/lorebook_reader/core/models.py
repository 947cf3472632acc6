# -*- coding: utf-8 -*-
"""
src/lorebook_reader/core/models.py

Value types shared by the detection and extraction pipeline.

Pixel buffers themselves are plain NumPy arrays of shape (height, width, 4)
in RGBA order; the types here describe everything that flows around them.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# An (R, G, B) triple, 0-255 per channel.
ColorSample = Tuple[int, int, int]

# Numeric score the comparator reports when two regions do not overlap.
NO_OVERLAP_SCORE = math.inf


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in screen (or buffer) pixels."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


class ScanStatus(Enum):
    FOUND = "found"
    EMPTY = "empty"


@dataclass(frozen=True)
class RowScan:
    """Outcome of scanning the start of a text row for its ink color."""

    status: ScanStatus
    color: Optional[ColorSample] = None

    @property
    def found(self) -> bool:
        return self.status is ScanStatus.FOUND


NO_TEXT = RowScan(ScanStatus.EMPTY)


class MatchStatus(Enum):
    EXACT = "exact"
    PARTIAL = "partial"
    NO_OVERLAP = "no_overlap"


@dataclass(frozen=True)
class MatchResult:
    """Outcome of comparing a capture against the reference template."""

    status: MatchStatus
    score: float = 0.0

    @classmethod
    def from_score(cls, score: float) -> "MatchResult":
        if score == NO_OVERLAP_SCORE:
            return cls(MatchStatus.NO_OVERLAP, score)
        if score == 0:
            return cls(MatchStatus.EXACT, 0.0)
        return cls(MatchStatus.PARTIAL, score)


@dataclass(frozen=True)
class LineResult:
    """Raw output of the glyph recognizer for a single line."""

    text: str
    x: int
    width: int


@dataclass(frozen=True)
class LoreBook:
    """
    The transcribed content of one open lore book.

    Attributes:
        title (str): Always empty; title glyphs use a font that is not available.
        page_left (str): Left page number, or "?" if it could not be read.
        page_right (str): Right page number, or "?" if it could not be read.
        lines (Tuple[str, ...]): Every left-column row top to bottom, then
            every right-column row. Blank rows are empty strings.
        title_hash (int): Perceptual hash of the title region, used to tell
            book instances apart.
        rows_per_column (int): Number of entries belonging to each column.
    """

    title: str
    page_left: str
    page_right: str
    lines: Tuple[str, ...]
    title_hash: int
    rows_per_column: int = 15

    @property
    def left_column(self) -> Tuple[str, ...]:
        return self.lines[:self.rows_per_column]

    @property
    def right_column(self) -> Tuple[str, ...]:
        return self.lines[self.rows_per_column:]
