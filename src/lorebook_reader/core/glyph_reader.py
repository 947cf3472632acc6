# -*- coding: utf-8 -*-
"""
src/lorebook_reader/core/glyph_reader.py

Bitmap-font glyph recognition for single lines of game text.

Game fonts are rendered pixel-exact, so instead of a general OCR model a line
is read by isolating the pixels of one known ink color and matching them,
column by column, against the glyph masks of a `BitmapFont`.

Font definitions are JSON files:

    {
        "height": 10,
        "baseline": 8,
        "space_width": 3,
        "glyphs": [{"char": "a", "rows": [".##.", "#..#", ...]}, ...]
    }

where "#" marks an ink pixel. `scripts/build_glyph_font.py` generates them
from TrueType fonts.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import numpy as np

from ..exceptions import AssetLoadError
from .models import ColorSample, LineResult

logger = logging.getLogger(__name__)

INK_CHAR = "#"


def _trim_columns(mask: np.ndarray) -> np.ndarray:
    """Drops leading and trailing columns that contain no ink."""
    inked = np.flatnonzero(mask.any(axis=0))
    if inked.size == 0:
        return mask[:, 0:0]
    return mask[:, inked[0]:inked[-1] + 1]


@dataclass
class BitmapFont:
    """
    A pixel font: one boolean mask per character, all of the same height.

    Attributes:
        height (int): Height in pixels of every glyph mask.
        baseline (int): Offset from the top of a glyph mask to the text baseline.
            A line read "at y" covers rows [y - baseline, y - baseline + height).
        space_width (int): Minimum blank gap, in pixels, that separates words.
        glyphs (Dict[str, np.ndarray]): Character to (height, width) bool mask.
    """

    height: int
    baseline: int
    space_width: int
    glyphs: Dict[str, np.ndarray] = field(default_factory=dict)

    def __post_init__(self):
        trimmed = {}
        for char, mask in self.glyphs.items():
            mask = _trim_columns(np.asarray(mask, dtype=bool))
            if mask.shape[0] != self.height:
                raise ValueError(
                    f"Glyph '{char}' is {mask.shape[0]}px high, font height is {self.height}px."
                )
            if mask.shape[1] == 0:
                logger.debug(f"Skipping glyph '{char}' without ink.")
                continue
            trimmed[char] = mask
        self.glyphs = trimmed

    @classmethod
    def from_dict(cls, data: dict) -> "BitmapFont":
        glyphs = {}
        for entry in data["glyphs"]:
            rows = entry["rows"]
            glyphs[entry["char"]] = np.array(
                [[pixel == INK_CHAR for pixel in row] for row in rows], dtype=bool
            )
        return cls(
            height=int(data["height"]),
            baseline=int(data["baseline"]),
            space_width=int(data["space_width"]),
            glyphs=glyphs,
        )

    def to_dict(self) -> dict:
        return {
            "height": self.height,
            "baseline": self.baseline,
            "space_width": self.space_width,
            "glyphs": [
                {
                    "char": char,
                    "rows": ["".join(INK_CHAR if pixel else "." for pixel in row) for row in mask],
                }
                for char, mask in self.glyphs.items()
            ],
        }


def load_font(path: Union[str, Path]) -> BitmapFont:
    """
    Loads a JSON font definition.

    Raises:
        AssetLoadError: If the file is missing or malformed.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        font = BitmapFont.from_dict(data)
    except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        raise AssetLoadError(f"Could not load glyph font '{path}': {e}") from e

    logger.info(f"Loaded glyph font '{path}' with {len(font.glyphs)} glyphs.")
    return font


class GlyphReader:
    """
    Reads one line of text of a known ink color starting from a pixel.

    Args:
        color_tolerance (int): Maximum per-channel difference from the ink
            color for a pixel to count as ink.
        max_mismatch (int): Pixels allowed to differ between a glyph mask and
            the ink under it.
        search_width (int): How far from the start pixel the first glyph may be.
        max_gap (Optional[int]): Blank columns that end the line once text has
            been read. Defaults to three spaces plus two pixels.
    """

    def __init__(
        self,
        color_tolerance: int = 24,
        max_mismatch: int = 0,
        search_width: int = 40,
        max_gap: Optional[int] = None
    ):
        self.color_tolerance = color_tolerance
        self.max_mismatch = max_mismatch
        self.search_width = search_width
        self.max_gap = max_gap

    def read_line(
        self,
        buffer: np.ndarray,
        font: BitmapFont,
        color: ColorSample,
        x: int,
        y: int,
        forward: bool = True,
        backward: bool = False
    ) -> Optional[LineResult]:
        """
        Recognizes the line whose baseline passes through (x, y).

        Args:
            buffer (np.ndarray): RGBA pixel buffer.
            font (BitmapFont): Font the line is rendered in.
            color (ColorSample): Ink color of the text.
            x (int): Start column. Forward reading starts here, backward reading ends here.
            y (int): Baseline row.
            forward (bool): Read rightwards from x (left-aligned text).
            backward (bool): Read leftwards from x (right-aligned text).

        Returns:
            Optional[LineResult]: The recognized text and its horizontal extent,
            or None if no glyph was recognized.
        """
        band = self._ink_band(buffer, font, color, y)
        if band is None:
            return None

        parts: List[Tuple[str, int, int]] = []
        if backward:
            result = self._scan(band, font, x if not forward else x - 1, step=-1)
            if result:
                parts.append(result)
        if forward:
            result = self._scan(band, font, x, step=1)
            if result:
                parts.append(result)

        if not parts:
            return None

        text, start, end = parts[0]
        for next_text, next_start, next_end in parts[1:]:
            separator = " " if next_start - end >= font.space_width else ""
            text = text + separator + next_text
            end = next_end
        return LineResult(text=text, x=start, width=end - start)

    def _ink_band(
        self, buffer: np.ndarray, font: BitmapFont, color: ColorSample, y: int
    ) -> Optional[np.ndarray]:
        top = y - font.baseline
        if top < 0 or top + font.height > buffer.shape[0]:
            logger.debug(f"Line at y={y} does not fit inside the buffer.")
            return None
        rows = buffer[top:top + font.height, :, :3].astype(np.int16)
        target = np.array(color, dtype=np.int16)
        return np.all(np.abs(rows - target) <= self.color_tolerance, axis=2)

    def _match(self, band: np.ndarray, font: BitmapFont, edge: int, step: int) -> Optional[Tuple[str, int]]:
        """Best glyph whose left edge (step=1) or right edge (step=-1) is at `edge`."""
        best = None
        best_key = (-1, -1)
        for char, mask in font.glyphs.items():
            width = mask.shape[1]
            left = edge if step > 0 else edge - width + 1
            if left < 0 or left + width > band.shape[1]:
                continue
            window = band[:, left:left + width]
            if np.count_nonzero(window != mask) > self.max_mismatch:
                continue
            key = (int(np.count_nonzero(mask)), width)
            if key > best_key:
                best, best_key = (char, width), key
        return best

    def _scan(self, band: np.ndarray, font: BitmapFont, start: int, step: int) -> Optional[Tuple[str, int, int]]:
        max_gap = self.max_gap if self.max_gap is not None else 3 * font.space_width + 2
        width = band.shape[1]
        chars: List[str] = []
        first = last = None
        gap = 0
        col = start

        while 0 <= col < width:
            if first is None and abs(col - start) >= self.search_width:
                break
            if first is not None and gap > max_gap:
                break

            if not band[:, col].any():
                gap += 1
                col += step
                continue

            match = self._match(band, font, col, step)
            if match is None:
                # Unrecognized ink; skip the column.
                col += step
                continue

            char, glyph_width = match
            if first is not None and gap >= font.space_width:
                chars.append(" ")
            chars.append(char)
            if first is None:
                first = col
            last = col + step * (glyph_width - 1)
            col = last + step
            gap = 0

        if not chars:
            return None
        if step > 0:
            return "".join(chars), first, last + 1
        return "".join(reversed(chars)), last, first + 1
