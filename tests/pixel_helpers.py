"""Synthetic screens, glyphs and capture fakes shared by the tests."""

from __future__ import annotations

import numpy as np

from lorebook_reader.core.glyph_reader import BitmapFont
from lorebook_reader.core.models import Rect

PARCHMENT = (200, 170, 120)
INK = (40, 25, 10)
BLACK = (0, 0, 0)

GLYPH_ROWS = {
    "H": [
        "#...#",
        "#...#",
        "#...#",
        "#####",
        "#...#",
        "#...#",
        "#...#",
    ],
    "i": [
        "#",
        ".",
        "#",
        "#",
        "#",
        "#",
        "#",
    ],
    "1": [
        ".#",
        "##",
        ".#",
        ".#",
        ".#",
        ".#",
        ".#",
    ],
    "2": [
        "###",
        "..#",
        "..#",
        "###",
        "#..",
        "#..",
        "###",
    ],
}


def make_font() -> BitmapFont:
    return BitmapFont.from_dict({
        "height": 7,
        "baseline": 6,
        "space_width": 3,
        "glyphs": [{"char": char, "rows": rows} for char, rows in GLYPH_ROWS.items()],
    })


def make_canvas(width: int, height: int, color=PARCHMENT) -> np.ndarray:
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[:, :, :3] = color
    canvas[:, :, 3] = 255
    return canvas


def text_width(font: BitmapFont, text: str) -> int:
    width = 0
    for char in text:
        width += font.space_width if char == " " else font.glyphs[char].shape[1] + 1
    return width - 1


def paint_text(buffer: np.ndarray, font: BitmapFont, text: str, x: int, y: int, color) -> None:
    """Draws `text` with its first column at x and its baseline at y, 1px letter spacing."""
    top = y - font.baseline
    col = x
    for char in text:
        if char == " ":
            col += font.space_width
            continue
        mask = font.glyphs[char]
        region = buffer[top:top + font.height, col:col + mask.shape[1]]
        region[mask] = (*color, 255)
        col += mask.shape[1] + 1


def make_marker(seed: int = 7, size: int = 20) -> np.ndarray:
    rng = np.random.default_rng(seed)
    marker = rng.integers(0, 256, size=(size, size, 4), dtype=np.uint8)
    marker[:, :, 3] = 255
    return marker


def paste(buffer: np.ndarray, image: np.ndarray, x: int, y: int) -> None:
    h, w = image.shape[:2]
    buffer[y:y + h, x:x + w] = image


class FakeCapturer:
    """Serves a fixed screen; regions are cut out of it."""

    def __init__(self, screen: np.ndarray, region: np.ndarray | None = None):
        self.screen = screen
        self.region = region
        self.region_calls: list[Rect] = []

    def capture_full_screen(self) -> np.ndarray:
        return self.screen.copy()

    def capture_region(self, rect: Rect):
        self.region_calls.append(rect)
        if self.region is not None:
            return self.region.copy()
        if rect.x < 0 or rect.y < 0:
            return None
        return self.screen[rect.y:rect.bottom, rect.x:rect.right].copy()


