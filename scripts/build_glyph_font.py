"""
Builds a JSON glyph font for the lore book reader from a TrueType font.

Usage:
    python scripts/build_glyph_font.py path/to/font.ttf 12 assets/lorebook_font.json

Every character of the character set is rendered with Pillow on a canvas of
the font's full line height, binarized and stored as rows of '#' (ink) and
'.' (background). The glyph reader matches these masks pixel for pixel, so
the font and size must be the ones the game renders with.
"""

import argparse
import json
import string
import sys
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from lorebook_reader.core.glyph_reader import BitmapFont

# Characters that appear in lore book text and page numbers.
CHAR_SET = string.ascii_letters + string.digits + ".,;:!?'\"-()&/"

# Gray level at or above which a rendered pixel counts as ink.
INK_THRESHOLD = 128


def render_glyph(font: ImageFont.FreeTypeFont, char: str, height: int) -> np.ndarray | None:
    """
    Renders a single character as a boolean mask of the full line height.

    Args:
        font: The loaded Pillow font.
        char: The character to render.
        height: Line height (ascent + descent) in pixels.

    Returns:
        A (height, width) bool array, or None if the glyph has no visible pixels.
    """
    try:
        bbox = font.getbbox(char)
    except (TypeError, ValueError):
        return None
    if bbox is None:
        return None

    left, _, right, _ = bbox
    width = right - left
    if width <= 0:
        return None

    image = Image.new("L", (width, height), color=0)
    draw = ImageDraw.Draw(image)
    # Aliased rendering keeps glyph edges crisp like in-game text.
    draw.fontmode = "1"
    # Anchor 'la' puts the ascender line at y=0, so every glyph shares a baseline.
    draw.text((-left, 0), char, font=font, fill=255, anchor="la")

    mask = np.array(image) >= INK_THRESHOLD
    if not mask.any():
        return None
    return mask


def build_font(font_path: str, size: int) -> BitmapFont:
    font = ImageFont.truetype(font_path, size)
    ascent, descent = font.getmetrics()
    height = ascent + descent

    glyphs = {}
    for char in CHAR_SET:
        mask = render_glyph(font, char, height)
        if mask is None:
            print(f"  -> skipping '{char}': nothing rendered")
            continue
        glyphs[char] = mask

    space_width = max(1, round(font.getlength(" ")))
    return BitmapFont(height=height, baseline=ascent, space_width=space_width, glyphs=glyphs)


def main():
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("font", help="TrueType/OpenType font file")
    parser.add_argument("size", type=int, help="font size in pixels")
    parser.add_argument("output", type=Path, help="JSON file to write")
    args = parser.parse_args()

    print(f"--- Building glyph font from {args.font} at {args.size}px ---")
    try:
        font = build_font(args.font, args.size)
    except OSError as e:
        print(f"ERROR: Pillow cannot load '{args.font}': {e}")
        sys.exit(1)

    if not font.glyphs:
        print("ERROR: No glyphs could be rendered.")
        sys.exit(1)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with open(args.output, "w", encoding="utf-8") as f:
        json.dump(font.to_dict(), f, indent=1)
    print(f"--- Wrote {len(font.glyphs)} glyphs to {args.output} ---")


if __name__ == "__main__":
    main()
