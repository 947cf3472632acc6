# -*- coding: utf-8 -*-
"""
src/lorebook_reader/core/pixels.py

Low-level pixel primitives used by the lore book pipeline.

All functions operate on RGBA NumPy arrays of shape (height, width, 4) and
dtype uint8. This module provides:

- image loading and channel-order conversion,
- subimage search (exact-ish template matching with transparent pixels),
- tolerance-scored comparison of a template at a fixed offset,
- a perceptual (difference) hash of a region.
"""

import logging
from pathlib import Path
from typing import List, Tuple, Union

import cv2
import numpy as np

from ..exceptions import AssetLoadError
from .models import NO_OVERLAP_SCORE, Rect

logger = logging.getLogger(__name__)

# Per-channel RMS difference still accepted as a subimage match. Absorbs the
# floating point error of cv2.matchTemplate.
SUBIMAGE_TOLERANCE = 4.0

# Largest summed |dR| + |dG| + |dB| between two pixels.
MAX_PIXEL_DIFFERENCE = 3 * 255

# Hash grid: 16 horizontal gradients on each of 4 rows = 64 bits.
HASH_GRID = (17, 4)


def bgra_to_rgba(image: np.ndarray) -> np.ndarray:
    """Converts a BGRA array (as produced by mss) to RGBA."""
    return cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA)


def load_image_rgba(path: Union[str, Path]) -> np.ndarray:
    """
    Loads an image file as an RGBA array, keeping any alpha channel.

    Args:
        path (Union[str, Path]): Path to a PNG (or any format OpenCV reads).

    Returns:
        np.ndarray: The image in RGBA channel order.

    Raises:
        AssetLoadError: If the file is missing or cannot be decoded.
    """
    image = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
    if image is None:
        raise AssetLoadError(f"Could not load image '{path}'.")

    if image.ndim == 2:
        return cv2.cvtColor(image, cv2.COLOR_GRAY2RGBA)
    if image.shape[2] == 3:
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGBA)
    return cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA)


def crop(buffer: np.ndarray, rect: Rect) -> np.ndarray:
    """Returns the part of `rect` that lies inside `buffer` (may be empty)."""
    h, w = buffer.shape[:2]
    x0, y0 = max(rect.x, 0), max(rect.y, 0)
    x1, y1 = min(rect.right, w), min(rect.bottom, h)
    if x0 >= x1 or y0 >= y1:
        return buffer[0:0, 0:0]
    return buffer[y0:y1, x0:x1]


def find_subimage(
    haystack: np.ndarray,
    needle: np.ndarray,
    tolerance: float = SUBIMAGE_TOLERANCE
) -> List[Tuple[int, int]]:
    """
    Finds every position where `needle` appears inside `haystack`.

    Fully transparent needle pixels (alpha 0) are ignored, so a marker can be
    cut out of its surroundings. A position matches when the per-channel RMS
    difference over the opaque pixels does not exceed `tolerance`.

    Args:
        haystack (np.ndarray): RGBA image to search in.
        needle (np.ndarray): RGBA template to search for.
        tolerance (float): Accepted per-channel RMS difference.

    Returns:
        List[Tuple[int, int]]: Top-left (x, y) of each match, in row-major order.
    """
    hay_h, hay_w = haystack.shape[:2]
    needle_h, needle_w = needle.shape[:2]
    if needle_h == 0 or needle_w == 0 or needle_h > hay_h or needle_w > hay_w:
        return []

    opaque = needle[:, :, 3] > 0
    opaque_count = int(np.count_nonzero(opaque))
    if opaque_count == 0:
        logger.warning("Subimage search called with a fully transparent needle.")
        return []

    hay_rgb = np.ascontiguousarray(haystack[:, :, :3], dtype=np.float32)
    needle_rgb = np.ascontiguousarray(needle[:, :, :3], dtype=np.float32)

    if opaque.all():
        result = cv2.matchTemplate(hay_rgb, needle_rgb, cv2.TM_SQDIFF)
    else:
        mask = np.repeat(opaque[:, :, np.newaxis], 3, axis=2).astype(np.float32)
        result = cv2.matchTemplate(hay_rgb, needle_rgb, cv2.TM_SQDIFF, mask=mask)

    limit = (tolerance ** 2) * 3 * opaque_count
    ys, xs = np.nonzero(np.isfinite(result) & (result <= limit))
    matches = [(int(x), int(y)) for y, x in zip(ys, xs)]
    logger.debug(f"Subimage search found {len(matches)} match(es).")
    return matches


def simple_compare(
    capture: np.ndarray,
    reference: np.ndarray,
    offset_x: int,
    offset_y: int,
    tolerance: int = 0
) -> float:
    """
    Scores how well `reference`, placed at (offset_x, offset_y), matches `capture`.

    Transparent reference pixels are ignored. Each opaque reference pixel
    contributes its summed absolute RGB difference when that exceeds
    `tolerance`, and MAX_PIXEL_DIFFERENCE when it falls outside the capture.

    Returns:
        float: 0 for an exact match, NO_OVERLAP_SCORE when the two regions share
        no pixels, otherwise the positive mismatch magnitude.
    """
    cap_h, cap_w = capture.shape[:2]
    ref_h, ref_w = reference.shape[:2]

    x0, y0 = max(offset_x, 0), max(offset_y, 0)
    x1, y1 = min(offset_x + ref_w, cap_w), min(offset_y + ref_h, cap_h)
    if x0 >= x1 or y0 >= y1:
        return NO_OVERLAP_SCORE

    opaque = reference[:, :, 3] > 0
    ref_slice = (slice(y0 - offset_y, y1 - offset_y), slice(x0 - offset_x, x1 - offset_x))

    region = capture[y0:y1, x0:x1, :3].astype(np.int32)
    expected = reference[ref_slice][:, :, :3].astype(np.int32)
    diff = np.abs(region - expected).sum(axis=2)
    diff[diff <= tolerance] = 0

    inside = opaque[ref_slice]
    missing = int(np.count_nonzero(opaque)) - int(np.count_nonzero(inside))
    return float(int(diff[inside].sum()) + missing * MAX_PIXEL_DIFFERENCE)


def pixel_hash(buffer: np.ndarray, rect: Rect) -> int:
    """
    Computes a 64-bit difference hash of `rect` within `buffer`.

    The region is reduced to a small grayscale grid and each bit records
    whether brightness increases from one cell to the next. Similar regions
    give similar hashes; identical regions give identical hashes.
    """
    region = crop(buffer, rect)
    if region.size == 0:
        return 0

    gray = cv2.cvtColor(np.ascontiguousarray(region), cv2.COLOR_RGBA2GRAY)
    small = cv2.resize(gray, HASH_GRID, interpolation=cv2.INTER_AREA)
    bits = (small[:, 1:] > small[:, :-1]).flatten()
    return sum(1 << i for i, bit in enumerate(bits) if bit)
