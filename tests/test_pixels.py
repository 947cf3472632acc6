import math

import cv2
import numpy as np
import pytest

from lorebook_reader.core.models import Rect
from lorebook_reader.core.pixels import (
    MAX_PIXEL_DIFFERENCE,
    crop,
    find_subimage,
    load_image_rgba,
    pixel_hash,
    simple_compare,
)
from lorebook_reader.exceptions import AssetLoadError
from pixel_helpers import make_canvas, make_marker, paste


def test_find_subimage_returns_every_match_in_row_major_order(marker):
    screen = make_canvas(300, 200)
    paste(screen, marker, 150, 120)
    paste(screen, marker, 40, 30)
    paste(screen, marker, 210, 30)

    assert find_subimage(screen, marker) == [(40, 30), (210, 30), (150, 120)]


def test_find_subimage_without_match_is_empty(marker):
    screen = make_canvas(300, 200)
    paste(screen, make_marker(seed=99), 10, 10)

    assert find_subimage(screen, marker) == []


def test_find_subimage_with_needle_larger_than_haystack(marker):
    assert find_subimage(make_canvas(10, 10), marker) == []


def test_find_subimage_ignores_transparent_needle_pixels(marker):
    needle = marker.copy()
    needle[:5, :, 3] = 0
    screen = make_canvas(120, 80)
    paste(screen, marker, 50, 40)
    # Scribble over the part of the screen covered by transparent pixels.
    screen[40:45, 50:70, :3] = 0

    assert find_subimage(screen, needle) == [(50, 40)]


def test_simple_compare_identical_is_zero(marker):
    capture = make_canvas(100, 60)
    paste(capture, marker, 30, 20)

    assert simple_compare(capture, marker, 30, 20) == 0


def test_simple_compare_without_overlap_is_sentinel(marker):
    capture = make_canvas(100, 60)

    assert simple_compare(capture, marker, 100, 0) == math.inf
    assert simple_compare(capture, marker, -20, 0) == math.inf
    assert simple_compare(capture, marker, 0, 60) == math.inf


def test_simple_compare_scores_pixel_differences(marker):
    capture = make_canvas(100, 60)
    paste(capture, marker, 30, 20)
    original = capture[25, 35, :3].astype(int)
    capture[25, 35, :3] = 255 - original

    expected = int(np.abs((255 - original) - original).sum())
    assert simple_compare(capture, marker, 30, 20) == expected


def test_simple_compare_counts_reference_pixels_outside_capture(marker):
    capture = make_canvas(100, 60)
    paste(capture, marker[:, :10], 90, 20)

    # Half of the marker hangs off the right edge.
    assert simple_compare(capture, marker, 90, 20) == 20 * 10 * MAX_PIXEL_DIFFERENCE


def test_simple_compare_ignores_transparent_reference_pixels(marker):
    reference = marker.copy()
    reference[0, 0, 3] = 0
    capture = make_canvas(100, 60)
    paste(capture, marker, 30, 20)
    capture[20, 30, :3] = 0

    assert simple_compare(capture, reference, 30, 20) == 0


def test_pixel_hash_is_stable_and_content_sensitive():
    rng = np.random.default_rng(3)
    buffer = make_canvas(450, 320)
    buffer[8:16, 110:310, :3] = rng.integers(0, 256, size=(8, 200, 3), dtype=np.uint8)
    title = Rect(110, 8, 200, 8)

    first = pixel_hash(buffer, title)
    assert first == pixel_hash(buffer.copy(), title)

    buffer[8:16, 110:210, :3] = 255
    assert pixel_hash(buffer, title) != first


def test_pixel_hash_outside_buffer_is_zero():
    assert pixel_hash(make_canvas(50, 50), Rect(60, 60, 10, 10)) == 0


def test_crop_clips_to_buffer():
    buffer = make_canvas(50, 40)

    assert crop(buffer, Rect(40, 30, 20, 20)).shape[:2] == (10, 10)
    assert crop(buffer, Rect(-5, -5, 10, 10)).shape[:2] == (5, 5)
    assert crop(buffer, Rect(60, 0, 5, 5)).size == 0


def test_load_image_rgba_converts_channel_order(tmp_path):
    bgra = np.zeros((4, 6, 4), dtype=np.uint8)
    bgra[:, :] = (10, 20, 30, 255)
    path = tmp_path / "marker.png"
    assert cv2.imwrite(str(path), bgra)

    image = load_image_rgba(path)

    assert image.shape == (4, 6, 4)
    assert tuple(image[0, 0]) == (30, 20, 10, 255)


def test_load_image_rgba_missing_file(tmp_path):
    with pytest.raises(AssetLoadError):
        load_image_rgba(tmp_path / "missing.png")
