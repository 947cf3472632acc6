import logging

from lorebook_reader.core.layout import LORE_BOOK_LAYOUT
from lorebook_reader.core.locator import BookLocator
from lorebook_reader.core.models import Rect
from pixel_helpers import make_canvas, paste


def test_marker_absent_returns_none(marker):
    assert BookLocator(marker).locate(make_canvas(800, 600)) is None


def test_rect_is_offset_from_marker(marker):
    screen = make_canvas(800, 700)
    paste(screen, marker, 400, 350)

    rect = BookLocator(marker).locate(screen)

    assert rect == Rect(400 - 192, 350 - 290, 450, 320)


def test_multiple_matches_use_the_first_and_warn(marker, caplog):
    screen = make_canvas(900, 800)
    paste(screen, marker, 600, 500)
    paste(screen, marker, 300, 400)

    with caplog.at_level(logging.WARNING):
        rect = BookLocator(marker).locate(screen)

    assert rect == Rect(300 - 192, 400 - 290, 450, 320)
    assert "More than one possible lore book found" in caplog.text


def test_located_rects_have_fixed_size(marker):
    fake_matches = [[(0, 0)], [(192, 290)], [(1000, 40)]]
    for matches in fake_matches:
        locator = BookLocator(marker, search=lambda screen, needle, m=matches: m)
        rect = locator.locate(make_canvas(10, 10))
        assert (rect.width, rect.height) == (LORE_BOOK_LAYOUT.width, LORE_BOOK_LAYOUT.height)
