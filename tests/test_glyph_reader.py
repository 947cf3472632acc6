import json

import numpy as np
import pytest

from lorebook_reader.core.glyph_reader import BitmapFont, GlyphReader, load_font
from lorebook_reader.exceptions import AssetLoadError
from pixel_helpers import BLACK, INK, make_canvas, paint_text, text_width

BASELINE = 30


@pytest.fixture
def reader():
    return GlyphReader()


def test_reads_forward_with_word_spacing(font, reader):
    buffer = make_canvas(200, 50)
    paint_text(buffer, font, "Hi 12", 10, BASELINE, INK)

    result = reader.read_line(buffer, font, INK, 5, BASELINE, True, False)

    assert result.text == "Hi 12"
    assert result.x == 10
    assert result.width == text_width(font, "Hi 12")


def test_reads_backward_for_right_aligned_text(font, reader):
    buffer = make_canvas(200, 50)
    right_edge = 150
    paint_text(buffer, font, "21", right_edge - text_width(font, "21") + 1, BASELINE, BLACK)

    result = reader.read_line(buffer, font, BLACK, right_edge, BASELINE, False, True)

    assert result.text == "21"
    assert result.x + result.width - 1 == right_edge


def test_reads_both_directions_around_start(font, reader):
    buffer = make_canvas(200, 50)
    paint_text(buffer, font, "Hi 12", 40, BASELINE, INK)

    # Start in the gap between the words.
    result = reader.read_line(buffer, font, INK, 48, BASELINE, True, True)

    assert result.text == "Hi 12"


def test_other_ink_color_is_ignored(font, reader):
    buffer = make_canvas(200, 50)
    paint_text(buffer, font, "Hi", 10, BASELINE, INK)

    assert reader.read_line(buffer, font, (255, 255, 255), 10, BASELINE) is None


def test_blank_line_reads_nothing(font, reader):
    assert reader.read_line(make_canvas(200, 50), font, INK, 0, BASELINE) is None


def test_text_beyond_search_width_is_not_read(font, reader):
    buffer = make_canvas(200, 50)
    paint_text(buffer, font, "Hi", 60, BASELINE, INK)

    assert reader.read_line(buffer, font, INK, 0, BASELINE) is None


def test_wide_gap_ends_the_line(font, reader):
    buffer = make_canvas(200, 50)
    paint_text(buffer, font, "Hi", 10, BASELINE, INK)
    paint_text(buffer, font, "12", 60, BASELINE, INK)

    assert reader.read_line(buffer, font, INK, 0, BASELINE).text == "Hi"


def test_line_outside_buffer_reads_nothing(font, reader):
    buffer = make_canvas(200, 50)

    assert reader.read_line(buffer, font, INK, 0, 3) is None
    assert reader.read_line(buffer, font, INK, 0, 60) is None


def test_font_round_trips_through_json(font, tmp_path):
    path = tmp_path / "font.json"
    path.write_text(json.dumps(font.to_dict()), encoding="utf-8")

    loaded = load_font(path)

    assert loaded.height == 7
    assert loaded.baseline == 6
    assert loaded.space_width == 3
    assert set(loaded.glyphs) == {"H", "i", "1", "2"}
    assert np.array_equal(loaded.glyphs["2"], font.glyphs["2"])


def test_font_trims_blank_columns_and_drops_empty_glyphs():
    font = BitmapFont.from_dict({
        "height": 2,
        "baseline": 1,
        "space_width": 2,
        "glyphs": [
            {"char": "a", "rows": [".#..", ".##."]},
            {"char": "b", "rows": ["..", ".."]},
        ],
    })

    assert font.glyphs["a"].shape == (2, 2)
    assert "b" not in font.glyphs


def test_font_rejects_glyph_of_wrong_height():
    with pytest.raises(ValueError):
        BitmapFont.from_dict({
            "height": 3,
            "baseline": 2,
            "space_width": 2,
            "glyphs": [{"char": "a", "rows": ["#", "#"]}],
        })


def test_load_font_reports_bad_files(tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("{\"height\": 7}", encoding="utf-8")

    with pytest.raises(AssetLoadError):
        load_font(broken)
    with pytest.raises(AssetLoadError):
        load_font(tmp_path / "missing.json")
