import numpy as np
import pytest

from template_analyzer import PixelBuffer, TextBlock
from template_analyzer.analyzers import LayoutAnalyzer
from template_analyzer.models import GridInfo, Margins, Section

from conftest import blank_page, BLACK


def _content(page):
    return PixelBuffer(page).luminance() < 240


def test_blank_page_has_no_sections_and_zero_margins(white_buffer):
    layout = LayoutAnalyzer().analyze(white_buffer, [])
    assert layout.sections == ()
    assert layout.margins == Margins(0, 0, 0, 0)


def test_single_band_becomes_one_section():
    page = blank_page(400, 400)
    page[100:200, 20:380] = BLACK
    sections = LayoutAnalyzer().detect_sections(_content(page))
    assert sections == [Section(x=0, y=100, width=400, height=100)]


def test_short_band_is_noise():
    page = blank_page(400, 400)
    page[100:110] = BLACK
    assert LayoutAnalyzer().detect_sections(_content(page)) == []


def test_band_open_at_bottom_is_always_kept():
    page = blank_page(400, 400)
    page[395:] = BLACK
    sections = LayoutAnalyzer().detect_sections(_content(page))
    assert sections == [Section(x=0, y=395, width=400, height=5)]


def test_sparse_rows_do_not_count_as_content():
    page = blank_page(400, 400)
    # 40 dark pixels per row is exactly 10% of the width, not more
    page[100:300, :40] = BLACK
    assert LayoutAnalyzer().detect_sections(_content(page)) == []


def test_light_gray_is_background():
    page = blank_page(100, 100, (245, 245, 245, 255))
    assert LayoutAnalyzer().detect_margins(_content(page)) == Margins()


def test_ten_pixel_border_margins():
    page = blank_page(100, 80)
    page[10:70, 10:90] = BLACK
    margins = LayoutAnalyzer().detect_margins(_content(page))
    assert margins == Margins(top=10, bottom=10, left=10, right=10)


def test_asymmetric_margins():
    page = blank_page(100, 80)
    page[5, 30] = BLACK
    page[60, 70] = BLACK
    margins = LayoutAnalyzer().detect_margins(_content(page))
    assert margins == Margins(top=5, bottom=19, left=30, right=29)


def test_grid_degenerates_below_two_blocks():
    analyzer = LayoutAnalyzer()
    expected = GridInfo(columns=1, rows=1, horizontal_gutter=0, vertical_gutter=0)
    assert analyzer.detect_grid([]) == expected
    assert analyzer.detect_grid([TextBlock(40, 40, 100, 20)]) == expected
    assert expected.to_dict() == {
        "columns": 1,
        "rows": 1,
        "gutters": {"horizontal": 0, "vertical": 0},
    }


def test_grid_two_columns():
    blocks = [
        TextBlock(0, 0, 60, 20),
        TextBlock(96, 0, 60, 20),
        TextBlock(4, 60, 60, 20),
        TextBlock(104, 60, 60, 20),
    ]
    grid = LayoutAnalyzer().detect_grid(blocks)
    assert grid.columns == 2
    assert grid.rows == 2
    assert grid.horizontal_gutter == 100
    # Top edges 0, 0, 60, 60
    assert grid.vertical_gutter == 20


def test_grid_snap_rounds_half_up():
    blocks = [TextBlock(25, 0, 20, 20), TextBlock(25, 50, 20, 20), TextBlock(14, 120, 20, 20)]
    grid = LayoutAnalyzer().detect_grid(blocks)
    # 25 -> 30 and 14 -> 10
    assert grid.columns == 2
    assert grid.horizontal_gutter == 20
    assert grid.rows == 2
    assert grid.vertical_gutter == 60


def test_analyze_keeps_text_blocks():
    page = blank_page(100, 100)
    page[40:60, 40:60] = BLACK
    blocks = [TextBlock(40, 40, 20, 20, 0.8)]
    layout = LayoutAnalyzer().analyze(PixelBuffer(page), blocks)
    assert layout.text_blocks == tuple(blocks)
    assert layout.margins == Margins(top=40, bottom=40, left=40, right=40)
    assert layout.sections == (Section(x=0, y=40, width=100, height=20),)


def test_mismatched_luminance_plane_is_rejected():
    buffer = PixelBuffer.filled(100, 80)
    with pytest.raises(ValueError, match="does not match"):
        LayoutAnalyzer().analyze(buffer, [], luminance=np.zeros((10, 10)))
