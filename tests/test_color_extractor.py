import numpy as np

from template_analyzer import PixelBuffer
from template_analyzer.extractors import ColorPaletteExtractor

from conftest import blank_page


def test_opaque_page_gives_sorted_capped_palette():
    # Twelve horizontal bands of distinct buckets with growing heights
    page = blank_page(100, 120)
    row = 0
    for i in range(12):
        height = i + 1
        page[row:row + height, :, :3] = (i * 20, 0, 0)
        row += height
    page[row:, :, :3] = (0, 0, 200)

    palette = ColorPaletteExtractor().extract(PixelBuffer(page))

    assert 0 < len(palette) <= 8
    frequencies = [swatch.frequency for swatch in palette]
    assert frequencies == sorted(frequencies, reverse=True)


def test_transparent_page_gives_empty_palette():
    buffer = PixelBuffer.filled(50, 50, (255, 0, 0, 0))
    assert ColorPaletteExtractor().extract(buffer) == []


def test_translucent_samples_are_skipped():
    page = blank_page(10, 10, (0, 0, 0, 255))
    page[5:, :, 3] = 127
    palette = ColorPaletteExtractor().extract(PixelBuffer(page))
    assert len(palette) == 1
    assert palette[0].frequency == 5


def test_pure_red_reconstructs_bucket_floor():
    buffer = PixelBuffer.filled(100, 100, (255, 0, 0, 255))
    palette = ColorPaletteExtractor().extract(buffer)

    assert len(palette) == 1
    top = palette[0]
    assert top.rgb == (240, 0, 0)
    assert top.hex == "#f00000"
    assert top.css_rgb == "rgb(240, 0, 0)"
    # Every 10th of 10,000 pixels
    assert top.frequency == 1000


def test_near_identical_colors_share_a_bucket():
    page = blank_page(20, 1, (41, 41, 41, 255))
    page[0, ::2, :3] = 59
    palette = ColorPaletteExtractor(sample_stride=1).extract(PixelBuffer(page))
    assert [(s.hex, s.frequency) for s in palette] == [("#282828", 20)]


def test_ties_keep_first_sampled_color_first():
    page = blank_page(2, 1)
    page[0, 0, :3] = (0, 0, 255)
    page[0, 1, :3] = (255, 0, 0)
    palette = ColorPaletteExtractor(sample_stride=1).extract(PixelBuffer(page))
    assert [s.rgb for s in palette] == [(0, 0, 240), (240, 0, 0)]


def test_sampling_walks_pixels_in_row_major_order():
    page = blank_page(10, 4, (0, 0, 0, 255))
    # Only column 0 is ever sampled with a width of 10 and stride of 10
    page[:, 1:, :3] = 255
    palette = ColorPaletteExtractor().extract(PixelBuffer(page))
    assert [(s.hex, s.frequency) for s in palette] == [("#000000", 4)]


def test_max_colors_is_configurable():
    page = blank_page(60, 1)
    page[0, :, 0] = np.arange(60) * 4
    palette = ColorPaletteExtractor(sample_stride=1, max_colors=3).extract(PixelBuffer(page))
    assert len(palette) == 3
