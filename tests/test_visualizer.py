import numpy as np

from template_analyzer import PixelBuffer, TemplateAnalyzer
from template_analyzer.visualizers import AnalysisAnnotator

from conftest import blank_page, checkerboard


def test_annotation_draws_on_a_copy(divider_page):
    buffer = PixelBuffer(divider_page)
    before = buffer.pixels.copy()
    result = TemplateAnalyzer().analyze_buffer(buffer)

    annotated = AnalysisAnnotator().annotate(buffer, result)

    assert annotated.shape == (1000, 800, 3)
    assert np.array_equal(buffer.pixels, before)
    # Divider drawn in the line color (BGR)
    assert tuple(annotated[500, 400]) == AnalysisAnnotator.COLORS["h_line"]


def test_text_blocks_are_outlined():
    page = blank_page(200, 200)
    checkerboard(page, 40, 40, 40, 40)
    buffer = PixelBuffer(page)
    result = TemplateAnalyzer().analyze_buffer(buffer)
    assert result.layout.text_blocks

    colors = {"text_block": (1, 2, 3)}
    annotated = AnalysisAnnotator(colors).annotate(buffer, result)
    block = result.layout.text_blocks[0]
    assert tuple(annotated[block.y, block.x]) == (1, 2, 3)


def test_save(tmp_path, white_buffer):
    result = TemplateAnalyzer().analyze_buffer(white_buffer)
    annotator = AnalysisAnnotator()
    path = tmp_path / "debug.png"
    annotator.save(annotator.annotate(white_buffer, result), str(path))
    assert path.exists()
