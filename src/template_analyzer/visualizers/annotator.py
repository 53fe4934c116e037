"""
Page annotation for debug visualization.
"""

import logging
from typing import Iterable, Tuple
import cv2
import numpy as np

from ..models import PixelBuffer, AnalysisResult, TextBlock, Section, Line

logger = logging.getLogger(__name__)


class AnalysisAnnotator:
    """Draws an analysis result over its page for debugging."""

    # Default colors (BGR format)
    COLORS = {
        "section": (0, 200, 0),       # Green
        "text_block": (0, 0, 255),    # Red
        "h_line": (255, 128, 0),      # Blue
        "margin": (200, 0, 200),      # Magenta
    }

    def __init__(self, colors: dict = None):
        self.colors = {**self.COLORS, **(colors or {})}

    def annotate(self, buffer: PixelBuffer, result: AnalysisResult) -> np.ndarray:
        """
        Create an annotated BGR image.

        Args:
            buffer: The page the result was computed from
            result: Analysis of that page

        Returns:
            New BGR image; the buffer is not modified
        """
        annotated = cv2.cvtColor(np.ascontiguousarray(buffer.pixels), cv2.COLOR_RGBA2BGR)

        self._draw_margins(annotated, result)
        self._draw_sections(annotated, result.layout.sections, self.colors["section"])
        self._draw_text_blocks(annotated, result.layout.text_blocks, self.colors["text_block"])
        self._draw_h_lines(annotated, result.design_elements.horizontal_lines, self.colors["h_line"])

        return annotated

    def _draw_margins(self, img: np.ndarray, result: AnalysisResult):
        margins = result.layout.margins
        height, width = img.shape[:2]
        top_left = (margins.left, margins.top)
        bottom_right = (width - 1 - margins.right, height - 1 - margins.bottom)
        cv2.rectangle(img, top_left, bottom_right, self.colors["margin"], 1)

    def _draw_sections(self, img: np.ndarray, sections: Iterable[Section], color: Tuple):
        for section in sections:
            cv2.rectangle(img, (section.x, section.y), (section.x + section.width - 1, section.y2 - 1), color, 2)

    def _draw_text_blocks(self, img: np.ndarray, blocks: Iterable[TextBlock], color: Tuple):
        for block in blocks:
            cv2.rectangle(img, (block.x, block.y), (block.x2, block.y2), color, 1)

    def _draw_h_lines(self, img: np.ndarray, lines: Iterable[Line], color: Tuple):
        for line in lines:
            cv2.line(img, (line.x, line.y), (line.x + line.length - 1, line.y), color, 2)

    def save(self, image: np.ndarray, path: str):
        """Save annotated image to file."""
        if not cv2.imwrite(str(path), image):
            raise OSError(f"Could not write annotated image to {path}")
        logger.info("Annotated image saved: %s", path)
