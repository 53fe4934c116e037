"""
Page layout analysis: content sections, alignment grid and margins.
"""

import logging
import math
from typing import List, Optional, Sequence
import numpy as np

from ..detectors.base import BaseDetector
from ..models import PixelBuffer, TextBlock, Section, GridInfo, Margins, LayoutInfo

logger = logging.getLogger(__name__)


class LayoutAnalyzer:
    """
    Derives coarse page structure.

    Sections and margins come from the pixels (anything darker than the
    background luminance is content); the grid comes from merged text
    blocks only.
    """

    def __init__(
        self,
        background_luminance: float = 240,
        content_row_ratio: float = 0.1,
        min_section_ratio: float = 0.05,
        grid_snap: int = 10
    ):
        self.background_luminance = background_luminance
        self.content_row_ratio = content_row_ratio
        self.min_section_ratio = min_section_ratio
        self.grid_snap = grid_snap

    def analyze(
        self,
        buffer: PixelBuffer,
        text_blocks: Sequence[TextBlock],
        luminance: Optional[np.ndarray] = None
    ) -> LayoutInfo:
        """
        Run all layout sub-analyses.

        Args:
            buffer: Source PixelBuffer
            text_blocks: Merged text blocks of the same page
            luminance: Precomputed luminance plane

        Returns:
            LayoutInfo with sections, text blocks, grid and margins

        Raises:
            ValueError: If the luminance plane does not match the buffer
        """
        lum = BaseDetector.resolve_luminance(buffer, luminance)
        content = lum < self.background_luminance

        return LayoutInfo(
            sections=tuple(self.detect_sections(content)),
            text_blocks=tuple(text_blocks),
            grid=self.detect_grid(text_blocks),
            margins=self.detect_margins(content)
        )

    def detect_sections(self, content: np.ndarray) -> List[Section]:
        """
        Find horizontal bands of content.

        A row holds content when more than content_row_ratio of its pixels
        are non-background. Closed runs must be taller than
        min_section_ratio of the page; a run still open at the bottom edge
        is always kept.

        Args:
            content: (H, W) boolean mask of non-background pixels

        Returns:
            Full-width sections, top to bottom
        """
        height, width = content.shape
        row_has_content = content.sum(axis=1) > width * self.content_row_ratio
        min_height = height * self.min_section_ratio

        sections = []
        start = 0
        in_section = False

        for y, has_content in enumerate(row_has_content):
            if has_content and not in_section:
                start = y
                in_section = True
            elif not has_content and in_section:
                if y - start > min_height:
                    sections.append(Section(x=0, y=start, width=width, height=y - start))
                in_section = False

        if in_section:
            sections.append(Section(x=0, y=start, width=width, height=height - start))

        logger.debug("Detected %d sections", len(sections))
        return sections

    def detect_grid(self, text_blocks: Sequence[TextBlock]) -> GridInfo:
        """
        Estimate columns, rows and gutters from text block alignment.

        Args:
            text_blocks: Merged text blocks

        Returns:
            GridInfo; 1x1 with zero gutters for fewer than two blocks
        """
        if len(text_blocks) < 2:
            return GridInfo(columns=1, rows=1, horizontal_gutter=0, vertical_gutter=0)

        lefts = sorted({self._snap(block.x) for block in text_blocks})

        tops = sorted(block.y for block in text_blocks)
        gaps = [b - a for a, b in zip(tops, tops[1:])]
        vertical_gutter = sum(gaps) / len(gaps) if gaps else 0

        return GridInfo(
            columns=len(lefts),
            rows=math.ceil(len(text_blocks) / len(lefts)),
            horizontal_gutter=lefts[1] - lefts[0] if len(lefts) > 1 else 0,
            vertical_gutter=vertical_gutter
        )

    def detect_margins(self, content: np.ndarray) -> Margins:
        """
        Measure the blank border around the content.

        Args:
            content: (H, W) boolean mask of non-background pixels

        Returns:
            Margins in pixels; all zero for a blank page
        """
        height, width = content.shape
        rows = np.flatnonzero(content.any(axis=1))
        cols = np.flatnonzero(content.any(axis=0))

        if len(rows) == 0:
            logger.debug("Blank page, margins default to zero")
            return Margins()

        return Margins(
            top=int(rows[0]),
            bottom=int(height - 1 - rows[-1]),
            left=int(cols[0]),
            right=int(width - 1 - cols[-1])
        )

    def _snap(self, value: int) -> int:
        # Round half up to the nearest grid step
        return int(math.floor(value / self.grid_snap + 0.5)) * self.grid_snap
