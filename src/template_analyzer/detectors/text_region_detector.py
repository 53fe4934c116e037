"""
Text region detection from edge density and local contrast.
"""

import logging
from typing import List, Optional
import numpy as np

from .base import BaseDetector
from ..models import PixelBuffer, TextBlock
from ..postprocessors import PostProcessorPipeline, MergeProcessor

logger = logging.getLogger(__name__)


class TextRegionDetector(BaseDetector):
    """
    Finds regions that look like text without recognizing glyphs.

    The page is cut into non-overlapping square cells. Character strokes
    give text cells a high share of edge pixels together with real local
    contrast, which separates them from flat fills and smooth photographs.
    Cells scoring above the threshold are clustered into merged blocks.
    """

    def __init__(
        self,
        block_size: int = 20,
        edge_threshold: float = 30,
        score_threshold: float = 0.3,
        merge_tolerance: int = 30
    ):
        """
        Initialize the text region detector.

        Args:
            block_size: Side of the scored cells in pixels
            edge_threshold: Luminance difference marking an edge pixel
            score_threshold: Minimum score for a cell to count as text
            merge_tolerance: Adjacency slack used when merging cells
        """
        self.block_size = block_size
        self.edge_threshold = edge_threshold
        self.score_threshold = score_threshold
        self.pipeline = PostProcessorPipeline([
            MergeProcessor(tolerance=merge_tolerance, name="merge")
        ])

    def detect(self, buffer: PixelBuffer, luminance: Optional[np.ndarray] = None) -> List[TextBlock]:
        """
        Detect merged text blocks.

        Args:
            buffer: Source PixelBuffer
            luminance: Precomputed luminance plane

        Returns:
            Merged TextBlock list
        """
        raw = self.detect_raw(buffer, luminance)
        context = {"dimensions": (buffer.width, buffer.height)}
        return self.pipeline.process(raw, context)

    def detect_raw(self, buffer: PixelBuffer, luminance: Optional[np.ndarray] = None) -> List[TextBlock]:
        """
        Score every cell and keep the text-like ones, unmerged.

        Args:
            buffer: Source PixelBuffer
            luminance: Precomputed luminance plane

        Returns:
            One TextBlock per qualifying cell, in row-major order
        """
        lum = self.resolve_luminance(buffer, luminance)
        scores = self.score_cells(lum)
        size = self.block_size

        blocks = [
            TextBlock(
                x=int(col) * size,
                y=int(row) * size,
                width=size,
                height=size,
                confidence=float(scores[row, col])
            )
            for row, col in np.argwhere(scores > self.score_threshold)
        ]

        logger.debug("Scored %d cells, %d look like text", scores.size, len(blocks))
        return blocks

    def score_cells(self, luminance: np.ndarray) -> np.ndarray:
        """
        Compute the text score of every cell that fits inside the image.

        A cell ending exactly on the right or bottom edge is scored; only
        partial cells past the edges are skipped.

        For each cell, the interior pixels (all but its last row and column)
        are compared with their right and lower neighbours. A pixel is an
        edge pixel when either difference exceeds the edge threshold, and
        the larger difference is added to the contrast sum.

            score = min(2 * edge_ratio, 1) * min(avg_contrast / 100, 1)

        Args:
            luminance: (H, W) luminance plane

        Returns:
            (rows, cols) array of scores in [0, 1]
        """
        size = self.block_size
        height, width = luminance.shape
        rows, cols = height // size, width // size

        if rows == 0 or cols == 0:
            return np.zeros((rows, cols))

        horizontal = np.zeros_like(luminance)
        horizontal[:, :-1] = np.abs(luminance[:, :-1] - luminance[:, 1:])
        vertical = np.zeros_like(luminance)
        vertical[:-1, :] = np.abs(luminance[:-1, :] - luminance[1:, :])

        edges = (horizontal > self.edge_threshold) | (vertical > self.edge_threshold)
        contrast = np.maximum(horizontal, vertical)

        def per_cell(plane: np.ndarray) -> np.ndarray:
            cells = plane[:rows * size, :cols * size].reshape(rows, size, cols, size)
            return cells[:, :size - 1, :, :size - 1].sum(axis=(1, 3))

        sampled = (size - 1) ** 2
        edge_ratio = per_cell(edges.astype(np.float64)) / sampled
        avg_contrast = per_cell(contrast) / sampled

        return np.minimum(edge_ratio * 2, 1.0) * np.minimum(avg_contrast / 100, 1.0)
