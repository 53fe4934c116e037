"""
Divider line detection.
"""

import logging
from typing import List, Optional
import numpy as np

from .base import BaseDetector
from ..models import PixelBuffer, Line, DesignElements

logger = logging.getLogger(__name__)


class DesignElementDetector(BaseDetector):
    """
    Detects long horizontal runs of dark pixels used as dividers.

    Only horizontal lines are looked for; vertical lines and shapes are
    reported as empty collections.
    """

    def __init__(self, dark_luminance: float = 200, row_step: int = 5, min_length_ratio: float = 0.1):
        """
        Initialize the detector.

        Args:
            dark_luminance: Pixels darker than this can belong to a line
            row_step: Scan every Nth row
            min_length_ratio: A run must be longer than this fraction of the width
        """
        self.dark_luminance = dark_luminance
        self.row_step = row_step
        self.min_length_ratio = min_length_ratio

    def detect(self, buffer: PixelBuffer, luminance: Optional[np.ndarray] = None) -> DesignElements:
        lum = self.resolve_luminance(buffer, luminance)
        min_length = buffer.width * self.min_length_ratio

        lines = []
        for y in range(0, buffer.height, self.row_step):
            for start, length in self.dark_runs(lum[y] < self.dark_luminance):
                if length > min_length:
                    lines.append(Line(x=start, y=y, length=length, thickness=1))

        logger.debug("Found %d horizontal lines", len(lines))
        return DesignElements(horizontal_lines=tuple(lines))

    @staticmethod
    def dark_runs(mask: np.ndarray) -> List[tuple]:
        """
        Find runs of True values in a 1-D mask.

        Args:
            mask: Boolean row mask

        Returns:
            List of (start, length) pairs, including a run touching the end
        """
        padded = np.concatenate(([False], mask, [False])).astype(np.int8)
        changes = np.diff(padded)
        starts = np.flatnonzero(changes == 1)
        ends = np.flatnonzero(changes == -1)
        return [(int(s), int(e - s)) for s, e in zip(starts, ends)]
