"""
Merge adjacent text blocks post-processor.
"""

import logging
from typing import List, Any, Dict
from .base import BasePostProcessor
from ..models import TextBlock

logger = logging.getLogger(__name__)


class MergeProcessor(BasePostProcessor):
    """
    Clusters adjacent text blocks into bounding boxes.

    Each unvisited block seeds a cluster and absorbs every later unvisited
    block adjacent to the seed itself. Blocks only adjacent to an absorbed
    member are not pulled in; they seed their own cluster later. The merged
    block is the union box with the highest member confidence.
    """

    def __init__(self, tolerance: int = 30, name: str = None):
        super().__init__(name)
        self.tolerance = tolerance

    def process(self, items: List[TextBlock], context: Dict[str, Any] = None) -> List[TextBlock]:
        if not items:
            return []

        merged = []
        used = set()

        for i, seed in enumerate(items):
            if i in used:
                continue
            used.add(i)

            group = [seed]
            for j in range(i + 1, len(items)):
                if j in used:
                    continue
                if seed.is_adjacent(items[j], self.tolerance):
                    group.append(items[j])
                    used.add(j)

            merged.append(TextBlock.bounding(group))

        logger.debug("Merged %d raw blocks into %d", len(items), len(merged))
        return merged
