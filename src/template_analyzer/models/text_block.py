"""
TextBlock model for regions hypothesized to contain text.
"""

from dataclasses import dataclass
from typing import Dict, Any, Iterable


@dataclass(frozen=True)
class TextBlock:
    """
    A rectangular region likely to hold text.

    Raw blocks are single grid cells; merged blocks are the bounding box of
    a cluster of raw blocks.

    Attributes:
        x: Left coordinate of the block
        y: Top coordinate of the block
        width: Width of the block
        height: Height of the block
        confidence: Text score in [0, 1]
    """
    x: int
    y: int
    width: int
    height: int
    confidence: float = 0.0

    @property
    def x2(self) -> int:
        """Right coordinate of the block."""
        return self.x + self.width

    @property
    def y2(self) -> int:
        """Bottom coordinate of the block."""
        return self.y + self.height

    def is_adjacent(self, other: "TextBlock", tolerance: int = 30) -> bool:
        """
        Check whether two blocks touch once padded by a tolerance.

        Args:
            other: Another TextBlock to compare with
            tolerance: Pixels of slack allowed on each axis

        Returns:
            True if the padded boxes overlap horizontally and vertically
        """
        horizontal = not (self.x2 < other.x - tolerance or other.x2 < self.x - tolerance)
        vertical = not (self.y2 < other.y - tolerance or other.y2 < self.y - tolerance)
        return horizontal and vertical

    @classmethod
    def bounding(cls, blocks: Iterable["TextBlock"]) -> "TextBlock":
        """
        Create the block covering every given block.

        Args:
            blocks: Non-empty collection of blocks

        Returns:
            Union bounding box carrying the highest member confidence
        """
        blocks = list(blocks)
        if not blocks:
            raise ValueError("Cannot bound an empty group of blocks")

        min_x = min(b.x for b in blocks)
        min_y = min(b.y for b in blocks)
        max_x = max(b.x2 for b in blocks)
        max_y = max(b.y2 for b in blocks)

        return cls(
            x=min_x,
            y=min_y,
            width=max_x - min_x,
            height=max_y - min_y,
            confidence=max(b.confidence for b in blocks)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "confidence": self.confidence
        }

    def __repr__(self) -> str:
        return f"TextBlock(x={self.x}, y={self.y}, w={self.width}, h={self.height}, conf={self.confidence:.2f})"
