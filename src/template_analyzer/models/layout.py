"""
Layout models: sections, grid statistics, margins and design elements.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Tuple

from .text_block import TextBlock


@dataclass(frozen=True)
class Section:
    """
    A horizontal band of the page containing non-background pixels.

    Attributes:
        x: Left coordinate (always 0, sections span the full width)
        y: Top coordinate of the band
        width: Width of the band
        height: Height of the band
        kind: Section type
    """
    x: int
    y: int
    width: int
    height: int
    kind: str = "content"

    @property
    def y2(self) -> int:
        """Bottom coordinate of the band."""
        return self.y + self.height

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height
        }


@dataclass(frozen=True)
class GridInfo:
    """Coarse column/row alignment statistics derived from text blocks."""
    columns: int = 1
    rows: int = 1
    horizontal_gutter: float = 0
    vertical_gutter: float = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "columns": self.columns,
            "rows": self.rows,
            "gutters": {
                "horizontal": self.horizontal_gutter,
                "vertical": self.vertical_gutter
            }
        }


@dataclass(frozen=True)
class Margins:
    """Distance in pixels from each page edge to the first content."""
    top: int = 0
    bottom: int = 0
    left: int = 0
    right: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "top": self.top,
            "bottom": self.bottom,
            "left": self.left,
            "right": self.right
        }


@dataclass(frozen=True)
class Line:
    """A detected divider line."""
    x: int
    y: int
    length: int
    thickness: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "length": self.length, "thickness": self.thickness}


@dataclass(frozen=True)
class DesignElements:
    """
    Graphical primitives found on the page.

    Only horizontal lines are detected; the other collections are part of
    the output shape and stay empty.
    """
    horizontal_lines: Tuple[Line, ...] = ()
    vertical_lines: Tuple[Line, ...] = ()
    shapes: Tuple[Any, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "horizontal_lines": [line.to_dict() for line in self.horizontal_lines],
            "vertical_lines": [line.to_dict() for line in self.vertical_lines],
            "shapes": list(self.shapes)
        }


@dataclass(frozen=True)
class LayoutInfo:
    """Aggregated layout analysis of a page."""
    sections: Tuple[Section, ...] = ()
    text_blocks: Tuple[TextBlock, ...] = ()
    grid: GridInfo = field(default_factory=GridInfo)
    margins: Margins = field(default_factory=Margins)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sections": [s.to_dict() for s in self.sections],
            "text_blocks": [b.to_dict() for b in self.text_blocks],
            "grid": self.grid.to_dict(),
            "margins": self.margins.to_dict()
        }
