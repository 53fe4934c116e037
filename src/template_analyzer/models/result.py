"""
AnalysisResult model aggregating every analysis stage.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Tuple

from .color_swatch import ColorSwatch
from .layout import LayoutInfo, DesignElements


@dataclass(frozen=True)
class Dimensions:
    """Size of the analyzed raster."""
    width: int
    height: int

    @property
    def aspect_ratio(self) -> float:
        """Width to height ratio, rounded to two decimals."""
        return round(self.width / self.height, 2) if self.height > 0 else 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "aspect_ratio": self.aspect_ratio
        }


@dataclass(frozen=True)
class AnalysisResult:
    """
    Structural design properties inferred from one template page.

    The result owns no reference to the pixel buffer it was computed from.

    Attributes:
        dimensions: Raster width, height and aspect ratio
        color_palette: Dominant colors, most frequent first
        fonts: Distinct embedded font names (PDF input only)
        layout: Sections, text blocks, grid and margins
        design_elements: Detected divider lines
        source_type: "image" or "pdf"
    """
    dimensions: Dimensions
    color_palette: Tuple[ColorSwatch, ...] = ()
    fonts: Tuple[str, ...] = ()
    layout: LayoutInfo = field(default_factory=LayoutInfo)
    design_elements: DesignElements = field(default_factory=DesignElements)
    source_type: str = "image"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {
            "source_type": self.source_type,
            "dimensions": self.dimensions.to_dict(),
            "color_palette": [swatch.to_dict() for swatch in self.color_palette],
            "fonts": list(self.fonts),
            "layout": self.layout.to_dict(),
            "design_elements": self.design_elements.to_dict()
        }
