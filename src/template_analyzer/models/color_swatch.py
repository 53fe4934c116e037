"""
ColorSwatch model for palette entries.
"""

from dataclasses import dataclass
from typing import Dict, Any, Tuple


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Render an RGB triple as a lowercase, zero-padded #rrggbb string."""
    return f"#{r:02x}{g:02x}{b:02x}"


@dataclass(frozen=True)
class ColorSwatch:
    """
    A dominant color and how often it was sampled.

    Frequencies are only comparable within one analysis.

    Attributes:
        hex: Lowercase #rrggbb string
        rgb: (r, g, b) triple
        frequency: Number of samples that fell in this color bucket
    """
    hex: str
    rgb: Tuple[int, int, int]
    frequency: int

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int, frequency: int) -> "ColorSwatch":
        """Create a swatch from channel values."""
        return cls(hex=rgb_to_hex(r, g, b), rgb=(r, g, b), frequency=frequency)

    @property
    def css_rgb(self) -> str:
        """CSS rgb() notation."""
        r, g, b = self.rgb
        return f"rgb({r}, {g}, {b})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "hex": self.hex,
            "rgb": self.css_rgb,
            "rgb_tuple": list(self.rgb),
            "frequency": self.frequency
        }
