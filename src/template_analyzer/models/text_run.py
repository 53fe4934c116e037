"""
TextRun model for spans read from a PDF text layer.
"""

from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class TextRun:
    """
    One span of embedded PDF text with its font metadata.

    Attributes:
        text: The span text
        font_name: Font name as stored in the PDF
        font_size: Font size in points
        x: Left coordinate in rendered pixels
        y: Top coordinate in rendered pixels
        width: Width in rendered pixels
        height: Height in rendered pixels
    """
    text: str
    font_name: str
    font_size: float = 12.0
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "text": self.text,
            "font_name": self.font_name,
            "font_size": self.font_size,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height
        }

    def __repr__(self) -> str:
        text = self.text if len(self.text) <= 20 else f"{self.text[:20]}..."
        return f"TextRun(font='{self.font_name}', text='{text}')"
