"""
Data models for template analysis.
"""

from .pixel_buffer import PixelBuffer
from .color_swatch import ColorSwatch, rgb_to_hex
from .text_block import TextBlock
from .text_run import TextRun
from .layout import Section, GridInfo, Margins, Line, DesignElements, LayoutInfo
from .result import Dimensions, AnalysisResult

__all__ = [
    "PixelBuffer",
    "ColorSwatch",
    "rgb_to_hex",
    "TextBlock",
    "TextRun",
    "Section",
    "GridInfo",
    "Margins",
    "Line",
    "DesignElements",
    "LayoutInfo",
    "Dimensions",
    "AnalysisResult",
]
