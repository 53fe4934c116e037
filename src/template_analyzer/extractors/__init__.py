"""
Extraction components for colors and PDF text metadata.
"""

from .base import BaseExtractor
from .color_extractor import ColorPaletteExtractor
from .text_run_extractor import TextRunExtractor

__all__ = ["BaseExtractor", "ColorPaletteExtractor", "TextRunExtractor"]
