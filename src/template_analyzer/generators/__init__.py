"""
Styling output generated from analysis results.
"""

from .base import BaseGenerator
from .font_matcher import FontMatcher
from .style_generator import StyleGenerator, StyleTheme

__all__ = ["BaseGenerator", "FontMatcher", "StyleGenerator", "StyleTheme"]
