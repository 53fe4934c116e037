"""
Style theme generation from an analysis result.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Any, Tuple

from .base import BaseGenerator
from .font_matcher import FontMatcher, DEFAULT_FONT_STACK
from ..models import AnalysisResult

logger = logging.getLogger(__name__)

DEFAULT_PRIMARY_COLOR = "#2563eb"
DEFAULT_SECONDARY_COLOR = "#64748b"
FALLBACK_SECONDARY_COLOR = "#666666"
DEFAULT_PADDING = (20, 20, 20, 20)


@dataclass(frozen=True)
class StyleTheme:
    """
    Styling parameters for a generated resume.

    Attributes:
        primary_color: Hex color for headings and accents
        secondary_color: Hex color for secondary text
        font_family: CSS font-family stack
        padding: Content padding (top, right, bottom, left) in pixels
        is_default: True when the template gave no usable colors
    """
    primary_color: str = DEFAULT_PRIMARY_COLOR
    secondary_color: str = DEFAULT_SECONDARY_COLOR
    font_family: str = DEFAULT_FONT_STACK
    padding: Tuple[int, int, int, int] = DEFAULT_PADDING
    is_default: bool = True

    def to_css_variables(self) -> Dict[str, str]:
        """Custom properties consumed by the resume stylesheet."""
        top, right, bottom, left = self.padding
        return {
            "--resume-primary-color": self.primary_color,
            "--resume-secondary-color": self.secondary_color,
            "--resume-primary-font": self.font_family,
            "--resume-content-padding": f"{top}px {right}px {bottom}px {left}px",
        }

    def to_css(self, selector: str = ".resume-page") -> str:
        """Render the theme as a single CSS rule."""
        body = "\n".join(f"    {name}: {value};" for name, value in self.to_css_variables().items())
        return f"{selector} {{\n{body}\n}}\n"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "primary_color": self.primary_color,
            "secondary_color": self.secondary_color,
            "font_family": self.font_family,
            "padding": list(self.padding),
            "is_default": self.is_default
        }


class StyleGenerator(BaseGenerator):
    """
    Turns an analysis into a StyleTheme.

    Degenerate analyses are handled here rather than in the analyzer: an
    empty palette selects the default theme colors and missing fonts the
    default stack.
    """

    def __init__(self, font_matcher: FontMatcher = None):
        self.font_matcher = font_matcher or FontMatcher()

    def generate(self, result: AnalysisResult, context: Dict[str, Any] = None) -> StyleTheme:
        palette = result.color_palette

        if palette:
            primary = palette[0].hex
            secondary = palette[1].hex if len(palette) > 1 else FALLBACK_SECONDARY_COLOR
        else:
            logger.info("Template palette is empty, using default theme colors")
            primary, secondary = DEFAULT_PRIMARY_COLOR, DEFAULT_SECONDARY_COLOR

        font_family = self.font_matcher.match(result.fonts[0]) if result.fonts else DEFAULT_FONT_STACK

        margins = result.layout.margins
        padding = (margins.top, margins.right, margins.bottom, margins.left)

        return StyleTheme(
            primary_color=primary,
            secondary_color=secondary,
            font_family=font_family,
            padding=padding,
            is_default=not palette
        )
