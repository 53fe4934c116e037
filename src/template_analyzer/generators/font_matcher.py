"""
Font Matcher - Maps embedded PDF font names to web-safe font stacks
"""

import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_FONT_STACK = "Inter, Arial, sans-serif"
SERIF_FONT_STACK = "Times New Roman, serif"
MONOSPACE_FONT_STACK = "Courier New, monospace"


class FontMatcher:
    """
    Maps detected font names to CSS font-family stacks.
    """

    DEFAULT_FONT_MAP = {
        # Serif fonts
        'Times': SERIF_FONT_STACK,
        'Times New Roman': SERIF_FONT_STACK,
        'TimesNewRoman': SERIF_FONT_STACK,
        'Georgia': 'Georgia, serif',
        'Garamond': 'Garamond, serif',

        # Sans-serif fonts
        'Arial': 'Arial, sans-serif',
        'Helvetica': 'Helvetica, Arial, sans-serif',
        'Calibri': 'Calibri, Arial, sans-serif',
        'Verdana': 'Verdana, sans-serif',
        'Tahoma': 'Tahoma, sans-serif',
        'Inter': DEFAULT_FONT_STACK,
        'Roboto': 'Roboto, Arial, sans-serif',
        'Open Sans': 'Open Sans, Arial, sans-serif',
        'OpenSans': 'Open Sans, Arial, sans-serif',
        'Lato': 'Lato, Arial, sans-serif',
        'Montserrat': 'Montserrat, Arial, sans-serif',

        # Monospace fonts
        'Courier': MONOSPACE_FONT_STACK,
        'Courier New': MONOSPACE_FONT_STACK,
        'Monaco': 'Monaco, Courier New, monospace',
        'Consolas': 'Consolas, Courier New, monospace'
    }

    def __init__(self, font_map: Optional[Dict[str, str]] = None, default_stack: str = DEFAULT_FONT_STACK):
        """
        Initialize Font Matcher.

        Args:
            font_map: Extra or overriding name -> stack entries
            default_stack: Stack used when nothing matches
        """
        self.font_map = {**self.DEFAULT_FONT_MAP, **(font_map or {})}
        self.default_stack = default_stack

    def match(self, font_name: Optional[str]) -> str:
        """
        Map a font name to a web-safe stack.

        Args:
            font_name: Font name from the template

        Returns:
            CSS font-family value
        """
        if not font_name:
            return self.default_stack

        clean_name = font_name.replace('"', '').replace("'", '').strip()

        if clean_name in self.font_map:
            return self.font_map[clean_name]

        # Drop subset prefix (ABCDEF+Name) and style suffix (Name-Bold)
        base_name = clean_name.split('+')[-1].split('-')[0].split(',')[0]
        if base_name in self.font_map:
            logger.debug("Font '%s' matched by base name '%s'", font_name, base_name)
            return self.font_map[base_name]

        lower = base_name.lower()
        for known, stack in self.font_map.items():
            known_lower = known.lower()
            if known_lower in lower or (lower and lower in known_lower):
                logger.debug("Font '%s' partially matched '%s'", font_name, known)
                return stack

        if 'mono' in lower or 'code' in lower:
            return MONOSPACE_FONT_STACK
        if 'serif' in lower and 'sans' not in lower:
            return SERIF_FONT_STACK

        logger.debug("No match for font '%s', using default", font_name)
        return self.default_stack
