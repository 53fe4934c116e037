"""
Page layout analysis.
"""

from .layout_analyzer import LayoutAnalyzer

__all__ = ["LayoutAnalyzer"]
