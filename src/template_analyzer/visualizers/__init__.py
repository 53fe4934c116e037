"""
Debug visualization of analysis results.
"""

from .annotator import AnalysisAnnotator

__all__ = ["AnalysisAnnotator"]
