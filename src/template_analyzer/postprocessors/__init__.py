"""
Post-processing pipeline for detection results.

Post-processors can be chained together to refine raw detections;
the text region detector uses one to cluster adjacent cells.
"""

from .base import BasePostProcessor, PostProcessorPipeline
from .merge_processor import MergeProcessor

__all__ = [
    "BasePostProcessor",
    "PostProcessorPipeline",
    "MergeProcessor",
]
