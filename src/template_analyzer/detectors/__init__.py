"""
Pixel detectors for text regions and design elements.
"""

from .base import BaseDetector
from .text_region_detector import TextRegionDetector
from .design_element_detector import DesignElementDetector

__all__ = ["BaseDetector", "TextRegionDetector", "DesignElementDetector"]
