"""
Base class for pixel detectors.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional
import numpy as np

from ..models import PixelBuffer


class BaseDetector(ABC):
    """
    Abstract base class for detectors that scan a pixel buffer.

    Most detectors work on luminance only; callers running several
    detectors over one buffer pass the plane in so it is computed once.
    """

    @abstractmethod
    def detect(self, buffer: PixelBuffer, luminance: Optional[np.ndarray] = None) -> Any:
        """
        Detect elements in a pixel buffer.

        Args:
            buffer: Source PixelBuffer
            luminance: Precomputed luminance plane of the buffer

        Returns:
            Detected elements
        """
        pass

    @staticmethod
    def resolve_luminance(buffer: PixelBuffer, luminance: Optional[np.ndarray]) -> np.ndarray:
        """Return the given luminance plane, computing it when missing."""
        if luminance is None:
            return buffer.luminance()
        if luminance.shape != (buffer.height, buffer.width):
            raise ValueError(
                f"Luminance shape {luminance.shape} does not match buffer "
                f"{buffer.height}x{buffer.width}"
            )
        return luminance
