"""
Dominant color extraction from pixel buffers.
"""

import logging
from typing import List
import numpy as np

from .base import BaseExtractor
from ..models import PixelBuffer, ColorSwatch

logger = logging.getLogger(__name__)


class ColorPaletteExtractor(BaseExtractor):
    """
    Quantizes and ranks the dominant opaque colors of an image.

    Every Nth pixel (in row-major order) is sampled, translucent samples
    are skipped, and each channel is floored to a multiple of the bucket
    size so near-identical colors count together.
    """

    def __init__(
        self,
        sample_stride: int = 10,
        alpha_threshold: int = 128,
        bucket_size: int = 20,
        max_colors: int = 8
    ):
        """
        Initialize the palette extractor.

        Args:
            sample_stride: Sample every Nth pixel
            alpha_threshold: Minimum alpha for a sample to count
            bucket_size: Channel quantization width
            max_colors: Maximum number of swatches returned
        """
        self.sample_stride = sample_stride
        self.alpha_threshold = alpha_threshold
        self.bucket_size = bucket_size
        self.max_colors = max_colors

    def extract(self, source: PixelBuffer) -> List[ColorSwatch]:
        """
        Extract the color palette.

        Args:
            source: PixelBuffer to sample

        Returns:
            Up to max_colors swatches sorted by descending frequency; empty
            when no sample is opaque
        """
        samples = source.pixels.reshape(-1, 4)[::self.sample_stride]
        samples = samples[samples[:, 3] >= self.alpha_threshold]

        if len(samples) == 0:
            logger.debug("No opaque samples, palette is empty")
            return []

        quantized = (samples[:, :3].astype(np.int32) // self.bucket_size) * self.bucket_size
        keys = (quantized[:, 0] << 16) | (quantized[:, 1] << 8) | quantized[:, 2]

        buckets, first_seen, counts = np.unique(keys, return_index=True, return_counts=True)

        # Most frequent first; equal counts keep their first-sampled order
        order = np.lexsort((first_seen, -counts))[:self.max_colors]

        palette = []
        for idx in order:
            key = int(buckets[idx])
            palette.append(ColorSwatch.from_rgb(
                (key >> 16) & 0xFF,
                (key >> 8) & 0xFF,
                key & 0xFF,
                frequency=int(counts[idx])
            ))

        logger.debug("Sampled %d opaque pixels into %d color buckets", len(samples), len(buckets))
        return self.postprocess(palette)
