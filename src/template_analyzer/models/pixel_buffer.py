"""
PixelBuffer model wrapping a decoded RGBA raster.
"""

from typing import Tuple
import numpy as np

# ITU-R BT.601 luma weights
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


class PixelBuffer:
    """
    Immutable width x height grid of 8-bit RGBA samples, origin top-left.

    The underlying array is marked read-only so detectors can share it
    without copying.
    """

    def __init__(self, pixels: np.ndarray):
        """
        Initialize the buffer.

        Args:
            pixels: uint8 array of shape (height, width, 4) in RGBA order
        """
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise ValueError(f"Expected an (H, W, 4) RGBA array, got shape {pixels.shape}")
        if pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 samples, got {pixels.dtype}")

        self._pixels = np.array(pixels, copy=True)
        self._pixels.flags.writeable = False

    @classmethod
    def from_array(cls, image: np.ndarray) -> "PixelBuffer":
        """
        Build a buffer from a grayscale, RGB or RGBA array.

        Missing alpha is filled as fully opaque.

        Args:
            image: Array of shape (H, W), (H, W, 3) or (H, W, 4)

        Returns:
            New PixelBuffer
        """
        image = np.asarray(image)
        if image.dtype != np.uint8:
            image = np.clip(image, 0, 255).astype(np.uint8)

        if image.ndim == 2:
            image = np.stack([image, image, image], axis=-1)

        if image.ndim != 3 or image.shape[2] not in (3, 4):
            raise ValueError(f"Unsupported image shape {image.shape}")

        if image.shape[2] == 3:
            alpha = np.full(image.shape[:2] + (1,), 255, dtype=np.uint8)
            image = np.concatenate([image, alpha], axis=-1)

        return cls(image)

    @classmethod
    def filled(cls, width: int, height: int, rgba: Tuple[int, int, int, int] = (255, 255, 255, 255)) -> "PixelBuffer":
        """Create a buffer of a single solid color."""
        pixels = np.empty((height, width, 4), dtype=np.uint8)
        pixels[:] = rgba
        return cls(pixels)

    @property
    def width(self) -> int:
        """Width in pixels."""
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        """Height in pixels."""
        return self._pixels.shape[0]

    @property
    def pixels(self) -> np.ndarray:
        """Read-only (H, W, 4) RGBA view."""
        return self._pixels

    def get(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """Return the RGBA sample at column x, row y."""
        r, g, b, a = self._pixels[y, x]
        return int(r), int(g), int(b), int(a)

    def luminance(self) -> np.ndarray:
        """
        Compute per-pixel luminance.

        Returns:
            float64 array of shape (H, W) with 0.299R + 0.587G + 0.114B
        """
        rgb = self._pixels[..., :3].astype(np.float64)
        return rgb @ np.array(LUMA_WEIGHTS)

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height})"
