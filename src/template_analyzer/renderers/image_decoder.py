"""
Raster image decoding to pixel buffers.
"""

import logging
import numpy as np
import cv2

from ..exceptions import DecodeFailureError
from ..models import PixelBuffer

logger = logging.getLogger(__name__)

IMAGE_MIME_TYPES = frozenset({"image/jpeg", "image/jpg", "image/png"})


class ImageDecoder:
    """
    Decodes PNG and JPEG bytes into RGBA pixel buffers with OpenCV.

    Alpha is preserved when the source carries it; otherwise every pixel
    is fully opaque.
    """

    supported_types = IMAGE_MIME_TYPES

    def decode(self, data: bytes, mime_type: str = "image/png") -> PixelBuffer:
        """
        Decode image bytes.

        Args:
            data: Encoded image bytes
            mime_type: Declared MIME type (used for logging only, OpenCV
                sniffs the actual format)

        Returns:
            Decoded PixelBuffer

        Raises:
            DecodeFailureError: If the bytes are not a readable image
        """
        if not data:
            raise DecodeFailureError("Failed to load image: empty input")

        encoded = np.frombuffer(data, dtype=np.uint8)
        image = cv2.imdecode(encoded, cv2.IMREAD_UNCHANGED)
        if image is None:
            raise DecodeFailureError(f"Failed to load image ({mime_type})")

        # 16-bit PNGs
        if image.dtype == np.uint16:
            image = (image >> 8).astype(np.uint8)

        if image.ndim == 2:
            rgba = cv2.cvtColor(image, cv2.COLOR_GRAY2RGBA)
        elif image.shape[2] == 3:
            rgba = cv2.cvtColor(image, cv2.COLOR_BGR2RGBA)
        elif image.shape[2] == 4:
            rgba = cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA)
        else:
            raise DecodeFailureError(f"Unsupported channel count: {image.shape[2]}")

        logger.debug("Decoded %s image %dx%d", mime_type, rgba.shape[1], rgba.shape[0])
        return PixelBuffer(rgba)
