"""
PDF page rendering to pixel buffers.
"""

import logging
import numpy as np
import cv2
import fitz  # PyMuPDF

from ..exceptions import DecodeFailureError
from ..models import PixelBuffer

logger = logging.getLogger(__name__)


def open_pdf(data: bytes) -> "fitz.Document":
    """
    Open PDF bytes with PyMuPDF.

    Raises:
        DecodeFailureError: If the bytes are not a readable PDF or the PDF
            is password protected
    """
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except Exception as exc:
        raise DecodeFailureError(f"Failed to open PDF: {exc}") from exc

    if doc.needs_pass:
        doc.close()
        raise DecodeFailureError("Failed to open PDF: document is password protected")
    return doc


def load_page(doc: "fitz.Document", page_number: int):
    """Fetch a page, raising DecodeFailureError when it cannot be loaded."""
    if page_number >= doc.page_count:
        raise DecodeFailureError(
            f"PDF has {doc.page_count} page(s), cannot load page {page_number + 1}"
        )
    try:
        return doc[page_number]
    except Exception as exc:
        raise DecodeFailureError(f"Failed to load PDF page {page_number + 1}: {exc}") from exc


class PdfPageRenderer:
    """
    Renders a PDF page to an RGBA pixel buffer.

    Uses PyMuPDF to rasterize at a fixed zoom, matching what a browser
    canvas would show at the same scale.
    """

    def __init__(self, scale: float = 2.0):
        """
        Initialize the page renderer.

        Args:
            scale: Zoom from PDF points to pixels (default: 2.0)
        """
        self.scale = scale

    def render(self, data: bytes, page_number: int = 0) -> PixelBuffer:
        """
        Render one page of a PDF.

        Args:
            data: PDF file bytes
            page_number: Zero-based page index (default: first page)

        Returns:
            Rendered PixelBuffer

        Raises:
            DecodeFailureError: If the PDF cannot be opened or rendered
        """
        with open_pdf(data) as doc:
            page = load_page(doc, page_number)
            try:
                return self.render_page(page)
            except DecodeFailureError:
                raise
            except Exception as exc:
                raise DecodeFailureError(f"Failed to render PDF page: {exc}") from exc

    def render_page(self, page) -> PixelBuffer:
        """
        Render an already opened PyMuPDF page.

        Args:
            page: PyMuPDF page object

        Returns:
            Rendered PixelBuffer (opaque, white background)
        """
        mat = fitz.Matrix(self.scale, self.scale)
        pix = page.get_pixmap(matrix=mat, alpha=False)

        img = np.frombuffer(pix.samples, dtype=np.uint8).reshape(
            pix.height, pix.width, pix.n
        )

        if pix.n == 1:
            img = cv2.cvtColor(img, cv2.COLOR_GRAY2RGBA)
        elif pix.n == 3:
            img = cv2.cvtColor(img, cv2.COLOR_RGB2RGBA)
        elif pix.n != 4:
            raise DecodeFailureError(f"Unsupported pixmap layout with {pix.n} channels")

        logger.debug("Rendered PDF page %d at %.1fx: %dx%d",
                     page.number, self.scale, pix.width, pix.height)
        return PixelBuffer(img)
