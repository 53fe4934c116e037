"""
Rasterization of template files into pixel buffers.
"""

from .image_decoder import ImageDecoder, IMAGE_MIME_TYPES
from .page_renderer import PdfPageRenderer, open_pdf, load_page

__all__ = ["ImageDecoder", "IMAGE_MIME_TYPES", "PdfPageRenderer", "open_pdf", "load_page"]
