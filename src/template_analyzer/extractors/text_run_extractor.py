"""
PDF text layer extraction using PyMuPDF.
"""

import logging
from typing import List, Any

from .base import BaseExtractor
from ..exceptions import DecodeFailureError
from ..models import TextRun
from ..renderers.page_renderer import open_pdf, load_page

logger = logging.getLogger(__name__)


class TextRunExtractor(BaseExtractor):
    """
    Extracts text spans with their font metadata from a PDF page.

    This extractor parses the text dictionary from PyMuPDF; only font names
    feed the analysis, the rest of each span is kept for callers.
    """

    def __init__(self, page_number: int = 0, scale: float = 1.0):
        """
        Initialize the text run extractor.

        Args:
            page_number: Zero-based page to read (default: first page)
            scale: Scaling factor from PDF points to rendered pixels
        """
        self.page_number = page_number
        self.scale = scale

    def extract(self, source: bytes) -> List[TextRun]:
        """
        Extract text runs from PDF bytes.

        Args:
            source: PDF file bytes

        Returns:
            List of TextRun objects in document order

        Raises:
            DecodeFailureError: If the PDF cannot be opened
        """
        with open_pdf(source) as doc:
            page = load_page(doc, self.page_number)
            try:
                return self.extract_page(page)
            except Exception as exc:
                raise DecodeFailureError(f"Failed to read PDF text layer: {exc}") from exc

    def extract_page(self, page: Any) -> List[TextRun]:
        """
        Extract text runs from an opened PyMuPDF page.

        Args:
            page: PyMuPDF page object

        Returns:
            List of TextRun objects with scaled positions
        """
        runs = []
        dict_data = page.get_text("dict")

        for block in dict_data.get("blocks", []):
            # Skip non-text blocks (type 0 is text)
            if block.get("type") != 0:
                continue

            for line in block.get("lines", []):
                for span in line.get("spans", []):
                    bbox = span.get("bbox", [0, 0, 0, 0])
                    runs.append(TextRun(
                        text=span.get("text", ""),
                        font_name=span.get("font", ""),
                        font_size=span.get("size", 12),
                        x=int(bbox[0] * self.scale),
                        y=int(bbox[1] * self.scale),
                        width=int((bbox[2] - bbox[0]) * self.scale),
                        height=int((bbox[3] - bbox[1]) * self.scale)
                    ))

        logger.debug("Read %d text runs from page %d", len(runs), self.page_number)
        return self.postprocess(runs)

    @staticmethod
    def font_names(runs: List[TextRun]) -> List[str]:
        """
        Collect distinct font names.

        Args:
            runs: Extracted text runs

        Returns:
            Each non-empty font name once, in first-seen order
        """
        return list(dict.fromkeys(run.font_name for run in runs if run.font_name))
