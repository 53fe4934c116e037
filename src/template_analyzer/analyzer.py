"""
Template analyzer orchestrating rasterization and every analysis stage.
"""

import asyncio
import logging
import mimetypes
import time
from functools import cached_property
from pathlib import Path
from typing import Optional, Sequence, Tuple

import numpy as np

from .config import AnalyzerConfig
from .exceptions import UnsupportedFormatError, DecodeFailureError
from .models import PixelBuffer, AnalysisResult, Dimensions
from .renderers import ImageDecoder, PdfPageRenderer, IMAGE_MIME_TYPES
from .extractors import ColorPaletteExtractor, TextRunExtractor
from .detectors import TextRegionDetector, DesignElementDetector
from .analyzers import LayoutAnalyzer

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
SUPPORTED_MIME_TYPES = IMAGE_MIME_TYPES | {PDF_MIME_TYPE}


def normalize_mime_type(mime_type: Optional[str]) -> str:
    """Lower-case a MIME type and drop any parameters."""
    return (mime_type or "").split(";")[0].strip().lower()


def guess_mime_type(path: str) -> Optional[str]:
    """Guess a template's MIME type from its file name."""
    mime_type, _ = mimetypes.guess_type(str(path))
    return mime_type


class AnalysisSession:
    """
    Scratch state owned by exactly one analysis run.

    Holds the rasterized page and its luminance plane, which is computed
    on first use and shared by every detector. A session is created per
    call and dropped once the result is built, so concurrent analyses
    never share buffers.
    """

    def __init__(self, buffer: PixelBuffer, source_type: str = "image", fonts: Sequence[str] = ()):
        self.buffer = buffer
        self.source_type = source_type
        self.fonts = tuple(fonts)

    @cached_property
    def luminance(self) -> np.ndarray:
        """Luminance plane of the buffer."""
        return self.buffer.luminance()

    def __repr__(self) -> str:
        return f"AnalysisSession({self.source_type}, {self.buffer!r})"


class TemplateAnalyzer:
    """
    Infers design properties from a resume template image or PDF.

    The analyzer itself is stateless between calls: every analysis
    rasterizes into its own session, so one instance can serve concurrent
    requests.

    Example:
        analyzer = TemplateAnalyzer()
        result = analyzer.analyze(png_bytes, "image/png")
        primary = result.color_palette[0].hex
    """

    def __init__(
        self,
        config: Optional[AnalyzerConfig] = None,
        image_decoder: Optional[ImageDecoder] = None,
        page_renderer: Optional[PdfPageRenderer] = None,
        text_run_extractor: Optional[TextRunExtractor] = None
    ):
        """
        Initialize the analyzer.

        Args:
            config: Thresholds (default: AnalyzerConfig())
            image_decoder: Decodes PNG/JPEG bytes to a PixelBuffer
            page_renderer: Renders a PDF page to a PixelBuffer
            text_run_extractor: Reads the PDF text layer
        """
        self.config = config or AnalyzerConfig()
        cfg = self.config

        # Rasterization collaborators
        self.image_decoder = image_decoder or ImageDecoder()
        self.page_renderer = page_renderer or PdfPageRenderer(scale=cfg.pdf_render_scale)
        self.text_run_extractor = text_run_extractor or TextRunExtractor(scale=cfg.pdf_render_scale)

        # Analysis components
        self.color_extractor = ColorPaletteExtractor(
            sample_stride=cfg.palette_sample_stride,
            alpha_threshold=cfg.alpha_threshold,
            bucket_size=cfg.color_bucket_size,
            max_colors=cfg.palette_size
        )
        self.text_detector = TextRegionDetector(
            block_size=cfg.block_size,
            edge_threshold=cfg.edge_threshold,
            score_threshold=cfg.text_score_threshold,
            merge_tolerance=cfg.merge_tolerance
        )
        self.layout_analyzer = LayoutAnalyzer(
            background_luminance=cfg.background_luminance,
            content_row_ratio=cfg.content_row_ratio,
            min_section_ratio=cfg.min_section_ratio,
            grid_snap=cfg.grid_snap
        )
        self.element_detector = DesignElementDetector(
            dark_luminance=cfg.dark_luminance,
            row_step=cfg.line_row_step,
            min_length_ratio=cfg.min_line_ratio
        )

    def analyze(self, data: bytes, mime_type: str) -> AnalysisResult:
        """
        Analyze a template synchronously.

        Args:
            data: Image or PDF bytes
            mime_type: Declared MIME type of the bytes

        Returns:
            AnalysisResult

        Raises:
            UnsupportedFormatError: If the MIME type is not supported
            DecodeFailureError: If the bytes cannot be rasterized
        """
        mime_type = self.check_mime_type(mime_type)
        session = self.open_session(data, mime_type)
        return self.analyze_session(session)

    async def analyze_async(self, data: bytes, mime_type: str) -> AnalysisResult:
        """
        Analyze a template from a coroutine.

        Decoding or rendering runs in a worker thread; the pixel scans that
        follow run synchronously in the calling task. Cancelling the task
        while it waits on the decode abandons the analysis.

        Args:
            data: Image or PDF bytes
            mime_type: Declared MIME type of the bytes

        Returns:
            AnalysisResult
        """
        mime_type = self.check_mime_type(mime_type)
        session = await asyncio.to_thread(self.open_session, data, mime_type)
        return self.analyze_session(session)

    def analyze_file(self, path: str, mime_type: Optional[str] = None) -> AnalysisResult:
        """
        Analyze a template file on disk.

        Args:
            path: Path to a PNG, JPEG or PDF file
            mime_type: MIME type (default: guessed from the extension)

        Returns:
            AnalysisResult
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Template not found: {path}")

        return self.analyze(path.read_bytes(), mime_type or guess_mime_type(path))

    def analyze_buffer(self, buffer: PixelBuffer, fonts: Sequence[str] = ()) -> AnalysisResult:
        """Analyze an already rasterized page."""
        return self.analyze_session(AnalysisSession(buffer, "image", fonts))

    def open_session(self, data: bytes, mime_type: str) -> AnalysisSession:
        """
        Rasterize the input into a fresh session.

        Args:
            data: Image or PDF bytes
            mime_type: Normalized, supported MIME type

        Returns:
            AnalysisSession owning the pixel buffer
        """
        try:
            if mime_type == PDF_MIME_TYPE:
                buffer = self.page_renderer.render(data, page_number=0)
                runs = self.text_run_extractor.extract(data)
                return AnalysisSession(buffer, "pdf", self.text_run_extractor.font_names(runs))

            return AnalysisSession(self.image_decoder.decode(data, mime_type), "image")
        except DecodeFailureError:
            logger.exception("Template analysis failed while rasterizing %s input", mime_type)
            raise

    def analyze_session(self, session: AnalysisSession) -> AnalysisResult:
        """
        Run every analysis stage over a session's buffer.

        Args:
            session: Session holding the rasterized page

        Returns:
            AnalysisResult holding no reference to the buffer
        """
        started = time.perf_counter()
        buffer = session.buffer
        luminance = session.luminance

        palette = self.color_extractor.extract(buffer)
        text_blocks = self.text_detector.detect(buffer, luminance)
        layout = self.layout_analyzer.analyze(buffer, text_blocks, luminance)
        elements = self.element_detector.detect(buffer, luminance)

        result = AnalysisResult(
            dimensions=Dimensions(width=buffer.width, height=buffer.height),
            color_palette=tuple(palette),
            fonts=session.fonts,
            layout=layout,
            design_elements=elements,
            source_type=session.source_type
        )

        logger.info(
            "Analyzed %s template %dx%d in %.2fs: %d colors, %d text blocks, %d sections, %d lines",
            session.source_type, buffer.width, buffer.height, time.perf_counter() - started,
            len(palette), len(text_blocks), len(layout.sections), len(elements.horizontal_lines)
        )
        return result

    def check_mime_type(self, mime_type: Optional[str]) -> str:
        """Normalize a MIME type, raising UnsupportedFormatError if unsupported."""
        normalized = normalize_mime_type(mime_type)
        if normalized not in SUPPORTED_MIME_TYPES:
            logger.error("Rejected template with unsupported type %r", mime_type)
            raise UnsupportedFormatError(mime_type)
        return normalized


def analyze_template(data: bytes, mime_type: str, config: Optional[AnalyzerConfig] = None) -> AnalysisResult:
    """Analyze a template with a one-off analyzer."""
    return TemplateAnalyzer(config).analyze(data, mime_type)


def supported_mime_types() -> Tuple[str, ...]:
    """MIME types accepted by the analyzer, sorted."""
    return tuple(sorted(SUPPORTED_MIME_TYPES))
