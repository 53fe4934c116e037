"""
Analyzer thresholds and their defaults.

The values are empirically chosen heuristics. They are collected here so a
deployment can tune them from a YAML file without touching the detectors.
"""

import logging
from dataclasses import dataclass, fields, asdict
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Color palette
DEFAULT_PALETTE_SAMPLE_STRIDE = 10
DEFAULT_ALPHA_THRESHOLD = 128
DEFAULT_COLOR_BUCKET_SIZE = 20
DEFAULT_PALETTE_SIZE = 8

# Text regions
DEFAULT_BLOCK_SIZE = 20
DEFAULT_EDGE_THRESHOLD = 30
DEFAULT_TEXT_SCORE_THRESHOLD = 0.3
DEFAULT_MERGE_TOLERANCE = 30

# Layout
DEFAULT_BACKGROUND_LUMINANCE = 240
DEFAULT_CONTENT_ROW_RATIO = 0.1
DEFAULT_MIN_SECTION_RATIO = 0.05
DEFAULT_GRID_SNAP = 10

# Design elements
DEFAULT_DARK_LUMINANCE = 200
DEFAULT_LINE_ROW_STEP = 5
DEFAULT_MIN_LINE_RATIO = 0.1

# Rasterization
DEFAULT_PDF_RENDER_SCALE = 2.0
DEFAULT_MAX_INPUT_BYTES = 10 * 1024 * 1024


@dataclass(frozen=True)
class AnalyzerConfig:
    """
    Tunable thresholds for every stage of the analysis.

    Attributes:
        palette_sample_stride: Sample every Nth pixel when counting colors
        alpha_threshold: Samples with lower alpha are skipped as transparent
        color_bucket_size: Channel quantization width
        palette_size: Maximum number of swatches returned
        block_size: Side of the square cells scored for text
        edge_threshold: Luminance difference that marks an edge pixel
        text_score_threshold: Cells scoring above this become text blocks
        merge_tolerance: Padding applied on both axes when testing adjacency
        background_luminance: Pixels at or above this count as background
        content_row_ratio: Fraction of the width a row needs to hold content
        min_section_ratio: Fraction of the height a section must exceed
        grid_snap: Left edges are rounded to this many pixels
        dark_luminance: Pixels below this are candidates for divider lines
        line_row_step: Row stride of the divider line scan
        min_line_ratio: Fraction of the width a dark run must exceed
        pdf_render_scale: Zoom applied when rasterizing a PDF page
        max_input_bytes: Upper bound on input size enforced by the CLI
    """
    palette_sample_stride: int = DEFAULT_PALETTE_SAMPLE_STRIDE
    alpha_threshold: int = DEFAULT_ALPHA_THRESHOLD
    color_bucket_size: int = DEFAULT_COLOR_BUCKET_SIZE
    palette_size: int = DEFAULT_PALETTE_SIZE
    block_size: int = DEFAULT_BLOCK_SIZE
    edge_threshold: float = DEFAULT_EDGE_THRESHOLD
    text_score_threshold: float = DEFAULT_TEXT_SCORE_THRESHOLD
    merge_tolerance: int = DEFAULT_MERGE_TOLERANCE
    background_luminance: float = DEFAULT_BACKGROUND_LUMINANCE
    content_row_ratio: float = DEFAULT_CONTENT_ROW_RATIO
    min_section_ratio: float = DEFAULT_MIN_SECTION_RATIO
    grid_snap: int = DEFAULT_GRID_SNAP
    dark_luminance: float = DEFAULT_DARK_LUMINANCE
    line_row_step: int = DEFAULT_LINE_ROW_STEP
    min_line_ratio: float = DEFAULT_MIN_LINE_RATIO
    pdf_render_scale: float = DEFAULT_PDF_RENDER_SCALE
    max_input_bytes: int = DEFAULT_MAX_INPUT_BYTES

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            expected = (int,) if f.type is int else (int, float)
            if isinstance(value, bool) or not isinstance(value, expected):
                kind = "an integer" if f.type is int else "a number"
                raise ConfigurationError(f"{f.name} must be {kind}, got {value!r}")

        for name in ("palette_sample_stride", "color_bucket_size", "palette_size",
                     "grid_snap", "line_row_step", "max_input_bytes"):
            if getattr(self, name) < 1:
                raise ConfigurationError(f"{name} must be at least 1")
        # A cell needs at least one interior pixel with a right and lower neighbour
        if self.block_size < 2:
            raise ConfigurationError("block_size must be at least 2")
        if self.merge_tolerance < 0:
            raise ConfigurationError("merge_tolerance must not be negative")
        if self.pdf_render_scale <= 0:
            raise ConfigurationError("pdf_render_scale must be positive")
        if not 0 <= self.alpha_threshold <= 255:
            raise ConfigurationError("alpha_threshold must be within 0-255")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalyzerConfig":
        """Create a config from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning("Ignoring unknown analyzer settings: %s", ", ".join(sorted(unknown)))
        return cls(**{k: v for k, v in data.items() if k in known})


def load_config(config_path: Optional[str] = None) -> AnalyzerConfig:
    """
    Load analyzer settings from a YAML file.

    The file may hold the settings at the top level or nested under an
    ``analyzer`` key.

    Args:
        config_path: Path to the YAML file

    Returns:
        AnalyzerConfig, with defaults when no file is given or found
    """
    if not config_path or not Path(config_path).exists():
        if config_path:
            logger.warning("Config file %s not found, using defaults", config_path)
        return AnalyzerConfig()

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Config file {config_path} is not valid YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")

    section = data.get("analyzer", data)
    if not isinstance(section, dict):
        raise ConfigurationError("'analyzer' section must be a mapping")

    logger.debug("Loaded analyzer config from %s", config_path)
    return AnalyzerConfig.from_dict(section)
