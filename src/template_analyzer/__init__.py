"""
Template Analyzer - infer design properties from resume templates.

A deterministic, pixel-statistics pipeline that reads a template image
(or the first page of a PDF) and reports its dominant colors, text
regions, content sections, margins, a coarse grid and divider lines,
so a resume generator can style its output after the template.

Quick Start:
    from template_analyzer import TemplateAnalyzer, StyleGenerator

    analyzer = TemplateAnalyzer()
    result = analyzer.analyze_file("template.png")
    theme = StyleGenerator().generate(result)

Modular Components:
    - models: PixelBuffer, TextBlock, AnalysisResult and friends
    - renderers: Image decoding and PDF page rendering
    - extractors: Color palette and PDF text run extraction
    - detectors: Text region and divider line detection
    - postprocessors: Text block merging pipeline
    - analyzers: Sections, grid and margins
    - generators: Style theme and font matching
    - visualizers: Debug visualization
"""

__version__ = "0.1.0"

# Main analyzer
from .analyzer import TemplateAnalyzer, AnalysisSession, analyze_template, supported_mime_types

# Configuration and errors
from .config import AnalyzerConfig, load_config
from .exceptions import (
    TemplateAnalysisError,
    UnsupportedFormatError,
    DecodeFailureError,
    ConfigurationError,
)

# Models
from .models import PixelBuffer, AnalysisResult, ColorSwatch, TextBlock

# Generators
from .generators import StyleGenerator, StyleTheme, FontMatcher

__all__ = [
    # Main classes
    "TemplateAnalyzer",
    "AnalysisSession",
    "analyze_template",
    "supported_mime_types",

    # Configuration and errors
    "AnalyzerConfig",
    "load_config",
    "TemplateAnalysisError",
    "UnsupportedFormatError",
    "DecodeFailureError",
    "ConfigurationError",

    # Models
    "PixelBuffer",
    "AnalysisResult",
    "ColorSwatch",
    "TextBlock",

    # Styling
    "StyleGenerator",
    "StyleTheme",
    "FontMatcher",
]
