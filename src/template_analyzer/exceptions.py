"""
Exceptions raised by the template analyzer.
"""


class TemplateAnalysisError(Exception):
    """Base class for every analysis failure."""


class UnsupportedFormatError(TemplateAnalysisError):
    """The input MIME type is not one the analyzer can rasterize."""

    def __init__(self, mime_type: str):
        self.mime_type = mime_type
        super().__init__(f"Unsupported file type: {mime_type!r}")


class DecodeFailureError(TemplateAnalysisError):
    """Image or PDF bytes could not be turned into a pixel buffer."""


class ConfigurationError(TemplateAnalysisError):
    """An analyzer setting is out of range."""
