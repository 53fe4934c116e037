"""
Base class for extractors.
"""

from abc import ABC, abstractmethod
from typing import List, Any


class BaseExtractor(ABC):
    """
    Abstract base class for extracting values from a template source.

    Subclasses implement extract for one kind of source (a pixel buffer,
    a PDF text layer, ...).
    """

    @abstractmethod
    def extract(self, source: Any) -> List[Any]:
        """
        Extract values from a source.

        Args:
            source: The object to extract from

        Returns:
            List of extracted values
        """
        pass

    def postprocess(self, items: List[Any]) -> List[Any]:
        """
        Optional postprocessing step after extraction.
        Override in subclasses if needed.

        Args:
            items: Extracted values

        Returns:
            Postprocessed values
        """
        return items
