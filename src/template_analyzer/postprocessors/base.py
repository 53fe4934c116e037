"""
Text block post-processing.
"""

from abc import ABC, abstractmethod
from typing import List, Any, Dict, Optional

from ..models import TextBlock


class BasePostProcessor(ABC):
    """
    Refines raw detector output.

    A disabled processor passes blocks through untouched, so a detector can
    expose its raw cells without rebuilding its pipeline.
    """

    def __init__(self, name: str = None):
        self.name = name or self.__class__.__name__
        self.enabled = True

    @abstractmethod
    def process(self, items: List[TextBlock], context: Dict[str, Any] = None) -> List[TextBlock]:
        """
        Process a list of blocks.

        Args:
            items: Blocks in detection order
            context: Optional page information such as dimensions

        Returns:
            Processed list of blocks
        """
        pass

    def __call__(self, items: List[TextBlock], context: Dict[str, Any] = None) -> List[TextBlock]:
        if not self.enabled:
            return items
        return self.process(items, context)

    def __repr__(self) -> str:
        return f"{self.name}(enabled={self.enabled})"


class PostProcessorPipeline:
    """Runs post-processors in order."""

    def __init__(self, processors: List[BasePostProcessor] = None):
        self.processors: List[BasePostProcessor] = processors or []

    def get(self, name: str) -> Optional[BasePostProcessor]:
        """Look up a processor by name."""
        return next((proc for proc in self.processors if proc.name == name), None)

    def process(self, items: List[TextBlock], context: Dict[str, Any] = None) -> List[TextBlock]:
        for processor in self.processors:
            items = processor(items, context)
        return items
