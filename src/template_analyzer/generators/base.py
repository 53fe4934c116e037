"""
Base class for output generators.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any
from ..models import AnalysisResult


class BaseGenerator(ABC):
    """Abstract base class for turning an analysis into rendering output."""

    @abstractmethod
    def generate(self, result: AnalysisResult, context: Dict[str, Any] = None) -> Any:
        """Generate output from an analysis result."""
        pass
