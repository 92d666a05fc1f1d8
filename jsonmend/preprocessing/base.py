"""
Base classes for preprocessing steps.

A preprocessing step chooses which part of the raw input the parser scans.
Steps never rewrite the JSON text itself; they only cut it.
"""

from ..recovery.log import RepairLog
from ..utils.config import RepairOptions


class PreprocessingStepBase:
    """Base class for preprocessing steps with common functionality."""

    def should_apply(self, _options: RepairOptions) -> bool:
        """Default implementation - always apply. Override in subclasses."""
        return True

    def process(self, text: str, _repair_log: RepairLog) -> str:
        """Process the text. Must be implemented by subclasses."""
        raise NotImplementedError("Subclasses must implement process()")
