"""
Preprocessing pipeline for composable content extraction steps.

This module implements the pipeline pattern to allow flexible composition
of preprocessing steps based on the repair options.
"""

from typing import Optional

from ..recovery.log import RepairLog
from ..utils.config import RepairOptions
from .base import PreprocessingStepBase
from .extractors import LeadingTextSkipper, MarkdownExtractor


class PreprocessingPipeline:
    """Manages a sequence of preprocessing steps applied to the raw input."""

    def __init__(self, steps: Optional[list[PreprocessingStepBase]] = None):
        self.steps = steps or []

    def add_step(self, step: PreprocessingStepBase) -> None:
        """Add a preprocessing step to the pipeline."""
        self.steps.append(step)

    def process(
        self, text: str, options: RepairOptions, repair_log: RepairLog
    ) -> str:
        """Apply all applicable preprocessing steps to the text."""
        result = text
        for step in self.steps:
            if step.should_apply(options):
                result = step.process(result, repair_log)
        return result

    @classmethod
    def create_default_pipeline(cls) -> "PreprocessingPipeline":
        """Create the pipeline used by the public API."""
        pipeline = cls()
        pipeline.add_step(MarkdownExtractor())
        pipeline.add_step(LeadingTextSkipper())
        return pipeline
