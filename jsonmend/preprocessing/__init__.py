"""
Input preprocessing for jsonmend.

This module locates the JSON payload inside surrounding model output before
the repair parser runs. Each step is optional and controlled by RepairOptions.
"""

from .base import PreprocessingStepBase
from .extractors import LeadingTextSkipper, MarkdownExtractor
from .pipeline import PreprocessingPipeline

__all__ = [
    "PreprocessingPipeline",
    "PreprocessingStepBase",
    "MarkdownExtractor",
    "LeadingTextSkipper",
]
