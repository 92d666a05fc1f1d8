"""
Resource limits for jsonmend.

The parser recurses once per nested container. Depth is unlimited unless
ParseLimits.max_nesting_depth is set; either way an exhausted interpreter
stack is reported as RecursionLimitExceeded by the engine.
"""

from ..utils.config import ParseLimits
from .exceptions import InputTooLarge, RecursionLimitExceeded


class LimitValidator:
    """Tracks nesting depth for one parse and enforces ParseLimits."""

    def __init__(self, limits: ParseLimits):
        self.limits = limits
        self.nesting_depth = 0

    def validate_input_size(self, text: str) -> None:
        """Validate that input text size is within limits."""
        max_size = self.limits.max_input_size
        if max_size is not None and len(text) > max_size:
            raise InputTooLarge(f"Input size {len(text)} exceeds limit {max_size}")

    def enter_structure(self) -> None:
        """Track entering a nested structure and validate depth."""
        self.nesting_depth += 1
        max_depth = self.limits.max_nesting_depth
        if max_depth is not None and self.nesting_depth > max_depth:
            raise RecursionLimitExceeded(
                f"Nesting depth {self.nesting_depth} exceeds limit {max_depth}"
            )

    def exit_structure(self) -> None:
        """Track exiting a nested structure."""
        if self.nesting_depth > 0:
            self.nesting_depth -= 1
