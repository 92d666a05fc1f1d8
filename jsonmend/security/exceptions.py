"""
Exception hierarchy for jsonmend.

Every failure the repair core can report is a subclass of JsonRepairError.
Heuristic ambiguity never raises; only the absence of any value, an internal
invariant violation, or an exceeded resource limit does.
"""

from dataclasses import dataclass
from typing import Optional

from ..core.cursor import Position


@dataclass
class ErrorContext:
    """Source excerpt around the offset where an error was detected."""

    text: str
    position: Position
    context_before: str
    context_after: str
    error_char: str
    line_text: str
    column_indicator: str


class JsonRepairError(ValueError):
    """Base class for all jsonmend errors."""

    exit_code = 1

    def __init__(
        self,
        message: str,
        position: Optional[Position] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.context = context
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]

        if self.position:
            parts[0] += f" at line {self.position.line}, column {self.position.column}"

        if self.context:
            parts.append("Context:")
            parts.append(f"  {self.context.line_text}")
            parts.append(f"  {self.context.column_indicator}")

        if self.suggestions:
            parts.append("Suggestions:")
            parts.extend(f"  - {suggestion}" for suggestion in self.suggestions)

        return "\n".join(parts)

    def summary(self) -> str:
        """One-line description, used by the command line."""
        if self.position:
            return (
                f"{self.message} at line {self.position.line}, "
                f"column {self.position.column}"
            )
        return self.message


class UnexpectedEnd(JsonRepairError):
    """The input contains no value: it is empty, blank, or only comments."""

    exit_code = 3


class InvalidLiteral(JsonRepairError):
    """A production was dispatched but found nothing to consume."""

    exit_code = 4


class LimitExceeded(JsonRepairError):
    """A configured resource limit was exceeded."""


class RecursionLimitExceeded(LimitExceeded):
    """Containers are nested deeper than the parser is allowed to recurse."""

    exit_code = 5


class InputTooLarge(LimitExceeded):
    """The input is longer than the configured maximum size."""

    exit_code = 6


class InvalidEncoding(JsonRepairError):
    """Byte input is not valid UTF-8."""
