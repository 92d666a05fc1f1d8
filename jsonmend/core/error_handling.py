"""
Error context building for jsonmend.

Turns a line/column position into the source excerpt and caret line that
JsonRepairError prints below its message.
"""

from ..security.exceptions import ErrorContext, JsonRepairError
from .cursor import Position


class ErrorContextBuilder:
    """Builds error context information from the scanned text."""

    @staticmethod
    def offset_of(text: str, position: Position) -> int:
        """Character offset of a 1-based line/column position."""
        line_start = 0
        for _ in range(position.line - 1):
            newline = text.find("\n", line_start)
            if newline == -1:
                return len(text)
            line_start = newline + 1
        return min(line_start + position.column - 1, len(text))

    @staticmethod
    def build_context(
        text: str, position: Position, context_length: int = 40
    ) -> ErrorContext:
        """Build error context from position and original text."""
        offset = ErrorContextBuilder.offset_of(text, position)

        line_start = text.rfind("\n", 0, offset) + 1
        line_end = text.find("\n", offset)
        if line_end == -1:
            line_end = len(text)

        # Long lines are clipped to a window around the error
        window_start = max(line_start, offset - context_length // 2)
        window_end = min(line_end, offset + context_length // 2)
        line_text = text[window_start:window_end]
        prefix = "..." if window_start > line_start else ""
        suffix = "..." if window_end < line_end else ""

        return ErrorContext(
            text=text,
            position=position,
            context_before=text[max(0, offset - context_length // 2) : offset],
            context_after=text[offset : offset + context_length // 2],
            error_char=text[offset] if offset < len(text) else "",
            line_text=f"{prefix}{line_text}{suffix}",
            column_indicator=" " * (len(prefix) + offset - window_start) + "^",
        )

    @staticmethod
    def with_context(error: JsonRepairError, text: str) -> JsonRepairError:
        """Copy ``error`` with a source excerpt attached, if it has a position."""
        if error.context is not None or error.position is None:
            return error
        context = ErrorContextBuilder.build_context(text, error.position)
        return type(error)(error.message, error.position, context, error.suggestions)
