"""
Container context tracking for the jsonmend parser.

The context stack records which kind of position the parser is filling in
each open container. String termination and stray-bracket handling both
depend on it.
"""

from enum import Enum
from typing import Optional


class ContextValues(Enum):
    """Role of the innermost position being parsed."""

    OBJECT_KEY = "object_key"
    OBJECT_VALUE = "object_value"
    ARRAY = "array"


# Characters that end the current element when a string forgets its quote
_ELEMENT_TERMINATORS = {
    ContextValues.OBJECT_KEY: ":,}",
    ContextValues.OBJECT_VALUE: ",}]",
    ContextValues.ARRAY: ",]}",
}


class JsonContext:
    """Stack of container roles, innermost last."""

    def __init__(self) -> None:
        self.context: list[ContextValues] = []

    @property
    def current(self) -> Optional[ContextValues]:
        """The innermost role, or None at the document root."""
        return self.context[-1] if self.context else None

    @property
    def empty(self) -> bool:
        """Whether the parser is at the document root."""
        return not self.context

    def set(self, value: ContextValues) -> None:
        """Enter a new container position."""
        self.context.append(value)

    def replace(self, value: ContextValues) -> None:
        """Switch the innermost position, e.g. from key to value."""
        self.context[-1] = value

    def reset(self) -> None:
        """Leave the innermost container."""
        if self.context:
            self.context.pop()

    def terminators(self) -> str:
        """Structural characters that end an element in the current position."""
        if self.current is None:
            return ""
        return _ELEMENT_TERMINATORS[self.current]

    def enclosing_array(self) -> bool:
        """Whether an array is open outside the innermost container."""
        return ContextValues.ARRAY in self.context[:-1]

    def enclosing_object(self) -> bool:
        """Whether an object is open outside the innermost container."""
        return any(
            value in (ContextValues.OBJECT_KEY, ContextValues.OBJECT_VALUE)
            for value in self.context[:-1]
        )
