"""
Canonical JSON writer for repaired values.

Strings are escaped with the json module's encoders. Numbers parsed from the
input are written back from their original lexeme when it is already valid
JSON, so repairing the output of a repair changes nothing.
"""

import math
from json.encoder import encode_basestring, encode_basestring_ascii
from typing import Any, Callable, Optional

from .values import FloatLiteral


class JsonWriter:
    """Serializes a Value tree to JSON text."""

    def __init__(
        self,
        ensure_ascii: bool = True,
        indent: Optional[int] = None,
        allow_nan: bool = False,
    ):
        self.encode_string: Callable[[str], str] = (
            encode_basestring_ascii if ensure_ascii else encode_basestring
        )
        self.indent = indent
        self.allow_nan = allow_nan
        self.item_separator = ", " if indent is None else ","

    def encode(self, value: Any) -> str:
        """Return the JSON text for ``value``."""
        chunks: list[str] = []
        self._write(value, chunks, 0)
        return "".join(chunks)

    def _write(self, value: Any, chunks: list[str], level: int) -> None:
        if value is None:
            chunks.append("null")
        elif value is True:
            chunks.append("true")
        elif value is False:
            chunks.append("false")
        elif isinstance(value, str):
            chunks.append(self.encode_string(value))
        elif isinstance(value, int):
            chunks.append(int.__repr__(value))
        elif isinstance(value, float):
            chunks.append(self._format_float(value))
        elif isinstance(value, dict):
            self._write_object(value, chunks, level)
        elif isinstance(value, (list, tuple)):
            self._write_array(value, chunks, level)
        else:
            raise TypeError(
                f"Object of type {type(value).__name__} is not JSON serializable"
            )

    def _format_float(self, value: float) -> str:
        if isinstance(value, FloatLiteral) and value.is_exact():
            return value.lexeme
        if math.isnan(value):
            return "NaN" if self.allow_nan else "null"
        if math.isinf(value):
            if not self.allow_nan:
                return "null"
            return "Infinity" if value > 0 else "-Infinity"
        return float.__repr__(value)

    def _newline(self, level: int) -> str:
        return "\n" + " " * (self.indent * level)

    def _write_object(self, value: dict, chunks: list[str], level: int) -> None:
        if not value:
            chunks.append("{}")
            return

        chunks.append("{")
        first = True
        for key, item in value.items():
            if not first:
                chunks.append(self.item_separator)
            first = False
            if self.indent is not None:
                chunks.append(self._newline(level + 1))
            chunks.append(self.encode_string(str(key)))
            chunks.append(": ")
            self._write(item, chunks, level + 1)
        if self.indent is not None:
            chunks.append(self._newline(level))
        chunks.append("}")

    def _write_array(self, value: Any, chunks: list[str], level: int) -> None:
        if not value:
            chunks.append("[]")
            return

        chunks.append("[")
        for index, item in enumerate(value):
            if index:
                chunks.append(self.item_separator)
            if self.indent is not None:
                chunks.append(self._newline(level + 1))
            self._write(item, chunks, level + 1)
        if self.indent is not None:
            chunks.append(self._newline(level))
        chunks.append("]")


def serialize(
    value: Any,
    ensure_ascii: bool = True,
    indent: Optional[int] = None,
    allow_nan: bool = False,
) -> str:
    """Serialize a Value tree to JSON text."""
    return JsonWriter(ensure_ascii, indent, allow_nan).encode(value)
