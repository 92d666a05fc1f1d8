"""
Value types produced by the jsonmend parser.

Parsed documents use plain Python types (None, bool, int, float, str, list,
dict). Non-integral numbers are FloatLiteral instances so the serializer can
write back the exact lexeme the input used.
"""

import re
from typing import Any, Optional, Union

# Strict JSON number grammar (RFC 8259)
STRICT_NUMBER_RE = re.compile(r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?")


class FloatLiteral(float):
    """A float that remembers the source lexeme it was parsed from."""

    lexeme: str

    def __new__(
        cls, value: Union[float, str], lexeme: Optional[str] = None
    ) -> "FloatLiteral":
        obj = super().__new__(cls, value)
        obj.lexeme = lexeme if lexeme is not None else float.__repr__(obj)
        return obj

    @classmethod
    def from_lexeme(cls, lexeme: str) -> "FloatLiteral":
        """Build from a strict JSON lexeme (``json.loads`` ``parse_float`` hook)."""
        return cls(lexeme, lexeme)

    def is_exact(self) -> bool:
        """Whether the lexeme is valid JSON and can be written back as-is."""
        return STRICT_NUMBER_RE.fullmatch(self.lexeme) is not None


Value = Union[None, bool, int, float, str, list[Any], dict[str, Any]]
