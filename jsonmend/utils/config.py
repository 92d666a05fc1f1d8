"""
Configuration and limits for jsonmend.

This module defines the immutable options consumed by one repair call and the
resource limits that guard the recursive parser.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Optional


@dataclass(frozen=True)
class ParseLimits:
    """Resource limits applied while parsing untrusted input.

    ``None`` disables a limit; nesting is then bounded by the interpreter's
    recursion limit.
    """

    max_nesting_depth: Optional[int] = None
    max_input_size: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_nesting_depth is not None and self.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be positive")
        if self.max_input_size is not None and self.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")


@dataclass(frozen=True)
class RepairOptions:
    """Options for a single repair or parse call.

    Attributes:
        return_objects: ``repair`` returns the parsed value instead of text.
        skip_fast_path: Do not try a strict ``json.loads`` before repairing.
        ensure_ascii: Escape non-ASCII characters in the serialized output.
        log_repairs: Record every corrective action in the repair log.
        indent: Indentation for serialized output, ``None`` for one line.
        allow_nan: Emit ``NaN``/``Infinity`` instead of ``null`` (not valid JSON).
        extract_markdown: Parse the body of the first fenced code block.
        skip_leading_text: Skip prose that precedes the first ``{`` or ``[``.
        limits: Nesting depth and input size limits.
    """

    return_objects: bool = False
    skip_fast_path: bool = False
    ensure_ascii: bool = True
    log_repairs: bool = False
    indent: Optional[int] = None
    allow_nan: bool = False
    extract_markdown: bool = True
    skip_leading_text: bool = True
    limits: ParseLimits = field(default_factory=ParseLimits)

    def __post_init__(self) -> None:
        if self.indent is not None and self.indent < 0:
            raise ValueError("indent must be None or a non-negative integer")

    @classmethod
    def conservative(cls) -> "RepairOptions":
        """Options that only repair the text itself, with no content extraction."""
        return cls(extract_markdown=False, skip_leading_text=False)

    def merged(self, **overrides: Any) -> "RepairOptions":
        """Return a copy with the given fields replaced."""
        if not overrides:
            return self
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise TypeError(f"Unknown repair option(s): {', '.join(unknown)}")
        return replace(self, **overrides)


def resolve_options(
    options: Optional[RepairOptions] = None, **overrides: Any
) -> RepairOptions:
    """Combine an optional base options object with keyword overrides."""
    return (options or RepairOptions()).merged(**overrides)
