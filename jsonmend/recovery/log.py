"""
Repair log for jsonmend.

Records every corrective action the parser takes, in the order it takes
them, so callers can audit how malformed input was interpreted.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

logger = logging.getLogger(__name__)


class RepairAction(Enum):
    """Kinds of corrective action the parser can take."""

    INSERTED_COMMA = "inserted_comma"
    REMOVED_COMMA = "removed_comma"
    INSERTED_COLON = "inserted_colon"
    REMOVED_COLON = "removed_colon"
    ADDED_QUOTES = "added_quotes"
    NORMALIZED_QUOTES = "normalized_quotes"
    ESCAPED_QUOTE = "escaped_quote"
    CLOSED_STRING = "closed_string"
    TERMINATED_STRING = "terminated_string"
    CONCATENATED_STRINGS = "concatenated_strings"
    CLOSED_CONTAINER = "closed_container"
    DROPPED_CHARACTER = "dropped_character"
    INFERRED_VALUE = "inferred_value"
    DUPLICATE_KEY = "duplicate_key"
    NORMALIZED_LITERAL = "normalized_literal"
    NORMALIZED_NUMBER = "normalized_number"
    EXTRACTED_CODE_BLOCK = "extracted_code_block"
    SKIPPED_LEADING_TEXT = "skipped_leading_text"
    DISCARDED_TRAILING_TEXT = "discarded_trailing_text"


@dataclass(frozen=True)
class RepairEvent:
    """One corrective action, located by character offset in the input."""

    position: int
    action: RepairAction
    description: str

    def __str__(self) -> str:
        return f"{self.description} at position {self.position}"


class RepairLog:
    """Ordered collection of repair events for a single parse.

    A disabled log accepts ``record`` calls and drops them, so the parser
    never has to check whether diagnostics were requested.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.events: list[RepairEvent] = []

    def record(self, position: int, action: RepairAction, description: str) -> None:
        """Record a corrective action taken at ``position``."""
        if not self.enabled:
            return
        event = RepairEvent(position, action, description)
        self.events.append(event)
        logger.debug("repair: %s", event)

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self) -> Iterator[RepairEvent]:
        return iter(self.events)

    def actions(self) -> list[RepairAction]:
        """The actions taken, in order."""
        return [event.action for event in self.events]

    def summary(self) -> dict[str, Any]:
        """Get a summary of the repairs performed."""
        counts = Counter(event.action.value for event in self.events)
        return {
            "total_repairs": len(self.events),
            "repair_types": dict(counts),
            "most_common": [action for action, _ in counts.most_common(5)],
        }


@dataclass
class RepairResult:
    """A parsed value together with the repairs needed to obtain it."""

    value: Any
    repairs: list[RepairEvent] = field(default_factory=list)
    fast_path: bool = False

    @property
    def was_repaired(self) -> bool:
        """Whether the input needed any repair at all."""
        return bool(self.repairs)
