"""
jsonmend - repairs the broken JSON that language models write.

jsonmend turns almost-JSON into valid JSON: it closes what was left open,
fills in missing commas and colons, quotes bare words, and drops what does
not belong. Valid JSON passes through the standard json module untouched.

Key Features:
- Unquoted keys and values, single and typographic quotes
- Missing or trailing commas, missing colons, stray characters
- Truncated output: strings, arrays and objects are closed automatically
- Comments, markdown code fences and leading prose are skipped
- Python and JavaScript literals (None, True, undefined, NaN, Infinity)
- A repair log describing every correction made

Quick Start:
    import jsonmend
    jsonmend.repair("{name: 'Ada', langs: ['en' 'fr'],")
    # '{"name": "Ada", "langs": ["en", "fr"]}'

    data = jsonmend.loads('{"a": 1, "b": [1, 2')  # {'a': 1, 'b': [1, 2]}

    result = jsonmend.parse_with_log("[1 2]")
    for event in result.repairs:
        print(event)
"""

from .core.engine import from_file, load, loads, parse, parse_with_log, repair
from .core.values import FloatLiteral
from .recovery.log import RepairAction, RepairEvent, RepairResult
from .security.exceptions import (
    InputTooLarge,
    InvalidEncoding,
    InvalidLiteral,
    JsonRepairError,
    LimitExceeded,
    RecursionLimitExceeded,
    UnexpectedEnd,
)
from .utils.config import ParseLimits, RepairOptions

__version__ = "0.1.0"
__author__ = "jsonmend contributors"

__all__ = [
    # Repair and parse functions
    "repair", "parse", "loads", "load", "from_file", "parse_with_log",
    # Configuration classes
    "RepairOptions", "ParseLimits",
    # Repair log
    "RepairAction", "RepairEvent", "RepairResult",
    # Values
    "FloatLiteral",
    # Exception classes
    "JsonRepairError", "UnexpectedEnd", "InvalidLiteral", "InvalidEncoding",
    "LimitExceeded", "RecursionLimitExceeded", "InputTooLarge",
]
