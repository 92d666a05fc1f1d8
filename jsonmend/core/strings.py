"""
String repair for jsonmend.

Resolves the boundaries and content of quoted, mis-quoted and unquoted
string tokens. Where a string ends is decided by looking ahead first, so the
cursor only ever moves forward over characters that belong to the string.
"""

from typing import Optional

from ..recovery.log import RepairAction, RepairLog
from ..security.exceptions import InvalidLiteral
from .constants import (
    APOSTROPHES,
    BAREWORD_TERMINATORS,
    HEX_DIGITS,
    JSON_ESCAPE_MAP,
    QUOTE_CHARS,
    QUOTE_PAIRS,
)
from .context import ContextValues, JsonContext
from .cursor import Cursor, is_whitespace, is_word_char


def _read_hex4(text: str, index: int) -> Optional[int]:
    """Read exactly 4 hexadecimal digits at ``index``."""
    digits = text[index : index + 4]
    if len(digits) != 4 or any(char not in HEX_DIGITS for char in digits):
        return None
    return int(digits, 16)


def decode_escapes(raw: str) -> str:
    """Process JSON escape sequences in the body of a quoted string.

    Surrogate pairs are combined; a lone surrogate becomes U+FFFD. Unknown
    escapes keep both characters so Windows paths survive intact.
    """
    if "\\" not in raw:
        return raw

    result = []
    i = 0
    length = len(raw)
    while i < length:
        char = raw[i]
        if char != "\\" or i + 1 >= length:
            result.append(char)
            i += 1
            continue

        next_char = raw[i + 1]
        if next_char == "u":
            code_point = _read_hex4(raw, i + 2)
            if code_point is None:
                result.append("\\u")
                i += 2
                continue
            i += 6
            if 0xD800 <= code_point <= 0xDBFF:
                low = _read_hex4(raw, i + 2) if raw[i : i + 2] == "\\u" else None
                if low is not None and 0xDC00 <= low <= 0xDFFF:
                    high = code_point - 0xD800
                    result.append(chr(0x10000 + (high << 10) + (low - 0xDC00)))
                    i += 6
                else:
                    result.append("\ufffd")
            elif 0xDC00 <= code_point <= 0xDFFF:
                result.append("\ufffd")
            else:
                result.append(chr(code_point))
        elif next_char in JSON_ESCAPE_MAP:
            result.append(JSON_ESCAPE_MAP[next_char])
            i += 2
        else:
            result.append(char + next_char)
            i += 2

    return "".join(result)


class StringRepairer:
    """Parses string tokens at the cursor, repairing their delimiters."""

    def __init__(self, cursor: Cursor, context: JsonContext, repair_log: RepairLog):
        self.cursor = cursor
        self.context = context
        self.repair_log = repair_log

    def parse_quoted(self) -> str:
        """Parse a quoted string, joining ``"a" + "b"`` concatenations."""
        value = self._parse_one_quoted()
        while True:
            plus_offset = self._concatenation_offset()
            if plus_offset is None:
                break
            plus_position = self.cursor.pos + plus_offset
            self.cursor.skip(plus_offset + 1)
            self.cursor.skip_whitespace()
            value += self._parse_one_quoted()
            self.repair_log.record(
                plus_position,
                RepairAction.CONCATENATED_STRINGS,
                "joined concatenated string literals",
            )
        return value

    def parse_unquoted(self) -> str:
        """Parse a bare word up to the next delimiter, newline or comment."""
        cursor = self.cursor
        start = cursor.pos
        offset = 0
        while True:
            char = cursor.peek(offset)
            if char == "" or char in BAREWORD_TERMINATORS:
                break
            if is_whitespace(char) and cursor.starts_comment(offset + 1):
                break
            offset += 1

        value = cursor.peek_text(offset).rstrip()
        if not value:
            raise InvalidLiteral("Unquoted string is empty", cursor.position())
        cursor.skip(len(value))
        self.repair_log.record(
            start, RepairAction.ADDED_QUOTES, f"added quotes around {value!r}"
        )
        return value

    def _concatenation_offset(self) -> Optional[int]:
        """Offset of a ``+`` joining this string to another quoted string."""
        plus_offset, char = self.cursor.next_significant()
        if char != "+":
            return None
        _, after = self.cursor.next_significant(plus_offset + 1)
        return plus_offset if after and after in QUOTE_CHARS else None

    def _parse_one_quoted(self) -> str:
        cursor = self.cursor
        start = cursor.pos
        remaining = cursor.length - start
        opening = cursor.peek()
        closers = QUOTE_PAIRS[opening]
        terminators = self.context.terminators()

        if opening != '"':
            self.repair_log.record(
                start, RepairAction.NORMALIZED_QUOTES, f"replaced {opening!r} quotes"
            )

        end: Optional[int] = None
        closed = False
        first_break: Optional[int] = None

        offset = 1
        while end is None:
            char = cursor.peek(offset)

            if char == "":
                in_key = self.context.current == ContextValues.OBJECT_KEY
                if first_break is not None and in_key:
                    end = first_break
                else:
                    end = self._end_before_closers(min(offset, remaining))
                self.repair_log.record(
                    start, RepairAction.CLOSED_STRING, "closed unterminated string"
                )
            elif char == "\\":
                offset += 2
            elif char in closers:
                if self._is_apostrophe(offset):
                    offset += 1
                elif self._accepts_closer(offset):
                    end = offset
                    closed = True
                elif first_break is not None:
                    end = first_break
                    self.repair_log.record(
                        start + first_break,
                        RepairAction.TERMINATED_STRING,
                        "ended string missing its closing quote",
                    )
                else:
                    self.repair_log.record(
                        start + offset,
                        RepairAction.ESCAPED_QUOTE,
                        "escaped quote inside string",
                    )
                    offset += 1
            elif char in QUOTE_CHARS and self._is_misplaced_closer(offset, terminators):
                end = offset
                closed = True
                self.repair_log.record(
                    start + offset,
                    RepairAction.NORMALIZED_QUOTES,
                    f"accepted {char!r} as closing quote for {opening!r}",
                )
            else:
                if first_break is None and char in terminators:
                    first_break = offset
                offset += 1

        raw = cursor.peek_text(end - 1, 1)
        if not closed:
            raw = raw.rstrip()
        cursor.skip(end + 1 if closed else end)
        return decode_escapes(raw)

    def _is_apostrophe(self, offset: int) -> bool:
        """A quote between two word characters is an apostrophe (``it's``)."""
        if self.cursor.peek(offset) not in APOSTROPHES:
            return False
        return is_word_char(self.cursor.peek(offset - 1)) and is_word_char(
            self.cursor.peek(offset + 1)
        )

    def _accepts_closer(self, offset: int) -> bool:
        """Decide whether a matching quote at ``offset`` really ends the string."""
        cursor = self.cursor
        current = self.context.current
        after = offset + 1

        if current is None:
            return True
        if current == ContextValues.OBJECT_KEY:
            return not is_word_char(cursor.peek(after))

        next_offset, next_char = cursor.next_significant(after)
        if next_char == "" or next_char in ",}]" or next_char in QUOTE_CHARS:
            return True
        if cursor.starts_comment(next_offset):
            return True
        if next_char == "+":
            _, after_plus = cursor.next_significant(next_offset + 1)
            if after_plus in QUOTE_CHARS:
                return True
        if "\n" in cursor.peek_text(next_offset - after, after):
            return True
        return current == ContextValues.ARRAY and next_char in "{["

    def _is_misplaced_closer(self, offset: int, terminators: str) -> bool:
        """A non-matching quote right before an element terminator closes the string."""
        following = self.cursor.peek(offset + 1)
        return following == "" or following in terminators

    def _end_before_closers(self, offset: int) -> int:
        """End of an unterminated string, leaving trailing brackets to containers."""
        if self.context.empty:
            return offset
        while offset > 1:
            char = self.cursor.peek(offset - 1)
            if not (is_whitespace(char) or char in ",}]"):
                break
            offset -= 1
        return offset
