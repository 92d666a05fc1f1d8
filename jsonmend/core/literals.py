"""
Literal parsing for jsonmend: numbers, booleans, null and numeric sentinels.
"""

import math
from typing import Any, Union

from ..recovery.log import RepairAction, RepairLog
from ..security.exceptions import InvalidLiteral
from .constants import (
    FALSE_WORDS,
    INFINITY_WORDS,
    NAN_WORDS,
    NULL_WORDS,
    NUMBER_SIGNS,
    TRUE_WORDS,
)
from .cursor import Cursor, is_word_char
from .values import FloatLiteral, STRICT_NUMBER_RE

DIGITS = "0123456789"

_KEYWORDS: dict[str, Any] = {}
_KEYWORDS.update((word, True) for word in TRUE_WORDS)
_KEYWORDS.update((word, False) for word in FALSE_WORDS)
_KEYWORDS.update((word, None) for word in NULL_WORDS)

_CANONICAL_SPELLING = {True: "true", False: "false", None: "null"}


def is_digit(char: str) -> bool:
    """ASCII digit check; str.isdigit() also accepts superscripts."""
    return bool(char) and char in DIGITS


def keyword_value(word: str) -> tuple[bool, Any]:
    """Classify a bare word as a boolean/null literal. Returns (found, value)."""
    lowered = word.lower()
    if lowered in _KEYWORDS:
        return True, _KEYWORDS[lowered]
    return False, None


def is_sentinel_word(word: str) -> bool:
    """Whether a bare word spells NaN or Infinity."""
    lowered = word.lower()
    return lowered in NAN_WORDS or lowered in INFINITY_WORDS


class LiteralParser:
    """Recognizes literals at the cursor position."""

    def __init__(self, cursor: Cursor, repair_log: RepairLog):
        self.cursor = cursor
        self.repair_log = repair_log

    def is_number_start(self) -> bool:
        """Whether a number (or numeric sentinel) starts at the cursor.

        Only the start is checked: in ``123abc`` the number is ``123`` and
        ``abc`` is left for the caller.
        """
        cursor = self.cursor
        char = cursor.peek()
        if is_digit(char):
            return True
        if char == ".":
            return is_digit(cursor.peek(1))
        if char in NUMBER_SIGNS and char:
            following = cursor.peek(1)
            if is_digit(following):
                return True
            if following == ".":
                return is_digit(cursor.peek(2))
            return is_sentinel_word(cursor.peek_word(1))
        return is_sentinel_word(cursor.peek_word())

    def parse_keyword(self) -> Any:
        """Consume a true/false/null word and return its value."""
        start = self.cursor.pos
        word = self.cursor.peek_word()
        found, value = keyword_value(word)
        if not found:
            raise InvalidLiteral(
                f"Expected a literal, found {word!r}", self.cursor.position()
            )
        self.cursor.skip(len(word))

        canonical = _CANONICAL_SPELLING[value]
        if word != canonical:
            self.repair_log.record(
                start,
                RepairAction.NORMALIZED_LITERAL,
                f"normalized literal {word!r} to {canonical}",
            )
        return value

    def parse_number(self) -> Union[int, float]:
        """Consume the longest number prefix at the cursor.

        Characters that cannot extend the number are left in place for the
        caller. Incomplete fractions and exponents (``1.``, ``1e+``) keep
        their lexeme but do not contribute to the value.
        """
        cursor = self.cursor
        start = cursor.pos

        sign = ""
        if cursor.peek() in NUMBER_SIGNS and cursor.peek():
            sign = cursor.advance()

        word = cursor.peek_word()
        if is_sentinel_word(word):
            cursor.skip(len(word))
            return self._sentinel(start, sign, word)

        int_digits = self._read_digits()

        frac = ""
        frac_digits = ""
        if cursor.peek() == ".":
            frac = cursor.advance()
            frac_digits = self._read_digits()

        exp = ""
        exp_digits = ""
        if int_digits or frac_digits:
            exp, exp_digits = self._read_exponent()

        if not int_digits and not frac_digits:
            raise InvalidLiteral(
                "Number production found no digits", cursor.position()
            )

        lexeme = cursor.text[start : cursor.pos]
        value_text = (sign if sign == "-" else "") + (int_digits or "0")
        is_float = bool(frac) or bool(exp_digits)
        if frac_digits:
            value_text += "." + frac_digits
        if exp_digits:
            value_text += exp

        if not STRICT_NUMBER_RE.fullmatch(lexeme):
            self.repair_log.record(
                start,
                RepairAction.NORMALIZED_NUMBER,
                f"normalized number {lexeme!r}",
            )

        if is_float:
            return FloatLiteral(value_text, lexeme)
        try:
            return int(value_text)
        except ValueError:
            # Beyond the interpreter's int digit limit
            return FloatLiteral(value_text, lexeme)

    def _read_digits(self) -> str:
        start = self.cursor.pos
        while is_digit(self.cursor.peek()):
            self.cursor.advance()
        return self.cursor.text[start : self.cursor.pos]

    def _read_exponent(self) -> tuple[str, str]:
        """Read ``e[+-]digits``, consuming a dangling ``e`` unless a word follows."""
        cursor = self.cursor
        if cursor.peek() not in ("e", "E"):
            return "", ""

        following = cursor.peek(1)
        if following in NUMBER_SIGNS and following:
            if is_word_char(cursor.peek(2)) and not is_digit(cursor.peek(2)):
                return "", ""
        elif is_word_char(following) and not is_digit(following):
            return "", ""

        exp = cursor.advance()
        if cursor.peek() in NUMBER_SIGNS and cursor.peek():
            exp += cursor.advance()
        digits = self._read_digits()
        return exp + digits, digits

    def _sentinel(self, start: int, sign: str, word: str) -> float:
        if word.lower() in NAN_WORDS:
            value = math.nan
            canonical = "NaN"
        else:
            value = -math.inf if sign == "-" else math.inf
            canonical = "-Infinity" if sign == "-" else "Infinity"

        spelled = sign + word
        if spelled != canonical:
            self.repair_log.record(
                start,
                RepairAction.NORMALIZED_NUMBER,
                f"normalized {spelled!r} to {canonical}",
            )
        return value
