"""
Cursor for jsonmend - a single forward-only scan position over the input.
"""

from dataclasses import dataclass

from .constants import WHITESPACE


@dataclass(frozen=True)
class Position:
    """Position in source text (line and column, both 1-based)."""

    line: int
    column: int


def is_whitespace(char: str) -> bool:
    """Whether a character is insignificant whitespace between tokens."""
    return bool(char) and (char in WHITESPACE or char.isspace())


def is_word_char(char: str) -> bool:
    """Whether a character can continue an identifier-like bare word."""
    return bool(char) and (char.isalnum() or char in "_$")


class Cursor:
    """Immutable input buffer plus one scan position that never moves back.

    ``peek`` returns ``""`` as the end-of-input sentinel. Every component of
    the parser shares the same cursor; none keeps a position of its own.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.length = len(text)

    def at_end(self) -> bool:
        """Whether the whole buffer has been consumed."""
        return self.pos >= self.length

    def peek(self, offset: int = 0) -> str:
        """Peek at character at given offset without consuming it."""
        pos = self.pos + offset
        if pos >= self.length:
            return ""
        return self.text[pos]

    def peek_text(self, length: int, offset: int = 0) -> str:
        """Return up to ``length`` characters starting at ``offset``."""
        start = self.pos + offset
        return self.text[start : start + length]

    def advance(self) -> str:
        """Advance one character and return the character consumed."""
        if self.pos >= self.length:
            return ""
        char = self.text[self.pos]
        self.pos += 1
        return char

    def skip(self, count: int) -> str:
        """Consume ``count`` characters and return them."""
        if count < 0:
            raise ValueError("Cursor cannot move backwards")
        consumed = self.text[self.pos : self.pos + count]
        self.pos = min(self.pos + count, self.length)
        return consumed

    def peek_word(self, offset: int = 0) -> str:
        """Return the run of word characters at ``offset`` without consuming it."""
        end = self.pos + offset
        while end < self.length and is_word_char(self.text[end]):
            end += 1
        return self.text[self.pos + offset : end]

    def next_significant(self, offset: int = 0) -> tuple[int, str]:
        """Find the next non-whitespace character at or after ``offset``.

        Returns the offset of that character relative to the cursor and the
        character itself, or ``""`` when only whitespace remains.
        """
        while is_whitespace(self.peek(offset)):
            offset += 1
        return offset, self.peek(offset)

    def position(self, offset: int = 0) -> Position:
        """Line and column of the cursor, plus an optional offset."""
        pos = min(self.pos + offset, self.length)
        line = self.text.count("\n", 0, pos) + 1
        line_start = self.text.rfind("\n", 0, pos) + 1
        return Position(line, pos - line_start + 1)

    def starts_comment(self, offset: int = 0) -> bool:
        """Whether a ``//`` or ``/*`` comment starts at ``offset``."""
        return self.peek(offset) == "/" and self.peek(offset + 1) in ("/", "*")

    def skip_whitespace(self) -> None:
        """Skip whitespace characters, including newlines."""
        while is_whitespace(self.peek()):
            self.pos += 1

    def skip_comment(self) -> bool:
        """Skip one comment at the cursor. Returns False if there is none."""
        char = self.peek()
        if char == "/" and self.peek(1) == "/":
            end = self.text.find("\n", self.pos)
            self.pos = self.length if end == -1 else end + 1
            return True
        if char == "/" and self.peek(1) == "*":
            end = self.text.find("*/", self.pos + 2)
            # An unterminated block comment swallows the rest of the input
            self.pos = self.length if end == -1 else end + 2
            return True
        return False

    def skip_insignificant(self) -> None:
        """Skip any run of whitespace and comments between tokens."""
        while True:
            self.skip_whitespace()
            if not self.skip_comment():
                return
