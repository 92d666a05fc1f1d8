"""
Content extraction preprocessing steps.

This module contains preprocessing steps that find the JSON payload inside
model output: the body of a markdown code block, or the first object or
array after a line of prose.
"""

import logging
import re

from ..core.constants import QUOTE_CHARS
from ..core.cursor import Cursor
from ..core.literals import is_sentinel_word, keyword_value
from ..recovery.log import RepairAction, RepairLog
from ..utils.config import RepairOptions
from .base import PreprocessingStepBase

logger = logging.getLogger(__name__)

# A fenced block, possibly cut off before its closing fence
_FENCE_RE = re.compile(
    r"```[ \t]*(?:json5?|javascript|js)?[ \t]*\r?\n?(.*?)(?:```|\Z)",
    re.DOTALL | re.IGNORECASE,
)


class MarkdownExtractor(PreprocessingStepBase):
    """Extracts JSON from markdown code blocks."""

    def should_apply(self, options: RepairOptions) -> bool:
        """Apply if markdown extraction is enabled."""
        return options.extract_markdown

    def process(self, text: str, repair_log: RepairLog) -> str:
        """Return the body of the first fenced code block, if it precedes the JSON."""
        fence = text.find("```")
        if fence == -1:
            return text

        # A fence after the first bracket is string content, not markup
        first_bracket = min(
            (index for index in (text.find("{"), text.find("[")) if index != -1),
            default=-1,
        )
        if first_bracket != -1 and first_bracket < fence:
            return text

        match = _FENCE_RE.search(text, fence)
        if match is None:
            return text

        body = match.group(1)
        if not body.strip():
            return text

        logger.debug("Extracted %d characters from a code block", len(body))
        repair_log.record(
            match.start(),
            RepairAction.EXTRACTED_CODE_BLOCK,
            "extracted JSON from markdown code block",
        )
        return body


class LeadingTextSkipper(PreprocessingStepBase):
    """Skips prose that precedes the first object or array."""

    def should_apply(self, options: RepairOptions) -> bool:
        """Apply if leading text skipping is enabled."""
        return options.skip_leading_text

    def process(self, text: str, repair_log: RepairLog) -> str:
        """Cut any prose in front of the first ``{`` or ``[``."""
        cursor = Cursor(text)
        cursor.skip_insignificant()
        if not self._starts_with_prose(cursor):
            return text

        starts = [
            index
            for index in (text.find("{", cursor.pos), text.find("[", cursor.pos))
            if index != -1
        ]
        if not starts:
            return text

        start = min(starts)
        logger.debug("Skipping %d characters of leading text", start)
        repair_log.record(
            cursor.pos,
            RepairAction.SKIPPED_LEADING_TEXT,
            f"skipped leading text {text[cursor.pos:start].strip()!r}",
        )
        return text[start:]

    @staticmethod
    def _starts_with_prose(cursor: Cursor) -> bool:
        char = cursor.peek()
        if char == "" or char in "{[" or char in QUOTE_CHARS:
            return False
        if char.isdigit() or char in "+-.":
            return False

        word = cursor.peek_word()
        return not (keyword_value(word)[0] or is_sentinel_word(word))
