"""
Main parsing engine for jsonmend.

This module contains the recursive-descent repair parser and the public
functions built on it. Strictly valid input is handed to the standard json
module first; everything else goes through the Parser, which never gives up
on malformed input and records each correction it makes.
"""

import json
import logging
from enum import Enum
from typing import Any, Optional, TextIO, Union

from ..preprocessing.pipeline import PreprocessingPipeline
from ..recovery.log import RepairAction, RepairLog, RepairResult
from ..security.exceptions import (
    InvalidEncoding,
    JsonRepairError,
    RecursionLimitExceeded,
    UnexpectedEnd,
)
from ..security.limits import LimitValidator
from ..utils.config import RepairOptions, resolve_options
from .constants import QUOTE_CHARS
from .context import ContextValues, JsonContext
from .cursor import Cursor, is_word_char
from .error_handling import ErrorContextBuilder
from .literals import LiteralParser, keyword_value
from .serializer import serialize
from .strings import StringRepairer
from .values import FloatLiteral, Value

logger = logging.getLogger(__name__)

TextInput = Union[str, bytes, bytearray]


class ContainerState(Enum):
    """Where a container loop is between its elements."""

    EXPECT_FIRST = "expect_first"
    EXPECT_DELIMITER = "expect_delimiter"
    EXPECT_NEXT = "expect_next"
    CLOSED = "closed"


class Parser:
    """Fault-tolerant recursive-descent parser over a single Cursor."""

    def __init__(self, text: str, options: RepairOptions, repair_log: RepairLog):
        self.cursor = Cursor(text)
        self.options = options
        self.repair_log = repair_log
        self.context = JsonContext()
        self.validator = LimitValidator(options.limits)
        self.literals = LiteralParser(self.cursor, repair_log)
        self.strings = StringRepairer(self.cursor, self.context, repair_log)

    def parse(self) -> Value:
        """Parse exactly one value; anything after it is discarded."""
        cursor = self.cursor
        self._skip_stray_closers()
        if cursor.at_end():
            raise UnexpectedEnd(
                "No JSON value found in input",
                cursor.position(),
                suggestions=[
                    "The input is empty or contains only whitespace and comments"
                ],
            )

        value = self.parse_value()

        cursor.skip_insignificant()
        if not cursor.at_end():
            self.repair_log.record(
                cursor.pos,
                RepairAction.DISCARDED_TRAILING_TEXT,
                f"discarded {cursor.length - cursor.pos} trailing characters",
            )
        return value

    def parse_value(self) -> Value:
        """Dispatch on the lookahead to the matching production."""
        cursor = self.cursor
        cursor.skip_insignificant()
        char = cursor.peek()

        if char == "":
            raise UnexpectedEnd(
                "Unexpected end of input, expected a value", cursor.position()
            )
        if char == "{":
            return self.parse_object()
        if char == "[":
            return self.parse_array()
        if char in QUOTE_CHARS:
            return self.strings.parse_quoted()
        if keyword_value(cursor.peek_word())[0]:
            return self.literals.parse_keyword()
        if self.literals.is_number_start():
            return self.literals.parse_number()
        return self.strings.parse_unquoted()

    def parse_object(self) -> dict[str, Any]:
        """Parse an object starting at ``{``, repairing delimiters as it goes."""
        cursor = self.cursor
        self._enter_structure()
        start = cursor.pos
        cursor.advance()
        self.context.set(ContextValues.OBJECT_KEY)

        obj: dict[str, Any] = {}
        state = ContainerState.EXPECT_FIRST
        comma_position = -1

        while state != ContainerState.CLOSED:
            cursor.skip_insignificant()
            char = cursor.peek()

            if char == "":
                self._close_at_end(start, "object", state, comma_position)
                state = ContainerState.CLOSED
            elif char == "}":
                self._drop_trailing_comma(state, comma_position)
                cursor.advance()
                state = ContainerState.CLOSED
            elif char == "]":
                if self.context.enclosing_array():
                    self._drop_trailing_comma(state, comma_position)
                    self.repair_log.record(
                        cursor.pos,
                        RepairAction.CLOSED_CONTAINER,
                        "closed object before ']' of the enclosing array",
                    )
                    state = ContainerState.CLOSED
                else:
                    self._drop_character()
            elif char == ",":
                if state == ContainerState.EXPECT_DELIMITER:
                    comma_position = cursor.pos
                    state = ContainerState.EXPECT_NEXT
                else:
                    self.repair_log.record(
                        cursor.pos, RepairAction.REMOVED_COMMA, "removed extra comma"
                    )
                cursor.advance()
            elif char == ":":
                self.repair_log.record(
                    cursor.pos, RepairAction.REMOVED_COLON, "removed stray colon"
                )
                cursor.advance()
            elif char in "{[":
                self._drop_character()
            elif state == ContainerState.EXPECT_DELIMITER:
                if char in QUOTE_CHARS or is_word_char(char) or char == "-":
                    self.repair_log.record(
                        cursor.pos,
                        RepairAction.INSERTED_COMMA,
                        "inserted missing comma",
                    )
                    state = ContainerState.EXPECT_NEXT
                else:
                    self._drop_character()
            else:
                key = self._parse_object_key()
                value = self._parse_object_value(key)
                if key in obj:
                    self.repair_log.record(
                        cursor.pos,
                        RepairAction.DUPLICATE_KEY,
                        f"duplicate key {key!r}, keeping the last value",
                    )
                obj[key] = value
                state = ContainerState.EXPECT_DELIMITER

        self.context.reset()
        self.validator.exit_structure()
        return obj

    def _parse_object_key(self) -> str:
        if self.cursor.peek() in QUOTE_CHARS:
            return self.strings.parse_quoted()
        return self.strings.parse_unquoted()

    def _parse_object_value(self, key: str) -> Value:
        cursor = self.cursor
        cursor.skip_insignificant()
        has_colon = cursor.peek() == ":"
        if has_colon:
            cursor.advance()
            cursor.skip_insignificant()
            while cursor.peek() == ":":
                self.repair_log.record(
                    cursor.pos, RepairAction.REMOVED_COLON, "removed repeated colon"
                )
                cursor.advance()
                cursor.skip_insignificant()

        char = cursor.peek()
        if char == "" or char in ",}]":
            self.repair_log.record(
                cursor.pos,
                RepairAction.INFERRED_VALUE,
                f"missing value for key {key!r}, used null",
            )
            return None

        if not has_colon:
            self.repair_log.record(
                cursor.pos,
                RepairAction.INSERTED_COLON,
                f"inserted colon after key {key!r}",
            )

        self.context.replace(ContextValues.OBJECT_VALUE)
        value = self.parse_value()
        self.context.replace(ContextValues.OBJECT_KEY)
        return value

    def parse_array(self) -> list[Any]:
        """Parse an array starting at ``[``, repairing delimiters as it goes."""
        cursor = self.cursor
        self._enter_structure()
        start = cursor.pos
        cursor.advance()
        self.context.set(ContextValues.ARRAY)

        arr: list[Any] = []
        state = ContainerState.EXPECT_FIRST
        comma_position = -1

        while state != ContainerState.CLOSED:
            cursor.skip_insignificant()
            char = cursor.peek()

            if char == "":
                self._close_at_end(start, "array", state, comma_position)
                state = ContainerState.CLOSED
            elif char == "]":
                self._drop_trailing_comma(state, comma_position)
                cursor.advance()
                state = ContainerState.CLOSED
            elif char == "}":
                if self.context.enclosing_object():
                    self._drop_trailing_comma(state, comma_position)
                    self.repair_log.record(
                        cursor.pos,
                        RepairAction.CLOSED_CONTAINER,
                        "closed array before '}' of the enclosing object",
                    )
                    state = ContainerState.CLOSED
                else:
                    self._drop_character()
            elif char == ",":
                if state == ContainerState.EXPECT_DELIMITER:
                    comma_position = cursor.pos
                    state = ContainerState.EXPECT_NEXT
                else:
                    self.repair_log.record(
                        cursor.pos, RepairAction.REMOVED_COMMA, "removed extra comma"
                    )
                cursor.advance()
            elif char == ":":
                self.repair_log.record(
                    cursor.pos, RepairAction.REMOVED_COLON, "removed stray colon"
                )
                cursor.advance()
            elif state == ContainerState.EXPECT_DELIMITER:
                if self._looks_like_value_start(char):
                    self.repair_log.record(
                        cursor.pos,
                        RepairAction.INSERTED_COMMA,
                        "inserted missing comma",
                    )
                    state = ContainerState.EXPECT_NEXT
                else:
                    self._drop_character()
            else:
                arr.append(self.parse_value())
                state = ContainerState.EXPECT_DELIMITER

        self.context.reset()
        self.validator.exit_structure()
        return arr

    def _enter_structure(self) -> None:
        try:
            self.validator.enter_structure()
        except RecursionLimitExceeded as error:
            raise RecursionLimitExceeded(
                error.message, self.cursor.position()
            ) from None

    @staticmethod
    def _looks_like_value_start(char: str) -> bool:
        return char in QUOTE_CHARS or is_word_char(char) or char in "-+.{["

    def _drop_character(self) -> None:
        position = self.cursor.pos
        char = self.cursor.advance()
        self.repair_log.record(
            position, RepairAction.DROPPED_CHARACTER, f"dropped stray {char!r}"
        )

    def _drop_trailing_comma(self, state: ContainerState, comma_position: int) -> None:
        if state == ContainerState.EXPECT_NEXT:
            self.repair_log.record(
                comma_position, RepairAction.REMOVED_COMMA, "removed trailing comma"
            )

    def _close_at_end(
        self, start: int, kind: str, state: ContainerState, comma_position: int
    ) -> None:
        self._drop_trailing_comma(state, comma_position)
        self.repair_log.record(
            start, RepairAction.CLOSED_CONTAINER, f"closed unterminated {kind}"
        )

    def _skip_stray_closers(self) -> None:
        """Drop structural characters that cannot start a document."""
        cursor = self.cursor
        cursor.skip_insignificant()
        while cursor.peek() in (",", ":", "}", "]"):
            self._drop_character()
            cursor.skip_insignificant()


def _decode(text: TextInput) -> str:
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidEncoding(
                f"Input is not valid UTF-8: byte {exc.start} cannot be decoded",
                suggestions=["Decode the input yourself and pass a str"],
            ) from exc
    if not isinstance(text, str):
        raise TypeError(
            f"Input must be str, bytes or bytearray, not {type(text).__name__}"
        )
    if text.startswith("\ufeff"):
        text = text[1:]
    return text


def _strict_parse(text: str) -> tuple[bool, Any]:
    """Try the standard json module. Returns (found, value)."""
    try:
        return True, json.loads(text, parse_float=FloatLiteral.from_lexeme)
    except (ValueError, RecursionError):
        return False, None


def _run(text: TextInput, options: RepairOptions, log_enabled: bool) -> RepairResult:
    text = _decode(text)
    LimitValidator(options.limits).validate_input_size(text)

    if not options.skip_fast_path:
        found, value = _strict_parse(text)
        if found:
            logger.debug("Input is valid JSON, no repair needed")
            return RepairResult(value, [], fast_path=True)
        logger.debug("Strict parse failed, repairing %d characters", len(text))

    repair_log = RepairLog(enabled=log_enabled)
    buffer = PreprocessingPipeline.create_default_pipeline().process(
        text, options, repair_log
    )

    try:
        value = Parser(buffer, options, repair_log).parse()
    except RecursionError:
        raise RecursionLimitExceeded(
            "Input is nested too deeply to parse",
            suggestions=[
                "Set ParseLimits.max_nesting_depth to reject deep input early"
            ],
        ) from None
    except JsonRepairError as error:
        enriched = ErrorContextBuilder.with_context(error, buffer)
        if enriched is error:
            raise
        raise enriched from None

    logger.debug("Repair finished with %d recorded repairs", len(repair_log))
    return RepairResult(value, list(repair_log))


def parse(
    text: TextInput, options: Optional[RepairOptions] = None, **overrides: Any
) -> Value:
    """
    Parse JSON-like text into a Python value, repairing it as needed.

    Args:
        text: The text to parse (str, or UTF-8 bytes)
        options: Optional RepairOptions
        **overrides: RepairOptions fields applied on top of ``options``

    Returns:
        The parsed value: dict, list, str, int, float, bool or None

    Raises:
        UnexpectedEnd: If the input holds no value at all
        LimitExceeded: If a configured resource limit is exceeded
    """
    options = resolve_options(options, **overrides)
    return _run(text, options, options.log_repairs).value


def loads(
    text: TextInput, options: Optional[RepairOptions] = None, **overrides: Any
) -> Value:
    """Alias of parse(), named after json.loads."""
    return parse(text, options, **overrides)


def repair(
    text: TextInput, options: Optional[RepairOptions] = None, **overrides: Any
) -> Union[str, Value]:
    """
    Repair JSON-like text and return valid JSON text.

    With ``return_objects`` set the parsed value is returned instead of text.
    Output written by repair() parses back to the same value and repairs to
    the same text.
    """
    options = resolve_options(options, **overrides)
    value = parse(text, options)
    if options.return_objects:
        return value
    try:
        return serialize(
            value,
            ensure_ascii=options.ensure_ascii,
            indent=options.indent,
            allow_nan=options.allow_nan,
        )
    except RecursionError:
        raise RecursionLimitExceeded(
            "Value is nested too deeply to serialize"
        ) from None


def parse_with_log(
    text: TextInput, options: Optional[RepairOptions] = None, **overrides: Any
) -> RepairResult:
    """Parse text and return the value together with every repair made."""
    options = resolve_options(options, **overrides)
    return _run(text, options, log_enabled=True)


def load(
    fp: TextIO, options: Optional[RepairOptions] = None, **overrides: Any
) -> Value:
    """Parse the contents of a file-like object."""
    return parse(fp.read(), options, **overrides)


def from_file(
    path: str, options: Optional[RepairOptions] = None, **overrides: Any
) -> Value:
    """Parse the contents of the file at ``path`` (read as UTF-8)."""
    with open(path, encoding="utf-8") as fp:
        return load(fp, options, **overrides)
