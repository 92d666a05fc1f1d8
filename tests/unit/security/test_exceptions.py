"""
Test cases for exceptions and error formatting.

Tests focus on message formatting, context blocks and exit codes.
"""

import unittest

from jsonmend.core.cursor import Position
from jsonmend.security.exceptions import (
    ErrorContext,
    InputTooLarge,
    InvalidLiteral,
    JsonRepairError,
    LimitExceeded,
    RecursionLimitExceeded,
    UnexpectedEnd,
)


class TestErrorContext(unittest.TestCase):
    """Test ErrorContext dataclass functionality."""

    def test_error_context_creation(self):
        """Test ErrorContext creation with all fields."""
        position = Position(line=5, column=10)
        context = ErrorContext(
            text="test json content",
            position=position,
            context_before="test ",
            context_after=" content",
            error_char="j",
            line_text="test json content",
            column_indicator="     ^",
        )

        self.assertEqual(context.position, position)
        self.assertEqual(context.error_char, "j")
        self.assertEqual(context.column_indicator, "     ^")


class TestJsonRepairError(unittest.TestCase):
    """Test the base error message format."""

    def test_basic_error(self):
        error = JsonRepairError("Test error")
        self.assertEqual(str(error), "Test error")
        self.assertEqual(error.message, "Test error")
        self.assertIsNone(error.position)
        self.assertEqual(error.suggestions, [])

    def test_error_with_position(self):
        error = JsonRepairError("Test error", Position(2, 3))
        self.assertEqual(str(error), "Test error at line 2, column 3")

    def test_error_with_context_and_suggestions(self):
        """Test the multi-line message with a context block."""
        context = ErrorContext(
            text='{"a": }',
            position=Position(1, 7),
            context_before='{"a": ',
            context_after="}",
            error_char="}",
            line_text='{"a": }',
            column_indicator="      ^",
        )
        error = JsonRepairError(
            "Bad value", Position(1, 7), context, ["Add a value"]
        )
        lines = str(error).split("\n")
        self.assertEqual(lines[0], "Bad value at line 1, column 7")
        self.assertEqual(lines[1], "Context:")
        self.assertEqual(lines[2], '  {"a": }')
        self.assertEqual(lines[3], "        ^")
        self.assertEqual(lines[4], "Suggestions:")
        self.assertEqual(lines[5], "  - Add a value")

    def test_summary_is_one_line(self):
        error = UnexpectedEnd("No value", Position(1, 1), suggestions=["Add one"])
        self.assertEqual(error.summary(), "No value at line 1, column 1")
        self.assertEqual(JsonRepairError("Plain").summary(), "Plain")

    def test_is_value_error(self):
        self.assertIsInstance(UnexpectedEnd("x"), ValueError)


class TestExitCodes(unittest.TestCase):
    def test_hierarchy(self):
        self.assertTrue(issubclass(RecursionLimitExceeded, LimitExceeded))
        self.assertTrue(issubclass(InputTooLarge, LimitExceeded))
        self.assertTrue(issubclass(LimitExceeded, JsonRepairError))

    def test_exit_codes(self):
        self.assertEqual(JsonRepairError.exit_code, 1)
        self.assertEqual(UnexpectedEnd.exit_code, 3)
        self.assertEqual(InvalidLiteral.exit_code, 4)
        self.assertEqual(RecursionLimitExceeded.exit_code, 5)
        self.assertEqual(InputTooLarge.exit_code, 6)


if __name__ == "__main__":
    unittest.main()
