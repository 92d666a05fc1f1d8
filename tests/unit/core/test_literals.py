"""
Test cases for number, boolean and null literals.
"""

import math
import unittest

from jsonmend.core.cursor import Cursor
from jsonmend.core.literals import LiteralParser, is_sentinel_word, keyword_value
from jsonmend.core.values import FloatLiteral
from jsonmend.recovery.log import RepairAction, RepairLog
from jsonmend.security.exceptions import InvalidLiteral


def _parser(text):
    cursor = Cursor(text)
    repair_log = RepairLog()
    return LiteralParser(cursor, repair_log), cursor, repair_log


class TestNumberParsing(unittest.TestCase):
    """Test number parsing and normalization."""

    def test_integer(self):
        parser, cursor, repair_log = _parser("42")
        value = parser.parse_number()
        self.assertEqual(value, 42)
        self.assertIs(type(value), int)
        self.assertTrue(cursor.at_end())
        self.assertEqual(len(repair_log), 0)

    def test_float_keeps_lexeme(self):
        """Test that fractional numbers remember their source text."""
        parser, cursor, repair_log = _parser("-0.5e3,")
        value = parser.parse_number()
        self.assertIsInstance(value, FloatLiteral)
        self.assertEqual(value, -500.0)
        self.assertEqual(value.lexeme, "-0.5e3")
        self.assertTrue(value.is_exact())
        self.assertEqual(cursor.peek(), ",")
        self.assertEqual(len(repair_log), 0)

    def test_large_integer_is_exact(self):
        parser, _, _ = _parser("1" * 30)
        self.assertEqual(parser.parse_number(), int("1" * 30))

    def test_leading_plus_is_normalized(self):
        parser, _, repair_log = _parser("+5")
        self.assertEqual(parser.parse_number(), 5)
        self.assertEqual(repair_log.actions(), [RepairAction.NORMALIZED_NUMBER])

    def test_trailing_dot(self):
        """Test that '1.' keeps its lexeme but is not exact JSON."""
        parser, _, repair_log = _parser("1.")
        value = parser.parse_number()
        self.assertIsInstance(value, FloatLiteral)
        self.assertEqual(value, 1.0)
        self.assertEqual(value.lexeme, "1.")
        self.assertFalse(value.is_exact())
        self.assertIn(RepairAction.NORMALIZED_NUMBER, repair_log.actions())

    def test_leading_dot(self):
        parser, _, _ = _parser(".5")
        self.assertEqual(parser.parse_number(), 0.5)

    def test_truncated_exponent_at_end(self):
        """Test that an incomplete exponent at end of input is consumed."""
        parser, cursor, _ = _parser("1e")
        self.assertEqual(parser.parse_number(), 1)
        self.assertTrue(cursor.at_end())

        parser, cursor, _ = _parser("1e+")
        self.assertEqual(parser.parse_number(), 1)
        self.assertTrue(cursor.at_end())

    def test_exponent_not_followed_by_digits_is_left(self):
        parser, cursor, _ = _parser("1ex")
        self.assertEqual(parser.parse_number(), 1)
        self.assertEqual(cursor.peek(), "e")

    def test_stops_at_first_non_number_character(self):
        parser, cursor, _ = _parser("12abc")
        self.assertEqual(parser.parse_number(), 12)
        self.assertEqual(cursor.peek(), "a")

    def test_sentinels(self):
        """Test NaN and Infinity spellings."""
        parser, _, repair_log = _parser("NaN")
        self.assertTrue(math.isnan(parser.parse_number()))
        self.assertEqual(len(repair_log), 0)

        parser, _, repair_log = _parser("-Infinity")
        self.assertEqual(parser.parse_number(), -math.inf)
        self.assertEqual(len(repair_log), 0)

        parser, _, repair_log = _parser("+infinity")
        self.assertEqual(parser.parse_number(), math.inf)
        self.assertEqual(repair_log.actions(), [RepairAction.NORMALIZED_NUMBER])

        parser, _, repair_log = _parser("nan")
        self.assertTrue(math.isnan(parser.parse_number()))
        self.assertEqual(repair_log.actions(), [RepairAction.NORMALIZED_NUMBER])

    def test_no_digits_raises(self):
        parser, _, _ = _parser("-x")
        with self.assertRaises(InvalidLiteral):
            parser.parse_number()


class TestNumberStart(unittest.TestCase):
    """Test recognition of where a number begins."""

    def _starts(self, text):
        parser, _, _ = _parser(text)
        return parser.is_number_start()

    def test_number_starts(self):
        for text in ["5", "-5", ".5", "-.5", "1e5", "5,", "NaN", "-Infinity", "1."]:
            with self.subTest(text=text):
                self.assertTrue(self._starts(text))

    def test_not_number_starts(self):
        for text in ["-", "-x", ".", "[1", "nanx", "abc"]:
            with self.subTest(text=text):
                self.assertFalse(self._starts(text))

    def test_number_ends_where_it_cannot_continue(self):
        """Test that text after the longest number prefix is left in place."""
        cases = [
            ("2024-01-01", 2024, "-"),
            ("123abc", 123, "a"),
            ("1.2.3", 1.2, "."),
            ("3px", 3, "p"),
        ]
        for text, value, rest in cases:
            with self.subTest(text=text):
                parser, cursor, _ = _parser(text)
                self.assertTrue(parser.is_number_start())
                self.assertEqual(parser.parse_number(), value)
                self.assertEqual(cursor.peek(), rest)


class TestKeywords(unittest.TestCase):
    """Test boolean and null literals."""

    def test_canonical_keywords(self):
        for text, expected in [("true", True), ("false", False), ("null", None)]:
            parser, _, repair_log = _parser(text)
            self.assertIs(parser.parse_keyword(), expected)
            self.assertEqual(len(repair_log), 0)

    def test_aliases_are_normalized(self):
        """Test Python and JavaScript spellings."""
        for text, expected in [
            ("True", True),
            ("FALSE", False),
            ("None", None),
            ("nil", None),
            ("undefined", None),
        ]:
            with self.subTest(text=text):
                parser, _, repair_log = _parser(text)
                self.assertIs(parser.parse_keyword(), expected)
                self.assertEqual(
                    repair_log.actions(), [RepairAction.NORMALIZED_LITERAL]
                )

    def test_whole_word_required(self):
        parser, _, _ = _parser("trueish")
        with self.assertRaises(InvalidLiteral):
            parser.parse_keyword()

    def test_keyword_value(self):
        self.assertEqual(keyword_value("FALSE"), (True, False))
        self.assertEqual(keyword_value("nothing"), (False, None))

    def test_is_sentinel_word(self):
        self.assertTrue(is_sentinel_word("Infinity"))
        self.assertTrue(is_sentinel_word("NAN"))
        self.assertFalse(is_sentinel_word("inf"))


if __name__ == "__main__":
    unittest.main()
