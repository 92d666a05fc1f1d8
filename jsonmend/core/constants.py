"""
Common constants and character tables used across the jsonmend parser.
"""

# Standard JSON escape sequences mapping, plus \' which models emit often
JSON_ESCAPE_MAP = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    '"': '"',
    "'": "'",
    "\\": "\\",
    "/": "/",
}

HEX_DIGITS = "0123456789abcdefABCDEF"

# Opening quote -> characters accepted as its closing quote
QUOTE_PAIRS = {
    '"': '"',
    "'": "'",
    "\u201c": "\u201d\u201c",
    "\u201d": "\u201d\u201c",
    "\u201e": "\u201c\u201d",
    "\u2018": "\u2019\u2018",
    "\u2019": "\u2019\u2018",
    "\u201a": "\u2018\u2019",
    "\u00ab": "\u00bb",
    "\u00bb": "\u00bb\u00ab",
}

QUOTE_CHARS = frozenset(QUOTE_PAIRS)

# Quotes that double as apostrophes inside words ("it's", "don't")
APOSTROPHES = frozenset("'\u2019")

# Characters that end a bare (unquoted) token
BAREWORD_TERMINATORS = frozenset(",}]:\n")

WHITESPACE = frozenset(" \t\r\n\u00a0\ufeff")

TRUE_WORDS = frozenset({"true"})
FALSE_WORDS = frozenset({"false"})
NULL_WORDS = frozenset({"null", "none", "nil", "undefined"})
NAN_WORDS = frozenset({"nan"})
INFINITY_WORDS = frozenset({"infinity"})

NUMBER_SIGNS = "+-"
