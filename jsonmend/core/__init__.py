"""
jsonmend Core Parsing Engine.

This module provides the fault-tolerant parser and the JSON writer.
"""

from .cursor import Cursor, Position
from .engine import Parser, parse, repair
from .serializer import serialize
from .values import FloatLiteral

__all__ = [
    "parse", "repair", "Parser",
    "Cursor", "Position",
    "FloatLiteral", "serialize",
]
