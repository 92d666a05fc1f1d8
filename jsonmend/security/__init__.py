"""
jsonmend error types and resource limits.
"""

from .exceptions import (
    ErrorContext,
    InputTooLarge,
    InvalidEncoding,
    InvalidLiteral,
    JsonRepairError,
    LimitExceeded,
    RecursionLimitExceeded,
    UnexpectedEnd,
)
from .limits import LimitValidator

__all__ = [
    "ErrorContext",
    "InputTooLarge",
    "InvalidEncoding",
    "InvalidLiteral",
    "JsonRepairError",
    "LimitExceeded",
    "LimitValidator",
    "RecursionLimitExceeded",
    "UnexpectedEnd",
]
