"""
error kinds raised by kevy collections.

every error derives from KevyError and from the closest built-in exception,
so `except KeyError` and `except KeyNotFound` both work.
"""
from typing import Any


class KevyError(Exception):
    """base class for all collection errors"""

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        return self.message


class KeyNotFound(KevyError, KeyError):
    """indexed read of a key that is not in the collection"""

    def __init__(self, key: Any):
        super().__init__(f"key {key!r} not found in collection", key=key)
        self.key = key


class UnsupportedOperation(KevyError, TypeError):
    """in-place write or delete through the indexed interface"""


class InvalidArgument(KevyError, ValueError):
    """argument of the wrong kind or shape"""


class ArgumentCountMismatch(InvalidArgument):
    """parallel argument lists of differing lengths"""

    def __init__(self, message: str, expected: int, actual: int):
        super().__init__(message, expected=expected, actual=actual)
        self.expected = expected
        self.actual = actual


class TypeMismatch(KevyError, TypeError):
    """values that cannot be compared, combined or used as keys"""
