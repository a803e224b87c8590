# coding: utf-8
"""
Public subclasses of different Exceptions
"""
from typing import Optional


class WcnfFeatException(Exception):
    """Base class for wcnffeat exceptions"""

    pass


class MalformedInputError(WcnfFeatException, ValueError):
    """An unexpected token where a number, clause or keyword was required."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class InvariantViolationError(WcnfFeatException):
    """The new-format hardness marker was seen while a nonzero top is active."""

    pass


class SourceUnavailableError(WcnfFeatException, OSError):
    """The input cannot be opened or read."""

    pass


class SourceMismatchError(WcnfFeatException):
    """A replayed traversal did not match the first one."""

    pass
