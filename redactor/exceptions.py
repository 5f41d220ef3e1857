"""
Exceptions raised by the redactor package.

PatternCompilationError is non-fatal: the compiler reports it to a sink and
drops the offending source. InvalidInputError aborts the single call that
received unusable content.
"""


class RedactorError(Exception):
    """Base class for all redactor errors."""


class PatternCompilationError(RedactorError):
    """A pattern source could not be compiled."""

    def __init__(self, source, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid regex pattern {source!r}: {reason}")


class InvalidInputError(RedactorError, TypeError):
    """Content handed to the engine is not text."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Content must be str, got {type(value).__name__}")
