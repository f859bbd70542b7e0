"""stringext exception hierarchy."""

from __future__ import annotations

from typing import Any


class StringExtError(Exception):
    """Base exception for all stringext errors."""


class NullInputError(StringExtError, TypeError):
    """A required string argument was None."""

    def __init__(self, argument: str = "value") -> None:
        self.argument = argument
        super().__init__(f"Argument '{argument}' must not be None")


class NullArgumentError(StringExtError, TypeError):
    """A required non-value argument (e.g. a replace target) was None."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"Argument '{argument}' must not be None")


class FormatError(StringExtError, ValueError):
    """Text could not be parsed, or an encoded blob had an invalid structure.

    Attributes:
        value: The original (unnormalized) input
        kind: What the input was being parsed as ("integer", "double", ...)
    """

    def __init__(self, value: Any, kind: str, reason: str | None = None) -> None:
        self.value = value
        self.kind = kind
        self.reason = reason
        message = f"The value '{value}' can not be parsed to {_article(kind)} {kind}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


def _article(word: str) -> str:
    return "an" if word[:1].lower() in "aeiou" else "a"
