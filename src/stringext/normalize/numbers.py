"""Lenient numeric parsing of human-entered text.

Text is normalized first (noise patterns removed, see ``normalize.text``) and
then parsed strictly: no thousands separators, no trailing garbage, at most one
decimal separator. Callers choose between a raised ``FormatError`` and a
fallback default.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from stringext.errors import FormatError, NullInputError, StringExtError
from stringext.normalize.text import NoiseConfig, TextNormalizer

T = TypeVar("T")


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for numeric parsing.

    The decimal separator is explicit configuration; it is never read from
    the process locale.
    """

    decimal_separator: str = "."
    noise: NoiseConfig = field(default_factory=NoiseConfig)

    def __post_init__(self):
        """Validate configuration."""
        sep = self.decimal_separator
        if not isinstance(sep, str) or len(sep) != 1:
            raise ValueError(f"decimal_separator must be a single character, got {sep!r}")
        if sep.isdigit() or sep in "-+" or sep.isspace():
            raise ValueError(f"Invalid decimal_separator: {sep!r}")


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of a parse: a value, or the error that prevented one."""

    value: T | None = None
    error: StringExtError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> ParseResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: StringExtError) -> ParseResult[T]:
        return cls(error=error)

    def unwrap(self, default: T | None = None) -> T:
        """Return the parsed value.

        A format failure resolves to ``default`` when one is given. A missing
        input is never covered by the default.

        Raises:
            FormatError: If parsing failed and no default was given
            NullInputError: If the input was None
        """
        if self.error is None:
            return self.value
        if default is not None and isinstance(self.error, FormatError):
            return default
        raise self.error


class NumericParser:
    """Parses normalized text into ``int`` or ``float`` values."""

    # Python ints are unbounded, so there is no 32-bit range check. Digit
    # strings past the interpreter's int conversion limit fail as a format error.
    _int_pattern = re.compile(r"-?[0-9]+")

    def __init__(self, config: ParserConfig | None = None):
        """Initialize with configuration.

        Args:
            config: Parser configuration (uses defaults if None)
        """
        self.config = config or ParserConfig()
        self._normalizer = TextNormalizer(self.config.noise)

        sep = re.escape(self.config.decimal_separator)
        self._double_pattern = re.compile(rf"-?(?:[0-9]+(?:{sep}[0-9]*)?|{sep}[0-9]+)")

    # Integers

    def try_parse_int(self, value: str | None) -> ParseResult[int]:
        """Parse ``value`` as an integer without raising."""
        if value is None:
            return ParseResult.failure(NullInputError("value"))
        return self._match_int(self._normalizer.normalize(value), value)

    def parse_int(self, value: str, default: int | None = None) -> int:
        """Parse ``value`` as an integer.

        Args:
            value: Text such as "+1 234" or "1&nbsp;234"
            default: Returned instead of raising when the text is not an integer

        Raises:
            NullInputError: If value is None
            FormatError: If value is not an integer and no default was given
        """
        return self.try_parse_int(value).unwrap(default)

    def parse_nullable_int(self, value: str, default: int | None = None) -> int | None:
        """Parse ``value`` as an integer, treating blank text as "no value".

        Blank input returns ``default`` (or None) without a parse attempt.
        """
        if value is None:
            raise NullInputError("value")

        text = self._normalizer.normalize(value)
        if not text.strip():
            return default

        return self._match_int(self._normalizer.normalize(text), value).unwrap(default)

    def is_int(self, value: str | None) -> bool:
        return self.try_parse_int(value).ok

    # Doubles

    def try_parse_double(self, value: str | None) -> ParseResult[float]:
        """Parse ``value`` as a float without raising."""
        if value is None:
            return ParseResult.failure(NullInputError("value"))
        return self._match_double(self._prepare_double(value), value)

    def parse_double(self, value: str, default: float | None = None) -> float:
        """Parse ``value`` as a float.

        Both "," and "." are read as the configured decimal separator, so
        "1234,12" and "1234.12" give the same result. Text holding both
        characters has two separators and does not parse.

        Raises:
            NullInputError: If value is None
            FormatError: If value is not a number and no default was given
        """
        return self.try_parse_double(value).unwrap(default)

    def parse_nullable_double(self, value: str, default: float | None = None) -> float | None:
        """Parse ``value`` as a float, treating blank text as "no value"."""
        if value is None:
            raise NullInputError("value")

        text = self._normalizer.normalize(value)
        if not text.strip():
            return default

        return self._match_double(self._prepare_double(text), value).unwrap(default)

    def is_double(self, value: str | None) -> bool:
        return self.try_parse_double(value).ok

    # Internals

    def _prepare_double(self, value: str) -> str:
        sep = self.config.decimal_separator
        text = value.lower().replace(",", sep).replace(".", sep)
        return self._normalizer.normalize(text)

    def _match_int(self, text: str, original: str) -> ParseResult[int]:
        if self._int_pattern.fullmatch(text):
            try:
                return ParseResult.success(int(text))
            except ValueError as e:
                return ParseResult.failure(FormatError(original, "integer", str(e)))
        return ParseResult.failure(FormatError(original, "integer"))

    def _match_double(self, text: str, original: str) -> ParseResult[float]:
        if self._double_pattern.fullmatch(text):
            result = float(text.replace(self.config.decimal_separator, "."))
            if math.isfinite(result):
                return ParseResult.success(result)
            return ParseResult.failure(FormatError(original, "double", "out of range"))
        return ParseResult.failure(FormatError(original, "double"))


# Default parser instance for convenience
default_parser = NumericParser()


def parse_int(value: str, default: int | None = None) -> int:
    """Parse ``value`` as an integer with the default parser.

    Example:
        >>> parse_int("+1&NBSP;234")
        1234
        >>> parse_int("1234.12", default=-1)
        -1
    """
    return default_parser.parse_int(value, default)


def parse_nullable_int(value: str, default: int | None = None) -> int | None:
    """Parse ``value`` as an integer; blank text gives ``default`` (or None)."""
    return default_parser.parse_nullable_int(value, default)


def parse_double(value: str, default: float | None = None) -> float:
    """Parse ``value`` as a float with the default parser.

    Example:
        >>> parse_double("1 234,12")
        1234.12
    """
    return default_parser.parse_double(value, default)


def parse_nullable_double(value: str, default: float | None = None) -> float | None:
    """Parse ``value`` as a float; blank text gives ``default`` (or None)."""
    return default_parser.parse_nullable_double(value, default)


def try_parse_int(value: str | None) -> ParseResult[int]:
    return default_parser.try_parse_int(value)


def try_parse_double(value: str | None) -> ParseResult[float]:
    return default_parser.try_parse_double(value)


def is_int(value: str | None) -> bool:
    """Check whether ``value`` parses as an integer."""
    return default_parser.is_int(value)


def is_double(value: str | None) -> bool:
    """Check whether ``value`` parses as a float."""
    return default_parser.is_double(value)
