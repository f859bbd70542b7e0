"""Numeric text normalization and parsing.

Lenient cleanup of human-entered numbers followed by strict parsing.

Example:
    >>> from stringext.normalize import parse_int, parse_double
    >>> parse_int("+1&nbsp;234")
    1234
    >>> parse_double("1 234,12")
    1234.12
"""

from stringext.normalize.numbers import (
    NumericParser,
    ParseResult,
    ParserConfig,
    default_parser,
    is_double,
    is_int,
    parse_double,
    parse_int,
    parse_nullable_double,
    parse_nullable_int,
    try_parse_double,
    try_parse_int,
)
from stringext.normalize.text import (
    DEFAULT_NOISE_PATTERNS,
    NoiseConfig,
    TextNormalizer,
    cleanup,
    default_normalizer,
    normalize,
    replace_all,
)

__all__ = [
    # Text normalization
    "TextNormalizer",
    "NoiseConfig",
    "DEFAULT_NOISE_PATTERNS",
    "normalize",
    "default_normalizer",
    "replace_all",
    "cleanup",
    # Numeric parsing
    "NumericParser",
    "ParserConfig",
    "ParseResult",
    "default_parser",
    "parse_int",
    "parse_nullable_int",
    "parse_double",
    "parse_nullable_double",
    "try_parse_int",
    "try_parse_double",
    "is_int",
    "is_double",
]
