"""stringext - lenient numeric text parsing and password hashing."""

from __future__ import annotations

from stringext.config import StringExtConfig
from stringext.errors import FormatError, NullArgumentError, NullInputError, StringExtError
from stringext.normalize import (
    NumericParser,
    ParseResult,
    ParserConfig,
    cleanup,
    is_double,
    is_int,
    normalize,
    parse_double,
    parse_int,
    parse_nullable_double,
    parse_nullable_int,
    replace_all,
    try_parse_double,
    try_parse_int,
)
from stringext.passwords import (
    HashingConfig,
    PasswordHash,
    PasswordHasher,
    hash_password,
    verify_password_hash,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Errors
    "StringExtError",
    "FormatError",
    "NullInputError",
    "NullArgumentError",
    # Configuration
    "StringExtConfig",
    "ParserConfig",
    "HashingConfig",
    # Text and numbers
    "normalize",
    "replace_all",
    "cleanup",
    "NumericParser",
    "ParseResult",
    "parse_int",
    "parse_nullable_int",
    "parse_double",
    "parse_nullable_double",
    "try_parse_int",
    "try_parse_double",
    "is_int",
    "is_double",
    # Passwords
    "PasswordHash",
    "PasswordHasher",
    "hash_password",
    "verify_password_hash",
]
