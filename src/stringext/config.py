"""Configuration for stringext.

Supports:
- Environment variable configuration
- YAML file configuration
- Runtime overrides through the dataclass constructors
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from stringext.normalize.numbers import NumericParser, ParserConfig
from stringext.normalize.text import NoiseConfig
from stringext.passwords import DEFAULT_ITERATIONS, HashingConfig, PasswordHasher

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class StringExtConfig:
    """Root configuration aggregating parser and hashing settings."""

    parser: ParserConfig = field(default_factory=ParserConfig)
    hashing: HashingConfig = field(default_factory=HashingConfig)
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate configuration."""
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {self.log_level}")
        object.__setattr__(self, "log_level", self.log_level.upper())

    @classmethod
    def from_env(cls) -> StringExtConfig:
        """
        Create configuration from environment variables.

        Environment variables:
            STRINGEXT_DECIMAL_SEPARATOR: Decimal separator for doubles ("." or ",")
            STRINGEXT_HASH_ITERATIONS: PBKDF2 iteration count
            STRINGEXT_HASH_ALGORITHM: PBKDF2 hash (sha1/sha256/sha512)
            STRINGEXT_LOG_LEVEL: Logging level name
        """
        separator = os.getenv("STRINGEXT_DECIMAL_SEPARATOR", ".")
        iterations_str = os.getenv("STRINGEXT_HASH_ITERATIONS", str(DEFAULT_ITERATIONS))
        algorithm = os.getenv("STRINGEXT_HASH_ALGORITHM", "sha1").lower()
        log_level = os.getenv("STRINGEXT_LOG_LEVEL", "WARNING")

        try:
            iterations = int(iterations_str)
        except ValueError:
            raise ValueError(f"Invalid STRINGEXT_HASH_ITERATIONS: {iterations_str}")

        return cls(
            parser=ParserConfig(decimal_separator=separator),
            hashing=HashingConfig(iterations=iterations, algorithm=algorithm),
            log_level=log_level,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StringExtConfig:
        """Create configuration from dictionary (e.g., YAML)."""
        parser_data = _section(data, "parser")
        noise_patterns = parser_data.get("noise_patterns")
        if noise_patterns is not None and not isinstance(noise_patterns, list):
            raise ValueError(f"parser.noise_patterns must be a list, got {type(noise_patterns).__name__}")
        noise = NoiseConfig(patterns=tuple(noise_patterns)) if noise_patterns is not None else NoiseConfig()

        hashing_data = _section(data, "hashing")

        return cls(
            parser=ParserConfig(
                decimal_separator=parser_data.get("decimal_separator", "."),
                noise=noise,
            ),
            hashing=HashingConfig(
                iterations=hashing_data.get("iterations", DEFAULT_ITERATIONS),
                algorithm=hashing_data.get("algorithm", "sha1"),
            ),
            log_level=data.get("log_level", "WARNING"),
        )

    @classmethod
    def from_file(cls, path: Path) -> StringExtConfig:
        """Load configuration from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not valid YAML or does not hold a mapping
        """
        with open(path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in config file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")

        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "parser": {
                "decimal_separator": self.parser.decimal_separator,
                "noise_patterns": list(self.parser.noise.patterns),
            },
            "hashing": {
                "iterations": self.hashing.iterations,
                "algorithm": self.hashing.algorithm,
            },
            "log_level": self.log_level,
        }

    def build_parser(self) -> NumericParser:
        return NumericParser(self.parser)

    def build_hasher(self) -> PasswordHasher:
        return PasswordHasher(self.hashing)

    def configure_logging(self) -> None:
        """Apply ``log_level`` to the root logger."""
        logging.basicConfig(
            level=getattr(logging, self.log_level),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' must be a mapping, got {type(section).__name__}")
    return section
