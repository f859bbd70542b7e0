"""Text normalization for human-entered numeric input.

Strips noise substrings (space variants, HTML entities, sign characters) so the
remaining text can be handed to a strict parser. All operations are pure
functions of their inputs.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from stringext.errors import FormatError, NullArgumentError, NullInputError

# Removal order matters only when patterns overlap after an earlier removal
DEFAULT_NOISE_PATTERNS: tuple[str, ...] = (
    " ",        # Regular space
    "\u00a0",   # Non-breaking space
    "&nbsp;",   # HTML non-breaking space
    "+",        # Plus signs
)


@dataclass(frozen=True)
class NoiseConfig:
    """Configuration for noise removal.

    Patterns are removed case-insensitively, in order, each one fully swept
    before the next.
    """

    patterns: tuple[str, ...] = DEFAULT_NOISE_PATTERNS
    lowercase: bool = True

    def __post_init__(self):
        """Validate configuration."""
        if isinstance(self.patterns, str):
            raise ValueError("patterns must be a sequence of strings, not a string")
        for pattern in self.patterns:
            if not isinstance(pattern, str):
                raise ValueError(f"Invalid noise pattern: {pattern!r}")
        # Stored as a tuple so the config stays hashable
        object.__setattr__(self, "patterns", tuple(self.patterns))


def replace_all(
    value: str,
    target: str | None,
    replacement: str | None,
    ignore_case: bool = False,
) -> str:
    """Replace every occurrence of ``target`` in ``value``.

    Matches are found left to right and never overlap. Text produced by a
    replacement is not scanned again.

    Args:
        value: String where the replace is done
        target: Substring to replace
        replacement: Substring to insert (None is treated as "")
        ignore_case: Match ``target`` without regard to case

    Returns:
        The string with all matches replaced

    Raises:
        NullInputError: If value is None
        NullArgumentError: If target is None
        FormatError: If target is empty and ignore_case is False

    Example:
        >>> replace_all("Hello WORLD!", "world", "world", ignore_case=True)
        'Hello world!'
    """
    if value is None:
        raise NullInputError("value")
    if target is None:
        raise NullArgumentError("target")

    if target == "":
        # Empty target: rejected when case-sensitive, no-op when not
        if ignore_case:
            return value
        raise FormatError(target, "replace target", "empty string can not be replaced")

    replacement = replacement or ""

    if not ignore_case:
        return value.replace(target, replacement)

    pattern = re.compile(re.escape(target), re.IGNORECASE)
    return pattern.sub(lambda _match: replacement, value)


def cleanup(value: str, *patterns: str) -> str:
    """Remove each pattern from ``value`` (case-insensitive), then trim.

    The order of ``patterns`` is the order of removal.

    Example:
        >>> cleanup("Hello world!", "!", "World")
        'Hello'
    """
    if value is None:
        raise NullInputError("value")

    result = value
    for pattern in patterns:
        result = replace_all(result, pattern, "", ignore_case=True)

    return result.strip()


class TextNormalizer:
    """Reduces raw numeric text to a trimmed candidate string."""

    def __init__(self, config: NoiseConfig | None = None):
        """Initialize with configuration.

        Args:
            config: Noise configuration (uses defaults if None)
        """
        self.config = config or NoiseConfig()

    def normalize(self, raw: str) -> str:
        """Normalize raw input.

        Args:
            raw: Text to normalize; "" is valid and normalizes to ""

        Returns:
            Text without noise patterns or surrounding whitespace

        Raises:
            NullInputError: If raw is None
        """
        if raw is None:
            raise NullInputError("raw")

        result = raw.lower() if self.config.lowercase else raw
        return cleanup(result, *self.config.patterns)


# Default normalizer instance for convenience
default_normalizer = TextNormalizer()


def normalize(raw: str, noise_patterns: tuple[str, ...] | None = None) -> str:
    """Normalize ``raw`` with the given (or default) noise patterns.

    Example:
        >>> normalize("+1&NBSP;234 ")
        '1234'
    """
    if noise_patterns is None:
        return default_normalizer.normalize(raw)
    return TextNormalizer(NoiseConfig(patterns=tuple(noise_patterns))).normalize(raw)
