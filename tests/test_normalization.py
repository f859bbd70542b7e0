"""Tests for text normalization and the replace/cleanup primitives."""

from __future__ import annotations

import pytest

from stringext.errors import FormatError, NullArgumentError, NullInputError
from stringext.normalize import (
    DEFAULT_NOISE_PATTERNS,
    NoiseConfig,
    TextNormalizer,
    cleanup,
    normalize,
    replace_all,
)


class TestReplaceAll:
    """Tests for replace_all."""

    def test_case_sensitive(self):
        """Test exact-case replacement."""
        assert replace_all("Hello WORLD!", "WORLD", "world") == "Hello world!"

    def test_case_sensitive_not_found(self):
        """Test that a differently cased target does not match."""
        assert replace_all("Hello WORLD!", "world", "world") == "Hello WORLD!"

    def test_case_insensitive(self):
        """Test case-insensitive replacement."""
        assert replace_all("Hello WORLD!", "world", "world", ignore_case=True) == "Hello world!"

    def test_case_sensitive_multiple_instances(self):
        value = "Hello WORLD! There are many worlds out there"
        result = replace_all(value, "WORLD", "people")
        assert result == "Hello people! There are many worlds out there"

    def test_case_insensitive_multiple_instances(self):
        value = "Hello WORLD! There are many worlds out there"
        result = replace_all(value, "WORLD", "people", ignore_case=True)
        assert result == "Hello people! There are many peoples out there"

    def test_replacement_none_is_empty(self):
        """Test that a None replacement removes the target."""
        assert replace_all("Hello WORLD!", "WORLD", None) == "Hello !"

    def test_empty_target_case_sensitive_rejected(self):
        """Test that an empty case-sensitive target is a format error."""
        with pytest.raises(FormatError):
            replace_all("Hello WORLD!", "", "world")

    def test_empty_target_case_insensitive_noop(self):
        """Test that an empty case-insensitive target leaves input unchanged."""
        assert replace_all("Hello WORLD!", "", "world", ignore_case=True) == "Hello WORLD!"

    @pytest.mark.parametrize("ignore_case", [False, True])
    def test_none_target_rejected(self, ignore_case):
        with pytest.raises(NullArgumentError) as exc_info:
            replace_all("Hello WORLD!", None, "world", ignore_case=ignore_case)
        assert exc_info.value.argument == "target"

    def test_none_value_rejected(self):
        with pytest.raises(NullInputError):
            replace_all(None, "a", "b")

    def test_inserted_text_not_rescanned(self):
        """Test that replacement text containing the target is not matched again."""
        assert replace_all("aXa", "a", "aa", ignore_case=True) == "aaXaa"
        assert replace_all("aXa", "A", "aA", ignore_case=True) == "aAXaA"

    def test_non_overlapping_left_to_right(self):
        """Test that matches do not overlap."""
        assert replace_all("aaaa", "aa", "b") == "bb"
        assert replace_all("AAA", "aa", "b", ignore_case=True) == "bA"

    def test_regex_metacharacters_are_literal(self):
        assert replace_all("1.5 + 2.5", ".", ",", ignore_case=True) == "1,5 + 2,5"
        assert replace_all("a+b", "+", "", ignore_case=True) == "ab"

    def test_replacement_backslashes_are_literal(self):
        assert replace_all("a-b", "-", r"\1", ignore_case=True) == r"a\1b"


class TestCleanup:
    """Tests for cleanup."""

    def test_single(self):
        """Test removing a single pattern (case-insensitive)."""
        assert cleanup("Hello world!", "World") == "Hello !"

    def test_multiple(self):
        """Test removing several patterns and trimming the result."""
        assert cleanup("Hello world!", "!", "World") == "Hello"

    def test_no_match(self):
        assert cleanup("Hello world!", "No match") == "Hello world!"

    def test_no_patterns_only_trims(self):
        assert cleanup("  padded  ") == "padded"

    def test_order_matters_for_overlaps(self):
        """Test that removing one pattern can create a match for a later one."""
        assert cleanup("a&nb sp;b", " ", "&nbsp;") == "ab"
        assert cleanup("a&nb sp;b", "&nbsp;", " ") == "a&nbsp;b"


class TestTextNormalizer:
    """Tests for the noise normalizer."""

    def test_default_patterns(self):
        assert DEFAULT_NOISE_PATTERNS == (" ", "\u00a0", "&nbsp;", "+")

    @pytest.mark.parametrize(
        "raw",
        ["1234", "+1234", "1 234", "1&nbsp;234", "1&NBSP;234", "1&NbSp;234", "1\u00a0234", " 1234 "],
    )
    def test_noise_removed(self, raw):
        assert normalize(raw) == "1234"

    def test_lowercases(self):
        assert normalize("ABC") == "abc"

    def test_keeps_minus_sign(self):
        assert normalize("-1 234") == "-1234"

    def test_empty_string(self):
        """Test that empty input is valid and stays empty."""
        assert normalize("") == ""

    def test_only_noise(self):
        assert normalize("&nbsp;&NBSP;") == ""

    def test_trims_other_whitespace(self):
        assert normalize("\t12\n") == "12"

    def test_none_rejected(self):
        with pytest.raises(NullInputError):
            normalize(None)

    def test_custom_patterns(self):
        """Test caller-supplied noise patterns."""
        assert normalize("1_234'567", noise_patterns=("_", "'")) == "1234567"
        assert normalize("+1 234", noise_patterns=("+",)) == "1 234"

    def test_config_without_lowercase(self):
        normalizer = TextNormalizer(NoiseConfig(patterns=("&NBSP;",), lowercase=False))
        assert normalizer.normalize("A&nbsp;B") == "AB"

    def test_config_accepts_list(self):
        config = NoiseConfig(patterns=["x", "y"])
        assert config.patterns == ("x", "y")

    def test_config_rejects_bare_string(self):
        with pytest.raises(ValueError, match="sequence"):
            NoiseConfig(patterns=" ")

    def test_config_rejects_non_string_pattern(self):
        with pytest.raises(ValueError, match="Invalid noise pattern"):
            NoiseConfig(patterns=(" ", None))

    def test_determinism_same_input(self):
        raw = " +1&nbsp;234 "
        assert normalize(raw) == normalize(raw) == normalize(raw)
