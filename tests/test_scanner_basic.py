"""
Basic scanner tests - single tokens and remainders

Tests #id, .class and key=value annotations and how the decorated text
before them is returned.
"""

import pytest

from mdattrs.lib.scanner import attrs_scan
from mdattrs.models.attrs import ScanResult


class TestSingleToken:
    """Test annotations holding one token"""

    def test_id(self):
        """#foo becomes an id pair"""
        result = attrs_scan("{#foo}")

        assert result.matched
        assert result.remainder == ""
        assert result.attrs == [("id", "foo")]

    def test_class(self):
        """.haskell becomes a class pair"""
        result = attrs_scan("{.haskell}")

        assert result.remainder == ""
        assert result.attrs == [("class", "haskell")]

    def test_key_value(self):
        """Unquoted key=value pair"""
        result = attrs_scan("{key=val}")

        assert result.remainder == ""
        assert result.attrs == [("key", "val")]

    def test_key_quoted_value(self):
        """Quoted values may contain whitespace"""
        result = attrs_scan('{key2="val 2"}')

        assert result.remainder == ""
        assert result.attrs == [("key2", "val 2")]

    def test_multibyte_value(self):
        """Values are scanned by character, not byte"""
        result = attrs_scan("Überschrift {#über .größe}")

        assert result.remainder == "Überschrift"
        assert result.attrs == [("id", "über"), ("class", "größe")]


class TestRemainder:
    """Test the text returned before the annotation"""

    def test_text_before_annotation(self):
        """Decorated text is kept, separating space trimmed"""
        result = attrs_scan("My heading {#foo}")

        assert result.remainder == "My heading"
        assert result.boundary == 11

    def test_multiple_spaces_trimmed(self):
        """All whitespace before the opening brace is trimmed"""
        result = attrs_scan("My heading \t   {#foo}")

        assert result.remainder == "My heading"

    def test_annotation_without_space(self):
        """Annotation may touch the text"""
        result = attrs_scan("pascal{.foo}")

        assert result.remainder == "pascal"
        assert result.attrs == [("class", "foo")]

    def test_braces_in_text_before(self):
        """Braces earlier in the text are ordinary characters"""
        result = attrs_scan("f(x) = {x | x > 0} {#set}")

        assert result.remainder == "f(x) = {x | x > 0}"
        assert result.attrs == [("id", "set")]

    def test_leading_whitespace_kept(self):
        """Only trailing whitespace of the remainder is trimmed"""
        result = attrs_scan("  pascal {.foo}")

        assert result.remainder == "  pascal"

    def test_only_whitespace_before(self):
        """Whitespace-only text reduces to an empty remainder"""
        result = attrs_scan(" {.foo}")

        assert result.remainder == ""

    def test_round_trip(self):
        """Remainder, trimmed gap and matched suffix rebuild the input"""
        text = "Section title   {#sec .wide data-x=1}"
        result = attrs_scan(text)

        suffix = text[result.boundary:]
        gap = text[len(result.remainder):result.boundary]
        assert result.remainder + gap + suffix == text
        assert gap.strip() == ""
        assert suffix == "{#sec .wide data-x=1}"


class TestResultModel:
    """Test the ScanResult data model"""

    def test_matched_reflects_attrs(self):
        """matched is True exactly when attrs is non-empty"""
        assert ScanResult(remainder="x", attrs=[("id", "x")], boundary=0).matched
        assert not ScanResult(remainder="x").matched

    def test_failure_defaults(self):
        """Failure carries no attrs and no boundary"""
        result = attrs_scan("plain text")

        assert result.attrs == []
        assert result.boundary is None

    @pytest.mark.parametrize("text", ["{#a}", "x {.b}", 'x {k="v"}', "x {k=v}"])
    def test_success_never_empty(self, text):
        """Every successful scan carries at least one pair"""
        result = attrs_scan(text)

        assert result.matched
        assert len(result.attrs) >= 1
