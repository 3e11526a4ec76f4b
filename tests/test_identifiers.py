"""Tests for identifier derivation."""

import pytest

from sheetschema.inference.identifiers import to_identifier


class TestToIdentifier:
    """Test lowerCamelCase identifier derivation."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("ID", "id"),
            ("Name", "name"),
            ("Received Date", "receivedDate"),
            ("mail_id-branch", "mailIdBranch"),
            ("  first   PREFERRED  clinic ", "firstPreferredClinic"),
            ("Has deficiency?", "hasDeficiency"),
            ("2nd choice", "2ndChoice"),
            ("e-mail Address", "eMailAddress"),
        ],
    )
    def test_camel_case(self, text, expected):
        """Test conversion of typical header text."""
        assert to_identifier(text, "field1") == expected

    def test_empty_text_returns_fallback(self):
        """Test that empty text yields the fallback verbatim."""
        assert to_identifier("", "field1") == "field1"

    def test_only_separators_returns_fallback(self):
        """Test that text with no alphanumerics yields the fallback."""
        assert to_identifier(" -_/ ", "field7") == "field7"

    def test_non_ascii_text(self):
        """Test that non-ASCII text does not crash and gives a non-empty name."""
        result = to_identifier("日本 語", "field1")

        assert result
        assert result == "field1"

    def test_mixed_ascii_and_non_ascii(self):
        """Test that ASCII runs survive among non-ASCII characters."""
        assert to_identifier("メールID branch", "field1") == "idBranch"

    def test_deterministic(self):
        """Test that the same input always yields the same output."""
        assert to_identifier("Some Header", "f") == to_identifier("Some Header", "f")
