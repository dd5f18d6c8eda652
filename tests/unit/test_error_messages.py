"""
Tests for error message formatting and typo detection.

These tests ensure that:
1. Error message templates format correctly with parameters
2. The suggest_similar and close_matches functions properly detect typos
3. All error messages follow the WHAT/CAUSE/FIX structure
"""

from __future__ import annotations

from option_docs.library.error_messages import (
    ERROR_MESSAGES,
    close_matches,
    format_error,
    suggest_similar,
)


class TestErrorMessageFormatting:
    """Test error message template formatting."""

    def test_format_error_manifest_not_found(self):
        """Test formatting of manifest_not_found error."""
        msg = format_error("manifest_not_found", path="docs/options.yaml")

        assert msg.startswith("Declaration manifest not found: docs/options.yaml")
        assert "WHAT HAPPENED:" in msg
        assert "HOW TO FIX:" in msg

    def test_format_error_manifest_invalid(self):
        """Test formatting of manifest_invalid error."""
        msg = format_error(
            "manifest_invalid",
            path="docs/options.yaml",
            details="units.0.name: Field required",
        )

        assert "docs/options.yaml is invalid" in msg
        assert "units.0.name: Field required" in msg
        assert "LIKELY CAUSE:" in msg

    def test_format_error_invalid_check_config(self):
        """Test formatting of invalid_check_config error."""
        msg = format_error(
            "invalid_check_config",
            path="checks.yaml",
            details="common_sektion: Extra inputs are not permitted",
            suggestion="Did you mean: common_section?",
        )

        assert "checks.yaml is invalid" in msg
        assert "Did you mean: common_section?" in msg

    def test_format_error_unknown_key(self):
        """Test that unknown error keys return a fallback message."""
        msg = format_error("nonexistent_error_key", param="value")

        assert "Unknown error: nonexistent_error_key" in msg

    def test_all_error_messages_have_structure(self):
        """Test that all error messages follow the WHAT/CAUSE/FIX structure."""
        for key, template in ERROR_MESSAGES.items():
            assert "WHAT HAPPENED:" in template, f"Error '{key}' missing WHAT HAPPENED"
            assert "HOW TO FIX:" in template, f"Error '{key}' missing HOW TO FIX"


class TestSuggestSimilar:
    """Test typo detection and suggestion functionality."""

    def test_suggest_similar_setting_typo(self):
        """Test the canonical typo case for a configuration setting."""
        result = suggest_similar(
            "generated_doc_dir", ["generated_docs_dir", "root_dir", "instructions"]
        )

        assert "Did you mean:" in result
        assert "generated_docs_dir" in result

    def test_suggest_similar_no_close_match(self):
        """Test fallback when no close match exists."""
        result = suggest_similar("xyz", ["root_dir", "instructions"])

        # Should fall back to listing valid options
        assert result == "Valid options: root_dir, instructions"

    def test_suggest_similar_lists_close_matches(self):
        """Test that suggestions are exactly the close matches, best first."""
        options = ["web.port", "web.ports.range", "rest.port", "root_dir"]

        result = suggest_similar("web.prot", options)

        matches = close_matches("web.prot", options)
        assert matches
        assert result == f"Did you mean: {', '.join(matches)}?"

    def test_close_matches_best_first(self):
        """Test that close matches are ordered by similarity."""
        result = close_matches(
            "web.prot", ["web.port", "web.ports.range", "rest.port"]
        )

        assert result[0] == "web.port"

    def test_close_matches_none(self):
        """Test that unrelated keys give no matches."""
        assert close_matches("state.backend", ["web.port"]) == []
