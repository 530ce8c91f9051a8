"""
Unit Tests for HTML Escaping
============================

Unit tests for the bidirectional HTML entity codec.
"""

import pytest

from tabi_pages.utils.html import escape_html, unescape_html


class TestEscapeHtml:
    """Test HTML escaping."""

    def test_escapes_all_special_characters(self):
        """Test each special character maps to its entity."""
        assert escape_html("&") == "&amp;"
        assert escape_html("<") == "&lt;"
        assert escape_html(">") == "&gt;"
        assert escape_html('"') == "&quot;"
        assert escape_html("'") == "&#39;"

    def test_ampersand_escaped_first(self):
        """Test entities produced for other characters are not re-escaped."""
        assert escape_html("<b>") == "&lt;b&gt;"
        assert escape_html("a & <b>") == "a &amp; &lt;b&gt;"

    def test_already_escaped_text_escapes_again(self):
        """Test escaping is applied to the text as given."""
        assert escape_html("&lt;") == "&amp;lt;"

    def test_plain_text_unchanged(self):
        """Test ordinary text passes through."""
        assert escape_html("Hello, world") == "Hello, world"
        assert escape_html("") == ""


class TestUnescapeHtml:
    """Test HTML unescaping."""

    def test_unescapes_all_entities(self):
        """Test each entity maps back to its character."""
        assert unescape_html("&amp;&lt;&gt;&quot;&#39;") == "&<>\"'"

    def test_ampersand_decoded_last(self):
        """Test an escaped entity decodes to the entity, not the character."""
        assert unescape_html("&amp;lt;") == "&lt;"
        assert unescape_html("&amp;amp;") == "&amp;"
        assert unescape_html("&amp;lt;&lt;") == "&lt;<"

    def test_unknown_entities_untouched(self):
        """Test only the five codec entities are decoded."""
        assert unescape_html("&nbsp;&#x27;") == "&nbsp;&#x27;"


class TestRoundTrip:
    """Test lossless escape/unescape."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "plain text",
            "& < > \" '",
            "&amp;",
            "&lt;script&gt;",
            "</deferred-markdown>",
            "a && b || c < d > e",
            "&&&amp;amp;;",
            "\"quoted\" and 'single'",
            "# Title\n\n```ts\nconst x = a < b && c > d;\n```\n",
        ],
    )
    def test_unescape_reverses_escape(self, text):
        """Test unescape(escape(s)) == s."""
        assert unescape_html(escape_html(text)) == text

    def test_escaped_output_contains_no_markup(self):
        """Test escaped text has no characters that could open a tag."""
        escaped = escape_html("<deferred-head>x</deferred-head>")
        assert "<" not in escaped
        assert ">" not in escaped
