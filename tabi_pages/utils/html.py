"""
HTML Escaping
=============

Bidirectional HTML entity codec shared by the tree renderer, the marker
components and the marker post-processors.
"""

# "&" first so entities produced for the other characters are not re-escaped.
_ESCAPE_TABLE = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)

# "&amp;" last: "&amp;lt;" must decode to "&lt;", not "<".
_UNESCAPE_TABLE = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&amp;", "&"),
)


def escape_html(text: str) -> str:
    """
    Escape HTML special characters.

    Args:
        text: Text to escape

    Returns:
        Text with ``& < > " '`` replaced by entities
    """
    for char, entity in _ESCAPE_TABLE:
        text = text.replace(char, entity)
    return text


def unescape_html(text: str) -> str:
    """
    Reverse :func:`escape_html`.

    Only the five entities produced by :func:`escape_html` are decoded, so
    ``unescape_html(escape_html(s)) == s`` for every string.

    Args:
        text: Text with HTML entities

    Returns:
        Unescaped text
    """
    for entity, char in _UNESCAPE_TABLE:
        text = text.replace(entity, char)
    return text
