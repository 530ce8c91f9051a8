"""
Head Marker Processing
======================

Extracts deferred-head markers from rendered HTML so their content can be
relocated into the document ``<head>``.
"""

from typing import List, NamedTuple

from tabi_pages.config.logging import get_logger
from tabi_pages.core.markers import HEAD_MARKER_PATTERN
from tabi_pages.utils.html import unescape_html

logger = get_logger(__name__)


class ExtractedHead(NamedTuple):
    """HTML with head markers removed, and the concatenated head content."""

    html: str
    head: str


def process_head_markers(html: str) -> ExtractedHead:
    """
    Remove every deferred-head marker from ``html`` and collect its content.

    Markers are removed in reverse document order while their unescaped
    content is collected in document order and joined with newlines. An
    escaped sequence that looks like a nested marker stays literal text of
    the enclosing marker.

    Args:
        html: Rendered HTML possibly containing head markers

    Returns:
        Cleaned HTML and head content (empty when there are no markers)
    """
    head_parts: List[str] = []
    result = html
    matches = list(HEAD_MARKER_PATTERN.finditer(html))
    for match in reversed(matches):
        head_parts.insert(0, unescape_html(match.group(1)))
        result = result[: match.start()] + result[match.end() :]

    if matches:
        logger.debug("Extracted head markers", markers=len(matches))
    return ExtractedHead(html=result, head="\n".join(head_parts))
