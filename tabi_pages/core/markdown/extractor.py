"""
Markdown Marker Processing
==========================

Replaces deferred-markdown markers left by a server render with rendered
markdown and builds the hydration cache shipped to the client.
"""

from typing import Dict, List, NamedTuple, Optional, Tuple

from tabi_pages.config.logging import get_logger
from tabi_pages.core.markdown.renderer import MarkdownRenderer, render_markdown
from tabi_pages.core.markers import MARKDOWN_MARKER_PATTERN
from tabi_pages.utils.html import unescape_html

logger = get_logger(__name__)


class ProcessedMarkdown(NamedTuple):
    """HTML with markers replaced, and identity token to rendered HTML."""

    html: str
    cache: Dict[str, str]


async def process_markdown_markers(
    html: str, renderer: Optional[MarkdownRenderer] = None
) -> ProcessedMarkdown:
    """
    Render every deferred-markdown marker in ``html``.

    Markers are spliced in reverse document order so the offsets of earlier
    matches stay valid. The cache lists entries in document order.

    Args:
        html: Server-rendered HTML possibly containing markers
        renderer: Markdown renderer; the process-wide one when omitted

    Returns:
        Patched HTML and the markdown cache

    Raises:
        HighlighterError: If the highlighter cannot be built. Nothing is
            caught here, so no partially processed page escapes.
    """
    matches = list(MARKDOWN_MARKER_PATTERN.finditer(html))
    if not matches:
        return ProcessedMarkdown(html=html, cache={})

    result = html
    entries: List[Tuple[str, str]] = []
    for match in reversed(matches):
        token, payload = match.group(1), match.group(2)
        source = unescape_html(payload)
        if renderer is not None:
            rendered = await renderer.render(source)
        else:
            rendered = await render_markdown(source)
        result = result[: match.start()] + rendered + result[match.end() :]
        if token is not None:
            entries.append((unescape_html(token), rendered))

    logger.debug("Processed markdown markers", markers=len(matches))
    return ProcessedMarkdown(html=result, cache=dict(reversed(entries)))
