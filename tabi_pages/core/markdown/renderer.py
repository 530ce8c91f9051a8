"""
Markdown Renderer
=================

Markdown to HTML conversion via markdown-it-py with Pygments highlighting
for fenced code blocks.

Security: output is not sanitized. Raw HTML in markdown passes through, so
only render trusted, author-controlled content.
"""

from typing import Any, Optional, Sequence

from markdown_it import MarkdownIt
from markdown_it.common.utils import unescapeAll
from markdown_it.token import Token

from tabi_pages.core.markdown.highlighter import (
    Highlighter,
    HighlighterService,
    get_highlighter_service,
)
from tabi_pages.utils.html import escape_html

HIGHLIGHTER_ENV_KEY = "highlighter"


def _render_fence(
    renderer: Any, tokens: Sequence[Token], idx: int, options: Any, env: Any
) -> str:
    """Render a fenced code block with the highlighter carried in ``env``."""
    token = tokens[idx]
    info = unescapeAll(token.info).strip() if token.info else ""
    lang = info.split()[0] if info else ""
    highlighter: Highlighter = env[HIGHLIGHTER_ENV_KEY]

    if not lang or highlighter.supports(lang):
        return highlighter.code_to_html(token.content, lang)
    return f"<pre><code>{escape_html(token.content)}</code></pre>\n"


def create_parser() -> MarkdownIt:
    """CommonMark parser with raw HTML, tables and strikethrough."""
    md = MarkdownIt("commonmark", {"html": True}).enable(["table", "strikethrough"])
    md.add_render_rule("fence", _render_fence)
    return md


class MarkdownRenderer:
    """Renders markdown using the highlighter held by a service."""

    def __init__(self, service: Optional[HighlighterService] = None) -> None:
        self.service = service or get_highlighter_service()
        self._md = create_parser()

    async def render(self, markdown: str) -> str:
        """
        Render markdown to HTML.

        Identical input yields byte-identical output: the parser carries no
        state between calls and the highlighter configuration is frozen.

        Raises:
            HighlighterError: If the highlighter cannot be built
        """
        highlighter = await self.service.get()
        return self._md.render(markdown, {HIGHLIGHTER_ENV_KEY: highlighter})


_default_renderer: Optional[MarkdownRenderer] = None


async def render_markdown(markdown: str, service: Optional[HighlighterService] = None) -> str:
    """Render markdown with the given highlighter service, or the process-wide one."""
    global _default_renderer
    if service is not None:
        return await MarkdownRenderer(service).render(markdown)
    if _default_renderer is None:
        _default_renderer = MarkdownRenderer()
    return await _default_renderer.render(markdown)
