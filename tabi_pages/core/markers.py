"""
Deferred Content Markers
========================

Marker-emitting leaf components.

During a server render, content that cannot be finished synchronously is
left in the HTML as a marker span whose payload is fully escaped text:

- ``<deferred-markdown data-tabi-md="TOKEN">...</deferred-markdown>`` holds a
  markdown body awaiting highlighting, replaced by MarkdownPostProcessor
- ``<deferred-head>...</deferred-head>`` holds rendered head elements,
  relocated into the document head by HeadExtractor

Because payloads never carry literal markup, marker spans can neither nest
nor overlap, and a non-greedy scan finds each one exactly.
"""

import re
from typing import Any, Optional

from tabi_pages.core.tree.context import (
    ContextError,
    RenderContext,
    use_markdown_cache,
    use_markdown_config,
)
from tabi_pages.core.tree.nodes import Element, Node, h, raw
from tabi_pages.core.tree.renderer import INNER_HTML_PROP, render_to_string
from tabi_pages.utils.html import escape_html


MARKDOWN_MARKER_TAG = "deferred-markdown"
HEAD_MARKER_TAG = "deferred-head"
IDENTITY_ATTRIBUTE = "data-tabi-md"
MARKDOWN_ID_PREFIX = "md"
HEAD_CONTENT_KEY = "head_content"

MARKDOWN_MARKER_PATTERN = re.compile(
    rf'<{MARKDOWN_MARKER_TAG}(?: {IDENTITY_ATTRIBUTE}="([^"]*)")?>(.*?)</{MARKDOWN_MARKER_TAG}>',
    re.DOTALL,
)
HEAD_MARKER_PATTERN = re.compile(
    rf"<{HEAD_MARKER_TAG}>(.*?)</{HEAD_MARKER_TAG}>",
    re.DOTALL,
)


def markdown_marker(token: str, markdown: str) -> str:
    """Encode a markdown body and its identity token as a marker span."""
    return (
        f'<{MARKDOWN_MARKER_TAG} {IDENTITY_ATTRIBUTE}="{escape_html(token)}">'
        f"{escape_html(markdown)}</{MARKDOWN_MARKER_TAG}>"
    )


def head_marker(html: str) -> str:
    """Encode rendered head HTML as a marker span."""
    return f"<{HEAD_MARKER_TAG}>{escape_html(html)}</{HEAD_MARKER_TAG}>"


def _text_of(children: Any) -> str:
    if children is None:
        return ""
    if isinstance(children, str):
        return children
    return "".join(str(child) for child in children)


def Markdown(ctx: RenderContext, children: Any = "") -> Element:
    """
    Container for a markdown body rendered after the synchronous pass.

    Server mode emits the container with a deferred-markdown marker as raw
    inner content. Client mode emits the cached HTML for this instance's
    identity token, or nothing when the cache has no entry.

    Raises:
        ContextError: If used inside ``Head``, whose content is never
            post-processed
    """
    if ctx.has(HEAD_CONTENT_KEY):
        raise ContextError("Markdown cannot be used within Head")

    token = ctx.use_id(MARKDOWN_ID_PREFIX)
    config = use_markdown_config(ctx)
    attributes = {IDENTITY_ATTRIBUTE: token, "class": config.wrapper_class_name}

    if ctx.is_server:
        inner_html = markdown_marker(token, _text_of(children))
    else:
        cache = use_markdown_cache(ctx) or {}
        inner_html = cache.get(token, "")

    return h("div", {**attributes, INNER_HTML_PROP: inner_html})


def Head(ctx: RenderContext, children: Any = None) -> Optional[Node]:
    """
    Content bound for the document ``<head>``.

    Server mode renders the children to a string and emits it escaped inside
    a deferred-head marker. Client mode emits nothing, the delivered document
    already carries the head content. Head children are rendered to static
    HTML, so ``Markdown`` and ``Code`` are rejected inside them.
    """
    if not ctx.is_server:
        return None

    html = render_to_string(children, context=ctx.fork().provide(HEAD_CONTENT_KEY, True))
    return raw(head_marker(html))


def Code(ctx: RenderContext, children: Any = "", lang: Optional[str] = None) -> Node:
    """Syntax-highlighted code block, rendered through the markdown pipeline."""
    code = _text_of(children).strip("\n")
    longest_run = max((len(run) for run in re.findall(r"`+", code)), default=0)
    fence = "`" * max(3, longest_run + 1)
    return h(Markdown, None, f"{fence}{lang or ''}\n{code}\n{fence}\n")
