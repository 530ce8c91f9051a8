"""
Document Assembly
=================

Wraps the patched body, the serialized page data and the client bundle
reference in a full HTML document shell, then splices the extracted head
content in by string surgery.
"""

from typing import Any, Callable, Optional

from tabi_pages.config.logging import get_logger
from tabi_pages.core.tree.context import RenderContext
from tabi_pages.core.tree.nodes import Element, Fragment, fragment, h, raw
from tabi_pages.core.tree.renderer import INNER_HTML_PROP, render_to_string
from tabi_pages.utils.html import escape_html

logger = get_logger(__name__)

DOCTYPE = "<!DOCTYPE html>"
HYDRATION_ROOT_ID = "__tabi__"
HEAD_CLOSE_TAG = "</head>"


def DefaultDocument(ctx: RenderContext, head: Any = None, children: Any = None) -> Element:
    """
    Default HTML5 document shell.

    Custom shells take the same ``head`` and ``children`` props. ``head`` is
    always ``None`` during assembly; head content is spliced in before the
    first ``</head>`` afterwards.
    """
    return h(
        "html",
        {"lang": "en"},
        h(
            "head",
            None,
            h("meta", {"charset": "UTF-8"}),
            h("meta", {"name": "viewport", "content": "width=device-width, initial-scale=1.0"}),
            head,
        ),
        h("body", None, children),
    )


def bundle_script(client_bundle_path: str) -> str:
    """Module script element loading the page's client bundle."""
    return f'<script type="module" src="{escape_html(client_bundle_path)}"></script>'


def build_body(body_html: str, data_script: str, bundle_script_html: str) -> Fragment:
    """Hydration root holding the body, followed by the data and bundle scripts."""
    return fragment(
        h("div", {"id": HYDRATION_ROOT_ID, INNER_HTML_PROP: body_html}),
        raw(data_script),
        raw(bundle_script_html),
    )


def inject_head(document_html: str, head: str) -> str:
    """
    Insert head content immediately before the first ``</head>``.

    A shell without ``</head>`` is returned unchanged and the head content is
    dropped.
    """
    index = document_html.find(HEAD_CLOSE_TAG)
    if index < 0:
        if head:
            logger.debug("Document shell has no </head>, head content dropped")
        return document_html
    return document_html[:index] + head + document_html[index:]


def assemble_document(
    body_html: str,
    head: str,
    data_script: str,
    bundle_script_html: str,
    document: Optional[Callable[..., Any]] = None,
) -> str:
    """
    Assemble the final document string.

    Args:
        body_html: Patched body HTML
        head: Extracted head content, pre-rendered raw HTML
        data_script: Serialized page data script element
        bundle_script_html: Client bundle script element
        document: Custom document shell component; DefaultDocument when omitted

    Returns:
        Complete document prefixed with ``<!DOCTYPE html>``
    """
    shell = document or DefaultDocument
    body = build_body(body_html, data_script, bundle_script_html)
    document_html = render_to_string(h(shell, {"head": None}, body))
    return DOCTYPE + inject_head(document_html, head)
