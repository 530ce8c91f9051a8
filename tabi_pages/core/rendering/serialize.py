"""
Page Data Serialization
=======================

Packages page state into a JSON payload embedded in a non-executable script
element, read back by the client to reproduce deferred content.

SECURITY:
- ``<`` and ``>`` are written as ``\\u003c``/``\\u003e`` so no string field can
  close the script element early.
- The ``application/json`` type keeps the payload data, never code.
- Markdown cache values are rendered, unsanitized HTML; only use with trusted
  markdown content.
"""

import json
from typing import Any, Dict, Mapping, Optional

from tabi_pages.models.schemas import Page, SerializedPageData

DATA_SCRIPT_ID = "__TABI_DATA__"
DATA_SCRIPT_TYPE = "application/json"


def build_page_data(
    page: Page,
    route: str,
    markdown_cache: Mapping[str, str],
    base_path: str = "",
    markdown_class_name: Optional[str] = None,
) -> SerializedPageData:
    """Collect the server-to-client page data."""
    return SerializedPageData(
        frontmatter=page.frontmatter,
        route=route,
        page_type=page.type,
        markdown_cache=dict(markdown_cache),
        base_path=base_path,
        markdown_class_name=markdown_class_name,
    )


def encode_page_data(data: SerializedPageData) -> str:
    """Encode page data as JSON safe for embedding inside a script element."""
    payload: Dict[str, Any] = data.model_dump(mode="json", by_alias=True)
    if payload.get("markdownClassName") is None:
        payload.pop("markdownClassName", None)

    encoded = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return encoded.replace("<", "\\u003c").replace(">", "\\u003e")


def serialize_page_data(
    page: Page,
    route: str,
    markdown_cache: Mapping[str, str],
    base_path: str = "",
    markdown_class_name: Optional[str] = None,
) -> str:
    """
    Serialize page data into a script tag for client hydration.

    Args:
        page: Loaded page providing frontmatter and type
        route: Route path for the page
        markdown_cache: Identity token to rendered markdown HTML
        base_path: Base path prefix for the site
        markdown_class_name: CSS class of markdown wrapper elements

    Returns:
        Complete script element ready for HTML embedding
    """
    data = build_page_data(page, route, markdown_cache, base_path, markdown_class_name)
    return (
        f'<script id="{DATA_SCRIPT_ID}" type="{DATA_SCRIPT_TYPE}">'
        f"{encode_page_data(data)}</script>"
    )
