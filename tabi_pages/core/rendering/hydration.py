"""
Client Reproduction
===================

Reads the serialized page data back out of a delivered document and
re-renders the page tree in client mode, where markdown leaves take their
HTML from the hydration cache instead of the highlighter.
"""

import json
import re
from typing import Callable, List

from pydantic import ValidationError

from tabi_pages.core.rendering.compose import compose_content
from tabi_pages.core.rendering.serialize import DATA_SCRIPT_ID, DATA_SCRIPT_TYPE
from tabi_pages.core.tree.context import (
    RenderMode,
    base_path_provider,
    frontmatter_provider,
    markdown_cache_provider,
    markdown_config_provider,
)
from tabi_pages.core.tree.nodes import Node
from tabi_pages.core.tree.renderer import render_to_string
from tabi_pages.models.schemas import Layout, MarkdownConfig, Page, SerializedPageData

DATA_SCRIPT_PATTERN = re.compile(
    rf'<script id="{DATA_SCRIPT_ID}" type="{re.escape(DATA_SCRIPT_TYPE)}">(.*?)</script>',
    re.DOTALL,
)


class PageDataError(Exception):
    """Exception raised when serialized page data cannot be read."""

    pass


def parse_page_data(document_html: str) -> SerializedPageData:
    """
    Decode the page data script of a delivered document.

    Raises:
        PageDataError: If the script is missing or its payload is invalid
    """
    match = DATA_SCRIPT_PATTERN.search(document_html)
    if match is None:
        raise PageDataError(f"No {DATA_SCRIPT_ID} script found in document")

    try:
        return SerializedPageData.model_validate(json.loads(match.group(1)))
    except (json.JSONDecodeError, ValidationError) as e:
        raise PageDataError(f"Invalid page data: {e}") from e


def compose_client_tree(
    page: Page, layouts: List[Layout], data: SerializedPageData
) -> Callable[[], Node]:
    """
    Compose the client-side tree matching the server composition.

    The markdown cache provider sits between the markdown config and the
    frontmatter providers; markdown leaves carry no body.
    """
    content = compose_content(page, layouts, markdown_body=False)
    config = MarkdownConfig(wrapper_class_name=data.markdown_class_name)

    def client_tree() -> Node:
        return base_path_provider(
            data.base_path,
            markdown_config_provider(
                config,
                markdown_cache_provider(
                    data.markdown_cache,
                    frontmatter_provider(data.frontmatter, content),
                ),
            ),
        )

    return client_tree


def render_client_body(page: Page, layouts: List[Layout], data: SerializedPageData) -> str:
    """Render the hydration root content the way the client reproduces it."""
    tree = compose_client_tree(page, layouts, data)
    return render_to_string(tree(), mode=RenderMode.CLIENT)
