"""
Page Composition
================

Builds one renderable tree from a page, its layout chain and the ambient
context (frontmatter, base path, markdown configuration).
"""

from typing import Callable, List, Optional

from tabi_pages.core.markers import Markdown
from tabi_pages.core.tree.context import (
    base_path_provider,
    frontmatter_provider,
    markdown_config_provider,
)
from tabi_pages.core.tree.nodes import Node, h
from tabi_pages.models.schemas import Layout, MarkdownConfig, Page, PageType


def compose_content(page: Page, layouts: List[Layout], markdown_body: bool = True) -> Node:
    """
    Wrap the page content in its layouts.

    ``layouts[0]`` is the root layout and ``layouts[-1]`` the innermost, so the
    chain is applied from the end: the innermost layout wraps the page first.

    Args:
        page: Loaded page
        layouts: Layout chain, root to innermost
        markdown_body: Pass the markdown body to the markdown leaf. Client trees
            leave it out, their markdown comes from the hydration cache.
    """
    if page.type == PageType.COMPONENT:
        content = h(page.content)
    elif markdown_body:
        content = h(Markdown, None, page.content)
    else:
        content = h(Markdown)

    for layout in reversed(layouts):
        content = h(layout.component, None, content)
    return content


def compose_tree(
    page: Page,
    layouts: List[Layout],
    base_path: str = "",
    markdown_config: Optional[MarkdownConfig] = None,
) -> Callable[[], Node]:
    """
    Compose a page with its layout chain into a render entry point.

    Providers wrap the content outermost to innermost: base path, markdown
    config, frontmatter. The frontmatter is provided by reference.

    Args:
        page: Loaded page (markdown or component)
        layouts: Layout chain, root to innermost
        base_path: Base path prefix for the site
        markdown_config: Markdown rendering configuration

    Returns:
        Zero-argument function returning the complete tree
    """
    config = markdown_config or MarkdownConfig()
    content = compose_content(page, layouts)
    frontmatter = page.frontmatter

    def composed_tree() -> Node:
        return base_path_provider(
            base_path,
            markdown_config_provider(
                config,
                frontmatter_provider(frontmatter, content),
            ),
        )

    return composed_tree
