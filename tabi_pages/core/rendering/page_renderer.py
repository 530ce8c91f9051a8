"""
Page Renderer
=============

Orchestrates the server-side rendering pipeline for one page:

1. Compose the page with its layout chain into a tree
2. Render the tree to an HTML string
3. Replace deferred-markdown markers and build the markdown cache
4. Extract deferred-head markers
5. Serialize page data for client hydration
6. Assemble the document shell and splice the head content in
"""

from typing import Any, Callable, List, Optional

from tabi_pages.config.logging import get_logger
from tabi_pages.config.settings import Settings, get_settings
from tabi_pages.core.head import process_head_markers
from tabi_pages.core.markdown.extractor import process_markdown_markers
from tabi_pages.core.markdown.renderer import MarkdownRenderer
from tabi_pages.core.rendering.compose import compose_tree
from tabi_pages.core.rendering.document import assemble_document, bundle_script
from tabi_pages.core.rendering.serialize import serialize_page_data
from tabi_pages.core.tree.context import RenderMode
from tabi_pages.core.tree.renderer import render_to_string
from tabi_pages.models.schemas import (
    Layout,
    MarkdownConfig,
    Page,
    RenderPageOptions,
    RenderPageResult,
)

logger = get_logger(__name__)


class RenderError(Exception):
    """Exception raised when page rendering fails."""

    def __init__(self, message: str, route: str) -> None:
        super().__init__(message)
        self.route = route


class PageRenderer:
    """Renders pages to complete HTML documents."""

    def __init__(self, markdown_renderer: Optional[MarkdownRenderer] = None) -> None:
        self.markdown_renderer = markdown_renderer
        self.logger: Any = logger.bind(component="page_renderer")  # structlog.BoundLoggerBase

    async def render(self, options: RenderPageOptions) -> RenderPageResult:
        """
        Render a page to a complete HTML document.

        Args:
            options: Page, layouts, bundle path, route and optional document shell

        Returns:
            Render result holding the document string

        Raises:
            RenderError: If any step fails; carries the route and the
                original exception as ``__cause__``
        """
        page = options.page
        route = options.route

        try:
            tree = compose_tree(
                page,
                options.layouts,
                base_path=options.base_path,
                markdown_config=options.markdown_config,
            )
            raw_html = render_to_string(tree(), mode=RenderMode.SERVER)

            body_html, markdown_cache = await process_markdown_markers(
                raw_html, self.markdown_renderer
            )
            body_html, head = process_head_markers(body_html)

            data_script = serialize_page_data(
                page,
                route,
                markdown_cache,
                base_path=options.base_path,
                markdown_class_name=options.markdown_config.wrapper_class_name,
            )
            html = assemble_document(
                body_html,
                head,
                data_script,
                bundle_script(options.client_bundle_path),
                document=options.document,
            )
        except Exception as e:
            raise RenderError(f"Failed to render page: {e}", route) from e

        self.logger.info(
            "Page rendered",
            route=route,
            page_type=page.type.value,
            markdown_blocks=len(markdown_cache),
            html_length=len(html),
        )
        return RenderPageResult(html=html)


def build_render_options(
    page: Page,
    layouts: List[Layout],
    client_bundle_path: str,
    route: str,
    document: Optional[Callable[..., Any]] = None,
    settings: Optional[Settings] = None,
) -> RenderPageOptions:
    """Render options with base path and markdown class taken from settings."""
    settings = settings or get_settings()
    return RenderPageOptions(
        page=page,
        layouts=layouts,
        client_bundle_path=client_bundle_path,
        route=route,
        document=document,
        base_path=settings.base_path,
        markdown_config=MarkdownConfig(wrapper_class_name=settings.markdown_class_name or None),
    )


async def render_page(
    options: RenderPageOptions, markdown_renderer: Optional[MarkdownRenderer] = None
) -> RenderPageResult:
    """
    Render a page to a complete HTML document.

    Args:
        options: Rendering options
        markdown_renderer: Markdown renderer; the process-wide one when omitted

    Returns:
        Render result with the ``<!DOCTYPE html>`` document
    """
    renderer = PageRenderer(markdown_renderer)
    return await renderer.render(options)
