"""
Rendering Module
===============

Page to HTML document rendering for delivery and client hydration.

Components:
- compose: Page and layout chain composition
- serialize: Page data serialization for hydration
- document: Document shell and head injection
- page_renderer: Full server-side rendering pipeline
- hydration: Client-side reproduction of deferred content
"""

from tabi_pages.core.rendering.document import DefaultDocument
from tabi_pages.core.rendering.page_renderer import (
    PageRenderer,
    RenderError,
    build_render_options,
    render_page,
)

__all__ = [
    "DefaultDocument",
    "PageRenderer",
    "RenderError",
    "build_render_options",
    "render_page",
]
