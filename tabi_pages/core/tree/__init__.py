"""
Component Tree
==============

In-memory component trees and their synchronous rendering to HTML.

Components:
- nodes: Node types and the h() factory
- context: Render mode, render context, providers and accessors
- renderer: Tree to HTML string conversion
"""

from tabi_pages.core.tree.context import (
    ContextError,
    RenderContext,
    RenderMode,
    base_path_provider,
    frontmatter_provider,
    markdown_cache_provider,
    markdown_config_provider,
    use_base_path,
    use_frontmatter,
    use_markdown_cache,
    use_markdown_config,
)
from tabi_pages.core.tree.nodes import (
    ComponentNode,
    Element,
    Fragment,
    Provider,
    RawHTML,
    fragment,
    h,
    raw,
)
from tabi_pages.core.tree.renderer import render_to_string

__all__ = [
    "ComponentNode",
    "ContextError",
    "Element",
    "Fragment",
    "Provider",
    "RawHTML",
    "RenderContext",
    "RenderMode",
    "base_path_provider",
    "fragment",
    "frontmatter_provider",
    "h",
    "markdown_cache_provider",
    "markdown_config_provider",
    "raw",
    "render_to_string",
    "use_base_path",
    "use_frontmatter",
    "use_markdown_cache",
    "use_markdown_config",
]
