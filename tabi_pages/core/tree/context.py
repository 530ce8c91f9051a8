"""
Render Context
==============

Explicit render context threaded through every component call.

The context carries the render mode, the values made available by provider
nodes (frontmatter, base path, markdown config, markdown cache) and the
identity allocator shared by one render pass.
"""

from enum import Enum
from typing import Any, Dict, Mapping, Optional

from tabi_pages.core.tree.nodes import Provider
from tabi_pages.models.schemas import MarkdownConfig


FRONTMATTER_KEY = "frontmatter"
BASE_PATH_KEY = "base_path"
MARKDOWN_CONFIG_KEY = "markdown_config"
MARKDOWN_CACHE_KEY = "markdown_cache"

_MISSING = object()


class RenderMode(str, Enum):
    """Which side of the wire a tree is rendered for."""
    SERVER = "server"
    CLIENT = "client"


class ContextError(Exception):
    """Exception raised when a context accessor is used outside its provider."""

    pass


class IdentityAllocator:
    """Hands out identity tokens that are unique within one render pass."""

    def __init__(self) -> None:
        self._counters: Dict[str, int] = {}

    def next(self, prefix: str) -> str:
        count = self._counters.get(prefix, 0)
        self._counters[prefix] = count + 1
        return f"{prefix}-{count}"


class RenderContext:
    """Immutable view of the values visible at one point of the tree."""

    def __init__(
        self,
        mode: RenderMode = RenderMode.SERVER,
        values: Optional[Mapping[str, Any]] = None,
        ids: Optional[IdentityAllocator] = None,
    ) -> None:
        self.mode = mode
        self._values: Dict[str, Any] = dict(values or {})
        self._ids = ids if ids is not None else IdentityAllocator()

    @property
    def is_server(self) -> bool:
        return self.mode == RenderMode.SERVER

    def provide(self, key: str, value: Any) -> "RenderContext":
        """Derive a child context with ``key`` bound to ``value``."""
        values = dict(self._values)
        values[key] = value
        return RenderContext(mode=self.mode, values=values, ids=self._ids)

    def has(self, key: str) -> bool:
        return key in self._values

    def lookup(self, key: str, default: Any = _MISSING) -> Any:
        """
        Look up a provided value.

        Raises:
            KeyError: If ``key`` was never provided and no default is given
        """
        if key in self._values:
            return self._values[key]
        if default is _MISSING:
            raise KeyError(key)
        return default

    def use_id(self, prefix: str = "id") -> str:
        """Allocate the next identity token of this render pass."""
        return self._ids.next(prefix)

    def fork(self, mode: Optional[RenderMode] = None) -> "RenderContext":
        """Context for a nested render pass sharing values but not identities."""
        return RenderContext(mode=mode or self.mode, values=self._values)


# Provider helpers

def frontmatter_provider(frontmatter: Dict[str, Any], *children: Any) -> Provider:
    """Provide page frontmatter, by reference, to descendants."""
    return Provider(key=FRONTMATTER_KEY, value=frontmatter, children=children)


def base_path_provider(base_path: str, *children: Any) -> Provider:
    return Provider(key=BASE_PATH_KEY, value=base_path, children=children)


def markdown_config_provider(config: MarkdownConfig, *children: Any) -> Provider:
    return Provider(key=MARKDOWN_CONFIG_KEY, value=config, children=children)


def markdown_cache_provider(cache: Mapping[str, str], *children: Any) -> Provider:
    """Provide the hydration cache consulted by client-mode markdown leaves."""
    return Provider(key=MARKDOWN_CACHE_KEY, value=dict(cache), children=children)


# Accessors

def use_frontmatter(ctx: RenderContext) -> Dict[str, Any]:
    """
    Access the frontmatter of the page being rendered.

    Raises:
        ContextError: If called outside of a frontmatter provider
    """
    if not ctx.has(FRONTMATTER_KEY):
        raise ContextError("use_frontmatter must be used within a frontmatter provider")
    return ctx.lookup(FRONTMATTER_KEY)


def use_base_path(ctx: RenderContext) -> str:
    return ctx.lookup(BASE_PATH_KEY, "")


def use_markdown_config(ctx: RenderContext) -> MarkdownConfig:
    return ctx.lookup(MARKDOWN_CONFIG_KEY, None) or MarkdownConfig()


def use_markdown_cache(ctx: RenderContext) -> Optional[Dict[str, str]]:
    """Markdown cache, or ``None`` when no cache provider is present (server side)."""
    return ctx.lookup(MARKDOWN_CACHE_KEY, None)
