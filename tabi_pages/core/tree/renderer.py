"""
Tree Renderer
=============

Pure, synchronous component tree to HTML string conversion.
"""

from typing import Any, Dict, List, Optional

from tabi_pages.core.tree.context import RenderContext, RenderMode
from tabi_pages.core.tree.nodes import ComponentNode, Element, Fragment, Provider, RawHTML
from tabi_pages.utils.html import escape_html


VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

ATTRIBUTE_ALIASES = {
    "class_name": "class",
    "html_for": "for",
}

INNER_HTML_PROP = "dangerously_set_inner_html"


def render_to_string(
    node: Any, mode: RenderMode = RenderMode.SERVER, context: Optional[RenderContext] = None
) -> str:
    """
    Render a tree to an HTML string.

    Each call is one render pass: unless a context is passed in, a fresh
    context (and with it a fresh identity allocator) is created, so identity
    tokens restart at zero and repeated renders are byte-identical.

    Args:
        node: Root node, string, number or sequence of children
        mode: Render mode used when no context is given
        context: Context to render under

    Returns:
        Rendered HTML
    """
    ctx = context if context is not None else RenderContext(mode=mode)
    parts: List[str] = []
    _render_node(node, ctx, parts)
    return "".join(parts)


def _render_node(node: Any, ctx: RenderContext, out: List[str]) -> None:
    if node is None or isinstance(node, bool):
        return
    if isinstance(node, str):
        out.append(escape_html(node))
    elif isinstance(node, (int, float)):
        out.append(escape_html(str(node)))
    elif isinstance(node, RawHTML):
        out.append(node.html)
    elif isinstance(node, Element):
        _render_element(node, ctx, out)
    elif isinstance(node, ComponentNode):
        _render_component(node, ctx, out)
    elif isinstance(node, Provider):
        child_ctx = ctx.provide(node.key, node.value)
        for child in node.children:
            _render_node(child, child_ctx, out)
    elif isinstance(node, Fragment):
        for child in node.children:
            _render_node(child, ctx, out)
    elif isinstance(node, (list, tuple)):
        for child in node:
            _render_node(child, ctx, out)
    else:
        raise TypeError(f"Cannot render node of type {type(node).__name__}")


def _render_component(node: ComponentNode, ctx: RenderContext, out: List[str]) -> None:
    props = dict(node.props)
    if node.children:
        props["children"] = node.children[0] if len(node.children) == 1 else node.children
    result = node.component(ctx, **props)
    _render_node(result, ctx, out)


def _render_element(node: Element, ctx: RenderContext, out: List[str]) -> None:
    out.append(f"<{node.tag}{_build_attributes(node.props)}")
    if node.tag in VOID_ELEMENTS:
        out.append("/>")
        return
    out.append(">")

    inner_html = node.props.get(INNER_HTML_PROP)
    if inner_html is not None:
        out.append(inner_html)
    else:
        for child in node.children:
            _render_node(child, ctx, out)

    out.append(f"</{node.tag}>")


def _build_attributes(props: Dict[str, Any]) -> str:
    """Build HTML attributes string."""
    attr_pairs: List[str] = []
    for key, value in props.items():
        if key == INNER_HTML_PROP or value is None or value is False:
            continue
        name = ATTRIBUTE_ALIASES.get(key, key)
        if value is True:
            attr_pairs.append(name)
        else:
            attr_pairs.append(f'{name}="{escape_html(str(value))}"')

    return " " + " ".join(attr_pairs) if attr_pairs else ""
