"""
Tree Nodes
==========

Node types for in-memory component trees and the ``h()`` factory used by
pages, layouts and document shells to build them.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class Element:
    """HTML element with attributes and children."""

    tag: str
    props: Dict[str, Any] = field(default_factory=dict)
    children: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class ComponentNode:
    """Deferred call of a component with its props."""

    component: Callable[..., Any]
    props: Dict[str, Any] = field(default_factory=dict)
    children: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class Fragment:
    """Children rendered without a wrapping element."""

    children: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class RawHTML:
    """Pre-rendered HTML inserted without escaping."""

    html: str


@dataclass(frozen=True)
class Provider:
    """Makes ``value`` available under ``key`` to every descendant."""

    key: str
    value: Any
    children: Tuple[Any, ...] = ()


Node = Union[Element, ComponentNode, Fragment, RawHTML, Provider]


def h(
    type_: Union[str, Callable[..., Any]], props: Optional[Dict[str, Any]] = None, *children: Any
) -> Node:
    """
    Build a tree node.

    Args:
        type_: Tag name for an element, or a component callable
        props: Attributes for elements, keyword props for components
        *children: Child nodes, strings, numbers or nested sequences

    Returns:
        ``Element`` for tag names, ``ComponentNode`` for callables
    """
    props = dict(props or {})
    if isinstance(type_, str):
        return Element(tag=type_, props=props, children=tuple(children))
    if callable(type_):
        return ComponentNode(component=type_, props=props, children=tuple(children))
    raise TypeError(f"Unsupported node type: {type_!r}")


def fragment(*children: Any) -> Fragment:
    """Group children without a wrapping element."""
    return Fragment(children=tuple(children))


def raw(html: str) -> RawHTML:
    """Insert pre-rendered HTML verbatim."""
    return RawHTML(html=html)
