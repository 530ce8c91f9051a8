"""
Unit Tests for Tree Renderer
============================

Unit tests for node construction, render context and tree to HTML rendering.
"""

import pytest

from tabi_pages.core.tree import (
    ContextError,
    RenderContext,
    RenderMode,
    base_path_provider,
    fragment,
    frontmatter_provider,
    h,
    raw,
    render_to_string,
    use_base_path,
    use_frontmatter,
    use_markdown_cache,
    use_markdown_config,
)
from tabi_pages.core.tree.nodes import ComponentNode, Element
from tabi_pages.models.schemas import MarkdownConfig


class TestNodeFactory:
    """Test the h() factory."""

    def test_tag_builds_element(self):
        """Test string types build elements."""
        node = h("div", {"id": "x"}, "text")
        assert isinstance(node, Element)
        assert node.tag == "div"
        assert node.props == {"id": "x"}
        assert node.children == ("text",)

    def test_callable_builds_component_node(self):
        """Test callables build component nodes."""

        def Comp(ctx):
            return None

        node = h(Comp)
        assert isinstance(node, ComponentNode)
        assert node.component is Comp
        assert node.props == {}

    def test_unsupported_type_rejected(self):
        """Test non-string, non-callable types raise."""
        with pytest.raises(TypeError):
            h(42)


class TestRenderToString:
    """Test synchronous rendering."""

    def test_renders_nested_elements(self):
        """Test nested elements render in order."""
        html = render_to_string(h("div", None, h("h1", None, "Title"), h("p", None, "Body")))
        assert html == "<div><h1>Title</h1><p>Body</p></div>"

    def test_text_escaped_once(self):
        """Test text children are escaped exactly once."""
        html = render_to_string(h("p", None, "a < b & \"c\""))
        assert html == "<p>a &lt; b &amp; &quot;c&quot;</p>"

    def test_attributes_escaped(self):
        """Test attribute values are escaped."""
        html = render_to_string(h("a", {"href": '/x?a=1&b="2"'}, "link"))
        assert html == '<a href="/x?a=1&amp;b=&quot;2&quot;">link</a>'

    def test_boolean_and_missing_attributes(self):
        """Test True renders bare, None and False are omitted."""
        html = render_to_string(h("input", {"disabled": True, "value": None, "hidden": False}))
        assert html == "<input disabled/>"

    def test_attribute_aliases(self):
        """Test class_name and html_for map to HTML names."""
        html = render_to_string(h("label", {"class_name": "field", "html_for": "name"}, "Name"))
        assert html == '<label class="field" for="name">Name</label>'

    def test_void_elements_self_close(self):
        """Test void elements render without closing tags."""
        html = render_to_string(h("head", None, h("meta", {"charset": "UTF-8"}), h("br")))
        assert html == '<head><meta charset="UTF-8"/><br/></head>'

    def test_empty_children_render_nothing(self):
        """Test None and booleans render nothing, numbers render as text."""
        html = render_to_string(h("p", None, None, True, False, 3, 1.5))
        assert html == "<p>31.5</p>"

    def test_raw_html_not_escaped(self):
        """Test raw nodes and inner HTML bypass escaping."""
        assert render_to_string(raw("<b>bold</b>")) == "<b>bold</b>"
        html = render_to_string(h("div", {"dangerously_set_inner_html": "<i>x</i>"}))
        assert html == "<div><i>x</i></div>"

    def test_fragments_and_sequences(self):
        """Test fragments and lists render their children without wrappers."""
        html = render_to_string(fragment(h("a"), [h("b"), (h("c"),)]))
        assert html == "<a></a><b></b><c></c>"

    def test_component_receives_props_and_children(self):
        """Test components get the context, props and children."""

        def Card(ctx, title, children=None):
            return h("section", None, h("h2", None, title), children)

        html = render_to_string(h(Card, {"title": "Hello"}, h("p", None, "inside")))
        assert html == "<section><h2>Hello</h2><p>inside</p></section>"

    def test_multiple_children_passed_as_tuple(self):
        """Test several children reach the component as a tuple."""
        received = []

        def Collect(ctx, children=None):
            received.append(children)
            return children

        html = render_to_string(h(Collect, None, "a", "b"))
        assert received == [("a", "b")]
        assert html == "ab"

    def test_unrenderable_node_raises(self):
        """Test unknown node types raise."""
        with pytest.raises(TypeError):
            render_to_string(object())

    def test_component_errors_propagate(self):
        """Test exceptions raised in components reach the caller."""

        def Broken(ctx):
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            render_to_string(h("div", None, h(Broken)))


class TestRenderContext:
    """Test render context, providers and accessors."""

    def test_default_mode_is_server(self):
        """Test server mode is the default."""
        seen = []

        def Probe(ctx):
            seen.append(ctx.mode)
            return None

        render_to_string(h(Probe))
        render_to_string(h(Probe), mode=RenderMode.CLIENT)
        assert seen == [RenderMode.SERVER, RenderMode.CLIENT]

    def test_provider_scopes_value_to_descendants(self):
        """Test provided values are visible inside and not outside."""

        def ShowBase(ctx):
            return use_base_path(ctx) or "none"

        tree = fragment(base_path_provider("/docs", h(ShowBase)), h(ShowBase))
        assert render_to_string(tree) == "/docsnone"

    def test_frontmatter_passed_by_reference(self):
        """Test every consumer receives the same frontmatter object."""
        frontmatter = {"title": "Hello"}
        seen = []

        def Probe(ctx, children=None):
            seen.append(use_frontmatter(ctx))
            return children

        render_to_string(frontmatter_provider(frontmatter, h(Probe, None, h(Probe))))
        assert len(seen) == 2
        assert all(item is frontmatter for item in seen)

    def test_use_frontmatter_outside_provider_raises(self):
        """Test the accessor fails without a provider."""

        def Title(ctx):
            return use_frontmatter(ctx)["title"]

        with pytest.raises(ContextError, match="frontmatter provider"):
            render_to_string(h(Title))

    def test_accessor_defaults(self):
        """Test defaults of the optional accessors."""
        ctx = RenderContext()
        assert use_base_path(ctx) == ""
        assert use_markdown_config(ctx) == MarkdownConfig()
        assert use_markdown_cache(ctx) is None

    def test_identity_tokens_unique_and_restart_per_pass(self):
        """Test tokens are unique within a pass and deterministic across passes."""

        def Ids(ctx):
            return f"{ctx.use_id('md')},{ctx.use_id('md')},{ctx.use_id('x')};"

        assert render_to_string(h(Ids)) == "md-0,md-1,x-0;"
        assert render_to_string(fragment(h(Ids), h(Ids))) == "md-0,md-1,x-0;md-2,md-3,x-1;"

    def test_provide_shares_identity_allocator(self):
        """Test derived contexts continue the same token sequence."""
        ctx = RenderContext()
        child = ctx.provide("k", "v")
        assert ctx.use_id("md") == "md-0"
        assert child.use_id("md") == "md-1"
        assert child.lookup("k") == "v"
        assert not ctx.has("k")

    def test_lookup_missing_key(self):
        """Test lookup without default raises KeyError."""
        with pytest.raises(KeyError):
            RenderContext().lookup("missing")
