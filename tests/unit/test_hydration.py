"""
Unit Tests for Client Reproduction
==================================

Unit tests for reading page data back out of a document and re-rendering
the page in client mode.
"""

import re

import pytest

from tabi_pages.core.markers import Markdown
from tabi_pages.core.rendering import render_page
from tabi_pages.core.rendering.hydration import (
    PageDataError,
    compose_client_tree,
    parse_page_data,
    render_client_body,
)
from tabi_pages.core.tree import RenderMode, fragment, h, render_to_string
from tabi_pages.models.schemas import MarkdownConfig, PageType, RenderPageOptions

from tests.utils.data_generators import LayoutDataGenerator, PageDataGenerator

HYDRATION_ROOT_RE = re.compile(r'<div id="__tabi__">(.*)</div><script id="__TABI_DATA__"', re.DOTALL)


async def render_document(page, layouts, markdown_renderer, **kwargs) -> str:
    options = RenderPageOptions(
        page=page, layouts=layouts, client_bundle_path="/_app/index.js", route="/", **kwargs
    )
    return (await render_page(options, markdown_renderer)).html


def server_body(html: str) -> str:
    match = HYDRATION_ROOT_RE.search(html)
    assert match is not None, "Hydration root not found"
    return match.group(1)


class TestParsePageData:
    """Test reading page data from a document."""

    @pytest.mark.asyncio
    async def test_round_trip(self, markdown_page, markdown_renderer):
        """Test the decoded data matches what the server embedded."""
        html = await render_document(
            markdown_page,
            [],
            markdown_renderer,
            base_path="/docs",
            markdown_config=MarkdownConfig(wrapper_class_name="prose"),
        )

        data = parse_page_data(html)

        assert data.page_type == PageType.MARKDOWN
        assert data.route == "/"
        assert data.base_path == "/docs"
        assert data.markdown_class_name == "prose"
        assert data.frontmatter == {"title": "Hello"}
        assert data.markdown_cache == {"md-0": "<h1>Hi</h1>\n"}

    def test_missing_script(self):
        """Test a document without page data is rejected."""
        with pytest.raises(PageDataError, match="No __TABI_DATA__ script"):
            parse_page_data("<!DOCTYPE html><html><body></body></html>")

    def test_invalid_json(self):
        """Test malformed JSON is rejected."""
        html = '<script id="__TABI_DATA__" type="application/json">{not json</script>'
        with pytest.raises(PageDataError, match="Invalid page data"):
            parse_page_data(html)

    def test_invalid_payload(self):
        """Test a payload missing required fields is rejected."""
        html = '<script id="__TABI_DATA__" type="application/json">{"frontmatter":{}}</script>'
        with pytest.raises(PageDataError):
            parse_page_data(html)


class TestClientReproduction:
    """Test that the client render reproduces the server body."""

    @pytest.mark.asyncio
    async def test_markdown_page(self, markdown_page, root_layout, markdown_renderer):
        """Test a markdown page with head content reproduces the server body."""
        layouts = [root_layout, LayoutDataGenerator.generate_wrapping_layout("docs")]
        html = await render_document(markdown_page, layouts, markdown_renderer, base_path="/site")

        client = render_client_body(markdown_page, layouts, parse_page_data(html))

        assert client == server_body(html)
        assert "<h1>Hi</h1>" in client

    @pytest.mark.asyncio
    async def test_component_page_with_code(self, markdown_renderer):
        """Test highlighted code comes from the cache on the client."""
        page = PageDataGenerator.generate_blog_post_page()
        html = await render_document(page, [], markdown_renderer)

        client = render_client_body(page, [], parse_page_data(html))

        assert client == server_body(html)
        assert '<div class="highlight"' in client

    @pytest.mark.asyncio
    async def test_multiple_markdown_blocks(self, markdown_renderer):
        """Test several blocks map back to their own cache entries."""

        def Blocks(ctx):
            return fragment(
                h(Markdown, None, "# One"), h(Markdown, None, "# One"), h(Markdown, None, "*two*")
            )

        page = PageDataGenerator.generate_component_page(component=Blocks)
        html = await render_document(
            page, [], markdown_renderer, markdown_config=MarkdownConfig(wrapper_class_name="md")
        )

        data = parse_page_data(html)
        client = render_client_body(page, [], data)

        assert list(data.markdown_cache) == ["md-0", "md-1", "md-2"]
        assert client == server_body(html)

    def test_client_tree_skips_markdown_body(self, markdown_page):
        """Test the client tree reads markdown from the cache only."""
        page_data = parse_page_data(
            '<script id="__TABI_DATA__" type="application/json">'
            '{"frontmatter":{"title":"Hello"},"route":"/","pageType":"markdown",'
            '"markdownCache":{"md-0":"<p>cached</p>"},"basePath":""}</script>'
        )

        html = render_to_string(
            compose_client_tree(markdown_page, [], page_data)(), mode=RenderMode.CLIENT
        )

        assert html == '<div data-tabi-md="md-0"><p>cached</p></div>'
