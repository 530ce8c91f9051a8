"""
Markdown Module
===============

Deferred markdown rendering with syntax highlighting.

Components:
- highlighter: Process-wide lazily constructed Pygments highlighter
- renderer: markdown-it-py rendering with highlighted code fences
- extractor: Deferred-markdown marker replacement and hydration cache
"""

from tabi_pages.core.markdown.extractor import ProcessedMarkdown, process_markdown_markers
from tabi_pages.core.markdown.highlighter import (
    DEFAULT_LANGUAGES,
    DEFAULT_THEME,
    Highlighter,
    HighlighterError,
    HighlighterService,
    configure_highlighter,
    configure_highlighter_from_settings,
    get_configured_theme,
    get_highlighter,
    get_highlighter_service,
    reset_highlighter,
)
from tabi_pages.core.markdown.renderer import MarkdownRenderer, render_markdown

__all__ = [
    "DEFAULT_LANGUAGES",
    "DEFAULT_THEME",
    "Highlighter",
    "HighlighterError",
    "HighlighterService",
    "MarkdownRenderer",
    "ProcessedMarkdown",
    "configure_highlighter",
    "configure_highlighter_from_settings",
    "get_configured_theme",
    "get_highlighter",
    "get_highlighter_service",
    "process_markdown_markers",
    "render_markdown",
    "reset_highlighter",
]
