"""
Test Configuration
==================

Pytest configuration with fixtures shared by all test modules.
Provides testing settings, highlighter isolation and sample pages.
"""

from typing import Generator

import pytest
from pydantic_settings import SettingsConfigDict

# Import application modules
import tabi_pages.config.settings as settings_module
from tabi_pages.config.settings import Settings
from tabi_pages.core.markdown.highlighter import HighlighterService, reset_highlighter
from tabi_pages.core.markdown.renderer import MarkdownRenderer
from tabi_pages.models.schemas import Layout, Page

from tests.utils.data_generators import LayoutDataGenerator, PageDataGenerator


# Test settings override
class TestSettings(Settings):
    """Test-specific settings."""

    environment: str = "testing"
    debug: bool = True
    log_level: str = "DEBUG"

    model_config = SettingsConfigDict(env_file=".env.test", env_prefix="TABI_")


@pytest.fixture(scope="session")
def test_settings() -> TestSettings:
    """Test settings fixture."""
    return TestSettings()


@pytest.fixture(scope="session", autouse=True)
def override_settings(test_settings: TestSettings) -> Generator[TestSettings, None, None]:
    """Override application settings for testing."""
    previous = settings_module.settings
    settings_module.settings = test_settings
    yield test_settings
    settings_module.settings = previous


@pytest.fixture(autouse=True)
def clean_highlighter() -> Generator[None, None, None]:
    """Reset the process-wide highlighter around each test."""
    reset_highlighter()
    yield
    reset_highlighter()


@pytest.fixture
def highlighter_service() -> HighlighterService:
    """Private highlighter service with default configuration."""
    return HighlighterService()


@pytest.fixture
def markdown_renderer(highlighter_service: HighlighterService) -> MarkdownRenderer:
    """Markdown renderer bound to a private highlighter service."""
    return MarkdownRenderer(highlighter_service)


@pytest.fixture
def markdown_page() -> Page:
    """Markdown page with a heading."""
    return PageDataGenerator.generate_markdown_page()


@pytest.fixture
def component_page() -> Page:
    """Component page rendering an article."""
    return PageDataGenerator.generate_component_page()


@pytest.fixture
def root_layout() -> Layout:
    """Root layout using head, frontmatter and base path."""
    return LayoutDataGenerator.generate_root_layout()
