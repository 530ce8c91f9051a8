"""
Pydantic Models and Schemas
===========================

Core data models for pages, layouts, render options and the serialized
server-to-client page data contract.
"""

from typing import Optional, List, Dict, Any, Callable, Union
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, InstanceOf, model_validator


# Enums
class PageType(str, Enum):
    """Page type discriminator."""
    MARKDOWN = "markdown"
    COMPONENT = "component"


# Page Models
class Page(BaseModel):
    """
    Loaded page, immutable once built.

    ``content`` holds the raw markdown body for markdown pages and the page
    component callable for component pages. ``frontmatter`` is handed to every
    tree consumer by reference.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: PageType = Field(..., description="Page type")
    # Held by reference; never copied
    frontmatter: InstanceOf[dict] = Field(default_factory=dict, description="Page metadata")
    content: Union[str, Callable[..., Any]] = Field(..., description="Markdown body or component")
    source_path: str = Field(default="", description="Source file path")

    @model_validator(mode="after")
    def validate_content_matches_type(self) -> "Page":
        """Ensure markdown pages carry text and component pages carry a callable."""
        if self.type == PageType.MARKDOWN and not isinstance(self.content, str):
            raise ValueError("Markdown pages require string content")
        if self.type == PageType.COMPONENT and not callable(self.content):
            raise ValueError("Component pages require a callable component")
        return self

    @classmethod
    def markdown(
        cls, content: str, frontmatter: Optional[Dict[str, Any]] = None, source_path: str = ""
    ) -> "Page":
        """Build a markdown page."""
        return cls(
            type=PageType.MARKDOWN,
            frontmatter=frontmatter if frontmatter is not None else {},
            content=content,
            source_path=source_path,
        )

    @classmethod
    def component(
        cls,
        component: Callable[..., Any],
        frontmatter: Optional[Dict[str, Any]] = None,
        source_path: str = "",
    ) -> "Page":
        """Build a component page."""
        return cls(
            type=PageType.COMPONENT,
            frontmatter=frontmatter if frontmatter is not None else {},
            content=component,
            source_path=source_path,
        )


class Layout(BaseModel):
    """Loaded layout component."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    component: Callable[..., Any] = Field(..., description="Layout component")
    source_path: str = Field(default="", description="Source file path")
    directory: str = Field(default="", description="Directory this layout applies to")


class MarkdownConfig(BaseModel):
    """Markdown rendering configuration."""
    model_config = ConfigDict(frozen=True)

    wrapper_class_name: Optional[str] = Field(
        default=None, description="CSS class for markdown wrapper elements"
    )


# Wire Models
class SerializedPageData(BaseModel):
    """Serialized page data shipped to the client for hydration."""
    model_config = ConfigDict(populate_by_name=True)

    frontmatter: Dict[str, Any] = Field(default_factory=dict)
    route: str
    page_type: PageType = Field(..., alias="pageType")
    markdown_cache: Dict[str, str] = Field(default_factory=dict, alias="markdownCache")
    base_path: str = Field(default="", alias="basePath")
    markdown_class_name: Optional[str] = Field(default=None, alias="markdownClassName")


# Render Models
class RenderPageOptions(BaseModel):
    """Options for rendering a page."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    page: Page
    layouts: List[Layout] = Field(default_factory=list, description="Root to innermost")
    client_bundle_path: str = Field(..., description="Public URL of the page's client bundle")
    route: str = Field(..., description="Route path, e.g. /blog/post")
    document: Optional[Callable[..., Any]] = Field(
        default=None, description="Custom document shell component"
    )
    base_path: str = Field(default="", description="Base path prefix for the site")
    markdown_config: MarkdownConfig = Field(default_factory=MarkdownConfig)


class RenderPageResult(BaseModel):
    """Result of rendering a page."""
    html: str = Field(..., description="Complete HTML5 document with DOCTYPE")
