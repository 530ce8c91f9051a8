"""
Application Settings
===================

Rendering settings and environment configuration using Pydantic Settings.
Supports development, testing, and production environments.
"""

import json
from typing import Annotated, List, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Main application settings with environment variable support."""

    # Application Configuration
    app_name: str = Field(default="Tabirun Pages", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: str = Field(
        default="development", description="Environment: development, testing, production"
    )
    debug: bool = Field(default=True, description="Debug mode")

    # Site Configuration
    base_path: str = Field(default="", description="Base path prefix for the site")

    # Markdown Configuration
    highlight_theme: str = Field(default="github-dark", description="Syntax highlighting theme")
    highlight_additional_langs: Annotated[List[str], NoDecode] = Field(
        default=[], description="Languages loaded in addition to the defaults"
    )
    markdown_class_name: str = Field(
        default="", description="CSS class for markdown wrapper elements"
    )

    # Monitoring Configuration
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = {"development", "testing", "production"}
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("base_path")
    @classmethod
    def normalize_base_path(cls, v: str) -> str:
        """Normalize base path to a leading slash and no trailing slash."""
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = f"/{v}"
        return v

    @field_validator("highlight_additional_langs", mode="before")
    @classmethod
    def parse_additional_langs(cls, v: Union[str, List[str]]) -> List[str]:
        """Parse additional languages from string or list."""
        if isinstance(v, str):
            # Handle JSON-like string: ["zig"] or ["zig", "nim"]
            v = v.strip()
            if v.startswith("[") and v.endswith("]"):
                try:
                    return json.loads(v)
                except json.JSONDecodeError:
                    pass
            # Handle comma-separated string: "zig" or "zig,nim"
            return [lang.strip() for lang in v.split(",") if lang.strip()]
        return v

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, env_prefix="TABI_"
    )


# Global settings instance - will be initialized when needed
settings = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings
