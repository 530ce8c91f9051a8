"""
Syntax Highlighter
==================

Process-wide, lazily constructed Pygments highlighter.

The first successful ``get()`` freezes the configuration: later
``configure()`` calls are ignored until ``reset()`` restores the defaults.
Construction is guarded by a lock so the instance is built at most once,
whether callers share one event loop or run on several threads.
"""

import threading
from typing import Any, Dict, Iterable, Optional, Tuple

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from tabi_pages.config.logging import get_logger

logger = get_logger(__name__)


DEFAULT_LANGUAGES: Tuple[str, ...] = (
    # Web
    "typescript",
    "javascript",
    "html",
    "css",
    "json",
    "markdown",
    # Shell
    "bash",
    "sh",
    "shell",
    "zsh",
    "fish",
    "powershell",
    # Systems
    "c",
    "cpp",
    "rust",
    "go",
    # JVM
    "java",
    "kotlin",
    "scala",
    # .NET
    "csharp",
    "fsharp",
    # Scripting
    "python",
    "ruby",
    "php",
    "perl",
    "lua",
    # Other
    "sql",
    "yaml",
    "toml",
    "dockerfile",
    "makefile",
)

DEFAULT_THEME = "github-dark"


class HighlighterError(Exception):
    """Exception raised when the highlighter cannot be built or used."""

    pass


class Highlighter:
    """Highlights code with a fixed theme and a fixed set of languages."""

    def __init__(self, theme: str, languages: Iterable[str]) -> None:
        self.theme = theme
        self.languages: Tuple[str, ...] = tuple(languages)

        try:
            style = get_style_by_name(theme)
        except ClassNotFound as e:
            raise HighlighterError(f"Unknown highlighting theme: {theme}") from e

        self._lexers: Dict[str, Any] = {}
        for name in self.languages:
            try:
                lexer = get_lexer_by_name(name)
            except ClassNotFound as e:
                raise HighlighterError(f"Unknown highlighting language: {name}") from e
            self._lexers[name] = lexer
            for alias in lexer.aliases:
                self._lexers.setdefault(alias, lexer)

        self._plain_lexer = TextLexer()
        self._formatter = HtmlFormatter(style=style, noclasses=True)

    def supports(self, lang: str) -> bool:
        """Whether ``lang`` (a name or alias) was loaded."""
        return lang in self._lexers

    def code_to_html(self, code: str, lang: str = "") -> str:
        """
        Highlight code as HTML with inline theme styles.

        Args:
            code: Source code
            lang: Configured language name or alias; empty for plain text

        Returns:
            Highlighted HTML block

        Raises:
            HighlighterError: If ``lang`` was not loaded
        """
        if not lang:
            lexer = self._plain_lexer
        elif lang in self._lexers:
            lexer = self._lexers[lang]
        else:
            raise HighlighterError(f"Language not loaded: {lang}")
        return highlight(code, lexer, self._formatter)


class HighlighterService:
    """Lock-guarded lazy cell holding the process-wide highlighter."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._instance: Optional[Highlighter] = None
        self._theme = DEFAULT_THEME
        self._languages: Tuple[str, ...] = DEFAULT_LANGUAGES
        self.logger: Any = logger.bind(component="highlighter")  # structlog.BoundLoggerBase

    @property
    def theme(self) -> str:
        return self._theme

    @property
    def languages(self) -> Tuple[str, ...]:
        return self._languages

    @property
    def is_initialized(self) -> bool:
        return self._instance is not None

    def configure(
        self, theme: Optional[str] = None, additional_langs: Optional[Iterable[str]] = None
    ) -> None:
        """
        Set the theme and languages used when the highlighter is built.

        Additional languages are merged into the defaults without duplicates.
        Has no effect once the highlighter exists.

        Args:
            theme: Pygments style name
            additional_langs: Languages loaded beyond the defaults
        """
        with self._lock:
            if self._instance is not None:
                self.logger.debug("Highlighter already initialized, configuration ignored")
                return
            if theme:
                self._theme = theme
            extra = list(additional_langs or [])
            if extra:
                self._languages = tuple(dict.fromkeys([*DEFAULT_LANGUAGES, *extra]))

    async def get(self) -> Highlighter:
        """
        Return the highlighter, building it on first use.

        Raises:
            HighlighterError: If the configured theme or a language is unknown.
                Nothing is cached on failure; the next call tries again.
        """
        if self._instance is None:
            with self._lock:
                if self._instance is None:
                    self._instance = Highlighter(self._theme, self._languages)
                    self.logger.info(
                        "Highlighter initialized",
                        theme=self._theme,
                        languages=len(self._languages),
                    )
        return self._instance

    def reset(self) -> None:
        """Drop the instance and restore the default configuration. Test seam."""
        with self._lock:
            self._instance = None
            self._theme = DEFAULT_THEME
            self._languages = DEFAULT_LANGUAGES


# Global highlighter service
_default_service = HighlighterService()


def get_highlighter_service() -> HighlighterService:
    """Get the process-wide highlighter service."""
    return _default_service


def configure_highlighter(
    theme: Optional[str] = None, additional_langs: Optional[Iterable[str]] = None
) -> None:
    """Configure the process-wide highlighter before first use."""
    _default_service.configure(theme=theme, additional_langs=additional_langs)


async def get_highlighter() -> Highlighter:
    """Get the process-wide highlighter, building it on first use."""
    return await _default_service.get()


def get_configured_theme() -> str:
    return _default_service.theme


def reset_highlighter() -> None:
    """Reset the process-wide highlighter. For tests only."""
    _default_service.reset()


def configure_highlighter_from_settings(settings: Any) -> None:
    """Feed theme and additional languages from application settings."""
    configure_highlighter(
        theme=settings.highlight_theme,
        additional_langs=settings.highlight_additional_langs,
    )
