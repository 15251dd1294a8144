"""Syntax highlighting for fenced code via Pygments"""

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Optional

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_all_lexers, get_lexer_by_name, load_lexer_from_file
from pygments.styles import get_all_styles


def available_themes() -> list[str]:
    """Sorted names of every installed Pygments style."""
    return sorted(get_all_styles())


def _grammar_tokens() -> frozenset[str]:
    return frozenset(alias.lower() for _, aliases, _, _ in get_all_lexers() for alias in aliases)


def load_custom_lexers(directory: Path) -> dict[str, Lexer]:
    """Load the `CustomLexer` class of every *.py file in directory, keyed by alias.

    A lexer without aliases is registered under its file stem. Raises
    pygments.util.ClassNotFound when a file cannot be loaded.
    """
    lexers: dict[str, Lexer] = {}
    for path in sorted(directory.glob("*.py")):
        lexer = load_lexer_from_file(str(path), stripnl=False)
        for alias in lexer.aliases or [path.stem]:
            lexers[alias.lower()] = lexer
    return lexers


class Highlighter:
    """Grammar set + theme, loaded once and shared read-only."""

    def __init__(self, theme: str, extra_lexers: Optional[Mapping[str, Lexer]] = None):
        if theme not in set(get_all_styles()):
            raise ValueError(f"unknown syntax theme {theme!r}")
        self.theme = theme
        self._extra = MappingProxyType(dict(extra_lexers or {}))
        self.grammars = _grammar_tokens() | frozenset(self._extra)
        self._formatter = HtmlFormatter(style=theme, noclasses=True)

    def knows(self, lang: str) -> bool:
        return lang.lower() in self.grammars

    def highlight(self, code: str, lang: str) -> str:
        """Colorize code with inline styles for the grammar named by lang."""
        lexer = self._extra.get(lang.lower()) or get_lexer_by_name(lang.lower(), stripnl=False)
        return highlight(code, lexer, self._formatter)
