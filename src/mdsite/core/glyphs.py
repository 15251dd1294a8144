"""Symbolic glyph substitution (`:heart:` -> Unicode) backed by the emoji package"""

import emoji


class GlyphTable:
    """Read-only alias table; safe to share between concurrent renders."""

    def __init__(self, language: str = "alias"):
        self._language = language

    @property
    def language(self) -> str:
        return self._language

    def substitute(self, text: str) -> str:
        """Replace every recognized `:name:` token in text with its glyph."""
        return emoji.emojize(text, language=self._language)
