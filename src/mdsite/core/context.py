"""Site context: shared read-only state built once before any rendering"""

from dataclasses import dataclass
from pathlib import Path

from loguru import logger
from markdown_it import MarkdownIt
from pygments.util import ClassNotFound

from mdsite.config import SiteConfig
from mdsite.core.errors import ConfigError
from mdsite.core.events import make_parser
from mdsite.core.glyphs import GlyphTable
from mdsite.core.highlight import Highlighter, available_themes, load_custom_lexers
from mdsite.handlers.registry import HandlerRegistry, build_registry


@dataclass(frozen=True)
class SiteContext:
    """Immutable after construction; shared by reference with every document task."""
    config:       SiteConfig
    content_root: Path
    output_root:  Path
    markdown:     MarkdownIt
    highlighter:  Highlighter
    glyphs:       GlyphTable
    handlers:     HandlerRegistry

    @property
    def base_file(self) -> Path:
        return self.content_root / self.config.base_file

    @property
    def header_file(self) -> Path | None:
        if self.config.header_file is None:
            return None
        return self.content_root / self.config.header_file


def build_context(config: SiteConfig, source: Path = Path("<config>")) -> SiteContext:
    """Load grammars, theme, glyph table and handlers for config."""
    extra_lexers = {}
    if config.syntaxes_path is not None:
        if not config.syntaxes_path.is_dir():
            raise ConfigError(config.syntaxes_path, "syntaxes_path is not a directory")
        try:
            extra_lexers = load_custom_lexers(config.syntaxes_path)
        except ClassNotFound as e:
            raise ConfigError(config.syntaxes_path, f"cannot load syntax: {e}") from e

    try:
        highlighter = Highlighter(config.syntax_theme, extra_lexers)
    except ValueError as e:
        raise ConfigError(source, f"{e}; available: {', '.join(available_themes())}") from e

    try:
        markdown = make_parser(config.parser_config)
    except KeyError as e:
        raise ConfigError(source, f"unknown parser preset {config.parser_config!r}") from e

    context = SiteContext(
        config=config,
        content_root=config.content_path.resolve(),
        output_root=config.output_path.resolve(),
        markdown=markdown,
        highlighter=highlighter,
        glyphs=GlyphTable(config.glyph_language),
        handlers=build_registry(config.handlers, source),
    )
    logger.debug("site context: content={} output={} theme={} handlers={}",
                 context.content_root, context.output_root, config.syntax_theme, context.handlers.names())
    return context
