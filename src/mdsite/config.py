"""Site configuration: settings schema and YAML config loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mdsite.core.errors import ConfigError


ENV_PREFIX = "MDSITE_"
DEFAULT_HANDLERS = {"header": "header", "include": "include", "index": "index"}


class SiteConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    syntax_theme:   str  = Field(default="default",   description="Pygments style used for code blocks")
    syntaxes_path:  Optional[Path] = Field(default=None, description="Directory of extra Pygments lexer files (*.py)")
    content_path:   Path = Field(default=Path("content"), description="Root of markdown sources and assets")
    output_path:    Path = Field(default=Path("output"),  description="Root of generated HTML")
    base_file:      Path = Field(default=Path("index.md"), description="Entry document, relative to content_path")
    header_file:    Optional[Path] = Field(default=None, description="Navigation document, relative to content_path")
    mode:           str  = Field(default="walk", pattern="^(walk|scan)$", description="walk from base_file or scan all files")
    handlers:       dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_HANDLERS),
                                           description="Directive name -> built-in handler kind")
    parser_config:  str  = Field(default="gfm-like", description="MarkdownIt parser preset name")
    glyph_language: str  = Field(default="alias", description="emoji alias language for :name: glyphs")
    max_depth:      int  = Field(default=16, ge=1, description="Max nested include/index render depth")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(path, f"cannot read config: {e}") from e
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(path, f"invalid YAML: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(path, f"expected a mapping, got {type(data).__name__}")
    return data


def load_config(path: Path, overrides: dict[str, Any] = None) -> SiteConfig:
    """Load SiteConfig from a YAML file, then MDSITE_<FIELD> env vars, then non-None overrides.

    Relative content/output/syntaxes paths are resolved against the config file's directory.
    """
    path = Path(path)
    data = _read_yaml(path)

    for name in SiteConfig.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        config = SiteConfig(**data)
    except ValidationError as e:
        raise ConfigError(path, str(e)) from e

    base = path.parent
    return config.model_copy(update={
        "content_path": base / config.content_path,
        "output_path": base / config.output_path,
        "syntaxes_path": None if config.syntaxes_path is None else base / config.syntaxes_path,
    })
