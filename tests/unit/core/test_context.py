"""Unit tests for core/context.py"""

import dataclasses

import pytest

from mdsite.config import SiteConfig
from mdsite.core.context import build_context
from mdsite.core.errors import ConfigError


def test_build_context_resolves_roots(config, content):
    site = build_context(config)
    assert site.content_root == content.resolve()
    assert site.base_file == content.resolve() / "index.md"
    assert site.header_file is None


def test_build_context_registers_default_handlers(site):
    assert site.handlers.names() == ["header", "include", "index"]


def test_build_context_custom_handler_names(config):
    site = build_context(config.model_copy(update={"handlers": {"nav": "header", "embed": "include"}}))
    assert site.handlers.names() == ["embed", "nav"]


def test_build_context_unknown_theme(config):
    with pytest.raises(ConfigError, match="no-such-theme"):
        build_context(config.model_copy(update={"syntax_theme": "no-such-theme"}))


def test_build_context_unknown_handler_kind(config):
    with pytest.raises(ConfigError, match="unknown kind"):
        build_context(config.model_copy(update={"handlers": {"x": "carousel"}}))


def test_build_context_unknown_preset(config):
    with pytest.raises(ConfigError, match="preset"):
        build_context(config.model_copy(update={"parser_config": "nonsense"}))


def test_site_context_is_immutable(site):
    with pytest.raises(dataclasses.FrozenInstanceError):
        site.glyphs = None


def test_header_file_under_content_root(tmp_path, content):
    site = build_context(SiteConfig(content_path=content, header_file="header.md"))
    assert site.header_file == content.resolve() / "header.md"


def test_build_context_loads_custom_syntaxes(config, tmp_path):
    syntaxes = tmp_path / "syntaxes"
    syntaxes.mkdir()
    (syntaxes / "toy.py").write_text(
        "from pygments.lexer import RegexLexer\n"
        "from pygments.token import Text\n\n"
        "class CustomLexer(RegexLexer):\n"
        "    aliases = ['toy']\n"
        "    tokens = {'root': [(r'.+\\n?', Text)]}\n"
    )
    site = build_context(config.model_copy(update={"syntaxes_path": syntaxes}))
    assert site.highlighter.knows("toy")


def test_build_context_broken_syntax_file(config, tmp_path):
    syntaxes = tmp_path / "syntaxes"
    syntaxes.mkdir()
    (syntaxes / "bad.py").write_text("def (:\n")
    with pytest.raises(ConfigError, match="cannot load syntax") as exc:
        build_context(config.model_copy(update={"syntaxes_path": syntaxes}))
    assert exc.value.path == syntaxes


def test_build_context_missing_syntaxes_dir(config, tmp_path):
    with pytest.raises(ConfigError, match="not a directory"):
        build_context(config.model_copy(update={"syntaxes_path": tmp_path / "absent"}))
