"""Markdown-it token stream <-> flat structural event sequence"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml
from markdown_it.token import Token


CODE_OPEN = "code_region_open"
CODE_CLOSE = "code_region_close"


class EventKind(str, Enum):
    START = "start"     # code region opens
    END   = "end"       # code region closes
    TEXT  = "text"      # plain text run
    HTML  = "html"      # raw markup, emitted verbatim
    OTHER = "other"     # any other structural token, rendered by markdown-it


@dataclass(frozen=True)
class Event:
    kind:   EventKind
    text:   str = ""
    lang:   Optional[str] = None        # START/END only; None for unfenced or untagged code
    token:  Optional[Token] = None      # OTHER only
    inline: bool = False                # belongs to an inline run (paragraph, heading, cell)


def fence_language(info: str) -> Optional[str]:
    """First word of a fence info string, or None when empty."""
    words = info.strip().split(maxsplit=1)
    return words[0] if words else None


def _render_code_open(self, tokens, idx, options, env) -> str:
    lang = tokens[idx].info
    if lang:
        return f'<pre><code class="{options.langPrefix}{escapeHtml(lang)}">'
    return "<pre><code>"


def _render_code_close(self, tokens, idx, options, env) -> str:
    return "</code></pre>\n"


def make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance able to serialize code-region events."""
    md = MarkdownIt(preset, options_update={"linkify": False})
    md.add_render_rule(CODE_OPEN, _render_code_open)
    md.add_render_rule(CODE_CLOSE, _render_code_close)
    return md


def _code_events(tok: Token) -> list[Event]:
    lang = fence_language(tok.info) if tok.type == "fence" else None
    events = [Event(EventKind.START, lang=lang)]
    if tok.content:
        events.append(Event(EventKind.TEXT, text=tok.content))
    events.append(Event(EventKind.END, lang=lang))
    return events


def parse_events(md: MarkdownIt, source: str) -> list[Event]:
    """Parse markdown into an ordered event sequence.

    Code regions become START/TEXT/END, inline tokens are flattened into their
    children, and everything else passes through as OTHER.
    """
    events: list[Event] = []
    for tok in md.parse(source):
        if tok.type in ("fence", "code_block"):
            events.extend(_code_events(tok))
        elif tok.type == "inline":
            for child in tok.children or []:
                if child.type == "text":
                    events.append(Event(EventKind.TEXT, text=child.content, inline=True))
                else:
                    events.append(Event(EventKind.OTHER, token=child, inline=True))
        else:
            events.append(Event(EventKind.OTHER, token=tok))
    return events


def _to_token(event: Event) -> Token:
    if event.kind is EventKind.OTHER:
        return event.token
    if event.kind is EventKind.TEXT:
        return Token("text", "", 0, content=event.text)
    if event.kind is EventKind.HTML:
        return Token("html_inline" if event.inline else "html_block", "", 0, content=event.text)
    if event.kind is EventKind.START:
        return Token(CODE_OPEN, "code", 1, info=event.lang or "", block=True)
    return Token(CODE_CLOSE, "code", -1, block=True)


def serialize_events(md: MarkdownIt, events: list[Event]) -> str:
    """Render an event sequence back to HTML with md's renderer."""
    tokens: list[Token] = []
    run: list[Token] = []

    def _flush() -> None:
        if run:
            tokens.append(Token("inline", "", 0, children=list(run)))
            run.clear()

    for event in events:
        if event.inline:
            run.append(_to_token(event))
            continue
        _flush()
        tokens.append(_to_token(event))
    _flush()
    return md.renderer.render(tokens, md.options, {})
