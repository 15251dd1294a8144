"""Unit tests for core/events.py"""

from markdown_it.token import Token

from mdsite.core.events import Event, EventKind, fence_language, parse_events, serialize_events


def _kinds(events):
    return [e.kind for e in events]


def test_fence_language_first_word():
    assert fence_language("python linenums") == "python"
    assert fence_language("  handler:index ") == "handler:index"
    assert fence_language("") is None


def test_parse_events_fence_becomes_start_text_end(md):
    """A fenced block yields START(lang), TEXT(body), END(lang)."""
    events = parse_events(md, "```rust\nfn main() {}\n```\n")
    assert _kinds(events) == [EventKind.START, EventKind.TEXT, EventKind.END]
    assert events[0].lang == "rust"
    assert events[1].text == "fn main() {}\n"
    assert events[2].lang == "rust"


def test_parse_events_empty_fence_has_no_text(md):
    events = parse_events(md, "```templateinfo\n```\n")
    assert _kinds(events) == [EventKind.START, EventKind.END]


def test_parse_events_indented_code_has_no_language(md):
    events = parse_events(md, "    x = 1\n")
    assert events[0].kind is EventKind.START
    assert events[0].lang is None


def test_parse_events_inline_text_is_flattened(md):
    """Paragraph text runs become inline TEXT events between structural events."""
    events = parse_events(md, "Hello *there*\n")
    assert events[0].kind is EventKind.OTHER and events[0].token.type == "paragraph_open"
    texts = [e.text for e in events if e.kind is EventKind.TEXT]
    assert texts == ["Hello ", "there"]
    assert all(e.inline for e in events if e.kind is EventKind.TEXT)
    assert events[-1].token.type == "paragraph_close"


def test_parse_events_keeps_glyph_alias_in_one_run(md):
    events = parse_events(md, "I :heart: markdown\n")
    texts = [e.text for e in events if e.kind is EventKind.TEXT]
    assert texts == ["I :heart: markdown"]


def test_serialize_matches_markdown_it_render(md, sample_md):
    """Unmodified events serialize to exactly what markdown-it renders."""
    assert serialize_events(md, parse_events(md, sample_md)) == md.render(sample_md)


def test_serialize_html_events_are_verbatim(md):
    events = [
        Event(EventKind.HTML, text="<div>raw & unescaped</div>\n"),
        Event(EventKind.OTHER, token=Token("paragraph_open", "p", 1, block=True)),
        Event(EventKind.HTML, text="<b>x</b>", inline=True),
        Event(EventKind.TEXT, text=" & y", inline=True),
        Event(EventKind.OTHER, token=Token("paragraph_close", "p", -1, block=True)),
    ]
    assert serialize_events(md, events) == "<div>raw & unescaped</div>\n<p><b>x</b> &amp; y</p>\n"


def test_serialize_code_region_without_language(md):
    events = [
        Event(EventKind.START),
        Event(EventKind.TEXT, text="a < b\n"),
        Event(EventKind.END),
    ]
    assert serialize_events(md, events) == "<pre><code>a &lt; b\n</code></pre>\n"
