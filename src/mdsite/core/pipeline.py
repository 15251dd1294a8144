"""Event pipeline: markdown document -> body HTML + page metadata"""

from pathlib import Path
from typing import TYPE_CHECKING, Optional

import yaml
from loguru import logger
from pydantic import ValidationError

from mdsite.core.errors import InclusionDepthExceeded, MetadataParseError, TemplateInfoMissing
from mdsite.core.events import Event, EventKind, parse_events, serialize_events
from mdsite.core.models import PageMetadata, RenderedDocument
from mdsite.handlers.base import DocumentRenderer, RenderScope
from mdsite.util.fs import read_text

if TYPE_CHECKING:
    from mdsite.core.context import SiteContext


METADATA_TOKEN = "templateinfo"
HANDLER_PREFIX = "handler:"


def is_directive(lang: Optional[str]) -> bool:
    """True for fence languages that carry configuration rather than code."""
    return lang is not None and (lang == METADATA_TOKEN or lang.startswith(HANDLER_PREFIX))


def parse_metadata(source: str, document: Path) -> PageMetadata:
    """Deserialize a templateinfo block body."""
    try:
        data = yaml.safe_load(source)
    except yaml.YAMLError as e:
        raise MetadataParseError(document, f"invalid templateinfo YAML: {e}") from e
    if not isinstance(data, dict):
        raise MetadataParseError(document, f"templateinfo must be a mapping, got {type(data).__name__}")
    try:
        return PageMetadata.model_validate(data)
    except ValidationError as e:
        raise MetadataParseError(document, f"invalid templateinfo: {e}") from e


async def transform_events(
    events: list[Event],
    site: "SiteContext",
    scope: RenderScope,
    ) -> tuple[list[Event], Optional[str]]:
    """Rewrite events in order; return (output events, buffered metadata source or None).

    Directive fences are dropped, their text routed to the metadata buffer or a
    handler; text in other known-grammar fences is highlighted; every text run
    gets glyph substitution.
    """
    out: list[Event] = []
    active: Optional[str] = None
    metadata: list[str] = []

    for event in events:
        if event.kind in (EventKind.START, EventKind.END):
            active = event.lang if event.kind is EventKind.START else None
            if is_directive(event.lang):
                continue
        elif event.kind is EventKind.TEXT:
            text = site.glyphs.substitute(event.text)
            if active == METADATA_TOKEN:
                metadata.append(text)
                continue
            if active is not None and active.startswith(HANDLER_PREFIX):
                name = active[len(HANDLER_PREFIX):]
                fragment = await site.handlers.dispatch(name, text, scope)
                event = Event(EventKind.HTML, text=fragment, inline=event.inline)
            elif active is not None and site.highlighter.knows(active):
                event = Event(EventKind.HTML, text=site.highlighter.highlight(text, active), inline=event.inline)
            else:
                event = Event(EventKind.TEXT, text=text, inline=event.inline)
        out.append(event)

    return out, ("".join(metadata) if metadata else None)


async def render_document(
    path: Path,
    site: "SiteContext",
    renderer: DocumentRenderer,
    depth: int = 0,
    ) -> RenderedDocument:
    """Read and render one document; metadata paths come back rebased onto the content root."""
    if depth > site.config.max_depth:
        raise InclusionDepthExceeded(path, depth)

    source = await read_text(path)
    logger.debug("rendering {} (depth {})", path, depth)

    scope = RenderScope(site=site, document=path, depth=depth, renderer=renderer)
    events, metadata_source = await transform_events(parse_events(site.markdown, source), site, scope)
    if metadata_source is None:
        raise TemplateInfoMissing(path)

    html = serialize_events(site.markdown, events)
    metadata = parse_metadata(metadata_source, path).rebased(site.content_root)
    return RenderedDocument(path=path, html=html, metadata=metadata)
