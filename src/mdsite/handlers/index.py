"""Directory listing handler: one summary entry per sibling document"""

import asyncio
import os
from pathlib import Path

from markdown_it.common.utils import escapeHtml
from pydantic import BaseModel

from mdsite.core.errors import ResourceError
from mdsite.core.models import BuildResult
from mdsite.handlers.base import Handler, RenderScope, parse_handler_config
from mdsite.util.fs import list_markdown_children


class IndexConfig(BaseModel):
    path:        Path = Path(".")
    title:       str = "Blogs"
    date_format: str = "%B %d, %Y"


class IndexHandler(Handler):
    """Builds every child page and lists its title and date.

    The document being rendered is left out of its own listing.
    """
    name = "index"

    async def _children(self, directory: Path, scope: RenderScope) -> list[Path]:
        try:
            children = await asyncio.to_thread(list_markdown_children, directory)
        except OSError as e:
            raise ResourceError(directory, e) from e
        current = scope.document.resolve()
        return [c for c in children if c.resolve() != current]

    def _entry(self, result: BuildResult, scope: RenderScope, date_format: str) -> str:
        href = Path(os.path.relpath(result.source, scope.document.parent)).with_suffix(".html").as_posix()
        meta = result.metadata
        return (
            f'<article class="post-title"><a href="{escapeHtml(href)}" class="post-link">'
            f'{escapeHtml(meta.title)}</a><div class="flex-break"></div>\n'
            f'<span class="post-date">{meta.time.strftime(date_format)}</span></article>'
        )

    async def render(self, config: str, scope: RenderScope) -> str:
        listing = parse_handler_config(IndexConfig, config, scope, self.name)
        children = await self._children(scope.resolve(listing.path), scope)
        results = await asyncio.gather(*(scope.process(c) for c in children))

        parts = [f'<div class="list-posts"><h1 class="list-title">{escapeHtml(listing.title)}</h1>']
        parts += [self._entry(r, scope, listing.date_format) for r in results]
        parts.append("</div>")
        return "\n".join(parts) + "\n"
