"""Inline another document's rendered body"""

from pathlib import Path

from pydantic import BaseModel

from mdsite.handlers.base import Handler, RenderScope, parse_handler_config


class IncludeConfig(BaseModel):
    path: Path


class IncludeHandler(Handler):
    """Re-renders the target on every inclusion; metadata is discarded."""
    name = "include"

    async def render(self, config: str, scope: RenderScope) -> str:
        target = parse_handler_config(IncludeConfig, config, scope, self.name)
        rendered = await scope.render(scope.resolve(target.path))
        return rendered.html
