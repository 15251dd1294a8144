"""Navigation bar handler: left links plus right-floated (usually icon) links"""

from pathlib import Path
from typing import Optional

from loguru import logger
from markdown_it.common.utils import escapeHtml
from pydantic import BaseModel, Field, model_validator

from mdsite.core.assets import load_asset
from mdsite.core.errors import AssetError
from mdsite.handlers.base import Handler, RenderScope, parse_handler_config


class NavItem(BaseModel):
    href:  str
    label: Optional[str] = None
    icon:  Optional[Path] = None      # content-root relative image

    @model_validator(mode="after")
    def _needs_text(self) -> "NavItem":
        if self.label is None and self.icon is None:
            raise ValueError("nav item needs a label or an icon")
        return self

    @property
    def text(self) -> str:
        return self.label if self.label is not None else str(self.icon)


class HeaderConfig(BaseModel):
    left:  list[NavItem] = Field(default_factory=list)
    right: list[NavItem] = Field(default_factory=list)


class HeaderHandler(Handler):
    name = "header"

    async def _item_body(self, item: NavItem, scope: RenderScope) -> str:
        if item.icon is None:
            return escapeHtml(item.text)
        try:
            return await load_asset(scope.site.content_root, item.icon)
        except AssetError as e:
            # decorative only: degrade to the label
            logger.warning("icon {} unavailable, using label: {}", e.path, e.cause)
            return escapeHtml(item.text)

    async def render(self, config: str, scope: RenderScope) -> str:
        nav = parse_handler_config(HeaderConfig, config, scope, self.name)
        lines = ['<nav class="navbar" role="navigation">', "<ul>"]
        for item in nav.left:
            body = await self._item_body(item, scope)
            lines.append(f'<li><a href="{escapeHtml(item.href)}">{body}</a></li>')
        for item in nav.right:
            body = await self._item_body(item, scope)
            lines.append(f'<li style="float:right"><a href="{escapeHtml(item.href)}">{body}</a></li>')
        lines += ["</ul>", "</nav>"]
        return "\n".join(lines) + "\n"
