"""Name -> Handler lookup, bound once when the site context is built"""

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from loguru import logger

from mdsite.core.errors import ConfigError, MissingHandler
from mdsite.handlers.base import Handler, RenderScope
from mdsite.handlers.header import HeaderHandler
from mdsite.handlers.include import IncludeHandler
from mdsite.handlers.index import IndexHandler


BUILTIN_HANDLERS: dict[str, type[Handler]] = {
    "header":  HeaderHandler,
    "include": IncludeHandler,
    "index":   IndexHandler,
}


class HandlerRegistry:
    """Read-only mapping of directive names to handlers."""

    def __init__(self, handlers: Mapping[str, Handler]):
        self._handlers = MappingProxyType(dict(handlers))

    def __contains__(self, name: str) -> bool:
        return name in self._handlers

    def names(self) -> list[str]:
        return sorted(self._handlers)

    def get(self, name: str) -> Handler | None:
        return self._handlers.get(name)

    async def dispatch(self, name: str, config: str, scope: RenderScope) -> str:
        """Render config with the handler registered under name."""
        handler = self._handlers.get(name)
        if handler is None:
            raise MissingHandler(scope.document, name)
        logger.debug("handler {} in {}", name, scope.document)
        return await handler.render(config, scope)


def build_registry(table: Mapping[str, str], source: Path = Path("<config>")) -> HandlerRegistry:
    """Instantiate the built-in handler kind named for each directive."""
    handlers: dict[str, Handler] = {}
    for name, kind in table.items():
        cls = BUILTIN_HANDLERS.get(kind)
        if cls is None:
            raise ConfigError(source, f"handler {name!r}: unknown kind {kind!r} "
                                      f"(expected one of {sorted(BUILTIN_HANDLERS)})")
        handlers[name] = cls()
    return HandlerRegistry(handlers)
