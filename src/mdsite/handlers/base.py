"""Handler capability: render a fragment from directive configuration"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from mdsite.core.errors import HandlerConfigError
from mdsite.core.models import BuildResult, RenderedDocument

if TYPE_CHECKING:
    from mdsite.core.context import SiteContext


ConfigT = TypeVar("ConfigT", bound=BaseModel)


class DocumentRenderer(Protocol):
    """Orchestrator entry points reachable from handlers."""

    async def render_document(self, path: Path, depth: int = 0) -> RenderedDocument: ...

    async def process_document(self, path: Path, depth: int = 0) -> BuildResult: ...


@dataclass(frozen=True)
class RenderScope:
    """Everything a handler may read while rendering one directive block."""
    site:     "SiteContext"
    document: Path
    depth:    int
    renderer: DocumentRenderer

    def resolve(self, path: Path) -> Path:
        """Resolve a content-root relative path."""
        return self.site.content_root / path

    async def render(self, path: Path) -> RenderedDocument:
        return await self.renderer.render_document(path, self.depth + 1)

    async def process(self, path: Path) -> BuildResult:
        return await self.renderer.process_document(path, self.depth + 1)


class Handler(ABC):
    """A named, stateless fragment renderer."""

    name: str = ""

    @abstractmethod
    async def render(self, config: str, scope: RenderScope) -> str:
        """Return the markup fragment that replaces the directive block."""


def parse_handler_config(model: type[ConfigT], config: str, scope: RenderScope, handler: str) -> ConfigT:
    """Validate a YAML handler body against model."""
    try:
        data: Any = yaml.safe_load(config) or {}
    except yaml.YAMLError as e:
        raise HandlerConfigError(scope.document, f"{handler}: invalid YAML: {e}") from e
    if not isinstance(data, dict):
        raise HandlerConfigError(scope.document, f"{handler}: expected a mapping, got {type(data).__name__}")
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise HandlerConfigError(scope.document, f"{handler}: {e}") from e
