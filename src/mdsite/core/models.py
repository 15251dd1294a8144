"""Data models shared by the event pipeline, handlers, and build orchestrator"""

from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


DEFAULT_FAVICON = Path("favicon.ico")


class PageMetadata(BaseModel):
    """Contents of a document's `templateinfo` block."""
    model_config = ConfigDict(frozen=True)

    style:       Path                      # content-root relative until rebased
    template:    Path
    favicon:     Path = DEFAULT_FAVICON
    time:        datetime
    title:       str
    description: str

    @field_validator("time", mode="before")
    @classmethod
    def _coerce_time(cls, value: Any) -> Any:
        """Accept bare YAML dates and ISO strings as well as datetimes."""
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime.combine(value, datetime.min.time())
        if isinstance(value, str):
            try:
                return datetime.fromisoformat(value)
            except ValueError:
                return value
        return value

    def rebased(self, root: Path) -> "PageMetadata":
        """Return a copy with style/template/favicon resolved against root."""
        return self.model_copy(update={
            "style": root / self.style,
            "template": root / self.template,
            "favicon": root / self.favicon,
        })


@dataclass(frozen=True)
class RenderedDocument:
    """Event pipeline output: body HTML plus extracted metadata."""
    path:     Path
    html:     str
    metadata: PageMetadata


@dataclass(frozen=True)
class BuildResult:
    """One written page."""
    source:   Path
    output:   Path
    metadata: PageMetadata


@dataclass
class BuildReport:
    """Aggregate of a finished build."""
    results:         list[BuildResult] = field(default_factory=list)
    missing_indices: list[Path] = field(default_factory=list)

    @property
    def pages(self) -> list[BuildResult]:
        """Results with one entry per output file; a page listed twice is rendered twice."""
        unique: dict[Path, BuildResult] = {}
        for r in self.results:
            unique.setdefault(r.output, r)
        return list(unique.values())
