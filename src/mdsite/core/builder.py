"""Build orchestrator: discover, render and write every page, then aggregate"""

import asyncio
from collections import defaultdict
from pathlib import Path

from loguru import logger

from mdsite.config import SiteConfig
from mdsite.core.assets import read_base64
from mdsite.core.context import SiteContext, build_context
from mdsite.core.errors import BuildFailed, PathPrefixError, SiteError, TaskJoinError
from mdsite.core.models import BuildReport, BuildResult, PageMetadata, RenderedDocument
from mdsite.core.pipeline import render_document
from mdsite.core.template import PageFragments, compose
from mdsite.util.fs import discover_files, read_text, write_text


INDEX_PAGE = "index.html"


def output_path_for(path: Path, content_root: Path, output_root: Path) -> Path:
    """Mirror path under output_root with a .html extension."""
    try:
        relative = path.relative_to(content_root)
    except ValueError as e:
        raise PathPrefixError(path, content_root) from e
    return (output_root / relative).with_suffix(".html")


def find_missing_indices(results: list[BuildResult]) -> list[Path]:
    """Output directories with at least one page but no index.html, sorted."""
    parents: dict[Path, dict[str, PageMetadata]] = defaultdict(dict)
    for r in results:
        parents[r.output.parent][r.output.name] = r.metadata
    return sorted(parent for parent, children in parents.items() if INDEX_PAGE not in children)


class SiteBuilder:
    """Runs one site build on the current event loop.

    Every written page is a tracked task; `build` waits for all of them,
    including ones spawned by handlers while the build is running.
    """

    def __init__(self, site: SiteContext):
        self.site = site
        self.header_html = ""
        self._tasks: list[asyncio.Task] = []

    # --- single-document entry points ---

    async def render_document(self, path: Path, depth: int = 0) -> RenderedDocument:
        return await render_document(path, self.site, self, depth)

    def spawn(self, path: Path, depth: int = 0) -> asyncio.Task:
        task = asyncio.create_task(self._process(path, depth), name=str(path))
        self._tasks.append(task)
        return task

    async def process_document(self, path: Path, depth: int = 0) -> BuildResult:
        return await self.spawn(path, depth)

    async def _process(self, path: Path, depth: int) -> BuildResult:
        output = output_path_for(path, self.site.content_root, self.site.output_root)
        rendered = await self.render_document(path, depth)
        meta = rendered.metadata

        css, skeleton, favicon = await asyncio.gather(
            read_text(meta.style),
            read_text(meta.template),
            read_base64(self.site.content_root, meta.favicon),
        )
        page = compose(skeleton, PageFragments(
            stylesheet=css,
            body=rendered.html,
            header=self.header_html,
            favicon=favicon,
            title=meta.title,
            description=meta.description,
        ))
        await write_text(output, page)
        logger.info("{} -> {}", path, output)
        return BuildResult(source=path, output=output, metadata=meta)

    # --- phases ---

    async def _render_header(self) -> str:
        header = self.site.header_file
        if header is None:
            return ""
        rendered = await self.render_document(header)
        return rendered.html

    def _scan(self) -> list[Path]:
        header = self.site.header_file
        return [p for p in discover_files(self.site.content_root) if p != header]

    async def _discover(self) -> None:
        if self.site.config.mode == "scan":
            for path in await asyncio.to_thread(self._scan):
                self.spawn(path)
        else:
            self.spawn(self.site.base_file)

    async def _join(self) -> tuple[list[BuildResult], list[SiteError]]:
        results: list[BuildResult] = []
        errors: list[SiteError] = []
        joined = 0
        # handlers may spawn more tasks while earlier ones are awaited
        while joined < len(self._tasks):
            task = self._tasks[joined]
            joined += 1
            try:
                results.append(await task)
            except SiteError as e:
                # a parent awaiting a failed child re-raises the same error
                if not any(e is seen for seen in errors):
                    logger.error("{}", e)
                    errors.append(e)
            except Exception as e:
                if any(isinstance(seen, TaskJoinError) and seen.cause is e for seen in errors):
                    continue
                logger.error("task {} crashed: {!r}", task.get_name(), e)
                errors.append(TaskJoinError(task.get_name(), e))
        return results, errors

    async def build(self) -> BuildReport:
        self.header_html = await self._render_header()
        await self._discover()
        results, errors = await self._join()

        missing = find_missing_indices(results)
        for directory in missing:
            logger.warning("NEEDS INDEX {}", directory)
        if errors:
            raise BuildFailed(errors)
        return BuildReport(results=results, missing_indices=missing)


def build_site(config: SiteConfig, source: Path = Path("<config>")) -> BuildReport:
    """Build one site on a fresh event loop."""
    site = build_context(config, source)
    return asyncio.run(SiteBuilder(site).build())
