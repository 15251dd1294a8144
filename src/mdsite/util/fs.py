"""Markdown file discovery and async file helpers"""

import asyncio
from pathlib import Path

from mdsite.core.errors import ResourceError


MD_EXTENSIONS = {".md"}


def is_markdown(path: Path) -> bool:
    return path.suffix.lower() in MD_EXTENSIONS


def discover_files(root: Path) -> list[Path]:
    """Return sorted markdown files at or below root."""
    return sorted(p for p in root.rglob("*") if p.is_file() and is_markdown(p))


def list_markdown_children(directory: Path) -> list[Path]:
    """Return sorted markdown files directly inside directory."""
    return sorted(p for p in directory.iterdir() if p.is_file() and is_markdown(p))


async def read_text(path: Path) -> str:
    try:
        return await asyncio.to_thread(path.read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceError(path, e) from e


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


async def write_text(path: Path, text: str) -> None:
    """Write text to path, creating parent directories."""
    try:
        await asyncio.to_thread(_write, path, text)
    except OSError as e:
        raise ResourceError(path, e) from e
