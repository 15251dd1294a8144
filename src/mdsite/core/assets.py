"""Load binary assets and inline them as base64 payloads or data-URI images"""

import asyncio
import base64
import mimetypes
from pathlib import Path

from mdsite.core.errors import AssetError


FALLBACK_MEDIA_TYPE = "application/octet-stream"


async def _read_bytes(path: Path) -> bytes:
    try:
        return await asyncio.to_thread(path.read_bytes)
    except OSError as e:
        raise AssetError(path, e) from e


def media_type(path: Path) -> str:
    """Guess a media type from the file extension."""
    guessed, _ = mimetypes.guess_type(path.name)
    return guessed or FALLBACK_MEDIA_TYPE


async def read_base64(root: Path, path: Path) -> str:
    """Read root/path and return its bytes base64-encoded as text."""
    data = await _read_bytes(root / path)
    return base64.b64encode(data).decode("ascii")


async def load_asset(root: Path, path: Path) -> str:
    """Read root/path and wrap it in a self-contained <img> element."""
    full = root / path
    data = await _read_bytes(full)
    payload = base64.b64encode(data).decode("ascii")
    return f'<img src="data:{media_type(full)};base64,{payload}" />'
