"""Root test configuration: on-disk site fixtures"""

from pathlib import Path
from typing import Callable

import pytest

from mdsite.config import SiteConfig
from mdsite.core.context import SiteContext, build_context


SKELETON = """\
<html><head>
<style><<<PUT THE STYLESHEET HERE>>></style>
<link rel="icon" href="data:image/x-icon;base64,<<<PUT THE FAVICON HERE>>>">
<title><<<PUT THE TITLE HERE>>></title>
<meta name="description" content="<<<PUT THE DESCRIPTION HERE>>>">
</head><body>
<<<PUT THE HEADER HERE>>>
<<<PUT THE MAIN CONTENT HERE>>>
</body></html>
"""

STYLE = "body { color: black; }"
FAVICON = b"\x00\x00\x01\x00fake-ico"


def templateinfo(title: str = "Hi", time: str = "2021-01-01", description: str = "A page") -> str:
    """A templateinfo fence pointing at the fixture style and skeleton."""
    return (
        "```templateinfo\n"
        "style: style.css\n"
        "template: template.html\n"
        f"time: {time}\n"
        f"title: {title}\n"
        f"description: {description}\n"
        "```\n"
    )


@pytest.fixture(name="content")
def content_fixture(tmp_path) -> Path:
    """Content root holding the shared style, skeleton and favicon."""
    root = (tmp_path / "content").resolve()
    root.mkdir()
    (root / "style.css").write_text(STYLE)
    (root / "template.html").write_text(SKELETON)
    (root / "favicon.ico").write_bytes(FAVICON)
    return root


@pytest.fixture(name="write_doc")
def write_doc_fixture(content) -> Callable[..., Path]:
    """Write a markdown document under the content root, with metadata unless meta=False."""
    def _write(rel: str, body: str = "", title: str = "Hi", time: str = "2021-01-01", meta: bool = True) -> Path:
        path = content / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text((templateinfo(title, time) + "\n" if meta else "") + body)
        return path
    return _write


@pytest.fixture(name="config")
def config_fixture(tmp_path, content) -> SiteConfig:
    return SiteConfig(content_path=content, output_path=tmp_path / "output")


@pytest.fixture(name="site")
def site_fixture(config) -> SiteContext:
    return build_context(config)
