"""Page skeleton placeholder substitution"""

import re
from typing import Optional

from pydantic import BaseModel


MARKERS: dict[str, str] = {
    "stylesheet":  "<<<PUT THE STYLESHEET HERE>>>",
    "body":        "<<<PUT THE MAIN CONTENT HERE>>>",
    "header":      "<<<PUT THE HEADER HERE>>>",
    "favicon":     "<<<PUT THE FAVICON HERE>>>",
    "title":       "<<<PUT THE TITLE HERE>>>",
    "description": "<<<PUT THE DESCRIPTION HERE>>>",
}

_FIELD_BY_MARKER = {marker: name for name, marker in MARKERS.items()}
_MARKER_RE = re.compile("|".join(re.escape(m) for m in MARKERS.values()))


class PageFragments(BaseModel):
    """Rendered pieces of a page; None leaves the matching marker untouched."""
    stylesheet:  Optional[str] = None
    body:        Optional[str] = None
    header:      Optional[str] = None
    favicon:     Optional[str] = None
    title:       Optional[str] = None
    description: Optional[str] = None


def compose(skeleton: str, fragments: PageFragments) -> str:
    """Replace each marker in skeleton with its fragment in a single pass.

    Inserted fragments are not rescanned, so a body that happens to contain a
    marker string is emitted as-is.
    """
    def _sub(m: re.Match) -> str:
        value = getattr(fragments, _FIELD_BY_MARKER[m.group(0)])
        return m.group(0) if value is None else value

    return _MARKER_RE.sub(_sub, skeleton)
