"""Shared fixtures for handler unit tests"""

import pytest

from mdsite.core.builder import SiteBuilder
from mdsite.handlers.base import RenderScope


@pytest.fixture(name="make_scope")
def make_scope_fixture(site):
    """Scope for a handler invoked from the given document."""
    def _make(document, depth=0):
        return RenderScope(site=site, document=document, depth=depth, renderer=SiteBuilder(site))
    return _make
