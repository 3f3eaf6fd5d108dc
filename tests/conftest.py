"""
Shared test fixtures and utilities for the snipgraph test suite.
"""

import pytest

from snipgraph.environ import Environment
from snipgraph.graph.render import RenderScope


@pytest.fixture
def scope():
    """Render scope with an empty environment and no insertion-point indent."""
    return RenderScope(env=Environment())


@pytest.fixture
def make_scope():
    """Factory for render scopes.

    Usage:
        def test_something(make_scope):
            scope = make_scope({"TM_FILENAME": "a.py"}, indent="  ")
    """

    def _make(values=None, indent=""):
        return RenderScope(env=Environment(values or {}), indent=indent)

    return _make
