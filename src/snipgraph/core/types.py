"""
Core type definitions for snipgraph.

This module contains fundamental type aliases used throughout the compiler
and the output graph for type safety and consistency.
"""

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from snipgraph.graph.render import RenderScope

Lines = list[str]

EnvValue = str | Sequence[str]

LineTransform = Callable[[Lines], Lines]

# Value functions receive the rendered lines of each dependency and the scope
# they are rendered in. Returning a plain string is accepted and split.
ValueFunc = Callable[[list[Lines], "RenderScope"], "Lines | str"]
