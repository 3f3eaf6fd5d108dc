"""
Core snipgraph components.

This package provides type aliases and line helpers shared by the syntax
model, the compiler, and the output graph.
"""

from snipgraph.core.text import concat_lines, join_lines, split_lines, to_lines
from snipgraph.core.types import (
    EnvValue,
    Lines,
    LineTransform,
    ValueFunc,
)

__all__ = [
    "Lines",
    "EnvValue",
    "LineTransform",
    "ValueFunc",
    "split_lines",
    "join_lines",
    "to_lines",
    "concat_lines",
]
