"""
Snippet syntax tree compiler.

This package converts a parsed snippet syntax tree into the output node
graph: mirrors for repeated positions, static flattening of placeholder
bodies, position compaction, and indentation of multi-line variables.
"""

from snipgraph.compiler.builders import convert, copy_func, variable_func
from snipgraph.compiler.context import (
    CompilerConfig,
    ConversionContext,
    NestedAssembler,
    TransformFactory,
    default_nested_assembler,
)
from snipgraph.compiler.entry import compile_snippet, new_context, to_node
from snipgraph.compiler.flatten import classify_placeholder, flatten_static, is_interactive
from snipgraph.compiler.indent import SELECTED_TEXT_VARIABLE, captured_indent, wrap_indent
from snipgraph.compiler.sequence import compact_positions, to_nodes

__all__ = [
    # Entry points
    "to_node",
    "compile_snippet",
    "new_context",
    "convert",
    # Context and configuration
    "ConversionContext",
    "CompilerConfig",
    "NestedAssembler",
    "TransformFactory",
    "default_nested_assembler",
    # Sequences
    "to_nodes",
    "compact_positions",
    # Value functions
    "copy_func",
    "variable_func",
    # Classification
    "is_interactive",
    "flatten_static",
    "classify_placeholder",
    # Indentation
    "SELECTED_TEXT_VARIABLE",
    "captured_indent",
    "wrap_indent",
]
