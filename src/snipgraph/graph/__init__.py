"""
Output node graph.

This package provides the node types the compiler produces for the host
runtime and the pull-on-read rendering helpers that evaluate them.
"""

from snipgraph.graph.nodes import (
    ChoiceNode,
    ComputedNode,
    DynamicNode,
    IndentSpec,
    IndentWrapNode,
    OutputNode,
    SnippetGroupNode,
    TabstopNode,
    TextNode,
)
from snipgraph.graph.render import (
    RenderScope,
    evaluate_static,
    render_nodes,
    render_text,
)

__all__ = [
    "OutputNode",
    "TextNode",
    "TabstopNode",
    "ChoiceNode",
    "ComputedNode",
    "DynamicNode",
    "SnippetGroupNode",
    "IndentSpec",
    "IndentWrapNode",
    "RenderScope",
    "evaluate_static",
    "render_nodes",
    "render_text",
]
