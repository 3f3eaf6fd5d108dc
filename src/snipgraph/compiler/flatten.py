"""
Interactivity classification and static flattening of placeholder bodies.

A placeholder body that cannot change while the template is edited is
equivalent to one block of literal text. Such bodies are not kept as live
nested graphs: they are replaced by a dynamic node that evaluates the body
once, on first render, and becomes a plain pre-filled tabstop.
"""

import logging

from snipgraph.compiler.context import ConversionContext
from snipgraph.core.text import join_lines
from snipgraph.graph.nodes import (
    ComputedNode,
    DynamicNode,
    IndentWrapNode,
    OutputNode,
    SnippetGroupNode,
    TabstopNode,
    TextNode,
)
from snipgraph.graph.render import RenderScope, evaluate_static

logger = logging.getLogger(__name__)


def is_interactive(node: OutputNode) -> bool:
    """
    Check whether a node, or anything below it, can change during editing.

    Tabstops, choices and dynamic nodes are edited by the user. Computed
    nodes are interactive when they depend on another node (a mirror); those
    reading only the environment snapshot are static. Unknown node types
    passed in by the host are treated as interactive.

    Params:
        node: Root of the sub-graph to classify

    Returns:
        True if the sub-graph must stay live
    """
    if isinstance(node, TextNode):
        return False
    if isinstance(node, ComputedNode):
        return bool(node.dependencies)
    if isinstance(node, SnippetGroupNode):
        return any(is_interactive(child) for child in node.children)
    if isinstance(node, IndentWrapNode):
        return is_interactive(node.child)
    return True


def flatten_static(position: int, group: SnippetGroupNode) -> DynamicNode:
    """
    Replace a static placeholder body with a node that renders it once as text.

    Params:
        position: Declared position of the placeholder
        group: Non-interactive placeholder body

    Returns:
        Dynamic node yielding a tabstop pre-filled with the body's text
    """

    def rebuild(parent: DynamicNode, scope: RenderScope) -> TabstopNode:
        text = join_lines(evaluate_static(group, scope))
        return TabstopNode(position=parent.position, default=text)

    return DynamicNode(position=position, rebuild=rebuild)


def classify_placeholder(
    position: int, group: SnippetGroupNode, context: ConversionContext
) -> OutputNode:
    """
    Choose the node a multi-part placeholder body becomes.

    Params:
        position: Declared position of the placeholder
        group: Converted placeholder body
        context: Conversion context providing the nested assembler

    Returns:
        A flattening dynamic node for static bodies, otherwise whatever the
        configured nested assembler returns
    """
    if not is_interactive(group):
        logger.debug("Flattening static placeholder at position %d", position)
        return flatten_static(position, group)
    return context.config.nested_assembler(position, group)
