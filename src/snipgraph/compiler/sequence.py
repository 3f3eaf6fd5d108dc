"""
Sibling sequence conversion and position compaction.
"""

import logging
from collections.abc import Sequence

from snipgraph.compiler.context import ConversionContext
from snipgraph.graph.nodes import OutputNode
from snipgraph.syntax.nodes import SnippetAst, SyntaxNode, TextAst

logger = logging.getLogger(__name__)


def compact_positions(nodes: list[OutputNode]) -> list[OutputNode]:
    """
    Renumber declared positions into a contiguous, order-preserving run.

    Nodes with a position greater than zero are ranked by that position,
    ties kept in document order, and renumbered starting at 1. Nodes with
    position 0 or no position are left alone.

    Params:
        nodes: Sibling nodes in document order, modified in place

    Returns:
        The same list
    """
    numbered: list[OutputNode] = []
    seen: set[int] = set()
    for node in nodes:
        position = getattr(node, "position", None)
        if position and position > 0 and id(node) not in seen:
            seen.add(id(node))
            numbered.append(node)

    numbered.sort(key=lambda node: node.position)
    for rank, node in enumerate(numbered, start=1):
        if node.position != rank:
            logger.debug("Renumbering position %d to %d", node.position, rank)
            node.position = rank
    return nodes


def to_nodes(
    children: Sequence[SyntaxNode | OutputNode], context: ConversionContext
) -> list[OutputNode]:
    """
    Convert sibling syntax nodes with one shared context, then compact positions.

    Nested snippet children contribute their node lists flat. Only the node
    directly following a text node in that flat order sees its lines in
    ``last_text``; a nested snippet ending in text hands it on to the next
    sibling.

    Params:
        children: Sibling syntax nodes in document order
        context: Conversion context of the current top-level call

    Returns:
        Output nodes in document order with compacted positions
    """
    from snipgraph.compiler.builders import convert

    nodes: list[OutputNode] = []
    context.last_text = None
    for child in children:
        result = convert(child, context)
        if isinstance(result, list):
            nodes.extend(result)
        else:
            nodes.append(result)
        if not isinstance(child, (TextAst, SnippetAst)):
            context.last_text = None

    return compact_positions(nodes)
