"""
Rendering of output graphs.

Provides the render scope hosts pass to node value functions, helpers to
render whole node lists, and ``evaluate_static``, the side-effect-free
evaluation used to collapse non-interactive placeholders to plain text.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from snipgraph.core.text import concat_lines, join_lines
from snipgraph.core.types import EnvValue, Lines
from snipgraph.exceptions import InteractiveContentError
from snipgraph.graph.nodes import (
    ComputedNode,
    IndentWrapNode,
    OutputNode,
    SnippetGroupNode,
    TextNode,
)


@dataclass(frozen=True)
class RenderScope:
    """
    Values available to nodes while they render.

    Params:
        env: Environment snapshot of the live template instance
        indent: Indentation of the line the template is inserted on
    """

    env: Mapping[str, EnvValue] = field(default_factory=dict)
    indent: str = ""


def render_nodes(nodes: Sequence[OutputNode], scope: RenderScope) -> Lines:
    """Render sibling nodes and join them as they would appear in a buffer."""
    return concat_lines([node.render(scope) for node in nodes])


def render_text(nodes: Sequence[OutputNode] | OutputNode, scope: RenderScope) -> str:
    """
    Render a node or node list to a single string.

    Params:
        nodes: Output node or sibling node list
        scope: Render scope

    Returns:
        Rendered text with lines joined by newlines
    """
    if isinstance(nodes, OutputNode):
        return join_lines(nodes.render(scope))
    return join_lines(render_nodes(nodes, scope))


def evaluate_static(node: OutputNode, scope: RenderScope) -> Lines:
    """
    Evaluate a non-interactive node to its literal text.

    Only text, dependency-free computed nodes, groups and indent wrappers
    are accepted. Nothing in the graph is modified.

    Params:
        node: Root of the sub-graph to evaluate
        scope: Render scope providing the environment snapshot

    Returns:
        Resolved lines

    Raises:
        InteractiveContentError: If the sub-graph contains a node that can
            change while the template is being edited
    """
    if isinstance(node, TextNode):
        return list(node.lines)
    if isinstance(node, ComputedNode) and not node.dependencies:
        return node.render(scope)
    if isinstance(node, SnippetGroupNode):
        return concat_lines([evaluate_static(child, scope) for child in node.children])
    if isinstance(node, IndentWrapNode):
        return node.indent.apply(evaluate_static(node.child, scope), scope.indent)
    raise InteractiveContentError(type(node).__name__)
