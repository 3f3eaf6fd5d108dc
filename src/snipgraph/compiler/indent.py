"""
Indentation propagation for multi-line variable values.

When a variable follows a line break and whitespace in the template
(``"\n    $TM_SELECTED_TEXT"``), every continuation line of its value must be
indented to that column or the expanded text misaligns.
"""

from snipgraph.core.types import Lines
from snipgraph.graph.nodes import IndentSpec, IndentWrapNode, OutputNode

# Its value already carries the indentation of the place it was cut from, so
# the insertion point's indent is not added on top.
SELECTED_TEXT_VARIABLE = "TM_SELECTED_TEXT"


def captured_indent(last_text: Lines | None) -> str | None:
    """
    Return the whitespace a variable sits behind, if it starts a new line.

    Params:
        last_text: Lines of the directly preceding text sibling

    Returns:
        The whitespace-only last line, or None if there is no indent to capture
    """
    if not last_text or len(last_text) < 2:
        return None
    last_line = last_text[-1]
    if last_line and last_line.isspace():
        return last_line
    return None


def wrap_indent(node: OutputNode, name: str, last_text: Lines | None) -> OutputNode:
    """
    Wrap a variable's node so its continuation lines keep the captured indent.

    Params:
        node: Node built for the variable
        name: Variable name
        last_text: Lines of the directly preceding text sibling

    Returns:
        An ``IndentWrapNode`` around ``node``, or ``node`` unchanged
    """
    indent = captured_indent(last_text)
    if indent is None:
        return node
    return IndentWrapNode(
        child=node,
        indent=IndentSpec(indent, with_parent=name != SELECTED_TEXT_VARIABLE),
    )
