"""
Output node graph produced by the snippet compiler.

These nodes are what the host runtime consumes. Rendering is pull-on-read:
every call to ``render`` recomputes the node's lines from its current
state and, for computed nodes, from the current lines of its dependencies.
Positions are mutable because position compaction renumbers them after a
sibling group has been built.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from attrs import frozen

from snipgraph.core.text import concat_lines, split_lines, to_lines
from snipgraph.core.types import Lines, ValueFunc

if TYPE_CHECKING:
    from snipgraph.graph.render import RenderScope


@dataclass(eq=False)
class OutputNode(ABC):
    """
    Base class for all output graph nodes.

    Nodes compare by identity: the same node object may be referenced as a
    dependency by any number of mirrors.
    """

    @abstractmethod
    def render(self, scope: "RenderScope") -> Lines:
        """Return the node's current text as a list of lines."""


@dataclass(eq=False)
class TextNode(OutputNode):
    """Static literal text."""

    lines: Lines = field(default_factory=lambda: [""])

    def render(self, scope: "RenderScope") -> Lines:
        return list(self.lines)


@dataclass(eq=False)
class TabstopNode(OutputNode):
    """
    User-editable insertion point.

    Params:
        position: Tab order position (0 for the implicit exit point)
        default: Pre-filled text, None for an empty tabstop
        text: Realized value after the user edited the field, None until then
    """

    position: int = 0
    default: str | None = None
    text: Lines | None = None

    def render(self, scope: "RenderScope") -> Lines:
        if self.text is not None:
            return list(self.text)
        return split_lines(self.default or "")

    def set_text(self, value: str | Lines) -> None:
        """Replace the realized value, as the host does when the user types."""
        self.text = to_lines(value)


@dataclass(eq=False)
class ChoiceNode(OutputNode):
    """
    Selection between literal alternatives, first alternative active by default.

    Params:
        position: Tab order position
        choices: One line list per alternative, in source order
        index: Index of the active alternative
    """

    position: int = 0
    choices: list[Lines] = field(default_factory=list)
    index: int = 0

    @property
    def selected(self) -> Lines:
        if not self.choices:
            return [""]
        return self.choices[self.index]

    def select(self, index: int) -> None:
        if not 0 <= index < len(self.choices):
            raise IndexError(
                f"Choice index {index} out of range for {len(self.choices)} alternatives"
            )
        self.index = index

    def render(self, scope: "RenderScope") -> Lines:
        return list(self.selected)


@dataclass(eq=False)
class ComputedNode(OutputNode):
    """
    Text derived at render time from its dependencies and the scope.

    Mirrors have exactly one dependency, the primary node of their
    position. Environment-backed variables have none.

    Params:
        fn: Value function ``(dependency_lines, scope) -> lines``
        dependencies: Nodes whose current lines are passed to ``fn``
    """

    fn: ValueFunc
    dependencies: list[OutputNode] = field(default_factory=list)

    def render(self, scope: "RenderScope") -> Lines:
        args = [dependency.render(scope) for dependency in self.dependencies]
        return to_lines(self.fn(args, scope))


@dataclass(eq=False)
class DynamicNode(OutputNode):
    """
    Node whose content is built by a function the first time it is rendered.

    Params:
        position: Tab order position handed to the built node
        rebuild: Function ``(this_node, scope) -> OutputNode``
        built: Node produced by ``rebuild``, None until first render
    """

    position: int = 0
    rebuild: Callable[["DynamicNode", "RenderScope"], OutputNode] | None = None
    built: OutputNode | None = None

    def realize(self, scope: "RenderScope") -> OutputNode:
        if self.built is None:
            if self.rebuild is None:
                raise ValueError("DynamicNode has no rebuild function")
            self.built = self.rebuild(self, scope)
        return self.built

    def render(self, scope: "RenderScope") -> Lines:
        return self.realize(scope).render(scope)


@dataclass(eq=False)
class SnippetGroupNode(OutputNode):
    """
    Ordered group of nodes, optionally embedded at a tab position.

    Params:
        children: Nodes in document order
        position: Position of the whole group when nested, None at top level
    """

    children: list[OutputNode] = field(default_factory=list)
    position: int | None = None

    def render(self, scope: "RenderScope") -> Lines:
        return concat_lines([child.render(scope) for child in self.children])


@frozen
class IndentSpec:
    """
    Indentation re-applied to continuation lines of a wrapped node.

    Params:
        indent: Whitespace captured from the template source
        with_parent: Prefix the insertion point's own indent before ``indent``
    """

    indent: str
    with_parent: bool = True

    def apply(self, lines: Lines, parent_indent: str = "") -> Lines:
        """Indent all lines except the first, which sits at the insertion point."""
        prefix = parent_indent + self.indent if self.with_parent else self.indent
        return lines[:1] + [prefix + line for line in lines[1:]]


@dataclass(eq=False)
class IndentWrapNode(OutputNode):
    """Indents every line but the first of the wrapped node's text."""

    child: OutputNode = field(default_factory=TextNode)
    indent: IndentSpec = field(default_factory=lambda: IndentSpec(""))

    def render(self, scope: "RenderScope") -> Lines:
        return self.indent.apply(self.child.render(scope), scope.indent)
