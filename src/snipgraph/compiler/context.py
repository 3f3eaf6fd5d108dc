"""
Conversion context and compiler configuration.

A ``ConversionContext`` carries the mutable state of one top-level
conversion: the tabstop registry that turns repeated positions into mirrors,
the most recent literal text (for indent detection), and custom variable
resolvers. It is created fresh per conversion and must not be reused across
unrelated syntax trees.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from attrs import frozen

from snipgraph.core.types import Lines, LineTransform, ValueFunc
from snipgraph.environ import STANDARD_VARIABLES, is_valid_var
from snipgraph.graph.nodes import OutputNode, SnippetGroupNode
from snipgraph.syntax.nodes import TransformSpec
from snipgraph.transforms import identity, make_transform

logger = logging.getLogger(__name__)

NestedAssembler = Callable[[int, SnippetGroupNode], OutputNode]

TransformFactory = Callable[[TransformSpec], LineTransform]


def default_nested_assembler(position: int, group: SnippetGroupNode) -> OutputNode:
    """Embed an interactive placeholder body as a group at the placeholder's position."""
    group.position = position
    return group


@frozen
class CompilerConfig:
    """
    Host policies the compiler delegates to.

    Params:
        nested_assembler: Builds the node spliced in for an interactive
            placeholder from ``(position, group)``; its result is used verbatim
        transform_factory: Turns a transform description into a line function
    """

    nested_assembler: NestedAssembler = default_nested_assembler
    transform_factory: TransformFactory = make_transform


@dataclass
class ConversionContext:
    """
    Mutable state threaded through one conversion.

    Params:
        config: Host policies for nested placeholders and transforms
        var_functions: Custom resolvers for variable names outside the environment
        known_variables: Names resolved from the environment at render time
        tabstops: Primary node registered for each declared position
        last_text: Lines of the most recent literal text sibling, if any
    """

    config: CompilerConfig = field(default_factory=CompilerConfig)
    var_functions: dict[str, ValueFunc] = field(default_factory=dict)
    known_variables: frozenset[str] = STANDARD_VARIABLES
    tabstops: dict[int, OutputNode] = field(default_factory=dict)
    last_text: Lines | None = None

    def lookup(self, position: int) -> OutputNode | None:
        return self.tabstops.get(position)

    def register(self, position: int, node: OutputNode) -> OutputNode:
        """
        Register the primary node for a position.

        The first node registered for a position stays primary; later
        registrations are ignored. This happens when a placeholder's own
        body repeats its position (``${1:a $1}``), where the inner tabstop is
        built first.

        Params:
            position: Declared position from the syntax tree
            node: Candidate primary node

        Returns:
            The node that is primary for the position
        """
        existing = self.tabstops.setdefault(position, node)
        if existing is not node:
            logger.debug("Position %d already has a primary node, keeping the first", position)
        return existing

    def is_known_variable(self, name: str) -> bool:
        return is_valid_var(name, self.known_variables)

    def transform_for(self, spec: TransformSpec | None) -> LineTransform:
        if spec is None:
            return identity
        return self.config.transform_factory(spec)
