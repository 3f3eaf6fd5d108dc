"""
Per-kind node builders.

Each builder turns one syntax node into output node(s) given the current
conversion context. ``convert`` dispatches on the syntax node class and
passes values that are not syntax nodes through unchanged, so callers can
mix pre-built output nodes into a tree.
"""

import logging
from collections.abc import Callable
from typing import Any

from snipgraph.compiler.context import ConversionContext
from snipgraph.compiler.flatten import classify_placeholder
from snipgraph.compiler.indent import wrap_indent
from snipgraph.compiler.sequence import to_nodes
from snipgraph.core.text import split_lines, to_lines
from snipgraph.core.types import Lines, LineTransform, ValueFunc
from snipgraph.exceptions import UnknownSyntaxKindError
from snipgraph.graph.nodes import (
    ChoiceNode,
    ComputedNode,
    OutputNode,
    SnippetGroupNode,
    TabstopNode,
    TextNode,
)
from snipgraph.graph.render import RenderScope
from snipgraph.syntax.nodes import (
    ChoiceAst,
    PlaceholderAst,
    SnippetAst,
    SyntaxNode,
    TabstopAst,
    TextAst,
    TransformSpec,
    VariableAst,
)

logger = logging.getLogger(__name__)

BuildResult = OutputNode | list[OutputNode]


def copy_func(transform: LineTransform) -> ValueFunc:
    """Value function of a mirror: the primary's lines through ``transform``."""

    def copy(args: list[Lines], scope: RenderScope) -> Lines:
        return transform(args[0])

    return copy


def variable_func(name: str, transform: LineTransform) -> ValueFunc:
    """Value function reading ``name`` from the environment at render time."""

    def resolve(args: list[Lines], scope: RenderScope) -> Lines:
        # Empty values keep one empty line so the field does not collapse
        return transform(to_lines(scope.env.get(name)))

    return resolve


def _mirror(
    position: int, transform_spec: TransformSpec | None, context: ConversionContext
) -> ComputedNode | None:
    primary = context.lookup(position)
    if primary is None:
        return None
    logger.debug("Position %d repeats, building mirror", position)
    return ComputedNode(
        fn=copy_func(context.transform_for(transform_spec)), dependencies=[primary]
    )


def build_snippet(ast: SnippetAst, context: ConversionContext) -> list[OutputNode]:
    return to_nodes(ast.children, context)


def build_text(ast: TextAst, context: ConversionContext) -> TextNode:
    lines = split_lines(ast.esc)
    context.last_text = lines
    return TextNode(lines)


def build_choice(ast: ChoiceAst, context: ConversionContext) -> ChoiceNode:
    return ChoiceNode(
        position=ast.position, choices=[split_lines(item) for item in ast.items]
    )


def build_tabstop(ast: TabstopAst, context: ConversionContext) -> OutputNode:
    mirror = _mirror(ast.position, ast.transform, context)
    if mirror is not None:
        return mirror

    node = TabstopNode(position=ast.position)
    context.register(ast.position, node)
    return node


def build_placeholder(ast: PlaceholderAst, context: ConversionContext) -> OutputNode:
    """
    Build a placeholder, a mirror of an earlier one, or a nested group.

    ``${1:text}`` becomes a tabstop with default text directly. Any other
    body is converted as a group and then either flattened or handed to the
    nested assembler.
    """
    mirror = _mirror(ast.position, ast.transform, context)
    if mirror is not None:
        return mirror

    if len(ast.children) == 1 and isinstance(ast.children[0], TextAst):
        node: OutputNode = TabstopNode(position=ast.position, default=ast.children[0].esc)
    else:
        group = SnippetGroupNode(children=to_nodes(ast.children, context))
        node = classify_placeholder(ast.position, group, context)

    context.register(ast.position, node)
    return node


def build_variable(ast: VariableAst, context: ConversionContext) -> OutputNode:
    """
    Build a variable from the environment, a custom resolver, or nothing.

    Unknown variables render as a single empty line rather than their source
    text.
    """
    if context.is_known_variable(ast.name):
        fn = variable_func(ast.name, context.transform_for(ast.transform))
    elif ast.name in context.var_functions:
        fn = context.var_functions[ast.name]
    else:
        logger.debug("Unknown variable '%s' renders empty", ast.name)
        return TextNode([""])

    return wrap_indent(ComputedNode(fn=fn), ast.name, context.last_text)


_BUILDERS: dict[type[SyntaxNode], Callable[[Any, ConversionContext], BuildResult]] = {
    SnippetAst: build_snippet,
    TextAst: build_text,
    ChoiceAst: build_choice,
    TabstopAst: build_tabstop,
    PlaceholderAst: build_placeholder,
    VariableAst: build_variable,
}


def convert(ast: Any, context: ConversionContext) -> Any:
    """
    Convert one syntax node, passing anything else through unchanged.

    Params:
        ast: Syntax node, or an already realized output node
        context: Conversion context of the current top-level call

    Returns:
        Output node or node list for syntax nodes, ``ast`` itself otherwise

    Raises:
        UnknownSyntaxKindError: If ``ast`` is a syntax node of a kind without a builder
    """
    if not isinstance(ast, SyntaxNode):
        return ast

    builder = _BUILDERS.get(type(ast))
    if builder is None:
        raise UnknownSyntaxKindError(ast.kind)
    return builder(ast, context)
