"""
Top-level conversion entry points.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from snipgraph.compiler.builders import convert
from snipgraph.compiler.context import CompilerConfig, ConversionContext
from snipgraph.core.types import ValueFunc
from snipgraph.environ import STANDARD_VARIABLES, Environment
from snipgraph.graph.nodes import OutputNode


def new_context(
    *,
    var_functions: Mapping[str, ValueFunc] | None = None,
    known_variables: Iterable[str] = (),
    env: Environment | None = None,
    config: CompilerConfig | None = None,
) -> ConversionContext:
    """
    Create a fresh conversion context.

    Params:
        var_functions: Custom resolvers for variables outside the environment
        known_variables: Names recognized as environment variables in addition
            to the standard set
        env: Environment whose registered variables are recognized as well
        config: Host policies, defaults when omitted

    Returns:
        Context for exactly one top-level conversion
    """
    variables = STANDARD_VARIABLES | frozenset(known_variables)
    if env is not None:
        variables |= env.variables
    return ConversionContext(
        config=config or CompilerConfig(),
        var_functions=dict(var_functions or {}),
        known_variables=variables,
    )


def to_node(
    ast: Any,
    context: ConversionContext | None = None,
    *,
    var_functions: Mapping[str, ValueFunc] | None = None,
    known_variables: Iterable[str] = (),
    env: Environment | None = None,
    config: CompilerConfig | None = None,
) -> Any:
    """
    Convert a snippet syntax tree into output nodes.

    A snippet root yields a list of nodes that can be handed to the host's
    template constructor; any other syntax node yields a single node. Values
    that are not syntax nodes are returned as they are.

    Params:
        ast: Syntax tree root, or an already realized output node
        context: Context to convert with; a fresh one is created when omitted
        var_functions: Custom variable resolvers for a fresh context
        known_variables: Extra environment variable names for a fresh context
        env: Environment whose registered variables a fresh context recognizes
        config: Host policies for a fresh context

    Returns:
        Output node, node list, or ``ast`` itself

    Raises:
        ValueError: If a context is given together with options for a fresh one
        UnknownSyntaxKindError: If the tree contains a syntax node kind without a builder
    """
    if context is None:
        context = new_context(
            var_functions=var_functions,
            known_variables=known_variables,
            env=env,
            config=config,
        )
    elif (
        var_functions is not None
        or known_variables
        or env is not None
        or config is not None
    ):
        raise ValueError("Pass either a context or options for a new context, not both")

    return convert(ast, context)


def compile_snippet(ast: Any, **options: Any) -> list[OutputNode]:
    """Convert a syntax tree and always return a list of output nodes."""
    result = to_node(ast, **options)
    if isinstance(result, list):
        return result
    return [result]
