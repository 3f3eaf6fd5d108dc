"""
Tests for the top-level conversion entry points.
"""

import pytest

from snipgraph.compiler.context import CompilerConfig, ConversionContext
from snipgraph.compiler.entry import compile_snippet, new_context, to_node
from snipgraph.environ import STANDARD_VARIABLES, Environment
from snipgraph.graph.nodes import TabstopNode, TextNode
from snipgraph.graph.render import RenderScope
from snipgraph.syntax.nodes import SnippetAst, TabstopAst, TextAst, VariableAst


class TestNewContext:
    """Test creation of fresh conversion contexts."""

    def test_defaults(self):
        """Test a new context starts empty with standard variables."""
        context = new_context()

        assert isinstance(context, ConversionContext)
        assert context.tabstops == {}
        assert context.last_text is None
        assert context.var_functions == {}
        assert context.known_variables == STANDARD_VARIABLES

    def test_extra_known_variables(self):
        """Test extra names extend the standard set."""
        context = new_context(known_variables=["NAME"])

        assert context.is_known_variable("NAME")
        assert context.is_known_variable("TM_FILENAME")

    def test_resolvers_copied(self):
        """Test the caller's resolver mapping is not shared."""
        resolvers = {"A": lambda args, s: ["a"]}
        context = new_context(var_functions=resolvers)
        resolvers["B"] = lambda args, s: ["b"]

        assert set(context.var_functions) == {"A"}

    def test_environment_seeds_known_variables(self):
        """Test variables registered on an environment are recognized."""
        env = Environment({"NAME": "World"})
        env.register_variable("PROJECT")

        context = new_context(env=env)

        assert context.is_known_variable("NAME")
        assert context.is_known_variable("PROJECT")
        assert context.is_known_variable("TM_FILENAME")


class TestToNode:
    """Test the main entry point."""

    def test_fresh_context_per_call(self, scope):
        """Test separate calls never share tabstop registries."""
        tree = SnippetAst(children=[TabstopAst(position=1)])

        first = to_node(tree)
        second = to_node(tree)

        assert isinstance(first[0], TabstopNode)
        assert isinstance(second[0], TabstopNode)
        assert first[0] is not second[0]

    def test_supplied_context_used(self):
        """Test a supplied context receives the registrations."""
        context = new_context()
        nodes = to_node(SnippetAst(children=[TabstopAst(position=2)]), context)

        assert context.tabstops[2] is nodes[0]

    def test_context_and_options_conflict(self):
        """Test passing a context together with fresh-context options fails."""
        with pytest.raises(ValueError):
            to_node(TextAst(esc="a"), new_context(), config=CompilerConfig())

    def test_context_and_environment_conflict(self):
        """Test an environment cannot be combined with a supplied context."""
        with pytest.raises(ValueError):
            to_node(TextAst(esc="a"), new_context(), env=Environment())

    def test_environment_variable_resolved(self):
        """Test a variable known only through the environment reads its value."""
        env = Environment({"NAME": "World"})

        node = to_node(VariableAst(name="NAME"), env=env)

        assert node.render(RenderScope(env=env)) == ["World"]

    def test_unregistered_variable_without_environment(self, scope):
        """Test the same name is unknown when no environment seeds the conversion."""
        node = to_node(VariableAst(name="NAME"))

        assert isinstance(node, TextNode)

    def test_non_syntax_values_pass_through(self):
        """Test values that are not syntax nodes are returned as they are."""
        nodes = [TextNode(["a"])]

        assert to_node(nodes) is nodes
        assert to_node("plain") == "plain"


class TestCompileSnippet:
    """Test the list-returning wrapper."""

    def test_snippet_list(self):
        """Test a snippet root returns its node list."""
        nodes = compile_snippet(SnippetAst(children=[TextAst(esc="a"), TabstopAst(position=1)]))

        assert len(nodes) == 2

    def test_single_node_wrapped(self):
        """Test a single node result is wrapped in a list."""
        nodes = compile_snippet(VariableAst(name="UNKNOWN"))

        assert len(nodes) == 1
        assert isinstance(nodes[0], TextNode)

    def test_options_forwarded(self, make_scope):
        """Test keyword options reach the fresh context."""
        nodes = compile_snippet(VariableAst(name="NAME"), known_variables={"NAME"})

        assert nodes[0].render(make_scope({"NAME": "World"})) == ["World"]
