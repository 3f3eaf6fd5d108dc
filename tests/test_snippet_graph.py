"""
End-to-end tests converting realistic snippets and rendering them.
"""

from snipgraph import CompilerConfig, Environment, RenderScope, compile_snippet, render_text
from snipgraph.graph.nodes import ChoiceNode, DynamicNode, SnippetGroupNode, TabstopNode
from snipgraph.syntax.nodes import (
    ChoiceAst,
    PlaceholderAst,
    SnippetAst,
    TabstopAst,
    TextAst,
    TransformSpec,
    VariableAst,
)

# def ${1:name}(${2:args}):
#     $TM_SELECTED_TEXT
#     return ${1/(.*)/${1:/upcase}/}$0
FUNCTION_SNIPPET = SnippetAst(
    children=[
        TextAst(esc="def "),
        PlaceholderAst(position=1, children=[TextAst(esc="name")]),
        TextAst(esc="("),
        PlaceholderAst(position=2, children=[TextAst(esc="args")]),
        TextAst(esc="):\n    "),
        VariableAst(name="TM_SELECTED_TEXT"),
        TextAst(esc="\n    return "),
        TabstopAst(
            position=1, transform=TransformSpec(pattern="(.*)", format="${1:/upcase}")
        ),
        TabstopAst(position=0),
    ]
)


class TestFunctionSnippet:
    """Test a snippet combining placeholders, a variable and a mirror."""

    def test_initial_render(self):
        """Test defaults, indented selection and the transformed mirror."""
        nodes = compile_snippet(FUNCTION_SNIPPET)
        scope = RenderScope(env=Environment({"TM_SELECTED_TEXT": ["x = 1", "y = 2"]}), indent="  ")

        assert render_text(nodes, scope) == "def name(args):\n    x = 1\n    y = 2\n    return NAME"

    def test_edit_updates_mirror(self):
        """Test editing the primary re-renders the mirror."""
        nodes = compile_snippet(FUNCTION_SNIPPET)
        scope = RenderScope(env=Environment({"TM_SELECTED_TEXT": "pass"}))

        nodes[1].set_text("main")

        assert render_text(nodes, scope) == "def main(args):\n    pass\n    return MAIN"

    def test_positions(self):
        """Test tab positions of the primary fields."""
        nodes = compile_snippet(FUNCTION_SNIPPET)
        fields = [node for node in nodes if isinstance(node, TabstopNode)]

        assert [node.position for node in fields] == [1, 2, 0]


class TestNestedSnippet:
    """Test nested placeholders, choices and sparse numbering."""

    def build(self, **options):
        # ${3:Dear ${5|Sir,Madam|}}, ${9:from $TM_FILENAME}
        return compile_snippet(
            SnippetAst(
                children=[
                    PlaceholderAst(
                        position=3,
                        children=[
                            TextAst(esc="Dear "),
                            ChoiceAst(position=5, items=["Sir", "Madam"]),
                        ],
                    ),
                    TextAst(esc=", "),
                    PlaceholderAst(
                        position=9,
                        children=[TextAst(esc="from "), VariableAst(name="TM_FILENAME")],
                    ),
                ]
            ),
            **options,
        )

    def test_structure(self):
        """Test the live placeholder nests and the static one flattens."""
        nodes = self.build()

        assert isinstance(nodes[0], SnippetGroupNode)
        assert isinstance(nodes[2], DynamicNode)
        assert [nodes[0].position, nodes[2].position] == [1, 2]
        assert isinstance(nodes[0].children[1], ChoiceNode)
        assert nodes[0].children[1].position == 1

    def test_render_and_select(self):
        """Test rendering follows the active choice."""
        nodes = self.build()
        scope = RenderScope(env=Environment({"TM_FILENAME": "letter.txt"}))

        assert render_text(nodes, scope) == "Dear Sir, from letter.txt"

        nodes[0].children[1].select(1)

        assert render_text(nodes, scope) == "Dear Madam, from letter.txt"

    def test_custom_assembler(self):
        """Test a host assembler decides how the live body is embedded."""
        nodes = self.build(
            config=CompilerConfig(
                nested_assembler=lambda position, group: TabstopNode(position=position, default="?")
            )
        )
        scope = RenderScope(env=Environment({"TM_FILENAME": "x"}))

        assert render_text(nodes, scope) == "?, from x"
