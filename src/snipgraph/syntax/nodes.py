"""
Snippet syntax tree model.

This module defines the read-only input shape the compiler consumes. The
tree is produced by an external snippet parser; every node is a frozen
pydantic model so conversion can never mutate its input.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, InstanceOf

from snipgraph.graph.nodes import OutputNode


class SyntaxNode(BaseModel):
    """
    Base class for all snippet syntax tree node kinds.

    Subclasses set a ``kind`` tag that names the grammar production they
    represent.
    """

    model_config = ConfigDict(frozen=True)

    kind: str


class TransformSpec(BaseModel):
    """
    Description of a regex transform attached to a tabstop or variable.

    The compiler never interprets these fields itself; it hands the description to
    the configured transform factory.

    Params:
        pattern: Regular expression matched against the resolved text
        format: Replacement format string
        options: Regex options (``g``, ``i``, ``m``, ``s``)
    """

    model_config = ConfigDict(frozen=True)

    pattern: str
    format: str = ""
    options: str = ""


class TextAst(SyntaxNode):
    """Literal text, already unescaped by the parser."""

    kind: Literal["text"] = "text"
    esc: str = ""


class ChoiceAst(SyntaxNode):
    """``${1|one,two|}`` - a numbered selection between literal alternatives."""

    kind: Literal["choice"] = "choice"
    position: int = Field(default=0, ge=0)
    items: tuple[str, ...] = ()


class TabstopAst(SyntaxNode):
    """``$1`` or ``${1/pattern/format/}`` - an empty numbered insertion point."""

    kind: Literal["tabstop"] = "tabstop"
    position: int = Field(default=0, ge=0)
    transform: TransformSpec | None = None


class PlaceholderAst(SyntaxNode):
    """``${1:default}`` - a numbered insertion point with nested default content."""

    kind: Literal["placeholder"] = "placeholder"
    position: int = Field(default=0, ge=0)
    transform: TransformSpec | None = None
    children: tuple["SyntaxChild", ...] = ()


class VariableAst(SyntaxNode):
    """``$NAME`` or ``${NAME/pattern/format/}`` - a host environment value."""

    kind: Literal["variable"] = "variable"
    name: str
    transform: TransformSpec | None = None


class SnippetAst(SyntaxNode):
    """Root of a parsed snippet body."""

    kind: Literal["snippet"] = "snippet"
    children: tuple["SyntaxChild", ...] = ()


# Children are parsed by their kind tag. Syntax node subclasses without a tag
# in this union are accepted as instances and rejected at conversion time;
# already built output nodes are accepted and passed through unchanged.
SyntaxChild = Union[
    Annotated[
        Union[TextAst, ChoiceAst, TabstopAst, PlaceholderAst, VariableAst, SnippetAst],
        Field(discriminator="kind"),
    ],
    InstanceOf[SyntaxNode],
    InstanceOf[OutputNode],
]

PlaceholderAst.model_rebuild()
SnippetAst.model_rebuild()
