"""
Snippet syntax tree model.

This package provides the immutable node classes an external parser
produces and the compiler consumes.
"""

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

__all__ = [
    "SyntaxNode",
    "TransformSpec",
    "SnippetAst",
    "TextAst",
    "ChoiceAst",
    "TabstopAst",
    "PlaceholderAst",
    "VariableAst",
]
