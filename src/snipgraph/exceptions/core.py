"""
Exception classes for snipgraph.

This module defines specific exception types for the error conditions that
can occur while converting a snippet syntax tree into an output node graph
and while evaluating that graph.
"""


class SnipGraphError(Exception):
    """Base exception for all snipgraph errors."""

    pass


class UnknownSyntaxKindError(SnipGraphError):
    """Raised when the converter meets a syntax node kind it has no builder for."""

    def __init__(self, kind: str):
        """
        Initialize the exception.

        Params:
            kind: Kind tag or class name of the offending syntax node
        """
        self.kind = kind
        super().__init__(f"No builder registered for syntax node kind '{kind}'")


class InteractiveContentError(SnipGraphError):
    """Raised when static evaluation reaches a node that can change while editing."""

    def __init__(self, node_type: str):
        """
        Initialize the exception.

        Params:
            node_type: Class name of the interactive node
        """
        self.node_type = node_type
        super().__init__(f"Cannot evaluate interactive node '{node_type}' statically")


class TransformError(SnipGraphError):
    """Raised when a transform description cannot be turned into a function."""

    def __init__(self, pattern: str, reason: str):
        """
        Initialize the exception.

        Params:
            pattern: Regex pattern of the transform
            reason: Why the transform is invalid
        """
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid transform '{pattern}': {reason}")
