"""
snipgraph exception classes.

This package provides all exception types used throughout snipgraph for
consistent error handling and reporting.
"""

from snipgraph.exceptions.core import (
    InteractiveContentError,
    SnipGraphError,
    TransformError,
    UnknownSyntaxKindError,
)

__all__ = [
    "SnipGraphError",
    "UnknownSyntaxKindError",
    "InteractiveContentError",
    "TransformError",
]
