"""
snipgraph - compile snippet syntax trees into reactive node graphs

snipgraph turns a parsed TextMate/VSCode-style snippet into the node graph an
interactive template-expansion engine renders and edits.
"""

from importlib.metadata import version

from snipgraph.compiler import CompilerConfig, ConversionContext, compile_snippet, to_node
from snipgraph.environ import Environment
from snipgraph.graph import RenderScope, render_text

__version__ = version("snipgraph")

__all__ = [
    "__version__",
    "to_node",
    "compile_snippet",
    "CompilerConfig",
    "ConversionContext",
    "Environment",
    "RenderScope",
    "render_text",
]
