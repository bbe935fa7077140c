"""
Event model syntax tree types.

Types are organized into submodules and re-exported from this package.
"""

# Document
from .document import Document, ModelFile

# Renderer hand-off
from .graph import (
    EdgeType,
    GraphEdge,
    GraphNode,
    GraphSpec,
    build_graph,
)

# Nodes
from .nodes import (
    Arrow,
    Comment,
    Declaration,
    DeclarationKind,
    Line,
    Node,
    Title,
)

__all__ = [
    "Arrow",
    "Comment",
    "Declaration",
    "DeclarationKind",
    "Document",
    "EdgeType",
    "GraphEdge",
    "GraphNode",
    "GraphSpec",
    "Line",
    "ModelFile",
    "Node",
    "Title",
    "build_graph",
]
