"""
Renderer hand-off view of a parsed document.

The diagram renderer is an external collaborator; it consumes a flat
title/nodes/edges structure rather than walking the syntax tree itself.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .document import Document
from .nodes import Arrow, Comment, Declaration, DeclarationKind, Line, Title


class EdgeType(str, Enum):
    """Kinds of edges drawn between nodes."""

    ARROW = "arrow"
    LINE = "line"


class GraphNode(BaseModel):
    """A declared element as the renderer sees it."""

    name: str
    kind: DeclarationKind
    caption: str | None = None

    model_config = ConfigDict(frozen=True)


class GraphEdge(BaseModel):
    """A relationship as the renderer sees it."""

    edge_type: EdgeType
    source: str
    target: str
    caption: str | None = None

    model_config = ConfigDict(frozen=True)


class GraphSpec(BaseModel):
    """
    Template context for the renderer.

    Attributes:
        title: Text of the last title in the document, if any
        nodes: Declarations in source order
        edges: Arrows and lines in source order
    """

    title: str | None = None
    nodes: list[GraphNode] = Field(default_factory=list)
    edges: list[GraphEdge] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


def build_graph(document: Document) -> GraphSpec:
    """
    Collect the title, nodes and edges of a document in drawing order.

    A later title replaces an earlier one; comments are skipped.
    """
    title: str | None = None
    nodes: list[GraphNode] = []
    edges: list[GraphEdge] = []

    for node in document.nodes:
        if isinstance(node, Title):
            title = node.text
        elif isinstance(node, Declaration):
            nodes.append(GraphNode(name=node.name, kind=node.kind, caption=node.caption))
        elif isinstance(node, Arrow):
            edges.append(
                GraphEdge(
                    edge_type=EdgeType.ARROW,
                    source=node.source,
                    target=node.target,
                    caption=node.caption,
                )
            )
        elif isinstance(node, Line):
            edges.append(
                GraphEdge(
                    edge_type=EdgeType.LINE,
                    source=node.source,
                    target=node.target,
                    caption=node.caption,
                )
            )
        elif isinstance(node, Comment):
            continue

    return GraphSpec(title=title, nodes=nodes, edges=edges)
