"""
Document type for the event model syntax tree.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .nodes import Arrow, Declaration, DeclarationKind, Line, Node, Title


class Document(BaseModel):
    """
    Ordered sequence of nodes parsed from one input buffer.

    Order is the drawing order for the renderer. Duplicate names, forward
    references and interleaving of declarations and relationships are all
    allowed.

    Attributes:
        nodes: Nodes in source order
    """

    nodes: tuple[Node, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> Node:
        return self.nodes[index]

    @property
    def titles(self) -> list[Title]:
        return [n for n in self.nodes if isinstance(n, Title)]

    @property
    def declarations(self) -> list[Declaration]:
        return [n for n in self.nodes if isinstance(n, Declaration)]

    @property
    def relationships(self) -> list[Arrow | Line]:
        return [n for n in self.nodes if isinstance(n, (Arrow, Line))]

    def declarations_of(self, kind: DeclarationKind) -> list[Declaration]:
        """Get declarations of one kind, in source order."""
        return [d for d in self.declarations if d.kind == kind]


class ModelFile(BaseModel):
    """
    Parsed model for a single source file.

    Attributes:
        name: Model name (file stem)
        file: Source file path
        document: Parsed document
    """

    name: str
    file: Path
    document: Document = Field(default_factory=Document)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)  # for Path
