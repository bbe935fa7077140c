"""
Node types for the event model syntax tree.

Every line of a model produces one node:

    t:Shop:"Online Shop"          -> Title
    e:Ordered:"Order placed"      -> Declaration(kind=EVENT)
    Ordered->Shipped              -> Arrow
    Ordered--Invoice:"see note"   -> Line

Nodes are frozen; names are validated on construction so an empty
identifier cannot be represented.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class DeclarationKind(str, Enum):
    """Kinds of named model elements."""

    USER = "user"
    COMMAND = "command"
    EVENT = "event"
    AGGREGATE = "aggregate"
    POLICY = "policy"
    READ_MODEL = "read_model"


class Title(BaseModel):
    """
    Document title.

    Attributes:
        name: Identifier written after ``t:``
        caption: Optional quoted caption
    """

    node_type: Literal["title"] = "title"
    name: str = Field(min_length=1)
    caption: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def text(self) -> str:
        """Display text: the caption if present, otherwise the name."""
        return self.caption if self.caption is not None else self.name


class Declaration(BaseModel):
    """
    A named model element of a specific kind.

    Attributes:
        kind: Element kind
        name: Identifier used as the join key for relationships
        caption: Optional human-readable label
    """

    node_type: Literal["declaration"] = "declaration"
    kind: DeclarationKind
    name: str = Field(min_length=1)
    caption: str | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def user(cls, name: str, caption: str | None = None) -> Declaration:
        return cls(kind=DeclarationKind.USER, name=name, caption=caption)

    @classmethod
    def command(cls, name: str, caption: str | None = None) -> Declaration:
        return cls(kind=DeclarationKind.COMMAND, name=name, caption=caption)

    @classmethod
    def event(cls, name: str, caption: str | None = None) -> Declaration:
        return cls(kind=DeclarationKind.EVENT, name=name, caption=caption)

    @classmethod
    def aggregate(cls, name: str, caption: str | None = None) -> Declaration:
        return cls(kind=DeclarationKind.AGGREGATE, name=name, caption=caption)

    @classmethod
    def policy(cls, name: str, caption: str | None = None) -> Declaration:
        return cls(kind=DeclarationKind.POLICY, name=name, caption=caption)

    @classmethod
    def read_model(cls, name: str, caption: str | None = None) -> Declaration:
        return cls(kind=DeclarationKind.READ_MODEL, name=name, caption=caption)


class Arrow(BaseModel):
    """
    Directed causal edge between two names.

    Endpoints are references; they need not resolve to a declaration.
    """

    node_type: Literal["arrow"] = "arrow"
    source: str = Field(min_length=1)
    target: str = Field(min_length=1)
    caption: str | None = None

    model_config = ConfigDict(frozen=True)


class Line(BaseModel):
    """Undirected annotation edge between two names."""

    node_type: Literal["line"] = "line"
    source: str = Field(min_length=1)
    target: str = Field(min_length=1)
    caption: str | None = None

    model_config = ConfigDict(frozen=True)


class Comment(BaseModel):
    """Discarded textual aside. Not produced by the current grammar."""

    node_type: Literal["comment"] = "comment"
    text: str = ""

    model_config = ConfigDict(frozen=True)


Node = Annotated[
    Union[Title, Declaration, Arrow, Line, Comment],
    Field(discriminator="node_type"),
]
