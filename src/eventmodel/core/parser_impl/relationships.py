"""
Relationship parser mixin for event model notation.

DSL Syntax:

    OrderPlaced->ShipWhenPaid:"triggers"
    Order--OrderPlaced:"emits"

Both operators start with '-', so each one is attempted in full and the
parser backtracks to the next on mismatch. The line form is tried first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .. import ir

# Attempt order; first match wins
RELATIONSHIP_OPERATORS: tuple[tuple[bytes, type[ir.Line] | type[ir.Arrow]], ...] = (
    (b"--", ir.Line),
    (b"->", ir.Arrow),
)


class RelationshipParserMixin:
    """Parser mixin for arrows and lines."""

    if TYPE_CHECKING:
        expect: Any
        first_of: Any
        parse_name: Any
        parse_caption: Any

    def parse_relationship(self, pos: int) -> tuple[int, ir.Arrow | ir.Line]:
        """
        Parse a relationship between two names.

        Grammar:
            relationship := name ( '--' | '->' ) name caption?
        """
        pos, source = self.parse_name(pos)
        rules = [
            self._relationship_rule(source, operator, node_type)
            for operator, node_type in RELATIONSHIP_OPERATORS
        ]
        return self.first_of(pos, *rules)

    def _relationship_rule(
        self,
        source: str,
        operator: bytes,
        node_type: type[ir.Line] | type[ir.Arrow],
    ) -> Any:
        def rule(pos: int) -> tuple[int, ir.Arrow | ir.Line]:
            pos = self.expect(pos, operator)
            pos, target = self.parse_name(pos)
            pos, caption = self.parse_caption(pos)
            return pos, node_type(source=source, target=target, caption=caption)

        return rule
