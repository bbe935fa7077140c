"""
Record parser mixin for event model notation.

DSL Syntax:

    t:Shop:"Online Shop"
    u:Customer
    c:PlaceOrder:"Place order"
    e:OrderPlaced:"Order placed"
    a:Order
    p:ShipWhenPaid
    r:OrderSummary

Each record is ``<tag>:<name>`` with an optional ``:"<caption>"``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .. import ir

# Ordered tag table; None marks the title record
RECORD_TAGS: tuple[tuple[bytes, ir.DeclarationKind | None], ...] = (
    (b"t", None),
    (b"u", ir.DeclarationKind.USER),
    (b"c", ir.DeclarationKind.COMMAND),
    (b"e", ir.DeclarationKind.EVENT),
    (b"a", ir.DeclarationKind.AGGREGATE),
    (b"p", ir.DeclarationKind.POLICY),
    (b"r", ir.DeclarationKind.READ_MODEL),
)

TAG_EXPECTATION = "record tag (" + ", ".join(tag.decode() for tag, _ in RECORD_TAGS) + ")"


class RecordParserMixin:
    """Parser mixin for tagged records."""

    if TYPE_CHECKING:
        expect: Any
        first_of: Any
        parse_name: Any
        parse_caption: Any

    def parse_record(self, pos: int) -> tuple[int, ir.Title | ir.Declaration]:
        """
        Parse one tagged record.

        Grammar:
            record := TAG ':' name caption?
            TAG    := 't' | 'u' | 'c' | 'e' | 'a' | 'p' | 'r'
        """
        rules = [self._record_rule(tag, kind) for tag, kind in RECORD_TAGS]
        return self.first_of(pos, *rules)

    def _record_rule(self, tag: bytes, kind: ir.DeclarationKind | None) -> Any:
        def rule(pos: int) -> tuple[int, ir.Title | ir.Declaration]:
            pos = self.expect(pos, tag, TAG_EXPECTATION)
            pos = self.expect(pos, b":", "':'")
            pos, name = self.parse_name(pos)
            pos, caption = self.parse_caption(pos)
            if kind is None:
                return pos, ir.Title(name=name, caption=caption)
            return pos, ir.Declaration(kind=kind, name=name, caption=caption)

        return rule
