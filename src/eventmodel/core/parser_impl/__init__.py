"""
Event model notation parser package.

The parser is built from mixins, one per layer of the grammar:

- LexicalParserMixin: whitespace, quoted/bare literals, escapes
- LiteralParserMixin: names and captions
- RecordParserMixin: ``<tag>:<name>[:"<caption>"]`` records
- RelationshipParserMixin: ``<name>->|--<name>[:"<caption>"]`` edges

The main exports are:
- Parser: The complete parser class
- parse_model: Parse one buffer into a Document

Usage:
    from eventmodel.core.parser_impl import parse_model

    document = parse_model(b'e:Ordered\\ne:Shipped\\nOrdered->Shipped')
"""

from __future__ import annotations

import logging

from .. import ir
from ..errors import ParseError, make_parse_error
from .base import Backtrack, BaseParser
from .lexical import LexicalParserMixin, decode_utf16
from .literals import LiteralParserMixin
from .records import RecordParserMixin
from .relationships import RelationshipParserMixin

logger = logging.getLogger(__name__)


class Parser(
    BaseParser,
    LexicalParserMixin,
    LiteralParserMixin,
    RecordParserMixin,
    RelationshipParserMixin,
):
    """
    Complete event model parser.

    Assembles the document from records and relationships:

        documents := ( WS* document )* WS* EOF
        document  := record | relationship

    A record is tried first; on mismatch the parser backtracks to the
    same offset and tries a relationship. If neither matches, the whole
    parse fails with the furthest failure reached.
    """

    def parse_document(self, pos: int) -> tuple[int, ir.Node]:
        """Parse a single record or relationship."""
        return self.first_of(pos, self.parse_record, self.parse_relationship)

    def parse(self) -> ir.Document:
        """
        Parse the whole buffer.

        Returns:
            Document with nodes in source order

        Raises:
            ParseError: If any input remains that no alternative matches
        """
        nodes: list[ir.Node] = []
        pos = self.skip_space(0, line_breaks=True)
        while not self.at_end(pos):
            try:
                pos, node = self.parse_document(pos)
            except Backtrack:
                raise self.error() from None
            nodes.append(node)
            pos = self.skip_space(pos, line_breaks=True)
        return ir.Document(nodes=tuple(nodes))


def _encode_text(text: str, source: str) -> bytes:
    """Encode str input as UTF-8; lone surrogates are a ParseError."""
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        offset = len(text[: e.start].encode("utf-8"))
        raise make_parse_error(
            f"Invalid UTF-8 in input: unencodable character {text[e.start]!r}",
            text.encode("utf-8", errors="replace"),
            offset,
            source=source,
        ) from None


def parse_model(data: bytes | str, source: str = "<input>") -> ir.Document:
    """
    Parse event model notation.

    Args:
        data: Model text; str input is encoded as UTF-8
        source: Source name used in error locations

    Returns:
        The parsed Document

    Raises:
        ParseError: If the input is not a complete, valid model
    """
    if isinstance(data, str):
        data = _encode_text(data, source)

    parser = Parser(data, source)
    try:
        document = parser.parse()
    except ParseError:
        logger.debug("Parse of %s failed at offset %d", source, parser.furthest)
        raise

    logger.debug("Parsed %d nodes from %s", len(document), source)
    return document


__all__ = [
    "Parser",
    "parse_model",
    "BaseParser",
    "Backtrack",
    "LexicalParserMixin",
    "LiteralParserMixin",
    "RecordParserMixin",
    "RelationshipParserMixin",
    "decode_utf16",
]
