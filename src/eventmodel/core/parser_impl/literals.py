"""
Literal parser mixin for event model notation.

Names are bare ASCII identifiers or double-quoted strings with simple
escapes. Captions are always double-quoted and additionally accept
``\\uXXXX`` escapes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any


class LiteralParserMixin:
    """Parser mixin for names and captions."""

    if TYPE_CHECKING:
        expect: Any
        fail: Any
        first_of: Any
        optional: Any
        skip_space: Any
        parse_quoted: Any
        parse_bare: Any

    def parse_name(self, pos: int) -> tuple[int, str]:
        """
        Parse a name, trimming spaces and tabs around it.

        Grammar:
            name := SPACE* ( quoted | bare ) SPACE*

        An empty quoted name is a mismatch, not an empty identifier.
        """
        start = self.skip_space(pos)
        pos, name = self.first_of(start, self.parse_quoted, self.parse_bare)
        if not name:
            self.fail(start, "non-empty name")
        return self.skip_space(pos), name

    def parse_caption(self, pos: int) -> tuple[int, str | None]:
        """
        Parse an optional caption.

        Grammar:
            caption := ( ':' SPACE* quoted_with_unicode_escapes )?

        Returns:
            The caption text, or None when no caption follows
        """
        return self.optional(pos, self._parse_caption_body)

    def _parse_caption_body(self, pos: int) -> tuple[int, str]:
        pos = self.expect(pos, b":", "':'")
        pos = self.skip_space(pos)
        return self.parse_quoted(pos, unicode_escapes=True)
