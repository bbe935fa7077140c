"""
Base parser class for event model notation.

Provides the cursor utilities and the ordered-alternation helper used by
all parser mixins.

Every grammar rule is a method taking a byte offset and returning
``(new_offset, value)``. A rule that does not match raises ``Backtrack``
and has no other effect, so an enclosing alternative retries from the
offset it already holds. The only state a parser carries across rules is
the furthest failure reached, kept for the final diagnostic.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NoReturn, TypeVar

from ..errors import ParseError, make_parse_error

T = TypeVar("T")

Rule = Callable[[int], tuple[int, T]]


class Backtrack(Exception):
    """Internal signal that the current alternative did not match."""


class BaseParser:
    """
    Base parser class with byte-cursor utilities.

    This class provides the foundation for backtracking recursive descent
    parsing over a byte buffer, including matching, alternation and error
    generation.
    """

    def __init__(self, data: bytes, source: str = "<input>"):
        """
        Initialize parser.

        Args:
            data: Raw model text
            source: Source name (for error reporting)
        """
        self.data = data
        self.source = source
        self.furthest = 0
        self.expected: set[str] = set()

    def at_end(self, pos: int) -> bool:
        return pos >= len(self.data)

    def byte_at(self, pos: int) -> int | None:
        """Get the byte at an offset, or None past the end."""
        if pos >= len(self.data):
            return None
        return self.data[pos]

    def fail(self, pos: int, expectation: str) -> NoReturn:
        """
        Record an unmet expectation and abandon the current alternative.

        Raises:
            Backtrack: Always
        """
        if pos > self.furthest:
            self.furthest = pos
            self.expected = {expectation}
        elif pos == self.furthest:
            self.expected.add(expectation)
        raise Backtrack()

    def expect(self, pos: int, literal: bytes, description: str | None = None) -> int:
        """
        Match an exact byte sequence.

        Returns:
            Offset just past the sequence
        """
        if not self.data.startswith(literal, pos):
            self.fail(pos, description or repr(literal.decode("ascii")))
        return pos + len(literal)

    def first_of(self, pos: int, *rules: Rule[T]) -> tuple[int, T]:
        """
        Ordered alternation: the first rule that matches at ``pos`` wins.

        Raises:
            Backtrack: If no rule matches
        """
        for rule in rules:
            try:
                return rule(pos)
            except Backtrack:
                continue
        raise Backtrack()

    def optional(self, pos: int, rule: Rule[T]) -> tuple[int, T | None]:
        """Try a rule; on mismatch stay at ``pos`` and yield None."""
        try:
            return rule(pos)
        except Backtrack:
            return pos, None

    def decode_utf8(self, raw: bytes, pos: int) -> str:
        """
        Decode a literal body.

        Invalid UTF-8 is not recoverable and aborts the whole parse.

        Raises:
            ParseError: If the bytes are not valid UTF-8
        """
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise make_parse_error(
                f"Invalid UTF-8 in literal: {e.reason}",
                self.data,
                pos,
                source=self.source,
            ) from e

    def error(self) -> ParseError:
        """Build the ParseError for the furthest failure reached."""
        found = self.byte_at(self.furthest)
        if found is None:
            found_text = "end of input"
        else:
            found_text = repr(chr(found)) if found < 0x80 else f"byte 0x{found:02x}"

        expected = tuple(sorted(self.expected))
        message = f"Unexpected {found_text}"
        if expected:
            message += f"; expected {' or '.join(expected)}"

        return make_parse_error(
            message,
            self.data,
            self.furthest,
            source=self.source,
            expected=expected,
        )
