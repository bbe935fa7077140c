"""
Lexical primitives for event model notation.

Byte-level scanners for whitespace, quoted and bare literals, simple
escape sequences and ``\\uXXXX`` UTF-16 escapes.

Escape sequences:

    \\\\  \\/  \\"  \\b  \\f  \\n  \\r  \\t    single character
    \\uXXXX                               UTF-16 code unit (captions only)

Consecutive ``\\u`` escapes are decoded together as UTF-16, so surrogate
pairs yield one character. A code unit that cannot be decoded becomes
U+FFFD.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

SPACE = frozenset(b" \t")
LINE_BREAK = frozenset(b"\r\n")

QUOTE = ord('"')
BACKSLASH = ord("\\")

SIMPLE_ESCAPES: dict[int, bytes] = {
    ord("\\"): b"\\",
    ord("/"): b"/",
    ord('"'): b'"',
    ord("b"): b"\x08",
    ord("f"): b"\x0c",
    ord("n"): b"\n",
    ord("r"): b"\r",
    ord("t"): b"\t",
}

HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")

# Bare names are printable ASCII minus the structural characters
BARE_EXCLUDED = frozenset(b'":-<>\\')

REPLACEMENT_CHARACTER = "\ufffd"


def is_bare_byte(byte: int) -> bool:
    return 0x21 <= byte <= 0x7E and byte not in BARE_EXCLUDED


def decode_utf16(units: list[int]) -> str:
    """
    Decode UTF-16 code units, replacing unpaired surrogates with U+FFFD.

    A high surrogate pairs only with an immediately following low
    surrogate; otherwise it is replaced and the next unit is decoded on
    its own.
    """
    chars: list[str] = []
    i = 0
    while i < len(units):
        unit = units[i]
        if 0xD800 <= unit <= 0xDBFF and i + 1 < len(units) and 0xDC00 <= units[i + 1] <= 0xDFFF:
            chars.append(chr(0x10000 + ((unit - 0xD800) << 10) + (units[i + 1] - 0xDC00)))
            i += 2
            continue
        if 0xD800 <= unit <= 0xDFFF:
            chars.append(REPLACEMENT_CHARACTER)
        else:
            chars.append(chr(unit))
        i += 1
    return "".join(chars)


class LexicalParserMixin:
    """Parser mixin for byte-level scanning."""

    if TYPE_CHECKING:
        data: bytes
        byte_at: Any
        fail: Any
        expect: Any
        decode_utf8: Any

    def skip_space(self, pos: int, line_breaks: bool = False) -> int:
        """
        Skip spaces and tabs, and CR/LF when ``line_breaks`` is set.

        Never fails.
        """
        while True:
            byte = self.byte_at(pos)
            if byte is None:
                return pos
            if byte in SPACE or (line_breaks and byte in LINE_BREAK):
                pos += 1
                continue
            return pos

    def parse_literal_char(self, pos: int) -> tuple[int, bytes]:
        """
        Parse one quoted-body character: a plain byte or a simple escape.

        Grammar:
            literal_char := [^"\\] | '\\' ( '\\' | '/' | '"' | 'b' | 'f' | 'n' | 'r' | 't' )
        """
        byte = self.byte_at(pos)
        if byte is None or byte == QUOTE:
            self.fail(pos, "literal character")
        if byte != BACKSLASH:
            return pos + 1, bytes((byte,))

        escaped = self.byte_at(pos + 1)
        if escaped is None or escaped not in SIMPLE_ESCAPES:
            self.fail(pos + 1, "escape character")
        return pos + 2, SIMPLE_ESCAPES[escaped]

    def parse_literal_run(self, pos: int) -> tuple[int, bytes]:
        """Parse one or more literal characters into their raw bytes."""
        pos, first = self.parse_literal_char(pos)
        chunks = [first]
        while True:
            byte = self.byte_at(pos)
            if byte is None or byte == QUOTE:
                break
            if byte == BACKSLASH and self.byte_at(pos + 1) not in SIMPLE_ESCAPES:
                break
            pos, chunk = self.parse_literal_char(pos)
            chunks.append(chunk)
        return pos, b"".join(chunks)

    def parse_unicode_escape(self, pos: int) -> tuple[int, int]:
        """
        Parse ``\\u`` followed by exactly four hex digits.

        Returns:
            The UTF-16 code unit
        """
        pos = self.expect(pos, b"\\u", "'\\u' escape")
        digits = self.data[pos : pos + 4]
        if len(digits) < 4 or any(d not in HEX_DIGITS for d in digits):
            self.fail(pos, "4 hex digits")
        return pos + 4, int(digits, 16)

    def parse_unicode_run(self, pos: int) -> tuple[int, str]:
        """Parse one or more ``\\uXXXX`` escapes and decode them as UTF-16."""
        pos, unit = self.parse_unicode_escape(pos)
        units = [unit]
        while self.data.startswith(b"\\u", pos):
            pos, unit = self.parse_unicode_escape(pos)
            units.append(unit)
        return pos, decode_utf16(units)

    def parse_quoted(self, pos: int, unicode_escapes: bool = False) -> tuple[int, str]:
        """
        Parse a double-quoted literal.

        Grammar:
            quoted := '"' ( literal_char+ | unicode_escape+ )* '"'

        The ``unicode_escape`` branch is only enabled with
        ``unicode_escapes``. Runs of plain characters are decoded as UTF-8.
        """
        pos = self.expect(pos, b'"', "'\"'")
        pieces: list[str] = []
        while (byte := self.byte_at(pos)) != QUOTE:
            if byte is None:
                self.fail(pos, "closing '\"'")
            start = pos
            if unicode_escapes and self.data.startswith(b"\\u", pos):
                pos, text = self.parse_unicode_run(pos)
                pieces.append(text)
                continue
            pos, raw = self.parse_literal_run(pos)
            pieces.append(self.decode_utf8(raw, start))
        return pos + 1, "".join(pieces)

    def parse_bare(self, pos: int) -> tuple[int, str]:
        """
        Parse an unquoted identifier.

        Grammar:
            bare := [!-~ except " : - < > \\]+
        """
        end = pos
        while (byte := self.byte_at(end)) is not None and is_bare_byte(byte):
            end += 1
        if end == pos:
            self.fail(pos, "name")
        return end, self.data[pos:end].decode("ascii")
