"""Tests for document assembly and the parse_model entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from eventmodel import parse_model
from eventmodel.core import ir
from eventmodel.core.errors import ParseError


class TestDocuments:
    def test_empty_input(self) -> None:
        assert parse_model(b"") == ir.Document(nodes=())

    def test_whitespace_only(self) -> None:
        assert len(parse_model(b"  \n\t\r\n ")) == 0

    def test_interleaved_document(self) -> None:
        document = parse_model(b't:G:"title"\n e:Ordered\n e:Shipped\n Ordered->Shipped')
        assert document.nodes == (
            ir.Title(name="G", caption="title"),
            ir.Declaration.event("Ordered"),
            ir.Declaration.event("Shipped"),
            ir.Arrow(source="Ordered", target="Shipped"),
        )

    def test_every_node_kind(self, shop_model: str) -> None:
        document = parse_model(shop_model)
        assert len(document) == 11
        assert [d.kind for d in document.declarations] == [
            ir.DeclarationKind.USER,
            ir.DeclarationKind.COMMAND,
            ir.DeclarationKind.AGGREGATE,
            ir.DeclarationKind.EVENT,
            ir.DeclarationKind.POLICY,
            ir.DeclarationKind.READ_MODEL,
        ]
        assert document[-1] == ir.Line(
            source="OrderPlaced", target="OrderSummary", caption="projected into"
        )

    def test_relationships_before_declarations(self) -> None:
        document = parse_model("a->b\ne:a\ne:b\n")
        assert isinstance(document[0], ir.Arrow)
        assert len(document.declarations) == 2

    def test_duplicate_names_are_kept(self) -> None:
        document = parse_model("e:X\ne:X\nX->X")
        assert len(document) == 3

    def test_crlf_line_endings(self) -> None:
        document = parse_model(b'e:A:"a"\r\ne:B\r\nA--B\r\n')
        assert document.nodes == (
            ir.Declaration.event("A", "a"),
            ir.Declaration.event("B"),
            ir.Line(source="A", target="B"),
        )

    def test_single_letter_names_in_relationships(self) -> None:
        document = parse_model("e->t\nu--c")
        assert document.nodes == (
            ir.Arrow(source="e", target="t"),
            ir.Line(source="u", target="c"),
        )

    def test_str_and_bytes_inputs_agree(self, shop_model: str) -> None:
        assert parse_model(shop_model) == parse_model(shop_model.encode("utf-8"))

    def test_parsing_is_idempotent(self, shop_model: str) -> None:
        data = shop_model.encode("utf-8")
        assert parse_model(data) == parse_model(data)

    def test_caption_round_trip(self) -> None:
        document = parse_model('abc->def:"ラベル"')
        assert document[0] == ir.Arrow(source="abc", target="def", caption="ラベル")

    def test_unicode_escapes_in_caption(self) -> None:
        document = parse_model(b'e:X:"\\u0041\\u0042\\u0043"')
        assert document[0].caption == "ABC"

    def test_lone_surrogate_is_replaced(self) -> None:
        document = parse_model(b'e:X:"\\ud800!"')
        assert document[0].caption == "\ufffd!"

    def test_fixture_file(self, models_dir: Path) -> None:
        document = parse_model((models_dir / "inventory.evm").read_bytes())
        assert document.titles[0].text == "Inventory"
        assert document.declarations[0].caption == "在庫確保された"
        assert len(document.relationships) == 2


class TestParseFailures:
    def test_dangling_arrow(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_model(b"e:A\na->")
        error = exc_info.value
        assert error.offset == 7
        assert "name" in error.expected
        assert error.context is not None
        assert (error.context.line, error.context.column) == (2, 4)

    def test_no_partial_result(self) -> None:
        with pytest.raises(ParseError):
            parse_model(b"e:A\ne:B\n???\n")

    def test_empty_name(self) -> None:
        with pytest.raises(ParseError):
            parse_model(b"u:")

    def test_empty_quoted_name(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_model(b'u:""')
        assert "non-empty name" in exc_info.value.expected

    def test_unquoted_caption(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_model(b"e:A:label")
        assert exc_info.value.offset == 4
        assert "'\"'" in exc_info.value.expected

    def test_unterminated_caption(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_model(b'e:A:"open')
        assert exc_info.value.offset == 9
        assert "end of input" in str(exc_info.value)

    def test_bad_hex_in_caption(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_model(b'e:A:"\\u12G4"')
        assert "4 hex digits" in exc_info.value.expected

    def test_invalid_utf8_in_name(self) -> None:
        with pytest.raises(ParseError, match="Invalid UTF-8"):
            parse_model(b'e:"\xc3\x28"')

    def test_furthest_failure_is_reported(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_model(b"e:Ordered\nOrdered-Shipped")
        assert exc_info.value.offset == 17
        assert exc_info.value.expected == ("'--'", "'->'")

    def test_source_name_in_message(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_model(b":x", source="orders.evm")
        assert str(exc_info.value).startswith("orders.evm:1:1")

    def test_lone_surrogate_in_str_input(self) -> None:
        with pytest.raises(ParseError, match="Invalid UTF-8") as exc_info:
            parse_model('e:A:"\ud800"', source="orders.evm")
        assert exc_info.value.offset == 5
        assert str(exc_info.value).startswith("orders.evm:1:6")

    def test_fixture_file(self, models_dir: Path) -> None:
        with pytest.raises(ParseError):
            parse_model((models_dir / "dangling.evm").read_bytes())
