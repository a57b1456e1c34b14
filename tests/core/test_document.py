import pytest

from core import Position, Range, SchemaDocument, TextPatch


# ===========================================================
# Construction
# ===========================================================

class TestSchemaDocumentConstruction:

    def test_empty_text_has_one_line(self):
        doc = SchemaDocument.from_text("")
        assert len(doc) == 1
        assert doc[0] == ""

    def test_split_on_newline(self):
        doc = SchemaDocument.from_text("struct A {\n}\n")
        assert doc.lines == ("struct A {", "}", "")

    def test_crlf_kept_out_of_lines(self):
        doc = SchemaDocument.from_text("a\r\nb\r\n")
        assert doc.lines == ("a", "b", "")
        assert doc.eol == "\r\n"
        assert doc.text == "a\r\nb\r\n"

    def test_text_round_trip(self):
        text = "#[solana]\nstruct A {\n    x: u8,\n}"
        assert SchemaDocument.from_text(text).text == text

    def test_file_path(self):
        doc = SchemaDocument.from_text("x", file_path="/tmp/a.lumos")
        assert doc.file_path == "/tmp/a.lumos"

    def test_behaves_as_sequence(self):
        doc = SchemaDocument(["a", "b"])
        assert list(doc) == ["a", "b"]
        assert "b" in doc
        assert doc[-1] == "b"


# ===========================================================
# Positions and offsets
# ===========================================================

class TestSchemaDocumentOffsets:

    @pytest.fixture
    def doc(self):
        return SchemaDocument.from_text("ab\ncd\nefg")

    def test_offset_at(self, doc):
        assert doc.offset_at(Position(0, 0)) == 0
        assert doc.offset_at(Position(1, 1)) == 4
        assert doc.offset_at(Position(2, 3)) == 9

    def test_offset_clamps_column(self, doc):
        assert doc.offset_at(Position(0, 50)) == 2

    def test_offset_clamps_line(self, doc):
        assert doc.offset_at(Position(9, 0)) == 6

    def test_full_range(self, doc):
        assert doc.full_range() == Range(Position(0, 0), Position(2, 3))


# ===========================================================
# Derivation
# ===========================================================

class TestSchemaDocumentApply:

    def test_insert(self):
        doc = SchemaDocument.from_text("wallet PublicKey")
        new = doc.apply(TextPatch(Range.point(0, 6), ":"))
        assert new.text == "wallet: PublicKey"
        assert doc.text == "wallet PublicKey"

    def test_replace(self):
        doc = SchemaDocument.from_text("a: pubkey,\nb: u8,")
        new = doc.apply(TextPatch(Range.on_line(0, 0, 10), "a: PublicKey,"))
        assert new.lines == ("a: PublicKey,", "b: u8,")

    def test_insert_line_uses_document_eol(self):
        doc = SchemaDocument.from_text("struct A {\r\n}")
        new = doc.apply(TextPatch(Range.point(0, 0), "#[solana]\n"))
        assert new.text == "#[solana]\r\nstruct A {\r\n}"

    def test_replace_all_keeps_path(self):
        doc = SchemaDocument.from_text("x", file_path="a.lumos")
        new = doc.replace_all("y\nz")
        assert new.lines == ("y", "z")
        assert new.file_path == "a.lumos"

    def test_equality_by_lines(self):
        assert SchemaDocument(["a"]) == SchemaDocument.from_text("a")
