"""
Tests for infrastructure/document_io.py — read / write / apply edits.

Uses tmp_path (pytest built-in) for file system operations.
"""
import pytest

from core import Range, SchemaDocument, TextPatch
from infrastructure import apply_patch, read_schema, replace_all, write_schema
from infrastructure.document_io import is_schema_file


# ===========================================================
# read / write
# ===========================================================

class TestReadSchema:

    def test_reads_lines_and_path(self, tmp_path):
        path = tmp_path / "wallet.lumos"
        path.write_text("struct Wallet {\n}\n", encoding="utf-8")
        doc = read_schema(path)
        assert doc.lines == ("struct Wallet {", "}", "")
        assert doc.file_path == str(path)
        assert doc.eol == "\n"

    def test_crlf_detected(self, tmp_path):
        path = tmp_path / "wallet.lumos"
        path.write_bytes(b"struct Wallet {\r\n}\r\n")
        doc = read_schema(path)
        assert doc.lines == ("struct Wallet {", "}", "")
        assert doc.eol == "\r\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_schema(tmp_path / "missing.lumos")


class TestWriteSchema:

    def test_roundtrip_keeps_crlf(self, tmp_path):
        path = tmp_path / "wallet.lumos"
        path.write_bytes(b"a: u8\r\nb: u8\r\n")
        doc = read_schema(path)
        out = tmp_path / "copy.lumos"
        assert write_schema(doc, out) == out
        assert out.read_bytes() == b"a: u8\r\nb: u8\r\n"

    def test_defaults_to_document_path(self, tmp_path):
        path = tmp_path / "wallet.lumos"
        doc = SchemaDocument(["struct A {", "}"], file_path=str(path))
        write_schema(doc)
        assert path.read_text(encoding="utf-8") == "struct A {\n}"

    def test_no_path(self):
        with pytest.raises(ValueError):
            write_schema(SchemaDocument(["x"]))


# ===========================================================
# edits
# ===========================================================

class TestEdits:

    def test_apply_insertion(self):
        doc = SchemaDocument(["wallet PublicKey", ""])
        new = apply_patch(doc, TextPatch(Range.point(0, 6), ":"))
        assert new.text == "wallet: PublicKey\n"
        assert doc.text == "wallet PublicKey\n"

    def test_apply_insertion_of_line_uses_document_eol(self):
        doc = SchemaDocument.from_text("struct A {\r\n}")
        new = apply_patch(doc, TextPatch(Range.point(0, 0), "#[solana]\n"))
        assert new.text == "#[solana]\r\nstruct A {\r\n}"

    def test_replace_all(self):
        doc = SchemaDocument(["a"], file_path="x.lumos")
        new = replace_all(doc, "b\nc")
        assert new.lines == ("b", "c")
        assert new.file_path == "x.lumos"

    def test_replace_all_none_is_noop(self):
        doc = SchemaDocument(["a"])
        assert replace_all(doc, None) is doc


@pytest.mark.parametrize("name, expected", [
    ("wallet.lumos", True),
    ("dir/wallet.lumos", True),
    ("wallet.rs", False),
    ("lumos", False),
])
def test_is_schema_file(name, expected):
    assert is_schema_file(name) is expected
