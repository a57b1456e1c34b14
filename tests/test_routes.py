"""
API tests for app/routes.py using FastAPI's TestClient.

A fresh SchemaService with a MockValidatorRunner is installed per test.
"""
from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.routes import init_service, router
from services.schema_service import SchemaService
from tests.mock_validator import MockValidatorRunner


@pytest.fixture
def runner():
    return MockValidatorRunner()


@pytest.fixture
def client(runner):
    init_service(SchemaService(runner=runner))
    app = FastAPI()
    app.include_router(router)
    return TestClient(app)


def _open(client, text: str, file_path=None, doc_id: str = "d1"):
    resp = client.post("/api/documents/open",
                       json={"doc_id": doc_id, "text": text, "file_path": file_path})
    assert resp.status_code == 200
    return resp.json()


class TestDocumentRoutes:

    def test_open_list_update_close(self, client):
        assert _open(client, "a\nb")["total_lines"] == 2
        assert [d["doc_id"] for d in client.get("/api/documents").json()] == ["d1"]

        resp = client.put("/api/documents/d1", json={"text": "a"})
        assert resp.json()["version"] == 2

        assert client.delete("/api/documents/d1").json() == {"doc_id": "d1", "closed": True}
        assert client.get("/api/documents").json() == []

    def test_update_unknown(self, client):
        assert client.put("/api/documents/nope", json={"text": "a"}).status_code == 404


class TestFormatRoutes:

    def test_format_document(self, client):
        _open(client, "struct A {\na: u8,\nbbb: u8,\n}")
        resp = client.post("/api/documents/d1/format", json={})
        assert resp.status_code == 200
        assert resp.json()["text"] == "struct A {\n    a  : u8,\n    bbb: u8,\n}"

    def test_format_document_with_options(self, client):
        _open(client, "struct A {\na: u8,\n}")
        resp = client.post("/api/documents/d1/format", json={"options": {"indent_size": 2}})
        assert resp.json()["text"] == "struct A {\n  a: u8,\n}"

    def test_format_unknown(self, client):
        assert client.post("/api/documents/nope/format", json={}).status_code == 404

    def test_invalid_indent_size(self, client):
        _open(client, "x")
        resp = client.post("/api/documents/d1/format", json={"options": {"indent_size": 3}})
        assert resp.status_code == 422

    def test_format_snippet(self, client):
        resp = client.post("/api/format", json={"text": "#[solana]\n#[account]\nstruct X {\n}"})
        assert resp.json() == {"text": "#[account]\n#[solana]\nstruct X {\n}"}


class TestDiagnosticRoutes:

    def test_validate_fix_and_apply(self, client, runner):
        _open(client, "wallet PublicKey\n", "/tmp/wallet.lumos")
        runner.output = "Error: parse failed\nCaused by: expected `:`"

        diags = client.post("/api/documents/d1/validate", json={}).json()
        assert [d["message"] for d in diags] == ["expected `:`"]
        assert client.get("/api/documents/d1/diagnostics").json() == diags

        fixes = client.get("/api/documents/d1/diagnostics/0/fixes").json()
        assert fixes[0]["title"] == "Add colon after field name"

        resp = client.post("/api/documents/d1/diagnostics/0/fixes/0/apply")
        assert resp.status_code == 200
        assert resp.json()["text"] == "wallet: PublicKey\n"
        assert client.get("/api/documents/d1/diagnostics").json() == []

    def test_validate_with_supplied_error_text(self, client, runner):
        _open(client, "x")
        diags = client.post("/api/documents/d1/validate",
                            json={"error_text": "Error: boom"}).json()
        assert diags[0]["message"] == "boom"
        assert runner.calls == []

    def test_missing_diagnostic(self, client):
        _open(client, "x")
        assert client.get("/api/documents/d1/diagnostics/0/fixes").status_code == 404
        assert client.post("/api/documents/d1/diagnostics/0/fixes/0/apply").status_code == 404

    def test_negative_indexes_not_found(self, client):
        _open(client, "wallet PublicKey")
        client.post("/api/documents/d1/validate", json={"error_text": "Error: expected `:`"})
        assert client.get("/api/documents/d1/diagnostics/-1/fixes").status_code == 404
        resp = client.post("/api/documents/d1/diagnostics/-1/fixes/-1/apply")
        assert resp.status_code == 404
        assert client.get("/api/documents").json()[0]["version"] == 1

    def test_unknown_document(self, client):
        assert client.post("/api/documents/nope/validate", json={}).status_code == 404
        assert client.get("/api/documents/nope/diagnostics").status_code == 404


class TestCompletionAndSettingsRoutes:

    def test_complete(self, client):
        items = client.post("/api/complete", json={"line_prefix": "#["}).json()
        assert [i["label"] for i in items] == ["#[solana]", "#[account]", "#[derive]"]

    def test_update_settings(self, client):
        resp = client.put("/api/settings", json={"config": {"format.indentSize": 2}})
        assert resp.status_code == 200
        assert resp.json()["format"]["indent_size"] == 2
        out = client.post("/api/format", json={"text": "struct A {\na: u8,\n}"}).json()
        assert out["text"] == "struct A {\n  a: u8,\n}"

    def test_debounce_echoed_for_client(self, client):
        resp = client.put("/api/settings", json={"config": {"validation.debounceMs": 250}})
        assert resp.json()["validation"]["debounce_ms"] == 250

    def test_invalid_settings(self, client):
        resp = client.put("/api/settings", json={"config": {"format.indentSize": 7}})
        assert resp.status_code == 422
