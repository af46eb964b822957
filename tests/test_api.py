"""Tests for the HTTP API."""

import asyncio
from types import SimpleNamespace

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

import app.services.ai as ai_module
from app.main import app as api_app
from app.services.file_reader import read_uploads

from conftest import HEAL_COMMAND

BROKEN = 'if player has permission "x"\n    send "ok"'


@pytest.fixture
def client():
    return TestClient(api_app)


@pytest.fixture
def fake_ai(monkeypatch):
    reply = '{"optimizedCode": "on join:\\n    stop", "changes": ["Tidied"], "language": "Skript"}'

    def create(**kwargs):
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=reply))])

    fake = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))
    monkeypatch.setattr(ai_module, "_client", lambda: fake)


class TestInfoRoutes:

    def test_root(self, client):
        r = client.get("/")
        assert r.status_code == 200
        assert "Skript Scanner API" in r.text

    def test_health(self, client, monkeypatch):
        monkeypatch.setenv("AI_API_KEY", "")
        body = client.get("/health").json()
        assert body["status"] == "ok"
        assert body["ai"]["available"] is False


class TestScan:

    def test_scan_json(self, client):
        r = client.post("/scan", json={"files": {"heal.sk": HEAL_COMMAND}})
        assert r.status_code == 200
        body = r.json()

        (result,) = body["files"]
        assert result["file_name"] == "heal.sk"
        assert [i["severity"] for i in result["issues"]] == ["high"]
        (feature,) = result["features"]
        assert feature["name"] == "/heal"
        assert feature["category"] == "Commands"
        assert feature["icon"] == "⚡"
        assert feature["arguments"] == []
        assert feature["has_permission"] is False

        assert body["project"]["total_commands"] == 1
        assert body["project"]["issues"]["high"] == 1
        assert body["suggestions"][0]["priority"] == "critical"
        assert body["failures"] == []

    def test_scan_without_suggestions(self, client):
        r = client.post("/scan", json={"files": {"heal.sk": HEAL_COMMAND}, "scan_suggestions": False})
        assert r.json()["suggestions"] is None

    def test_unsupported_extension(self, client):
        r = client.post("/scan", json={"files": {"virus.exe": "x"}})
        assert r.status_code == 400

    def test_too_many_files(self, client, monkeypatch):
        monkeypatch.setenv("MAX_FILES", "1")
        r = client.post("/scan", json={"files": {"a.sk": "stop", "b.sk": "stop"}})
        assert r.status_code == 400

    def test_file_too_large(self, client, monkeypatch):
        monkeypatch.setenv("MAX_FILE_SIZE", "10")
        r = client.post("/scan", json={"files": {"heal.sk": HEAL_COMMAND}})
        assert r.status_code == 413

    def test_report(self, client):
        r = client.post("/scan/report", json={"files": {"heal.sk": HEAL_COMMAND}})
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/markdown")
        assert r.text.startswith("# Skript Scan Report")
        assert "Add Permission Checks" in r.text


class TestScanUpload:

    def test_upload(self, client):
        r = client.post(
            "/scan/upload",
            files=[
                ("files", ("heal.sk", HEAL_COMMAND.encode("utf-8"), "text/plain")),
                ("files", ("join.sk", b"on join:\n    stop", "text/plain")),
            ],
            data={"scan_suggestions": "false"},
        )
        assert r.status_code == 200
        body = r.json()
        assert [f["file_name"] for f in body["files"]] == ["heal.sk", "join.sk"]
        assert body["project"]["total_events"] == 1
        assert body["suggestions"] is None

    def test_upload_unsupported_extension(self, client):
        r = client.post("/scan/upload", files=[("files", ("tool.exe", b"MZ", "application/octet-stream"))])
        assert r.status_code == 400

    def test_upload_not_utf8(self, client):
        r = client.post("/scan/upload", files=[("files", ("bad.sk", b"\xff\xfe\xfa", "text/plain"))])
        assert r.status_code == 400

    def test_upload_too_large(self, client, monkeypatch):
        monkeypatch.setenv("MAX_FILE_SIZE", "10")
        r = client.post("/scan/upload", files=[("files", ("heal.sk", HEAL_COMMAND.encode("utf-8"), "text/plain"))])
        assert r.status_code == 413

    def test_upload_total_too_large(self, client, monkeypatch):
        monkeypatch.setenv("MAX_TOTAL_SIZE", "50")
        r = client.post(
            "/scan/upload",
            files=[
                ("files", ("a.sk", HEAL_COMMAND.encode("utf-8"), "text/plain")),
                ("files", ("b.sk", HEAL_COMMAND.encode("utf-8"), "text/plain")),
            ],
        )
        assert r.status_code == 413


class FakeUpload:
    """Records how many bytes each read asked for."""

    def __init__(self, filename, data, size=None):
        self.filename = filename
        self.data = data
        self.size = size
        self.reads = []

    async def read(self, size=-1):
        self.reads.append(size)
        return self.data if size < 0 else self.data[:size]


class TestReadUploads:

    def test_read_is_capped_at_the_file_limit(self, monkeypatch):
        monkeypatch.setenv("MAX_FILE_SIZE", "10")
        upload = FakeUpload("big.sk", b"x" * 1000)
        with pytest.raises(HTTPException) as exc:
            asyncio.run(read_uploads([upload]))
        assert exc.value.status_code == 413
        assert upload.reads == [11]

    def test_declared_size_rejected_before_reading(self, monkeypatch):
        monkeypatch.setenv("MAX_FILE_SIZE", "10")
        upload = FakeUpload("big.sk", b"x" * 1000, size=1000)
        with pytest.raises(HTTPException) as exc:
            asyncio.run(read_uploads([upload]))
        assert exc.value.status_code == 413
        assert upload.reads == []

    def test_small_uploads_are_decoded(self):
        uploads = [FakeUpload("a.sk", b"on join:\n    stop"), FakeUpload("a.sk", b"ignored")]
        assert asyncio.run(read_uploads(uploads)) == {"a.sk": "on join:\n    stop"}


class TestValidate:

    def test_invalid_skript(self, client):
        body = client.post("/validate", json={"file_name": "a.sk", "content": BROKEN}).json()
        assert body["is_skript"] is True
        assert body["valid"] is False
        assert body["language"] == "Skript"
        assert body["summary"] == "Line 1 [CRITICAL]: Missing colon at end of condition"

    def test_other_language(self, client):
        body = client.post("/validate", json={"file_name": "a.py", "content": "print(1)"}).json()
        assert body["is_skript"] is False
        assert body["valid"] is True
        assert body["language"] == "Python"


class TestOptimize:

    def test_no_key(self, client, monkeypatch):
        monkeypatch.setenv("AI_API_KEY", "")
        r = client.post("/optimize", json={"file_name": "heal.sk", "content": HEAL_COMMAND})
        assert r.status_code == 503

    def test_invalid_content_is_rejected(self, client, fake_ai):
        r = client.post("/optimize", json={"file_name": "a.sk", "content": BROKEN})
        assert r.status_code == 422
        assert "Validation failed with 1 error(s)" in r.json()["detail"]

    def test_skip_validation(self, client, fake_ai):
        r = client.post(
            "/optimize",
            json={"file_name": "a.sk", "content": BROKEN, "skip_validation": True},
        )
        assert r.status_code == 200
        assert r.json()["changes"] == ["Tidied"]

    def test_optimize(self, client, fake_ai):
        r = client.post("/optimize", json={"file_name": "heal.sk", "content": HEAL_COMMAND})
        assert r.status_code == 200
        body = r.json()
        assert body["file_name"] == "heal.sk"
        assert body["optimized_code"] == "on join:\n    stop"
        assert body["language"] == "Skript"
