"""Tests for the file-backed JsonConfig."""

import logging

import pytest
from pydantic import BaseModel

from jsonconfig import (
    STRING,
    DecodeError,
    DocumentCorrupt,
    JBool,
    JNumber,
    JObject,
    JsonConfig,
    PathNotFound,
    TypeCodec,
)


class Server(BaseModel):
    host: str
    port: int


def test_creates_folder_and_file(tmp_path):
    target = tmp_path / "test" / "data.json"
    cfg = JsonConfig(target)
    assert target.exists()
    assert target.read_bytes() == b""
    assert cfg.root == JObject()
    assert cfg.folder == target.parent


def test_accepts_str_path(tmp_path):
    cfg = JsonConfig(str(tmp_path / "data.json"))
    assert cfg.file == tmp_path / "data.json"


def test_loads_existing(tmp_path):
    target = tmp_path / "data.json"
    target.write_text('{"a": {"b": true}}', encoding="utf-8")
    assert JsonConfig(target).get("a.b") == JBool(True)


def test_non_object_file_normalized(tmp_path):
    target = tmp_path / "data.json"
    target.write_text("[1, 2, 3]", encoding="utf-8")
    assert JsonConfig(target).root == JObject()


def test_corrupt_file_logs_and_raises(tmp_path, caplog):
    target = tmp_path / "data.json"
    target.write_text("{broken", encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="jsonconfig"):
        with pytest.raises(DocumentCorrupt):
            JsonConfig(target)
    assert "Failed to parse json" in caplog.text
    assert str(target) in caplog.text


def test_deeply_nested_file_logs_and_raises(tmp_path, caplog):
    target = tmp_path / "data.json"
    target.write_text("[" * 100000, encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="jsonconfig"):
        with pytest.raises(DocumentCorrupt):
            JsonConfig(target)
    assert "Failed to parse json" in caplog.text


def test_save_and_reopen(tmp_path):
    target = tmp_path / "data.json"
    cfg = JsonConfig(target)
    cfg.set("server.ports[1]", JNumber(8080))
    cfg.save()
    reopened = JsonConfig(target)
    assert reopened.get("server.ports[1]") == JNumber(8080)
    assert reopened.root == cfg.root


def test_save_recreates_folder(tmp_path):
    target = tmp_path / "gone" / "data.json"
    cfg = JsonConfig(target)
    target.unlink()
    target.parent.rmdir()
    cfg.set("k", JNumber(1))
    cfg.save()
    assert target.exists()


def test_custom_indent(tmp_path):
    target = tmp_path / "data.json"
    cfg = JsonConfig(target, indent=4)
    cfg.set("a", JNumber(1))
    cfg.save()
    assert target.read_bytes() == b'{\n    "a": 1\n}'


def test_reload_discards_changes(tmp_path):
    cfg = JsonConfig(tmp_path / "data.json")
    cfg.set("a", JNumber(1))
    cfg.reload()
    with pytest.raises(PathNotFound):
        cfg.get("a")


# ---------------------------------------------------------------------------
# Typed access
# ---------------------------------------------------------------------------

def test_typed_string(tmp_path):
    cfg = JsonConfig(tmp_path / "data.json")
    cfg.set_as("data", STRING, "3f1c2b")
    assert cfg.get_as("data", STRING) == "3f1c2b"


def test_typed_model(tmp_path):
    codec = TypeCodec(Server)
    cfg = JsonConfig(tmp_path / "data.json")
    cfg.set_as("servers[0]", codec, Server(host="localhost", port=80))
    cfg.save()
    assert JsonConfig(cfg.file).get_as("servers[0]", codec) == Server(host="localhost", port=80)


def test_typed_decode_error(tmp_path):
    cfg = JsonConfig(tmp_path / "data.json")
    cfg.set_as("flag", STRING, "x")
    with pytest.raises(DecodeError):
        cfg.get_as("flag", TypeCodec(Server))


def test_repr(tmp_path):
    cfg = JsonConfig(tmp_path / "data.json")
    assert "data.json" in repr(cfg)
