"""End-to-end tests: file → paths → codecs → file."""

import uuid

import pytest

from jsonconfig import (
    STRING,
    Document,
    JArray,
    JBool,
    JObject,
    JString,
    JsonConfig,
    Null,
    PathNotFound,
    TypeMismatch,
    from_builtin,
)


def test_config_workflow(tmp_path):
    cfg = JsonConfig(tmp_path / "test" / "data.json")

    cfg.set("enabled", from_builtin(True))
    assert cfg.get("enabled") == JBool(True)

    value = str(uuid.uuid4())
    cfg.set_as("data", STRING, value)
    assert cfg.get_as("data", STRING) == value

    for i in range(10):
        cfg.set_as(f"array[{i}]", STRING, uuid.uuid4().hex[:6])

    array = cfg.get("array")
    assert isinstance(array, JArray)
    assert len(array) == 10

    cfg.save()
    reopened = JsonConfig(cfg.file)
    assert reopened.get_as("data", STRING) == value
    assert len(reopened.get("array")) == 10


# ---------------------------------------------------------------------------
# Scenarios on an empty document
# ---------------------------------------------------------------------------

def test_set_then_get():
    doc = Document()
    doc.set("data", JString("x"))
    assert doc.get("data") == JString("x")


def test_sparse_array():
    doc = Document()
    doc.set("array[9]", JString("z"))
    array = doc.get("array")
    assert len(array) == 10
    assert array.items[:9] == [Null] * 9
    assert array.items[9] == JString("z")


def test_missing_path():
    with pytest.raises(PathNotFound):
        Document().get("missing.key")


def test_scalar_blocks_array():
    doc = Document()
    doc.set("a.b", JString("X"))
    with pytest.raises(TypeMismatch):
        doc.set("a.b[0]", JString("Y"))


def test_never_assigned_leaf():
    doc = Document()
    doc.set("a.b", JString("X"))
    with pytest.raises(PathNotFound):
        doc.get("a.c")


def test_replace_kinds():
    doc = Document()
    for value in (JObject({"k": Null}), JArray([Null]), JString("s"), JObject()):
        doc.set("slot", value)
        assert doc.get("slot") == value


def test_copy_swap_batch():
    doc = Document.loads(b'{"a": {"b": 1}}')
    staged = doc.copy()
    staged.set("a.c", JString("new"))
    with pytest.raises(TypeMismatch):
        staged.set("a.b.d", JString("fails"))
    # staged batch failed; the original was never touched
    assert doc.root == from_builtin({"a": {"b": 1}})
