"""Write-side path assignment with structural creation."""

from __future__ import annotations

from .errors import EmptyPath, TypeMismatch
from .model import JArray, JObject, Node, Null, clone, kind_name
from .path import Index, Key, Segment, format_path


def assign(root: Node, segments: list[Segment], value: Node) -> None:
    """Store a copy of *value* at *segments* below *root*, creating the way.

    Missing keys on the way become empty objects, missing arrays become
    empty arrays, and arrays grow with Null up to the requested index. The
    last segment overwrites whatever was there (no merge).

    A failure part way leaves the structure created so far in place.
    """
    if not segments:
        raise EmptyPath()

    path = format_path(segments)
    parent = root
    for seg in segments[:-1]:
        parent = _traverse(parent, seg, path)

    _apply(parent, segments[-1], clone(value), path)


def _require_object(node: Node, seg: Segment, path: str) -> JObject:
    if not isinstance(node, JObject):
        raise TypeMismatch(path, str(seg), "object", kind_name(node))
    return node


def _array_for(obj: JObject, seg: Index, path: str) -> JArray:
    """Return the array stored under ``seg.name``, creating it if missing."""
    if seg.name not in obj.entries:
        obj.entries[seg.name] = JArray()
    array = obj.entries[seg.name]
    if not isinstance(array, JArray):
        raise TypeMismatch(path, str(seg), "array", kind_name(array))
    while len(array.items) <= seg.index:
        array.items.append(Null)
    return array


def _traverse(parent: Node, seg: Segment, path: str) -> Node:
    obj = _require_object(parent, seg, path)

    if isinstance(seg, Key):
        if seg.name not in obj.entries:
            obj.entries[seg.name] = JObject()
        return obj.entries[seg.name]

    if isinstance(seg, Index):
        array = _array_for(obj, seg, path)
        return array.items[seg.index]

    raise TypeError(f"Unknown segment: {seg!r}")


def _apply(parent: Node, seg: Segment, value: Node, path: str) -> None:
    obj = _require_object(parent, seg, path)

    if isinstance(seg, Key):
        obj.entries[seg.name] = value
        return

    if isinstance(seg, Index):
        array = _array_for(obj, seg, path)
        array.items[seg.index] = value
        return

    raise TypeError(f"Unknown segment: {seg!r}")
