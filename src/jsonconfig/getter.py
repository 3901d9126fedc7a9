"""Read-side path resolution."""

from __future__ import annotations

from .errors import PathNotFound, TypeMismatch
from .model import JArray, JObject, Node, _NullType, kind_name
from .path import Index, Key, Segment, format_path


def resolve(root: Node, segments: list[Segment]) -> Node:
    """Walk *segments* from *root* and return the node they name.

    - Key: the current node must be an object holding the key
    - Index: the current node must be an object whose entry ``name`` is an
      array, and the index must be in range
    - A stored null is returned as is; only stepping *through* it fails

    Raises PathNotFound for missing keys, out-of-range indices and null
    intermediates, TypeMismatch when a container has the wrong kind.
    Never mutates the tree.
    """
    path = format_path(segments)
    current = root

    for seg in segments:
        if current is None or isinstance(current, _NullType):
            raise PathNotFound(path, str(seg))

        if not isinstance(current, JObject):
            raise TypeMismatch(path, str(seg), "object", kind_name(current))

        if isinstance(seg, Key):
            if seg.name not in current.entries:
                raise PathNotFound(path, str(seg))
            current = current.entries[seg.name]
            continue

        if isinstance(seg, Index):
            array = current.entries.get(seg.name)
            if array is None:
                raise PathNotFound(path, str(seg))
            if not isinstance(array, JArray):
                raise TypeMismatch(path, str(seg), "array", kind_name(array))
            if seg.index < 0 or seg.index >= len(array.items):
                raise PathNotFound(path, str(seg))
            current = array.items[seg.index]
            continue

        raise TypeError(f"Unknown segment: {seg!r}")

    return current
