"""Node model for JSON documents: objects, arrays and scalars."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Union


# ---------------------------------------------------------------------------
# Null: singleton for JSON null
# ---------------------------------------------------------------------------

class _NullType:
    """The JSON ``null`` value. Also used to fill gaps in grown arrays."""

    _instance: _NullType | None = None

    def __new__(cls) -> _NullType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _NullType:
        return self

    def __deepcopy__(self, memo: dict) -> _NullType:
        return self


Null = _NullType()


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class JString:
    value: str


@dataclass(slots=True)
class JNumber:
    value: int | float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise ValueError(f"JNumber needs an int or float, got {type(self.value).__name__}")
        if isinstance(self.value, float) and not math.isfinite(self.value):
            raise ValueError(f"JSON numbers must be finite, got {self.value!r}")


@dataclass(slots=True)
class JBool:
    value: bool


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class JArray:
    items: list[Node] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(slots=True)
class JObject:
    entries: dict[str, Node] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: str) -> bool:
        return key in self.entries


Node = Union[JObject, JArray, JString, JNumber, JBool, _NullType]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_KIND_NAMES = {
    JObject: "object",
    JArray: "array",
    JString: "string",
    JNumber: "number",
    JBool: "boolean",
    _NullType: "null",
}


def kind_name(node: Node) -> str:
    """Return the JSON kind of *node* (``"object"``, ``"array"``, ...)."""
    return _KIND_NAMES.get(type(node), type(node).__name__)


def clone(node: Node) -> Node:
    """Deep-copy *node* so the result shares no containers with the input."""
    if isinstance(node, JObject):
        return JObject({k: clone(v) for k, v in node.entries.items()})
    if isinstance(node, JArray):
        return JArray([clone(v) for v in node.items])
    if isinstance(node, JString):
        return JString(node.value)
    if isinstance(node, JNumber):
        return JNumber(node.value)
    if isinstance(node, JBool):
        return JBool(node.value)
    if isinstance(node, _NullType):
        return Null
    raise TypeError(f"Not a JSON node: {node!r}")


def from_builtin(obj: object) -> Node:
    """Convert plain Python data (as produced by ``json.loads``) to a Node.

    - dict → JObject (keys must be strings)
    - list / tuple → JArray
    - bool → JBool (checked before numbers)
    - int / float → JNumber
    - str → JString
    - None → Null
    """
    if obj is None:
        return Null
    if isinstance(obj, bool):
        return JBool(obj)
    if isinstance(obj, (int, float)):
        return JNumber(obj)
    if isinstance(obj, str):
        return JString(obj)
    if isinstance(obj, dict):
        entries: dict[str, Node] = {}
        for key, value in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"JSON object keys must be strings, got {key!r}")
            entries[key] = from_builtin(value)
        return JObject(entries)
    if isinstance(obj, (list, tuple)):
        return JArray([from_builtin(v) for v in obj])
    raise TypeError(f"Cannot convert {type(obj).__name__} to a JSON node")


def to_builtin(node: Node) -> object:
    """Convert a Node back to plain Python data suitable for ``json.dumps``."""
    if isinstance(node, JObject):
        return {k: to_builtin(v) for k, v in node.entries.items()}
    if isinstance(node, JArray):
        return [to_builtin(v) for v in node.items]
    if isinstance(node, (JString, JNumber, JBool)):
        return node.value
    if isinstance(node, _NullType):
        return None
    raise TypeError(f"Not a JSON node: {node!r}")
