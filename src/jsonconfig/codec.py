"""Codecs: conversion between typed Python values and JSON nodes.

The core never looks at typed values; ``JsonConfig.get_as``/``set_as``
plug a codec in front of ``resolve``/``assign``.

Usage::

    point = TypeCodec(Point)           # any type pydantic can validate
    cfg.set_as("shapes.origin", point, Point(x=0, y=0))
    cfg.get_as("shapes.origin", point) # → Point(x=0, y=0)
"""

from __future__ import annotations

import json
from typing import Any, Generic, Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .errors import DecodeError, EncodeError
from .model import Node, clone, from_builtin, kind_name, to_builtin

T = TypeVar("T")


class Codec(Protocol[T]):
    def encode(self, value: T) -> Node: ...

    def decode(self, node: Node) -> T: ...


class TypeCodec(Generic[T]):
    """Codec for any type understood by ``pydantic.TypeAdapter``."""

    def __init__(self, tp: Any) -> None:
        self.type = tp
        self._adapter: TypeAdapter[T] = TypeAdapter(tp)

    def __repr__(self) -> str:
        return f"TypeCodec({getattr(self.type, '__name__', self.type)!s})"

    def encode(self, value: T) -> Node:
        try:
            data = self._adapter.dump_python(value, mode="json")
            return from_builtin(data)
        except (PydanticSerializationError, TypeError, ValueError) as exc:
            raise EncodeError(f"Cannot encode {value!r} with {self!r}: {exc}") from exc

    def decode(self, node: Node) -> T:
        try:
            # strict: a node of the wrong JSON kind is never coerced
            return self._adapter.validate_json(json.dumps(to_builtin(node)), strict=True)
        except ValidationError as exc:
            raise DecodeError(
                f"Cannot decode {kind_name(node)} with {self!r}: {exc}"
            ) from exc


class NodeCodec:
    """Identity codec: values are already nodes."""

    def __repr__(self) -> str:
        return "NODE"

    def encode(self, value: Node) -> Node:
        try:
            return clone(value)
        except TypeError as exc:
            raise EncodeError(str(exc)) from exc

    def decode(self, node: Node) -> Node:
        return node


NODE = NodeCodec()
STRING: TypeCodec[str] = TypeCodec(str)
INT: TypeCodec[int] = TypeCodec(int)
FLOAT: TypeCodec[float] = TypeCodec(float)
BOOL: TypeCodec[bool] = TypeCodec(bool)
