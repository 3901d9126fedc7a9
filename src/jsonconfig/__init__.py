"""jsonconfig: path-addressable access to JSON documents."""

from .codec import BOOL, FLOAT, INT, NODE, STRING, Codec, TypeCodec
from .config import JsonConfig
from .document import Document
from .errors import (
    DecodeError,
    DocumentCorrupt,
    EmptyPath,
    EncodeError,
    InvalidPath,
    JsonConfigError,
    PathNotFound,
    TypeMismatch,
)
from .getter import resolve
from .model import (
    JArray,
    JBool,
    JNumber,
    JObject,
    JString,
    Node,
    Null,
    clone,
    from_builtin,
    to_builtin,
)
from .path import Index, Key, Segment, parse_path
from .repl import ConfigRepl
from .setter import assign

__all__ = [
    "parse_path",
    "resolve",
    "assign",
    "Document",
    "JsonConfig",
    "ConfigRepl",
    "Key",
    "Index",
    "Segment",
    "Node",
    "JObject",
    "JArray",
    "JString",
    "JNumber",
    "JBool",
    "Null",
    "clone",
    "from_builtin",
    "to_builtin",
    "Codec",
    "TypeCodec",
    "NODE",
    "STRING",
    "INT",
    "FLOAT",
    "BOOL",
    "JsonConfigError",
    "InvalidPath",
    "EmptyPath",
    "PathNotFound",
    "TypeMismatch",
    "DocumentCorrupt",
    "EncodeError",
    "DecodeError",
]
