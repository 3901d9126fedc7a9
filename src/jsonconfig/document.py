"""Document: a JSON object tree together with its load/save format."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from .errors import DocumentCorrupt
from .getter import resolve
from .model import JObject, Node, clone, from_builtin, to_builtin
from .path import parse_path
from .setter import assign

logger = logging.getLogger(__name__)

DEFAULT_INDENT = 2


def _reject_constant(name: str) -> float:
    raise ValueError(f"non-finite number {name} is not allowed")


@dataclass
class Document:
    """Holds the root object of a JSON document.

    The root is always a JObject; anything else handed in (or loaded) is
    replaced by an empty object.
    """

    root: JObject = field(default_factory=JObject)

    def __post_init__(self) -> None:
        if not isinstance(self.root, JObject):
            logger.debug("Top-level value is %s, using an empty object", type(self.root).__name__)
            self.root = JObject()

    # -- Path access ----------------------------------------------------

    def get(self, path: str) -> Node:
        """Return the node at *path* (see ``getter.resolve``)."""
        return resolve(self.root, parse_path(path))

    def set(self, path: str, value: Node) -> None:
        """Store *value* at *path*, creating intermediate structure."""
        assign(self.root, parse_path(path), value)

    def copy(self) -> Document:
        """Return an independent deep copy, e.g. to apply a batch atomically."""
        return Document(clone(self.root))

    # -- Bytes ----------------------------------------------------------

    @classmethod
    def loads(cls, data: bytes | str | None, source: object = "<bytes>") -> Document:
        """Parse *data* into a Document.

        ``None``, empty and whitespace-only input give an empty document.
        Invalid UTF-8, malformed or too deeply nested JSON and NaN/Infinity
        raise DocumentCorrupt.
        """
        if data is None:
            return cls()
        try:
            text = data.decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
            if not text.strip():
                return cls()
            # from_builtin rejects overflowing literals such as 1e999
            root = from_builtin(json.loads(text, parse_constant=_reject_constant))
        except (ValueError, RecursionError) as exc:
            raise DocumentCorrupt(source, str(exc)) from exc
        return cls(root)

    def dumps(self, indent: int | None = DEFAULT_INDENT) -> bytes:
        """Serialize to pretty-printed UTF-8 JSON in insertion order."""
        text = json.dumps(
            to_builtin(self.root),
            indent=indent,
            ensure_ascii=False,
            allow_nan=False,
        )
        return text.encode("utf-8")

    # -- Files ----------------------------------------------------------

    @classmethod
    def load(cls, path: Path | str) -> Document:
        """Read a Document from *path*; a missing file gives an empty one."""
        path = Path(path)
        if not path.exists():
            logger.debug("%s does not exist, starting from an empty document", path)
            return cls()
        return cls.loads(path.read_bytes(), source=path)

    def save(self, path: Path | str, indent: int | None = DEFAULT_INDENT) -> None:
        """Write the document to *path*, creating parent directories.

        The file is overwritten in place, not atomically.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.dumps(indent))
        logger.debug("Saved %s", path)
