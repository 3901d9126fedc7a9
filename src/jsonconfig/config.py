"""JsonConfig: a Document bound to a file on disk.

Usage::

    cfg = JsonConfig(Path("conf/data.json"))   # folder and file created if missing
    cfg.set("server.ports[0]", JNumber(8080))
    cfg.set_as("server.name", STRING, "main")
    cfg.get_as("server.name", STRING)          # → "main"
    cfg.save()
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TypeVar

from .codec import Codec
from .document import DEFAULT_INDENT, Document
from .errors import DocumentCorrupt
from .model import JObject, Node

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonConfig:
    """File-backed JSON configuration with dotted/indexed path access."""

    def __init__(self, file: Path | str, indent: int | None = DEFAULT_INDENT) -> None:
        self.file = Path(file)
        self.indent = indent
        self._ensure_file()
        self.document = self._read()

    # -- Files ----------------------------------------------------------

    @property
    def folder(self) -> Path:
        return self.file.parent

    def _ensure_file(self) -> None:
        if not self.folder.exists():
            logger.debug("Creating folder %s", self.folder)
            self.folder.mkdir(parents=True, exist_ok=True)
        if not self.file.exists():
            logger.debug("Creating empty config file %s", self.file)
            self.file.touch()

    def _read(self) -> Document:
        try:
            return Document.loads(self.file.read_bytes(), source=self.file)
        except DocumentCorrupt:
            logger.error("Failed to parse json in %s", self.file)
            raise

    def reload(self) -> None:
        """Discard in-memory changes and read the file again."""
        self._ensure_file()
        self.document = self._read()

    def save(self) -> None:
        """Write the document back to the file (folder recreated if gone)."""
        self.document.save(self.file, indent=self.indent)

    # -- Tree access ----------------------------------------------------

    @property
    def root(self) -> JObject:
        return self.document.root

    def get(self, path: str) -> Node:
        return self.document.get(path)

    def set(self, path: str, value: Node) -> None:
        self.document.set(path, value)

    def get_as(self, path: str, codec: Codec[T]) -> T:
        """Resolve *path* and decode the node with *codec*."""
        return codec.decode(self.get(path))

    def set_as(self, path: str, codec: Codec[T], value: T) -> None:
        """Encode *value* with *codec* and store it at *path*."""
        self.set(path, codec.encode(value))

    def __repr__(self) -> str:
        return f"JsonConfig({str(self.file)!r})"
