"""Exception hierarchy for jsonconfig."""

from __future__ import annotations


class JsonConfigError(Exception):
    """Base class for every error raised by jsonconfig."""


class InvalidPath(JsonConfigError):
    """The path string is empty or has an empty component."""

    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid path {path!r}: {reason}")


class EmptyPath(InvalidPath):
    """An assignment was attempted with no segments at all."""

    def __init__(self, path: object = "") -> None:
        super().__init__(path, "path cannot be empty")


class PathNotFound(JsonConfigError):
    """A read traversal hit a missing key, an out-of-range index or null."""

    def __init__(self, path: str, segment: str) -> None:
        self.path = path
        self.segment = segment
        super().__init__(f"Path segment '{segment}' not found in '{path}'")


class TypeMismatch(JsonConfigError):
    """A segment needs an object or array but found another kind of node."""

    def __init__(self, path: str, segment: str, expected: str, found: str) -> None:
        self.path = path
        self.segment = segment
        self.expected = expected
        self.found = found
        super().__init__(
            f"Element at '{segment}' in '{path}' is not an {expected} (found {found})"
        )


class DocumentCorrupt(JsonConfigError):
    """The bytes of a document are not valid JSON."""

    def __init__(self, source: object, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to parse json in {source}: {reason}")


class EncodeError(JsonConfigError):
    """A codec could not turn a value into a node."""


class DecodeError(JsonConfigError):
    """A codec could not turn a node into a value."""
