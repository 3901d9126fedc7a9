"""Path parsing: ``a.b[3].c`` → ``[Key('a'), Index('b', 3), Key('c')]``."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Union

from .errors import InvalidPath

_WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_DIGITS = frozenset(string.digits)

MAX_INDEX = 2**31 - 1


# ---------------------------------------------------------------------------
# Segments
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Key:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Index:
    name: str  # key of the array inside its parent object
    index: int

    def __str__(self) -> str:
        return f"{self.name}[{self.index}]"


Segment = Union[Key, Index]


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _scan_index(part: str) -> tuple[str, str] | None:
    """Match ``name[digits]`` exactly; return ``(name, digits)`` or None.

    name is one or more ASCII word characters, digits one or more ASCII
    digits, and nothing may follow the closing bracket.
    """
    i = 0
    n = len(part)
    while i < n and part[i] in _WORD_CHARS:
        i += 1
    if i == 0 or i >= n or part[i] != "[":
        return None
    name_end = i
    i += 1
    digits_start = i
    while i < n and part[i] in _DIGITS:
        i += 1
    if i == digits_start or i >= n or part[i] != "]":
        return None
    if i != n - 1:
        return None
    return part[:name_end], part[digits_start:i]


def parse_segment(part: str, path: str = "") -> Segment:
    """Parse one dot-separated component.

    Anything that is not exactly ``name[digits]`` becomes a literal Key,
    brackets included.
    """
    match = _scan_index(part)
    if match is None:
        return Key(part)
    name, digits = match
    index = int(digits)
    if index > MAX_INDEX:
        raise InvalidPath(path or part, f"index {digits} in '{part}' is too large")
    return Index(name, index)


def parse_path(path: str) -> list[Segment]:
    """Split *path* on ``.`` and parse each component into a Segment."""
    if not isinstance(path, str):
        raise InvalidPath(path, "path must be a string")
    if path == "":
        raise InvalidPath(path, "path cannot be empty")

    segments: list[Segment] = []
    for pos, part in enumerate(path.split(".")):
        if part == "":
            raise InvalidPath(path, f"empty segment at position {pos}")
        segments.append(parse_segment(part, path))
    return segments


def format_path(segments: list[Segment]) -> str:
    """Render *segments* back to path text."""
    return ".".join(str(s) for s in segments)
