"""JSON pointer parsing and resolution.

Pointer syntax follows RFC 6901:

    /a/b/0      # key "a", key "b", index 0
    /a~1b       # key "a/b"
    /m~0n       # key "m~n"

with one exception: a bare ``/`` (like the empty string) addresses the
document root rather than the key ``""``.
"""

import re
from dataclasses import dataclass
from typing import Tuple

from .exceptions import PointerError
from .values import Value, VArray, VObject, dumps

_INDEX_RE = re.compile(r"0|[1-9][0-9]*")
_BAD_ESCAPE_RE = re.compile(r"~(?![01])")


@dataclass(frozen=True)
class Pointer:
    """Parsed pointer.

    Examples:
        "/s"   → Pointer(raw="/s", segments=("s",))
        "/a/0" → Pointer(raw="/a/0", segments=("a", "0"))
        "/"    → Pointer(raw="/", segments=())
    """

    raw: str
    """Pointer text as written in the query."""

    segments: Tuple[str, ...] = ()
    """Unescaped reference tokens, root first."""

    @property
    def is_root(self) -> bool:
        return not self.segments

    def __str__(self) -> str:
        return self.raw


def _unescape(token: str) -> str:
    if _BAD_ESCAPE_RE.search(token):
        raise ValueError(f"Invalid escape sequence in pointer token: {token!r}")
    # ~1 first so that "~01" becomes "~1", not "/"
    return token.replace("~1", "/").replace("~0", "~")


def parse_pointer(raw: str) -> Pointer:
    """Parse pointer text into segments.

    Args:
        raw: Pointer text, e.g. "/d/a/1"

    Returns:
        Parsed Pointer

    Raises:
        ValueError: If the text does not start with "/" or has a bad escape
    """
    if raw in ("", "/"):
        return Pointer(raw=raw)
    if not raw.startswith("/"):
        raise ValueError(f"Pointer must be empty or start with '/': {raw!r}")
    segments = tuple(_unescape(token) for token in raw[1:].split("/"))
    return Pointer(raw=raw, segments=segments)


def _step(current: Value, segment: str) -> Value | None:
    if isinstance(current, VObject):
        return current.entries.get(segment)
    if isinstance(current, VArray):
        if not _INDEX_RE.fullmatch(segment):
            return None
        # more digits than the array length: always out of range
        if len(segment) > len(str(len(current.items))):
            return None
        index = int(segment)
        if index >= len(current.items):
            return None
        return current.items[index]
    # scalars have no children
    return None


def resolve(root: Value, pointer: Pointer) -> Value:
    """Return the value addressed by ``pointer`` inside ``root``.

    Raises:
        PointerError: If a key is missing, an index is invalid or out of
            range, or the walk reaches a scalar before the last segment
    """
    current = root
    for segment in pointer.segments:
        child = _step(current, segment)
        if child is None:
            raise PointerError(pointer=pointer.raw, value=dumps(root))
        current = child
    return current


__all__ = ["Pointer", "parse_pointer", "resolve"]
