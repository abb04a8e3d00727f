"""Output sorting.

Passing lines are buffered and written once the stream ends. Keys are
applied one after another with a stable sort, so the last key listed is
the primary order:

    {"sort": [{"p": "/i"}, {"p": "/j"}]}    # ordered by /j, ties by /i

Values order as null < array < object < bool < number < string. Arrays
all compare equal, as do objects. A pointer that does not resolve sorts
as null.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple

from pydantic import ValidationError

from .evaluator import parse_line
from .exceptions import PointerError, QueryParseError
from .models.sort import SortDescription
from .pointer import Pointer, parse_pointer, resolve
from .values import NULL, Value, VBool, VFloat, VInt, VString


@dataclass(frozen=True)
class SortKey:
    pointer: Pointer
    descending: bool = False


def sort_key(value: Value) -> Tuple[int, Any]:
    """Comparable key for a value in the type-tag order."""
    if isinstance(value, (VBool, VInt, VFloat, VString)):
        return (value.tag.rank, value.value)
    return (value.tag.rank, 0)


def _lookup(root: Value, pointer: Pointer) -> Value:
    try:
        return resolve(root, pointer)
    except PointerError:
        return NULL


class Sorter:
    """Collects lines and returns them in key order."""

    def __init__(self, keys: Iterable[SortKey]):
        self.keys = tuple(keys)
        self._rows: List[Tuple[Tuple[Tuple[int, Any], ...], str]] = []

    def __len__(self) -> int:
        return len(self._rows)

    def add(self, line_text: str, root: Optional[Value] = None) -> None:
        """Buffer a line, extracting its sort keys.

        ``root`` is the already parsed line; the text is parsed when omitted.

        Raises:
            JsonParseError: If the line is not valid JSON
        """
        if root is None:
            root = parse_line(line_text)
        row_keys = tuple(sort_key(_lookup(root, k.pointer)) for k in self.keys)
        self._rows.append((row_keys, line_text))

    def sorted_lines(self) -> List[str]:
        rows = list(self._rows)
        for i, key in enumerate(self.keys):
            rows.sort(key=lambda row: row[0][i], reverse=key.descending)
        return [text for _, text in rows]


def build_sort_keys(description: SortDescription) -> Tuple[SortKey, ...]:
    return tuple(
        SortKey(
            pointer=parse_pointer(pair.pointer),
            descending=pair.order == "desc",
        )
        for pair in description.sort
    )


def parse_sort(text: str) -> Tuple[SortKey, ...]:
    """Parse sort description text into sort keys.

    Raises:
        QueryParseError: If the description is malformed
    """
    try:
        return build_sort_keys(SortDescription.model_validate_json(text))
    except ValidationError as e:
        raise QueryParseError(f"Invalid sort: {e}") from e
    except (ValueError, OverflowError) as e:
        raise QueryParseError(str(e)) from e


__all__ = ["SortKey", "Sorter", "build_sort_keys", "parse_sort", "sort_key"]
