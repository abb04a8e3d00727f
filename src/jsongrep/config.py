"""Config layer: query and sort definitions for a run.

Each definition can be given inline or as a file (never both):

    query: --raw-query / $JSONGREP_QUERY, --query-file / $JSONGREP_QUERY_FILE
    sort:  --raw-sort  / $JSONGREP_SORT,  --sort-file  / $JSONGREP_SORT_FILE

Definitions are parsed once into GrepSettings before any input is read.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from .exceptions import OptionError
from .query import Query, SelectAll, parse_query
from .sort import SortKey, Sorter, parse_sort

__all__ = [
    "GrepSettings",
    "load_query",
    "load_settings",
    "load_sort_keys",
    "read_definition",
]


@dataclass(frozen=True)
class GrepSettings:
    """Parsed, read-only settings shared by every line of a run."""

    query: Query
    sort_keys: Tuple[SortKey, ...] = ()

    def make_sorter(self) -> Optional[Sorter]:
        """Return a fresh Sorter, or None when no sort is configured."""
        if not self.sort_keys:
            return None
        return Sorter(self.sort_keys)


def read_definition(
    inline: Optional[str], path: Optional[Path], name: str
) -> Optional[str]:
    """Return definition text from exactly one of ``inline`` or ``path``.

    Blank inline text counts as not given.

    Raises:
        OptionError: If both are given
        OSError: If the file cannot be read
    """
    if inline is not None and not inline.strip():
        inline = None
    if inline is not None and path is not None:
        raise OptionError(f"raw_{name} and {name}_file are exclusive")
    if path is not None:
        return Path(path).read_text(encoding="utf-8")
    return inline


def load_query(inline: Optional[str], path: Optional[Path]) -> Query:
    """Load the query; without one every JSON line is selected."""
    text = read_definition(inline, path, "query")
    if text is None:
        return SelectAll()
    return parse_query(text)


def load_sort_keys(
    inline: Optional[str], path: Optional[Path]
) -> Tuple[SortKey, ...]:
    text = read_definition(inline, path, "sort")
    if text is None:
        return ()
    return parse_sort(text)


def load_settings(
    raw_query: Optional[str] = None,
    query_file: Optional[Path] = None,
    raw_sort: Optional[str] = None,
    sort_file: Optional[Path] = None,
) -> GrepSettings:
    """Resolve and parse all definitions for a run.

    Raises:
        OptionError: If a definition is given both inline and as a file
        QueryParseError: If a definition is malformed
        OSError: If a definition file cannot be read
    """
    return GrepSettings(
        query=load_query(raw_query, query_file),
        sort_keys=load_sort_keys(raw_sort, sort_file),
    )
