"""jsongrep: filter NDJSON lines by a structural query."""

from .evaluator import Outcome, Verdict, evaluate
from .exceptions import (
    JsonGrepError,
    JsonParseError,
    MatchError,
    PointerError,
    QueryParseError,
)
from .query import Query, parse_query

__all__ = [
    "JsonGrepError",
    "JsonParseError",
    "MatchError",
    "Outcome",
    "PointerError",
    "Query",
    "QueryParseError",
    "Verdict",
    "__version__",
    "evaluate",
    "parse_query",
]

__version__ = "0.1.0"
