"""In-memory query model.

A Query is built once from a query description and is read-only
afterwards; the same instance is shared by every line evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from pydantic import ValidationError

from .exceptions import QueryParseError
from .matcher import Condition, MatchKind
from .models.query import (
    CompareCondition,
    ConditionSpec,
    MatchCondition,
    QueryDescription,
)
from .pointer import Pointer, parse_pointer

_MTYPES = {
    "exact": MatchKind.EXACT,
    "regex": MatchKind.REGEX,
    "contain": MatchKind.CONTAIN,
}

_COMPARISONS = {
    "eq": MatchKind.EXACT,
    "gt": MatchKind.GREATER_THAN,
    "lt": MatchKind.LESS_THAN,
}


@dataclass(frozen=True)
class Pair:
    """Binds a location in the document to a condition."""

    pointer: Pointer
    condition: Condition


@dataclass(frozen=True)
class RawQuery:
    """Query testing a single pair."""

    pair: Pair


@dataclass(frozen=True)
class SelectAll:
    """Query used when none is given: every JSON document passes."""


Query = Union[RawQuery, SelectAll]


def build_condition(spec: ConditionSpec) -> Condition:
    """Convert a condition description into a Condition."""
    if isinstance(spec, MatchCondition):
        kind = _MTYPES[spec.mtype]
    elif isinstance(spec, CompareCondition):
        kind = _COMPARISONS[spec.type]
    else:
        raise TypeError(f"Unknown condition spec: {type(spec).__name__}")
    return Condition(kind=kind, operand=spec.value.to_value())


def build_query(description: QueryDescription) -> Query:
    """Convert a validated query description into a Query."""
    pair = description.query.pair
    return RawQuery(
        pair=Pair(
            pointer=parse_pointer(pair.pointer),
            condition=build_condition(pair.condition),
        )
    )


def parse_query(text: str) -> Query:
    """Parse query description text.

    Args:
        text: JSON query description

    Returns:
        Executable Query

    Raises:
        QueryParseError: If the text is not valid JSON, does not match the
            description format, or holds a bad pointer or regex
    """
    try:
        description = QueryDescription.model_validate_json(text)
        return build_query(description)
    except ValidationError as e:
        raise QueryParseError(f"Invalid query: {e}") from e
    except (ValueError, OverflowError) as e:
        raise QueryParseError(str(e)) from e


__all__ = [
    "Pair",
    "Query",
    "RawQuery",
    "SelectAll",
    "build_condition",
    "build_query",
    "parse_query",
]
