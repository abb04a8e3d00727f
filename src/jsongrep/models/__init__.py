"""Pydantic models for query and sort descriptions."""

from .query import (
    CompareCondition,
    LiteralSpec,
    MatchCondition,
    QueryDescription,
    QueryPairSpec,
    RawQuerySpec,
)
from .sort import SortDescription, SortPairSpec
from .summary import GrepSummary

__all__ = [
    "CompareCondition",
    "GrepSummary",
    "LiteralSpec",
    "MatchCondition",
    "QueryDescription",
    "QueryPairSpec",
    "RawQuerySpec",
    "SortDescription",
    "SortPairSpec",
]
