"""jsongrep exceptions."""

import json
from dataclasses import dataclass


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


class JsonGrepError(Exception):
    """Base class for all jsongrep errors."""

    pass


class QueryParseError(JsonGrepError):
    """Query or sort description could not be parsed.

    Raised before any input line is read; aborts the run.
    """

    pass


class OptionError(JsonGrepError):
    """Invalid combination of command line options."""

    def __init__(self, reason: str):
        super().__init__(f"Invalid option ({reason})")
        self.reason = reason


class JsonParseError(JsonGrepError):
    """Input line is not valid JSON."""

    pass


@dataclass
class PointerError(JsonGrepError):
    """Pointer does not resolve against a document."""

    pointer: str
    value: str

    def __str__(self) -> str:
        return (
            f"Invalid pointer (pointer: {_quote(self.pointer)}, "
            f"value: {_quote(self.value)})"
        )


@dataclass
class MatchError(JsonGrepError):
    """Condition cannot be applied to the resolved value."""

    matcher_type: str
    matcher_value: str
    target: str
    by: str

    def __str__(self) -> str:
        return (
            f"Matcher type mismatch (matcher_type {_quote(self.matcher_type)}, "
            f"matcher_value {_quote(self.matcher_value)}, "
            f"target {_quote(self.target)}, by {_quote(self.by)})"
        )


__all__ = [
    "JsonGrepError",
    "JsonParseError",
    "MatchError",
    "OptionError",
    "PointerError",
    "QueryParseError",
]
