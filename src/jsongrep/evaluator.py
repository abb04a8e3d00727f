"""Per-line query evaluation.

Each input line goes through three stages:

    PARSING    line text → Value        (JsonParseError)
    RESOLVING  pointer   → target Value (PointerError)
    MATCHING   condition → bool         (MatchError)

and ends as an Outcome: PASS, FAIL, or ERROR with a ``line {n}: ...``
message. Errors never escape ``evaluate``; one bad line does not stop
the stream.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .exceptions import JsonGrepError, JsonParseError, MatchError, PointerError
from .matcher import matches
from .pointer import resolve
from .query import Query, RawQuery, SelectAll
from .values import Value, loads


class Verdict(Enum):
    PASS = "pass"
    FAIL = "fail"
    ERROR = "error"


class Stage(Enum):
    PARSING = "parsing"
    RESOLVING = "resolving"
    MATCHING = "matching"
    DONE = "done"


@dataclass(frozen=True)
class Outcome:
    """Verdict for one input line."""

    verdict: Verdict
    line_number: int
    stage: Stage = Stage.DONE
    """Stage the evaluation stopped in (DONE unless it failed)."""

    message: Optional[str] = None
    """Diagnostic for ERROR outcomes, prefixed with the line number."""

    document: Optional[Value] = field(default=None, compare=False, repr=False)
    """Parsed line, kept on PASS outcomes only."""

    @property
    def passed(self) -> bool:
        return self.verdict is Verdict.PASS

    @property
    def failed(self) -> bool:
        return self.verdict is Verdict.FAIL

    @property
    def errored(self) -> bool:
        return self.verdict is Verdict.ERROR

    def __str__(self) -> str:
        if self.message:
            return self.message
        return f"line {self.line_number}: {self.verdict.value}"


def parse_line(line_text: str) -> Value:
    """Parse one line as a JSON document.

    Raises:
        JsonParseError: With the decoder's diagnostic
    """
    try:
        return loads(line_text)
    except (ValueError, OverflowError, RecursionError) as e:
        raise JsonParseError(str(e)) from e


def eval_query(query: Query, root: Value) -> bool:
    """Evaluate ``query`` against a parsed document.

    Raises:
        PointerError: If the query's pointer does not resolve
        MatchError: If the condition does not apply to the target
    """
    if isinstance(query, SelectAll):
        return True
    if isinstance(query, RawQuery):
        pair = query.pair
        return matches(pair.condition, resolve(root, pair.pointer))
    raise TypeError(f"Unknown query type: {type(query).__name__}")


_ERROR_STAGES = (
    (JsonParseError, Stage.PARSING),
    (PointerError, Stage.RESOLVING),
    (MatchError, Stage.MATCHING),
)


def error_stage(error: JsonGrepError) -> Stage:
    """Stage a per-line error was raised in."""
    for error_type, stage in _ERROR_STAGES:
        if isinstance(error, error_type):
            return stage
    return Stage.MATCHING


def evaluate(query: Query, line_number: int, line_text: str) -> Outcome:
    """Evaluate one input line.

    Args:
        query: Parsed query, shared read-only across lines
        line_number: 1-based line number used in diagnostics
        line_text: Line without its trailing newline

    Returns:
        Outcome for the line; a passing outcome carries the parsed document
    """
    try:
        root = parse_line(line_text)
        ok = eval_query(query, root)
    except JsonGrepError as e:
        return Outcome(
            verdict=Verdict.ERROR,
            line_number=line_number,
            stage=error_stage(e),
            message=f"line {line_number}: {e}",
        )
    if not ok:
        return Outcome(verdict=Verdict.FAIL, line_number=line_number)
    return Outcome(verdict=Verdict.PASS, line_number=line_number, document=root)


__all__ = [
    "Outcome",
    "Stage",
    "Verdict",
    "error_stage",
    "eval_query",
    "evaluate",
    "parse_line",
]
