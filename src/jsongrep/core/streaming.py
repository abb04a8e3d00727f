"""NDJSON stream filtering.

Reads lines from an input stream, evaluates each against the query and:
- writes passing lines unchanged to the output stream
- drops failing lines
- writes ``line {n}: {message}`` for erroring lines to the error stream

When a Sorter is given, passing lines are held until EOF and written in
sorted order.
"""

from typing import Iterator, Optional, TextIO, Tuple

from ..evaluator import evaluate
from ..models import GrepSummary
from ..query import Query
from ..sort import Sorter


def iter_lines(input_stream: TextIO) -> Iterator[Tuple[int, str]]:
    """Yield (1-based line number, line text without newline)."""
    for number, line in enumerate(input_stream, start=1):
        yield number, line.rstrip("\r\n")


def grep_stream(
    input_stream: TextIO,
    output_stream: TextIO,
    query: Query,
    sorter: Optional[Sorter] = None,
    error_stream: Optional[TextIO] = None,
) -> GrepSummary:
    """Filter input lines by query.

    Args:
        input_stream: Stream to read NDJSON lines from
        output_stream: Stream for passing lines
        query: Parsed query
        sorter: Optional sorter; output is delayed until EOF when set
        error_stream: Stream for per-line diagnostics (dropped if None)

    Returns:
        Counts of passed, failed and errored lines
    """
    summary = GrepSummary()
    for number, text in iter_lines(input_stream):
        outcome = evaluate(query, number, text)
        if outcome.passed:
            summary.passed += 1
            if sorter is not None:
                sorter.add(text, outcome.document)
            else:
                output_stream.write(text + "\n")
        elif outcome.failed:
            summary.failed += 1
        else:
            summary.errored += 1
            if error_stream is not None:
                error_stream.write(f"{outcome.message}\n")

    if sorter is not None:
        for text in sorter.sorted_lines():
            output_stream.write(text + "\n")

    return summary
