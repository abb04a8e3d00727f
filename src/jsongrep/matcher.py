"""Condition matching.

Matching is type-strict: an operand and a target are only compared when
they carry the same type tag (``1`` never equals ``"1"``). Incompatible
pairs raise MatchError instead of quietly failing, so that a grep over
a field with unexpected types is reported rather than silently empty.
"""

import functools
import re
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Pattern

from .exceptions import MatchError
from .values import TypeTag, Value, VFloat, VString

ORDERED_TAGS = frozenset(
    {TypeTag.BOOL, TypeTag.INT, TypeTag.FLOAT, TypeTag.STRING}
)


class MatchKind(Enum):
    """How a condition compares its operand with the target."""

    EXACT = "Exact"
    REGEX = "Regex"
    CONTAIN = "Contain"
    GREATER_THAN = "GreaterThan"
    LESS_THAN = "LessThan"


@functools.lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> Pattern[str]:
    """Compile a regex pattern, caching by pattern text."""
    return re.compile(pattern)


@dataclass(frozen=True)
class Condition:
    """Right-hand side of a comparison: a match kind and its operand.

    Regex operands are compiled on construction so that a bad pattern is
    rejected before any input is read.
    """

    kind: MatchKind
    operand: Value

    def __post_init__(self) -> None:
        if self.kind is MatchKind.REGEX and isinstance(self.operand, VString):
            try:
                compile_pattern(self.operand.value)
            except re.error as e:
                raise ValueError(f"Invalid regex ({self.operand.value})") from e

    def __str__(self) -> str:
        return f"Condition({self.kind.value}, {self.operand})"


def _mismatch(condition: Condition, target: Value) -> MatchError:
    return MatchError(
        matcher_type=condition.kind.value,
        matcher_value=str(condition.operand),
        target=str(target),
        by=str(condition),
    )


def _exact(condition: Condition, target: Value) -> bool:
    operand = condition.operand
    if operand.tag is not target.tag:
        raise _mismatch(condition, target)
    if isinstance(operand, VFloat):
        return abs(operand.value - target.value) <= sys.float_info.epsilon
    return operand == target


def _text(condition: Condition, target: Value) -> bool:
    operand = condition.operand
    if not isinstance(operand, VString) or not isinstance(target, VString):
        raise _mismatch(condition, target)
    if condition.kind is MatchKind.CONTAIN:
        return operand.value in target.value
    # search, not fullmatch: "[sS]irius" matches inside "Sirius B"
    return compile_pattern(operand.value).search(target.value) is not None


def _ordered(condition: Condition, target: Value) -> bool:
    operand = condition.operand
    if operand.tag is not target.tag or operand.tag not in ORDERED_TAGS:
        raise _mismatch(condition, target)
    if condition.kind is MatchKind.GREATER_THAN:
        return target.value > operand.value
    return target.value < operand.value


def matches(condition: Condition, target: Value) -> bool:
    """Report whether ``target`` satisfies ``condition``.

    Args:
        condition: Condition to test
        target: Value resolved from the document

    Returns:
        True if the target satisfies the condition

    Raises:
        MatchError: If the operand and target types are incompatible for
            the condition's match kind
    """
    kind = condition.kind
    if kind is MatchKind.EXACT:
        return _exact(condition, target)
    if kind in (MatchKind.REGEX, MatchKind.CONTAIN):
        return _text(condition, target)
    return _ordered(condition, target)


__all__ = ["Condition", "MatchKind", "compile_pattern", "matches"]
