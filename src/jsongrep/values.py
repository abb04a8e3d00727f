"""JSON value model.

Every decoded document is converted into a closed set of frozen value
types so that the pointer resolver and the matcher can dispatch on the
type tag instead of on Python's own (looser) JSON types:

    null    → VNull
    true    → VBool(True)
    1       → VInt(1)
    1.5     → VFloat(1.5)
    "a"     → VString("a")
    [1]     → VArray((VInt(1),))
    {"a":1} → VObject({"a": VInt(1)})

``str(value)`` gives the debug render used in diagnostics, e.g.
``Int(1)`` or ``String([sS]irius)``.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, Tuple, Union

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

RENDER_LIMIT = 64


class TypeTag(Enum):
    """Type tag of a value, named as in diagnostics."""

    NULL = "Null"
    BOOL = "Bool"
    INT = "Int"
    FLOAT = "Float"
    STRING = "String"
    ARRAY = "Array"
    OBJECT = "Object"

    @property
    def rank(self) -> int:
        """Position in the total order of type tags.

        null < array < object < bool < number < string; Int and Float
        share the number rank.
        """
        return _RANKS[self]


_RANKS = {
    TypeTag.NULL: 0,
    TypeTag.ARRAY: 1,
    TypeTag.OBJECT: 2,
    TypeTag.BOOL: 3,
    TypeTag.INT: 4,
    TypeTag.FLOAT: 4,
    TypeTag.STRING: 5,
}


def _abbreviate(text: str) -> str:
    if len(text) <= RENDER_LIMIT:
        return text
    return text[:RENDER_LIMIT] + "..."


@dataclass(frozen=True)
class VNull:
    tag: ClassVar[TypeTag] = TypeTag.NULL

    def __str__(self) -> str:
        return "Null"


@dataclass(frozen=True)
class VBool:
    value: bool
    tag: ClassVar[TypeTag] = TypeTag.BOOL

    def __str__(self) -> str:
        return f"Bool({str(self.value).lower()})"


@dataclass(frozen=True)
class VInt:
    value: int
    tag: ClassVar[TypeTag] = TypeTag.INT

    def __str__(self) -> str:
        return f"Int({self.value})"


@dataclass(frozen=True)
class VFloat:
    value: float
    tag: ClassVar[TypeTag] = TypeTag.FLOAT

    def __str__(self) -> str:
        return f"Float({self.value!r})"


@dataclass(frozen=True)
class VString:
    value: str
    tag: ClassVar[TypeTag] = TypeTag.STRING

    def __str__(self) -> str:
        return f"String({_abbreviate(self.value)})"


@dataclass(frozen=True)
class VArray:
    items: Tuple["Value", ...] = ()
    tag: ClassVar[TypeTag] = TypeTag.ARRAY

    def __str__(self) -> str:
        return f"Array({_abbreviate(dumps(self))})"


@dataclass(frozen=True)
class VObject:
    # dict equality ignores insertion order; iteration keeps it
    entries: Dict[str, "Value"] = field(default_factory=dict)
    tag: ClassVar[TypeTag] = TypeTag.OBJECT

    def __str__(self) -> str:
        return f"Object({_abbreviate(dumps(self))})"


Value = Union[VNull, VBool, VInt, VFloat, VString, VArray, VObject]

NULL = VNull()


def from_json(obj: Any) -> Value:
    """Convert a ``json.loads`` result into a Value tree.

    Integers outside the signed 64-bit range become floats.

    Raises:
        ValueError: If a number does not fit a finite float
        TypeError: If ``obj`` contains a non-JSON Python type
    """
    if obj is None:
        return NULL
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return VBool(obj)
    if isinstance(obj, int):
        if I64_MIN <= obj <= I64_MAX:
            return VInt(obj)
        return VFloat(finite_float(obj))
    if isinstance(obj, float):
        return VFloat(finite_float(obj))
    if isinstance(obj, str):
        return VString(obj)
    if isinstance(obj, (list, tuple)):
        return VArray(tuple(from_json(x) for x in obj))
    if isinstance(obj, dict):
        return VObject({str(k): from_json(v) for k, v in obj.items()})
    raise TypeError(f"Not a JSON value: {type(obj).__name__}")


def to_json(value: Value) -> Any:
    """Convert a Value tree back into plain Python JSON types."""
    if isinstance(value, VNull):
        return None
    if isinstance(value, (VBool, VInt, VFloat, VString)):
        return value.value
    if isinstance(value, VArray):
        return [to_json(x) for x in value.items]
    if isinstance(value, VObject):
        return {k: to_json(v) for k, v in value.entries.items()}
    raise TypeError(f"Not a Value: {type(value).__name__}")


def dumps(value: Value) -> str:
    """Compact JSON text of a value, e.g. ``{"a":[]}``."""
    return json.dumps(
        to_json(value),
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


def finite_float(number: Union[int, float]) -> float:
    """Convert to float, rejecting values outside the finite range.

    Raises:
        ValueError: "number out of range"
    """
    try:
        result = float(number)
    except OverflowError as e:
        raise ValueError("number out of range") from e
    if not math.isfinite(result):
        raise ValueError("number out of range")
    return result


def _parse_float(text: str) -> float:
    return finite_float(float(text))


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid number {name}")


def loads(text: str) -> Value:
    """Parse JSON text into a Value.

    ``NaN``, ``Infinity`` and numbers that overflow a float (``1e400``)
    are rejected.

    Raises:
        ValueError: With the decoder's own diagnostic
    """
    return from_json(
        json.loads(
            text, parse_float=_parse_float, parse_constant=_reject_constant
        )
    )


__all__ = [
    "NULL",
    "TypeTag",
    "VArray",
    "VBool",
    "VFloat",
    "VInt",
    "VNull",
    "VObject",
    "VString",
    "Value",
    "dumps",
    "finite_float",
    "from_json",
    "loads",
    "to_json",
]
