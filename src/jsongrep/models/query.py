"""Query description models (the external JSON query format).

Shape:

    {
      "query": {
        "type": "raw",
        "pair": {
          "p": "/s",
          "cond": {
            "type": "match",
            "mtype": "regex",
            "value": {"type": "string", "value": "[sS]irius"}
          }
        }
      }
    }

``type`` fields are discriminators; an unknown discriminator fails
validation.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
)

from ..pointer import parse_pointer
from ..values import (
    I64_MAX,
    I64_MIN,
    NULL,
    Value,
    VArray,
    VBool,
    VFloat,
    VInt,
    VObject,
    VString,
    finite_float,
    from_json,
)


class NullLiteral(BaseModel):
    type: Literal["null"]
    value: None = None

    def to_value(self) -> Value:
        return NULL


class BoolLiteral(BaseModel):
    type: Literal["bool"]
    value: StrictBool

    def to_value(self) -> Value:
        return VBool(self.value)


class IntLiteral(BaseModel):
    type: Literal["int"]
    value: StrictInt = Field(ge=I64_MIN, le=I64_MAX)

    def to_value(self) -> Value:
        return VInt(self.value)


class FloatLiteral(BaseModel):
    type: Literal["float"]
    value: Union[StrictFloat, StrictInt]

    def to_value(self) -> Value:
        return VFloat(finite_float(self.value))


class NumberLiteral(BaseModel):
    """Number whose type follows its value: integral → Int, else Float."""

    type: Literal["number"]
    value: Union[StrictInt, StrictFloat]

    def to_value(self) -> Value:
        v = self.value
        if isinstance(v, int) or v.is_integer():
            if I64_MIN <= v <= I64_MAX:
                return VInt(int(v))
        return VFloat(finite_float(v))


class StringLiteral(BaseModel):
    type: Literal["string"]
    value: StrictStr

    def to_value(self) -> Value:
        return VString(self.value)


class ArrayLiteral(BaseModel):
    type: Literal["array"]
    value: List[Any]

    def to_value(self) -> Value:
        return VArray(tuple(from_json(x) for x in self.value))


class ObjectLiteral(BaseModel):
    type: Literal["object"]
    value: Dict[str, Any]

    def to_value(self) -> Value:
        return VObject({k: from_json(v) for k, v in self.value.items()})


LiteralSpec = Annotated[
    Union[
        NullLiteral,
        BoolLiteral,
        IntLiteral,
        FloatLiteral,
        NumberLiteral,
        StringLiteral,
        ArrayLiteral,
        ObjectLiteral,
    ],
    Field(discriminator="type"),
]


class MatchCondition(BaseModel):
    """``{"type": "match", "mtype": ..., "value": ...}``"""

    type: Literal["match"]
    mtype: Literal["exact", "regex", "contain"]
    value: LiteralSpec


class CompareCondition(BaseModel):
    """``{"type": "eq" | "gt" | "lt", "value": ...}``"""

    type: Literal["eq", "gt", "lt"]
    value: LiteralSpec


ConditionSpec = Annotated[
    Union[MatchCondition, CompareCondition],
    Field(discriminator="type"),
]


class QueryPairSpec(BaseModel):
    """Pointer plus condition."""

    model_config = ConfigDict(populate_by_name=True)

    pointer: str = Field(alias="p")
    condition: ConditionSpec = Field(alias="cond")

    @field_validator("pointer")
    @classmethod
    def pointer_valid(cls, v: str) -> str:
        parse_pointer(v)
        return v


class RawQuerySpec(BaseModel):
    type: Literal["raw"]
    pair: QueryPairSpec


class QueryDescription(BaseModel):
    """Root of a query description."""

    query: RawQuerySpec


__all__ = [
    "ArrayLiteral",
    "BoolLiteral",
    "CompareCondition",
    "ConditionSpec",
    "FloatLiteral",
    "IntLiteral",
    "LiteralSpec",
    "MatchCondition",
    "NullLiteral",
    "NumberLiteral",
    "ObjectLiteral",
    "QueryDescription",
    "QueryPairSpec",
    "RawQuerySpec",
    "StringLiteral",
]
