"""Shared helpers for building query and sort descriptions in tests."""

from __future__ import annotations

import json
from typing import Any


def make_query(
    pointer: str,
    mtype: str | None,
    literal_type: str,
    value: Any,
    cond_type: str = "match",
) -> str:
    """Build query description text for a single pointer/condition pair."""
    cond: dict[str, Any] = {
        "type": cond_type,
        "value": {"type": literal_type, "value": value},
    }
    if cond_type == "match":
        cond["mtype"] = mtype
    return json.dumps(
        {"query": {"type": "raw", "pair": {"p": pointer, "cond": cond}}}
    )


def make_sort(*keys: tuple[str, str | None]) -> str:
    """Build sort description text from (pointer, order) pairs."""
    pairs = []
    for pointer, order in keys:
        pair = {"p": pointer}
        if order is not None:
            pair["ord"] = order
        pairs.append(pair)
    return json.dumps({"sort": pairs})
