"""JSON and string helpers."""

from __future__ import annotations

import dataclasses
import json
import re
from datetime import date, datetime, timedelta
from typing import Any


def _default(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, timedelta):
        return (value // timedelta(microseconds=1)) * 1000
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    raise TypeError(f"json: unsupported type: {type(value).__name__}")


def stringify(value: Any) -> str:
    """Encode a value as compact JSON text; raises TypeError if it cannot be encoded."""
    return json.dumps(value, default=_default, separators=(",", ":"), ensure_ascii=False)


def parse(data: str | bytes) -> Any:
    """Decode JSON text; raises ValueError on malformed input."""
    return json.loads(data)


def parse_to(data: Any) -> Any:
    """Convert a value into plain JSON data by encoding and decoding it."""
    return parse(stringify(data))


def key_value_to_json(*args: Any) -> str:
    """Encode alternating keys and values as a JSON object.

    Pairs whose key is not a string are skipped, as is a trailing key
    without a value.
    """
    data = {
        key: value
        for key, value in zip(args[0::2], args[1::2])
        if isinstance(key, str)
    }
    return json.dumps(data, default=_default, separators=(",", ":"), ensure_ascii=False, sort_keys=True)


_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_WORD = re.compile(r"([A-Z]+)([A-Z][a-z])")
_NON_WORD = re.compile(r"[^0-9A-Za-z]+")


def to_snake_case(text: str) -> str:
    """Return text in lower snake case, splitting on camel case and punctuation."""
    spaced = _ACRONYM_WORD.sub(r"\1 \2", _LOWER_UPPER.sub(r"\1 \2", text))
    words = [word for word in _NON_WORD.split(spaced) if word]
    return "_".join(words).lower()