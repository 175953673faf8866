"""JSON value types.

Parsed values are the native Python objects the standard ``json`` module
produces. ``JSONKind`` and ``kind_of`` give them an explicit tag so callers
can branch on the kind of value without ad-hoc isinstance chains.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeAlias, Union

JSONScalar: TypeAlias = Union[str, int, float, bool, None]
JSONValue: TypeAlias = Union[JSONScalar, list["JSONValue"], dict[str, "JSONValue"]]
JSONObject: TypeAlias = dict[str, JSONValue]
JSONArray: TypeAlias = list[JSONValue]


class JSONKind(str, Enum):
    """Tag of a JSON value."""
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value: JSONValue) -> JSONKind:
    """Return the JSONKind of a parsed value.

    bool is checked before number because ``bool`` subclasses ``int``.
    """
    if value is None:
        return JSONKind.NULL
    if isinstance(value, bool):
        return JSONKind.BOOL
    if isinstance(value, (int, float)):
        return JSONKind.NUMBER
    if isinstance(value, str):
        return JSONKind.STRING
    if isinstance(value, list):
        return JSONKind.ARRAY
    if isinstance(value, dict):
        return JSONKind.OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def is_container(value: JSONValue) -> bool:
    """True for arrays and objects."""
    return isinstance(value, (list, dict))
