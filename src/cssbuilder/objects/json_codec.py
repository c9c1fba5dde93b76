"""Compact JSON encoding of plain objects and decoding back into a given type."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

__all__ = ["get_json", "from_json"]

T = TypeVar("T")


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if hasattr(obj, "__dict__"):
        return vars(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    Examples:
        get_json([1, 2, 3])              -> '[1,2,3]'
        get_json(Rectangle(10, 20))      -> '{"width":10,"height":20}'
    """
    return json.dumps(obj, separators=(",", ":"), default=_default)


def from_json(cls: type[T], text: str) -> T:
    """Build an instance of *cls* from the JSON object in *text*.

    ``__init__`` is not called; every key of the object becomes an
    attribute, so the instance behaves like *cls* for its methods:

        from_json(Rectangle, '{"width":10,"height":20}').area()  -> 200
    """
    props = json.loads(text)
    if not isinstance(props, dict):
        raise TypeError(f"Expected a JSON object, got {type(props).__name__}")
    obj = cls.__new__(cls)
    for key, value in props.items():
        object.__setattr__(obj, key, value)
    return obj
