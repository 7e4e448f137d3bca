"""
records.py
==========
A rectangle record and a JSON round-trip for plain records.
"""

import dataclasses
import json
import math
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel


@dataclasses.dataclass
class Rectangle:
    """Rectangle with a derived area.

    Attributes:
        width: Width of the rectangle
        height: Height of the rectangle

    """

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height


def _finite(value: Any) -> Any:
    # NaN and Infinity have no JSON form; they are written as null
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(item) for item in value]
    return value


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return _finite(dataclasses.asdict(obj))
    if isinstance(obj, BaseModel):
        return _finite(obj.model_dump(mode='json'))
    if hasattr(obj, '__dict__'):
        return _finite(vars(obj))
    raise TypeError(f'Object of type {type(obj).__name__} is not JSON serializable')


def to_json(obj: Any) -> str:
    """Return the compact JSON representation of a record.

    Dataclasses, pydantic models and plain objects are written as JSON
    objects of their fields, in definition order. NaN and infinite floats
    are written as null.

    Example:
        >>> to_json([1, 2, 3])
        '[1,2,3]'
        >>> to_json(Rectangle(10, 20))
        '{"width":10,"height":20}'

    """
    return json.dumps(_finite(obj), separators=(',', ':'), ensure_ascii=False, allow_nan=False, default=_default)


def from_json(factory: Callable[..., Any] | Any, text: str) -> Any:
    """Build a record from JSON by passing the parsed values positionally.

    Field names are dropped: values are passed in the order they appear in
    the text, so a reordered or incomplete document builds a different
    record or fails with the factory's own TypeError. Use this as a
    convenience for trusted, well-ordered input only.

    Args:
        factory: Class or callable to invoke. An instance may be given, in
            which case its type is used.
        text: JSON text of an object, array or single value

    Returns:
        The result of calling the factory with the parsed values.

    Raises:
        json.JSONDecodeError: If the text is not valid JSON

    """
    if not callable(factory):
        factory = type(factory)

    data = json.loads(text)
    if isinstance(data, dict):
        values = list(data.values())
    elif isinstance(data, list):
        values = data
    else:
        values = [data]

    return factory(*values)
