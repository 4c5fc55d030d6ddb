"""Decode response bodies into a caller-chosen shape.

Any shape pydantic can validate works: ``BaseModel`` subclasses, dataclasses,
``TypedDict`` and plain containers such as ``List[int]``. Fields are matched by
name and unknown keys are ignored.
"""
from functools import lru_cache
from typing import Any, Dict, List, Type, TypeVar, Union

from pydantic import TypeAdapter

JSONValue = Union[str, int, float, bool, None, List["JSONValue"], Dict[str, "JSONValue"]]

T = TypeVar("T")


@lru_cache(maxsize=256)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def decode_json(shape: Type[T], data: bytes) -> T:
    """Validate raw JSON bytes as ``shape``; raises ``pydantic.ValidationError`` on mismatch."""
    return _adapter(shape).validate_json(data)
