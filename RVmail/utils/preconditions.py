from __future__ import annotations

from collections.abc import Collection
from typing import Optional, TypeVar

from ..connection.exceptions import InvalidArgumentError

T = TypeVar("T")


def value_null_or_empty(value: object) -> bool:
    """
    True for None, blank strings, empty collections and empty bytes.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (bytes, bytearray)):
        return len(value) == 0
    if isinstance(value, Collection):
        return len(value) == 0
    return False


def check_argument_not_empty(value: Optional[T], name: str) -> T:
    if value_null_or_empty(value):
        raise InvalidArgumentError(f"{name} must not be empty")
    return value


def default_to(value: Optional[T], default: Optional[T]) -> Optional[T]:
    return value if value is not None else default
