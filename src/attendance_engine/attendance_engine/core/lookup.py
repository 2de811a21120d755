"""Explicit lookup results for directory and session queries.

A miss is a normal outcome in this domain (employee without a department,
unknown session value), so lookups return ``Found(value)`` or ``NOT_FOUND``
instead of raising or returning sentinel strings.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    def __bool__(self) -> bool:
        return False


NOT_FOUND = NotFound()

Lookup = Union[Found[T], NotFound]


def value_or(result: "Lookup[T]", default: T) -> T:
    if isinstance(result, Found):
        return result.value
    return default
