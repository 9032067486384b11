"""Two-armed result type for expected failures.

``Either`` threads domain failures through the layers as plain values
instead of exceptions.  A value is exactly one of:

- ``Left(value)``: the failure arm (usually a ``DomainError``).
- ``Right(value)``: the success arm.

Both arms are frozen dataclasses, so the tag and the value cannot change
after construction.  Unexpected faults are still raised as exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

L = TypeVar("L")
R = TypeVar("R")


@dataclass(frozen=True)
class Left(Generic[L]):
    """Failure arm."""

    value: L

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False


@dataclass(frozen=True)
class Right(Generic[R]):
    """Success arm."""

    value: R

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True


Either = Union[Left[L], Right[R]]


def left(value: L) -> Left[L]:
    return Left(value)


def right(value: Any = None) -> Right[Any]:
    return Right(value)
