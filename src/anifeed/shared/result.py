"""Typed success/failure container returned by the data layer.

Every repository operation resolves to either ``Success`` or ``Failure``;
exceptions raised by the network, the decoder or the cache never escape.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from anifeed.shared.errors import AniFeedError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    def get_or_none(self) -> T | None:
        return self.value


@dataclass(frozen=True)
class Failure:
    """Failed outcome carrying the error that caused it."""

    error: AniFeedError

    @property
    def is_success(self) -> bool:
        return False

    @property
    def message(self) -> str:
        """Human-readable message for the presentation layer."""
        return self.error.message

    def get_or_none(self) -> None:
        return None


Result = Union[Success[T], Failure]


__all__ = ["Failure", "Result", "Success"]
