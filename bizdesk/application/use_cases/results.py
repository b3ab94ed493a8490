"""Discriminated result for operations that touch the Record Store."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from bizdesk.domain.errors import BusinessDeskError

T = TypeVar("T")


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Either a success value or the error that prevented it.

    A failed result never carries a default value, so an error cannot be
    mistaken for a legitimate empty result.
    """

    value: T | None = None
    error: BusinessDeskError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> "OperationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: BusinessDeskError) -> "OperationResult[T]":
        return cls(error=error)

    def unwrap(self) -> T | None:
        """Return the value, raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value


__all__ = ["OperationResult"]
