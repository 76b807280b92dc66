"""
Store results - explicit success/failure outcomes for transcript operations.

Expected conditions (unknown student, missing grade, duplicate grade) are
returned as values, not raised. Callers check `result.success` and read
either `result.value` or `result.error`.
"""

from __future__ import annotations

from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class StoreError(str, Enum):
    # no live transcript for the given student ID
    NOT_FOUND = "NOT_FOUND"

    # student exists but has no grade recorded for the course
    GRADE_NOT_FOUND = "GRADE_NOT_FOUND"

    # student already has a grade for the course
    DUPLICATE_GRADE = "DUPLICATE_GRADE"


class StoreResult(Generic[T]):
    """
    Outcome of a transcript store operation.

    Attributes:
        success (bool): Indicates whether the operation succeeded.
        value (T | None): Payload on success, varies by operation.
        error (StoreError | None): Failure kind when success is False.
        detail (str | None): Optional human-readable explanation.
    """

    def __init__(
        self,
        success: bool,
        value: Optional[T] = None,
        error: Optional[StoreError] = None,
        detail: Optional[str] = None,
    ):
        self._success = success
        self._value = value
        self._error = error
        self._detail = detail

    # === properties ===

    @property
    def success(self) -> bool:
        return self._success

    @property
    def value(self) -> Optional[T]:
        return self._value

    @property
    def error(self) -> Optional[StoreError]:
        return self._error

    @property
    def detail(self) -> Optional[str]:
        return self._detail

    # === public classmethods ===

    @classmethod
    def succeed(cls, value: Optional[T] = None, detail: Optional[str] = None) -> StoreResult[T]:
        return cls(success=True, value=value, detail=detail)

    @classmethod
    def fail(cls, error: StoreError, detail: Optional[str] = None) -> StoreResult[T]:
        return cls(success=False, error=error, detail=detail)

    # === dunder methods ===

    def __repr__(self) -> str:
        if self.success:
            return f"StoreResult(success=True, value={self.value!r})"
        return f"StoreResult(success=False, error={self.error.value}, detail={self.detail!r})"
