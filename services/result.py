"""
Outcome type for expected, non-exceptional service failures.

Roster validation reports bad input as a failed Result carrying a code from
services.error_codes; infrastructure failures are raised instead.

    check = service.validate_roster(player_ids, skills)
    if not check:
        return ShuffleResult.failure(check.error, code=check.error_code)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value (success) or an error message with an optional code."""

    success: bool
    value: T | None = None
    error: str | None = None
    error_code: str | None = None

    @classmethod
    def ok(cls, value: T | None = None) -> "Result[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: str, code: str | None = None) -> "Result[T]":
        return cls(success=False, error=error, error_code=code)

    def __bool__(self) -> bool:
        return self.success

    def unwrap(self) -> T:
        """Return the value, or raise ValueError carrying the error message."""
        if not self.success:
            raise ValueError(f"Result has no value: {self.error}")
        return self.value  # type: ignore
