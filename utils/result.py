"""Result type for boundary operations that report failure instead of raising."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """Outcome of a best-effort operation; the caller picks the fallback."""

    value: T | None = None
    error: E | None = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @classmethod
    def success(cls, value: T) -> "Result[T, E]":
        return cls(value=value, error=None)

    @classmethod
    def failure(cls, error: E) -> "Result[T, E]":
        return cls(value=None, error=error)

    def unwrap(self) -> T:
        """Return the value, raising ValueError for a failed result."""
        if self.is_error:
            raise ValueError(f"Cannot unwrap failed result: {self.error}")
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        return self.value if self.is_success else default  # type: ignore[return-value]
