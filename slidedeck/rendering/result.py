"""Result type returned at the rendering boundary."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class RenderResult(Generic[T]):
    """Outcome of a call into the rendering library.

    Exactly one of ``value`` (on success, may be None for side-effect-only
    operations) or ``reason`` (on failure) is meaningful.
    """

    value: Optional[T] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "RenderResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, reason: str) -> "RenderResult[T]":
        return cls(reason=reason or "unknown rendering failure")
