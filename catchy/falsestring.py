"""A truth value that carries a reason when it is false."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FalseString:
    """Represents success (empty reason) or failure (non-empty reason)."""

    reason: str = ""

    @classmethod
    def false(cls, reason: str) -> FalseString:
        """Create a failed result; the reason must not be empty."""
        if not reason:
            raise ValueError("a false result needs a non-empty reason")
        return cls(reason)

    @classmethod
    def true(cls) -> FalseString:
        """Create a successful result."""
        return cls("")

    def is_true(self) -> bool:
        return not self.reason

    def __bool__(self) -> bool:
        return self.is_true()

    @classmethod
    def combine(cls, lhs: FalseString, rhs: FalseString) -> FalseString:
        """Merge two results, joining the reasons of both when both failed."""
        if lhs.is_true() and rhs.is_true():
            return cls.true()
        if not lhs.is_true() and not rhs.is_true():
            return cls.false(f"{lhs.reason}\n{rhs.reason}")
        return rhs if lhs.is_true() else lhs

    def __str__(self) -> str:
        return "<true>" if self else self.reason