"""Shared types and exceptions for idmanager."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class ID:
    """Opaque identifier issued by an IDManager. Never reused once retired."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"ID must be nonnegative, got {self.value}")

    def next(self) -> ID:
        return ID(self.value + 1)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"ID({self.value})"


class IDSpaceExhausted(OverflowError):
    """Raised when the generator has no IDs left to issue. Nothing is mutated."""


class InvariantViolation(AssertionError):
    """The forward and reverse indexes disagree. Always an implementation bug."""


class BorrowError(RuntimeError):
    """A mutating call was made while a borrowed value was still held."""
