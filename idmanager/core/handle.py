"""SharedHandle - one stored value, referenced from both indexes."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

T = TypeVar("T")


class SharedHandle(Generic[T]):
    """
    Wraps a stored value so the forward and reverse index can share it.

    Equality and hashing are delegated to the wrapped value, which lets a
    bare value be used to probe a dict keyed by handles. The value itself
    is never copied.
    """

    __slots__ = ("_value", "_hash")

    def __init__(self, value: T) -> None:
        self._value = value
        # Computed once; dict resizes reuse it
        self._hash = hash(value)

    @property
    def value(self) -> T:
        """Read-only access to the wrapped object."""
        return self._value

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, SharedHandle):
            return self._value is other._value or self._value == other._value
        return self._value is other or self._value == other

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self._value!r})"
