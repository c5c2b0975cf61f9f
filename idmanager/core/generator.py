"""IDGenerator - the monotonically increasing counter behind IDManager."""

from __future__ import annotations

import sys

from idmanager.core.types import ID, IDSpaceExhausted


class IDGenerator:
    """
    Hands out ID(0), ID(1), ID(2), ... in order.

    The counter only moves forward. Once it passes ``max_id`` every
    further ``issue()`` raises IDSpaceExhausted and leaves the counter
    where it is.
    """

    def __init__(self, max_id: int = sys.maxsize) -> None:
        if max_id < 0:
            raise ValueError(f"max_id must be nonnegative, got {max_id}")
        self._next = ID(0)
        self._max_id = max_id

    @property
    def exhausted(self) -> bool:
        return self._next.value > self._max_id

    @property
    def issued(self) -> int:
        return self._next.value

    def peek(self) -> ID:
        """The ID the next ``issue()`` will return. Raises once exhausted."""
        if self.exhausted:
            raise IDSpaceExhausted(f"all IDs up to {self._max_id} have been issued")
        return self._next

    def issue(self) -> ID:
        new_id = self.peek()
        self._next = new_id.next()
        return new_id
