"""IDManager - assigns stable IDs to values and looks them up both ways."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Generator, Generic, Hashable, Iterator, TypeVar

from idmanager.core.diagnostics import WarningSink, logging_sink
from idmanager.core.generator import IDGenerator
from idmanager.core.handle import SharedHandle
from idmanager.core.types import ID, BorrowError, InvariantViolation

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


class IDManager(Generic[T]):
    """
    Bidirectional store mapping issued IDs to values and values to IDs.

    Each inserted value is wrapped once in a SharedHandle. The forward
    index (ID -> handle) and the reverse index (handle -> ID) hold that
    same handle, so the value is never copied and is released when both
    entries are gone.

    Inserting a value equal to one already stored retires the old ID and
    issues a new one. IDs are never reused.
    """

    def __init__(self, warn: WarningSink | None = None, max_id: int = sys.maxsize) -> None:
        self._generator = IDGenerator(max_id=max_id)
        self._forward: dict[ID, SharedHandle[T]] = {}
        self._reverse: dict[SharedHandle[T], ID] = {}
        self._warn = warn if warn is not None else logging_sink
        self._borrows = 0

    @classmethod
    def new(cls, warn: WarningSink | None = None, max_id: int = sys.maxsize) -> IDManager[T]:
        return cls(warn=warn, max_id=max_id)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _check_not_borrowed(self, operation: str) -> None:
        if self._borrows:
            raise BorrowError(f"IDManager.{operation}() called while a borrowed value is held")

    def _retire(self, old_id: ID) -> None:
        handle = self._forward.pop(old_id)
        del self._reverse[handle]

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def insert(self, value: T) -> ID:
        """
        Store ``value`` under a fresh ID and return that ID.

        If an equal value is already stored its association is removed
        first. Raises IDSpaceExhausted, without changing anything, once
        the ID space is used up.
        """
        self._check_not_borrowed("insert")
        # Fail before displacing anything
        self._generator.peek()

        old_id = self._reverse.get(value)
        if old_id is not None:
            self._retire(old_id)
            logger.debug("Retired %r: equal value re-inserted", old_id)

        new_id = self._generator.issue()
        handle = SharedHandle(value)
        self._forward[new_id] = handle
        self._reverse[handle] = new_id
        logger.debug("Inserted %r as %r", value, new_id)
        return new_id

    def lookup_id(self, value: T) -> ID | None:
        return self._reverse.get(value)

    def lookup_value(self, id: ID | int) -> T | None:
        """The stored value for ``id``, or None if it was removed or never issued.

        ``id`` must be an ID or an int; other types raise TypeError.
        """
        if not isinstance(id, ID):
            if id < 0:
                return None
            id = ID(id)
        handle = self._forward.get(id)
        return handle.value if handle is not None else None

    def remove(self, value: T) -> bool:
        """
        Remove the association for a value equal to ``value``.

        Returns True if something was removed. Otherwise emits one line on
        the warning channel and returns False. The removed ID is retired.
        """
        self._check_not_borrowed("remove")
        old_id = self._reverse.get(value)
        if old_id is None:
            self._warn(f"tried to remove nonexistent value {value!r}")
            return False
        self._retire(old_id)
        logger.debug("Removed %r (was %r)", value, old_id)
        return True

    def clear(self) -> None:
        """Retire every present association. The counter keeps its position."""
        self._check_not_borrowed("clear")
        self._forward.clear()
        self._reverse.clear()

    @contextmanager
    def borrow(self, id: ID | int) -> Generator[T | None, None, None]:
        """
        Yield the value for ``id`` and block mutation until the block exits.

        ``insert``, ``remove`` and ``clear`` raise BorrowError while any
        borrow is open, so the yielded value stays the one stored.
        """
        self._borrows += 1
        try:
            yield self.lookup_value(id)
        finally:
            self._borrows -= 1

    def items(self) -> Iterator[tuple[ID, T]]:
        """Present (ID, value) pairs. No ordering is guaranteed."""
        for ident, handle in self._forward.items():
            yield ident, handle.value

    def check_invariants(self) -> None:
        """Raise InvariantViolation if the two indexes are not exact inverses."""
        if len(self._forward) != len(self._reverse):
            raise InvariantViolation(
                f"index sizes differ: forward={len(self._forward)} reverse={len(self._reverse)}"
            )
        issued = self._generator.issued
        for ident, handle in self._forward.items():
            if ident.value >= issued:
                raise InvariantViolation(f"{ident!r} was never issued (next is {issued})")
            back = self._reverse.get(handle)
            if back != ident:
                raise InvariantViolation(f"{ident!r} maps back to {back!r}")
        for handle, ident in self._reverse.items():
            if self._forward.get(ident) is not handle:
                raise InvariantViolation(f"{ident!r} does not share storage with the reverse index")

    @property
    def next_id(self) -> ID:
        return ID(self._generator.issued)

    @property
    def total_ids(self) -> int:
        return self._generator.issued

    def __len__(self) -> int:
        return len(self._forward)

    def has_id(self, id: ID | int) -> bool:
        if not isinstance(id, ID):
            if id < 0:
                return False
            id = ID(id)
        return id in self._forward

    def __contains__(self, value: object) -> bool:
        """Membership by stored value. Use ``has_id`` to ask about an ID."""
        return value in self._reverse

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self)}, next_id={self.next_id.value})"
