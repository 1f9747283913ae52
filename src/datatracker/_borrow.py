"""Runtime borrow flag — exclusivity state for one tracker.

One exclusive borrow (a Modifier) or any number of shared borrows (views
held open in a ``with`` block), never both. Checked and set on the
caller's thread; there is no locking.
"""

from __future__ import annotations

from datatracker.errors import AliasingViolation


class BorrowFlag:
    __slots__ = ("exclusive", "shared")

    def __init__(self) -> None:
        self.exclusive = False
        self.shared = 0

    def check_not_exclusive(self, what: str) -> None:
        if self.exclusive:
            raise AliasingViolation(f"cannot {what} while a Modifier is outstanding")

    def acquire_shared(self) -> None:
        self.check_not_exclusive("open a read-only view")
        self.shared += 1

    def release_shared(self) -> None:
        if self.shared > 0:
            self.shared -= 1

    def check_unborrowed(self, what: str) -> None:
        self.check_not_exclusive(what)
        if self.shared:
            raise AliasingViolation(
                f"cannot {what} while {self.shared} read-only view(s) are open"
            )

    def acquire_exclusive(self) -> None:
        self.check_unborrowed("borrow the value mutably")
        self.exclusive = True

    def release_exclusive(self) -> None:
        self.exclusive = False

    def __repr__(self) -> str:
        if self.exclusive:
            return "BorrowFlag(exclusive)"
        return f"BorrowFlag(shared={self.shared})"
