"""Modifier — scoped mutable access with commit-on-release.

Creating a Modifier copies the tracked value into a snapshot. Reads and
writes through the Modifier go straight to the live value. Releasing it
(explicitly, or by leaving its ``with`` block on any path) compares the
snapshot with the live value once and, if they differ, notifies every
listener with (snapshot, live).

Attribute and item access are forwarded to the live value, so

    with tracker.as_tracked_mut() as m:
        m.a = 10
        m["key"] = "x"

mutates the tracked object directly. Use get_value()/replace() to read or
replace the whole value; the wrapped value's own get() and set() stay
reachable through forwarding.

A Modifier that is dropped without being released is released by the
garbage collector. Listener errors raised there cannot reach the caller,
so they are logged instead; prefer ``with`` or DataTracker.mutate().
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, Iterator, TypeVar

from datatracker.errors import GuardReleasedError, ValueOperationError

if TYPE_CHECKING:
    from datatracker.tracker import DataTracker

T = TypeVar("T")

logger = logging.getLogger("datatracker.modifier")


class Modifier(Generic[T]):
    """Exclusive, change-detected access to a DataTracker's value.

    Obtain one with DataTracker.as_tracked_mut(). Only one may be
    outstanding per tracker; while it lives the tracker refuses views,
    other Modifiers and listener changes.
    """

    __slots__ = ("_tracker", "_snapshot", "_released")

    def __init__(self, tracker: DataTracker[T, Any]) -> None:
        tracker._borrow.acquire_exclusive()
        try:
            snapshot = tracker._clone(tracker._value)
        except Exception as exc:
            tracker._borrow.release_exclusive()
            raise ValueOperationError(f"duplicating tracked value failed: {exc}") from exc
        object.__setattr__(self, "_tracker", tracker)
        object.__setattr__(self, "_snapshot", snapshot)
        object.__setattr__(self, "_released", False)

    def _live(self) -> T:
        if self._released:
            raise GuardReleasedError("Modifier has already been released")
        return self._tracker._value

    # --- Whole-value access ---

    def get_value(self) -> T:
        """Return the live value (not the snapshot)."""
        return self._live()

    def replace(self, value: T) -> None:
        """Replace the live value."""
        self._live()
        self._tracker._value = value

    @property
    def released(self) -> bool:
        return self._released

    def has_changed(self) -> bool:
        """Compare live value with the snapshot without notifying."""
        live = self._live()
        return self._differs(self._snapshot, live)

    def _differs(self, snapshot: T, live: T) -> bool:
        try:
            return not self._tracker._eq(snapshot, live)
        except Exception as exc:
            raise ValueOperationError(f"comparing tracked values failed: {exc}") from exc

    # --- Release ---

    def release(self) -> None:
        """Compare against the snapshot and notify listeners on change.

        Runs once; later calls are no-ops. The exclusive borrow is dropped
        even if the comparison or a listener raises, in which case the
        exception propagates and the changed value stays in place.
        """
        if self._released:
            return
        object.__setattr__(self, "_released", True)
        tracker = self._tracker
        snapshot = self._snapshot
        try:
            live = tracker._value
            if self._differs(snapshot, live):
                logger.debug(
                    "Value changed: notifying %d listener(s)", len(tracker._registry)
                )
                tracker._registry.notify_all(snapshot, live)
            else:
                logger.debug("Value unchanged: no notification")
        finally:
            object.__setattr__(self, "_snapshot", None)
            tracker._borrow.release_exclusive()

    def __enter__(self) -> Modifier[T]:
        self._live()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __del__(self) -> None:
        # Unset when __init__ failed before the borrow was taken.
        if getattr(self, "_released", True):
            return
        try:
            self.release()
        except Exception:
            logger.exception("Error releasing a Modifier that was never released")

    # --- Forwarding to the live value ---

    def __getattr__(self, name: str) -> Any:
        if name in Modifier.__slots__:
            raise AttributeError(name)
        return getattr(self._live(), name)

    def __setattr__(self, name: str, value: Any) -> None:
        setattr(self._live(), name, value)

    def __delattr__(self, name: str) -> None:
        delattr(self._live(), name)

    def __getitem__(self, key: Any) -> Any:
        return self._live()[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._live()[key] = value

    def __delitem__(self, key: Any) -> None:
        del self._live()[key]

    def __len__(self) -> int:
        return len(self._live())

    def __iter__(self) -> Iterator[Any]:
        return iter(self._live())

    def __contains__(self, item: Any) -> bool:
        return item in self._live()

    def __repr__(self) -> str:
        if self._released:
            return "Modifier(released)"
        return f"Modifier({self._tracker._value!r})"
