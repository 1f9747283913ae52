"""DataTracker — owns a value and notifies listeners when it changes.

The tracker is the only way to reach its value:

- as_ref() hands out a ReadOnlyView;
- as_tracked_mut() hands out a Modifier, which snapshots the value and
  notifies listeners on release if the value no longer equals the snapshot.

Usage:
    tracker = DataTracker({"a": 1})
    tracker.add_listener(0, lambda old, new: print(old, "->", new))

    with tracker.as_tracked_mut() as m:
        m["a"] = 10
    # prints {'a': 1} -> {'a': 10}

Single owner, single thread. A runtime borrow flag, not a lock, keeps a
Modifier from coexisting with views or another Modifier.
"""

from __future__ import annotations

import copy
import logging
import operator
from typing import Any, Callable, Generic, Hashable, TypeVar

from datatracker._borrow import BorrowFlag
from datatracker._registry import ListenerRegistry, OnChanged
from datatracker.errors import TrackerDisposedError
from datatracker.modifier import Modifier
from datatracker.view import ReadOnlyView

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
R = TypeVar("R")

logger = logging.getLogger("datatracker.tracker")


class DataTracker(Generic[T, K]):
    """Tracks changes to an owned value of type T.

    Listeners are stored under caller-chosen keys of type K.

    clone duplicates the value for the snapshot (default copy.deepcopy);
    eq compares snapshot and live value (default ==).
    """

    __slots__ = ("_value", "_registry", "_borrow", "_clone", "_eq", "_disposed")

    def __init__(
        self,
        value: T,
        *,
        clone: Callable[[T], T] | None = None,
        eq: Callable[[T, T], bool] | None = None,
    ) -> None:
        self._value = value
        self._registry: ListenerRegistry[K, T] = ListenerRegistry()
        self._borrow = BorrowFlag()
        self._clone = clone or copy.deepcopy
        self._eq = eq or operator.eq
        self._disposed = False

    def _check_alive(self) -> None:
        if self._disposed:
            raise TrackerDisposedError("DataTracker has been disposed")

    # --- Access ---

    def as_ref(self) -> ReadOnlyView[T]:
        """Return a read-only view of the current value."""
        self._check_alive()
        self._borrow.check_not_exclusive("open a read-only view")
        return ReadOnlyView(self)

    def as_tracked_mut(self) -> Modifier[T]:
        """Return a Modifier for change-detected mutation.

        Release it with ``with`` or Modifier.release().
        """
        self._check_alive()
        return Modifier(self)

    def mutate(self, fn: Callable[..., R], *args: Any, **kwargs: Any) -> R:
        """Run fn(modifier, *args, **kwargs) inside one mutation scope.

        The Modifier is released on every exit path; fn's result is returned.

        Usage:
            def bump(m, by):
                m["a"] += by

            tracker.mutate(bump, 10)
        """
        with self.as_tracked_mut() as modifier:
            return fn(modifier, *args, **kwargs)

    @property
    def is_borrowed(self) -> bool:
        """True while a Modifier is outstanding."""
        return self._borrow.exclusive

    # --- Listeners ---

    def add_listener(self, key: K, callback: OnChanged[T]) -> OnChanged[T] | None:
        """Register callback(old, new) under key.

        Replaces and returns any callback already registered under key.
        Registering never notifies.
        """
        self._check_alive()
        self._borrow.check_not_exclusive("add a listener")
        return self._registry.insert(key, callback)

    def remove_listener(self, key: K) -> OnChanged[T] | None:
        """Remove and return the callback for key; None if absent."""
        self._check_alive()
        self._borrow.check_not_exclusive("remove a listener")
        return self._registry.remove(key)

    def has_listener(self, key: K) -> bool:
        self._check_alive()
        return key in self._registry

    def listener_keys(self) -> list[K]:
        """Registered keys in notification order."""
        self._check_alive()
        return list(self._registry)

    # --- Lifecycle ---

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """Drop the value and all listeners without notifying them.

        Refused while a Modifier is outstanding or a view is open in a
        ``with`` block.
        """
        if self._disposed:
            return
        self._borrow.check_unborrowed("dispose the tracker")
        count = len(self._registry)
        self._registry.clear()
        self._value = None
        self._disposed = True
        logger.debug("Disposed tracker: dropped %d listener(s)", count)

    def __repr__(self) -> str:
        if self._disposed:
            return "DataTracker(disposed)"
        return f"DataTracker({self._value!r}, listeners={len(self._registry)})"
