"""Listener registry — keyed (old, new) callbacks.

A plain dict keeps insertion order, so notification order is the order
keys were first registered. Replacing a callback keeps its key's slot.
"""

from __future__ import annotations

from typing import Callable, Generic, Hashable, Iterator, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

OnChanged = Callable[[T, T], None]


class ListenerRegistry(Generic[K, T]):
    """Unique-key mapping of change callbacks."""

    __slots__ = ("_callbacks",)

    def __init__(self) -> None:
        self._callbacks: dict[K, OnChanged[T]] = {}

    def insert(self, key: K, callback: OnChanged[T]) -> OnChanged[T] | None:
        """Register callback under key. Returns the callback it replaced, if any."""
        previous = self._callbacks.get(key)
        self._callbacks[key] = callback
        return previous

    def remove(self, key: K) -> OnChanged[T] | None:
        """Drop the callback for key. Missing keys are a no-op."""
        return self._callbacks.pop(key, None)

    def notify_all(self, old: T, new: T) -> None:
        """Call every callback with the same (old, new) pair."""
        for callback in list(self._callbacks.values()):
            callback(old, new)

    def clear(self) -> None:
        self._callbacks.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._callbacks

    def __len__(self) -> int:
        return len(self._callbacks)

    def __iter__(self) -> Iterator[K]:
        return iter(list(self._callbacks))

    def __repr__(self) -> str:
        return f"ListenerRegistry({list(self._callbacks)!r})"
