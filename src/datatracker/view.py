"""ReadOnlyView — shared, read-only access to a DataTracker's value.

Every read checks that no Modifier is live. Holding the view open in a
``with`` block additionally registers a shared borrow, so the tracker
refuses as_tracked_mut() until the block exits.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, Iterator, TypeVar

if TYPE_CHECKING:
    from datatracker.tracker import DataTracker

T = TypeVar("T")


class ReadOnlyView(Generic[T]):
    """Read-only handle on a tracked value. Writes raise TypeError."""

    __slots__ = ("_tracker", "_open")

    def __init__(self, tracker: DataTracker[T, Any]) -> None:
        object.__setattr__(self, "_tracker", tracker)
        object.__setattr__(self, "_open", 0)

    def _live(self) -> T:
        tracker = self._tracker
        tracker._check_alive()
        tracker._borrow.check_not_exclusive("read the value")
        return tracker._value

    def get_value(self) -> T:
        """Return the live value.

        The object itself is not frozen; mutate it only through a Modifier
        or listeners will not hear about it.
        """
        return self._live()

    def __enter__(self) -> ReadOnlyView[T]:
        self._tracker._check_alive()
        self._tracker._borrow.acquire_shared()
        object.__setattr__(self, "_open", self._open + 1)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._open:
            object.__setattr__(self, "_open", self._open - 1)
            self._tracker._borrow.release_shared()

    # --- Read forwarding ---

    def __getattr__(self, name: str) -> Any:
        if name in ReadOnlyView.__slots__:
            raise AttributeError(name)
        return getattr(self._live(), name)

    def __getitem__(self, key: Any) -> Any:
        return self._live()[key]

    def __len__(self) -> int:
        return len(self._live())

    def __iter__(self) -> Iterator[Any]:
        return iter(self._live())

    def __contains__(self, item: Any) -> bool:
        return item in self._live()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ReadOnlyView):
            other = other._live()
        return self._live() == other

    __hash__ = None  # type: ignore[assignment]

    # --- Writes are refused ---

    def __setattr__(self, name: str, value: Any) -> None:
        raise TypeError(f"ReadOnlyView does not support setting {name!r}")

    def __delattr__(self, name: str) -> None:
        raise TypeError(f"ReadOnlyView does not support deleting {name!r}")

    def __setitem__(self, key: Any, value: Any) -> None:
        raise TypeError("ReadOnlyView does not support item assignment")

    def __delitem__(self, key: Any) -> None:
        raise TypeError("ReadOnlyView does not support item deletion")

    def __repr__(self) -> str:
        return f"ReadOnlyView({self._tracker._value!r})"
