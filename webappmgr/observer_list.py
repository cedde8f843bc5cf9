"""An ordered list of observers without duplicates."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ObserverList(Generic[T]):
    """Observers kept in the order they were added, each at most once.

    Observers are compared by identity. None is never added.
    """

    def __init__(self) -> None:
        self._observers: list[Optional[T]] = []

    def _index(self, observer: Optional[T]) -> Optional[int]:
        if observer is None:
            return None
        for position, candidate in enumerate(self._observers):
            if candidate is observer:
                return position
        return None

    def add_observer(self, observer: Optional[T]) -> None:
        if observer is None or self.has_observer(observer):
            return
        self._observers.append(observer)

    def remove_observer(self, observer: Optional[T]) -> None:
        position = self._index(observer)
        if position is not None:
            del self._observers[position]

    def has_observer(self, observer: Optional[T]) -> bool:
        return self._index(observer) is not None

    def clear(self) -> None:
        self._observers.clear()

    def compact(self) -> None:
        """Drop empty slots."""
        self._observers = [obs for obs in self._observers if obs is not None]

    def for_each(self, func: Callable[[T], object]) -> None:
        """Call ``func`` on each observer of a snapshot of the list.

        Observers added or removed by ``func`` do not change this pass.
        """
        for observer in list(self._observers):
            if observer is not None:
                func(observer)

    def __len__(self) -> int:
        return len(self._observers)

    def __iter__(self) -> Iterator[T]:
        return iter([obs for obs in self._observers if obs is not None])