"""A growable sequence of references with map, apply and reject helpers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from ykit.listiter import ListIter


class YList:
    """An ordered list of items.

    Out-of-range positions never raise: lookups give ``None`` and updates are
    ignored. Predicates passed to the reject helpers select the items to
    drop; the items for which they return a false value are kept.
    """

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._items: list[Any] = list(items) if items is not None else []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, i: int) -> Any:
        return self._items[i]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, YList):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"YList({self._items!r})"

    def append(self, item: Any) -> None:
        """Add ``item`` at the end."""
        self._items.append(item)

    def insert_at(self, i: int, item: Any) -> None:
        """Insert ``item`` before position ``i``; ``i`` may equal the length.

        Positions outside ``0..len`` are ignored.
        """
        if 0 <= i <= len(self._items):
            self._items.insert(i, item)

    def remove(self, item: Any) -> None:
        """Remove the first occurrence of ``item``, if there is one."""
        for index, existing in enumerate(self._items):
            if existing is item or existing == item:
                del self._items[index]
                return

    def remove_at(self, i: int) -> None:
        """Remove the item at ``i``; out-of-range positions are ignored."""
        if 0 <= i < len(self._items):
            del self._items[i]

    def get(self, i: int) -> Any:
        """Return the item at ``i``, or ``None`` when out of range."""
        if 0 <= i < len(self._items):
            return self._items[i]
        return None

    def set(self, i: int, item: Any) -> None:
        """Replace the item at ``i``; out-of-range positions are ignored."""
        if 0 <= i < len(self._items):
            self._items[i] = item

    def pop(self) -> Any:
        """Remove and return the last item, or ``None`` when empty."""
        if self._items:
            return self._items.pop()
        return None

    def copy(self) -> YList:
        """Return a shallow copy."""
        return YList(self._items)

    def apply(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each item in order."""
        for item in self._items:
            func(item)

    def map(self, func: Callable[[Any], Any]) -> YList:
        """Return a new list of ``func(item)`` for each item."""
        return YList(func(item) for item in self._items)

    def reject(self, predicate: Callable[[Any], bool]) -> None:
        """Drop, in place, every item for which ``predicate`` is true."""
        self._items = [item for item in self._items if not predicate(item)]

    def rejected(self, predicate: Callable[[Any], bool]) -> YList:
        """Return a new list without the items for which ``predicate`` is true."""
        return YList(item for item in self._items if not predicate(item))

    def iapply(self, func: Callable[[Any, int], Any]) -> None:
        """Call ``func(item, index)`` on each item in order."""
        for index, item in enumerate(self._items):
            func(item, index)

    def imap(self, func: Callable[[Any, int], Any]) -> YList:
        """Return a new list of ``func(item, index)`` for each item."""
        return YList(func(item, index) for index, item in enumerate(self._items))

    def ireject(self, predicate: Callable[[Any, int], bool]) -> None:
        """Drop, in place, items for which ``predicate(item, index)`` is true.

        The index is the item's position before any removal.
        """
        self._items = [
            item for index, item in enumerate(self._items)
            if not predicate(item, index)
        ]

    def irejected(self, predicate: Callable[[Any, int], bool]) -> YList:
        """Return a new list without items where ``predicate(item, index)`` holds."""
        return YList(
            item for index, item in enumerate(self._items)
            if not predicate(item, index)
        )

    def iter(self) -> ListIter:
        """Return a cursor positioned before the first item."""
        return ListIter(self._items)

    def iter_first(self) -> ListIter:
        """Return a cursor already stepped onto the first item."""
        cursor = ListIter(self._items)
        cursor.next()
        return cursor

    def iter_last(self) -> ListIter:
        """Return a cursor positioned past the last item."""
        cursor = ListIter(self._items)
        cursor.end()
        return cursor