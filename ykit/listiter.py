"""A bidirectional cursor over a sequence."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any


class ListIter:
    """A cursor that steps forwards and backwards through a sequence.

    ``index`` is the position of the next item ``next`` will yield; ``value``
    holds the item the last successful step landed on, or ``None``.
    """

    def __init__(self, items: Sequence[Any] | None) -> None:
        self.items = items
        self.index = 0
        self.value: Any = None

    def next(self) -> bool:
        """Advance to the next item; return False when there is none."""
        if self.items is not None and self.index < len(self.items):
            self.value = self.items[self.index]
            self.index += 1
            return True
        self.value = None
        return False

    def prev(self) -> bool:
        """Step back to the previous item; return False at the start."""
        if self.items is not None and self.index > 0:
            self.value = self.items[self.index - 1]
            self.index -= 1
            return True
        self.value = None
        return False

    def begin(self) -> None:
        """Move the cursor to the start of the sequence."""
        self.index = 0
        self.value = None

    def end(self) -> None:
        """Move the cursor past the last item of the sequence."""
        self.index = len(self.items) if self.items is not None else 0
        self.value = None

    def __iter__(self) -> Iterator[Any]:
        while self.next():
            yield self.value