"""A priority queue that keeps higher priorities at the front."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Ordered queue: the highest priority is served first.

    An item whose priority is no higher than the current last one joins the
    back, so equal low priorities keep their arrival order.  An item strictly
    above the current front goes to the front.  Otherwise it is placed before
    the first item after the front whose priority does not exceed it.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[float, T]] = []

    def push(self, item: T, priority: float) -> None:
        """Insert ``item`` with the given ``priority``."""
        entries = self._entries
        entry = (priority, item)
        if not entries or priority <= entries[-1][0]:
            entries.append(entry)
        elif entries[0][0] < priority:
            entries.insert(0, entry)
        else:
            position = 1
            while entries[position][0] > priority:
                position += 1
            entries.insert(position, entry)

    def pop(self) -> T:
        """Remove and return the front item; IndexError when empty."""
        if not self._entries:
            raise IndexError("pop from an empty priority queue")
        return self._entries.pop(0)[1]

    def peek(self) -> T:
        """Return the front item without removing it; IndexError when empty."""
        if not self._entries:
            raise IndexError("peek into an empty priority queue")
        return self._entries[0][1]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[T]:
        return iter([item for _, item in self._entries])

    def __bool__(self) -> bool:
        return bool(self._entries)