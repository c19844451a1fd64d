"""Lazily sorted priority queue used by the median-cut iterations."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class PriorityQueue(Generic[T]):
    """Container that keeps its items ascending by ``key`` on demand.

    ``push`` only appends and marks the contents unsorted; the next ``pop`` or
    ``peek`` sorts and serves from the tail, so the maximum comes out first.
    """

    def __init__(self, key: Callable[[T], Any]) -> None:
        self._key = key
        self._contents: list[T] = []
        self._sorted = False

    def _sort(self) -> None:
        self._contents.sort(key=self._key)
        self._sorted = True

    def push(self, item: T) -> None:
        self._contents.append(item)
        self._sorted = False

    def peek(self, index: int | None = None) -> T:
        if not self._sorted:
            self._sort()
        if index is None:
            index = len(self._contents) - 1
        return self._contents[index]

    def pop(self) -> T:
        if not self._sorted:
            self._sort()
        return self._contents.pop()

    def size(self) -> int:
        return len(self._contents)

    def __len__(self) -> int:
        return len(self._contents)

    def __iter__(self) -> Iterator[T]:
        if not self._sorted:
            self._sort()
        return iter(list(self._contents))

    def map(self, func: Callable[[T], R]) -> list[R]:
        """Apply ``func`` to every item in current (ascending) order."""

        return [func(item) for item in self]
