"""Binary min-heap ordered by a caller supplied comparison function."""

from __future__ import annotations

from typing import Callable, Generic, List, Optional, TypeVar


T = TypeVar("T")


class MinHeapPriorityQueue(Generic[T]):
    """Priority queue returning elements in ascending order of ``compare``.

    ``compare(a, b)`` must return a negative number when ``a`` sorts before
    ``b``, zero when they are equal and a positive number otherwise. Equal
    elements come out in heap order, not insertion order.
    """

    def __init__(self, compare: Callable[[T, T], float]) -> None:
        self._heap: List[T] = []
        self._compare = compare

    # ------------------------------------------------------------------
    # Index helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _left(index: int) -> int:
        return 2 * index + 1

    @staticmethod
    def _right(index: int) -> int:
        return 2 * index + 2

    @staticmethod
    def _parent(index: int) -> int:
        return (index - 1) // 2

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    def _sift_up(self) -> None:
        index = len(self._heap) - 1
        while index > 0:
            parent = self._parent(index)
            if self._compare(self._heap[index], self._heap[parent]) >= 0:
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self) -> None:
        index = 0
        size = len(self._heap)
        while self._left(index) < size:
            smaller = self._left(index)
            right = self._right(index)
            if right < size and self._compare(self._heap[right], self._heap[smaller]) < 0:
                smaller = right
            if self._compare(self._heap[index], self._heap[smaller]) <= 0:
                break
            self._swap(index, smaller)
            index = smaller

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def put(self, element: T) -> None:
        """Insert ``element``."""

        self._heap.append(element)
        self._sift_up()

    def get(self) -> Optional[T]:
        """Remove and return the smallest element, or ``None`` when empty."""

        if not self._heap:
            return None
        smallest = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down()
        return smallest

    def peek(self) -> Optional[T]:
        """Return the smallest element without removing it, or ``None``."""

        return self._heap[0] if self._heap else None

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)


__all__ = ["MinHeapPriorityQueue"]
