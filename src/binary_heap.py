import logging
from typing import TypeVar, Generic, List, Iterable, Iterator, Optional

log = logging.getLogger(__name__)

T = TypeVar('T')


class BinaryHeap(Generic[T]):
    """Array-backed binary heap, min-ordered by default.

    With ``min_heap=False`` the largest element has the highest priority.
    """

    def __init__(self, values: Optional[Iterable[T]] = None, min_heap: bool = True) -> None:
        self._min_heap = min_heap
        self._data: List[T] = []
        if values is not None:
            self._data = list(values)
            self._build()

    @property
    def min_heap(self) -> bool:
        return self._min_heap

    def _before(self, a: T, b: T) -> bool:
        """True if ``a`` must sit above ``b``."""
        if self._min_heap:
            return a < b
        return a > b

    def _build(self) -> None:
        log.debug("building heap from %d values", len(self._data))
        for i in range(len(self._data) // 2 - 1, -1, -1):
            self._sift_down(i)

    def put(self, value: T) -> None:
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def pop(self) -> T:
        if not self._data:
            raise IndexError("pop from empty heap")
        if len(self._data) == 1:
            return self._data.pop()
        result = self._data[0]
        self._data[0] = self._data.pop()
        self._sift_down(0)
        return result

    def peek(self) -> T:
        if not self._data:
            raise IndexError("peek from empty heap")
        return self._data[0]

    def sort(self) -> List[T]:
        """Empty the heap, returning its elements in priority order."""
        result: List[T] = []
        while self._data:
            result.append(self.pop())
        return result

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def clear(self) -> None:
        self._data.clear()

    def copy(self) -> 'BinaryHeap[T]':
        clone: BinaryHeap[T] = BinaryHeap(min_heap=self._min_heap)
        clone._data = self._data.copy()
        return clone

    @staticmethod
    def from_array(arr: Iterable[T], min_heap: bool = True) -> 'BinaryHeap[T]':
        """Build a heap from an array in O(n).

        Note: Creates a shallow copy of the input array.
        """
        return BinaryHeap(arr, min_heap=min_heap)

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if self._before(self._data[index], self._data[parent]):
                self._data[index], self._data[parent] = self._data[parent], self._data[index]
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        size = len(self._data)
        while True:
            top = index
            left = 2 * index + 1
            right = 2 * index + 2
            if left < size and self._before(self._data[left], self._data[top]):
                top = left
            if right < size and self._before(self._data[right], self._data[top]):
                top = right
            if top == index:
                break
            self._data[index], self._data[top] = self._data[top], self._data[index]
            index = top

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def __repr__(self) -> str:
        kind = "min" if self._min_heap else "max"
        return f"BinaryHeap({self._data}, {kind})"

    def __str__(self) -> str:
        return f"BinaryHeap(size={len(self._data)})"

    def __iter__(self) -> Iterator[T]:
        heap_copy = self.copy()
        while not heap_copy.is_empty():
            yield heap_copy.pop()
