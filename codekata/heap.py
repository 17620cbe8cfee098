"""Binary heaps backed by a Python list."""

from __future__ import annotations

from typing import Any, Generic, Iterator, List, TypeVar

T = TypeVar("T")


class _BinaryHeap(Generic[T]):
    """Array-backed binary heap; subclasses decide which value ranks first."""

    def __init__(self) -> None:
        self._values: List[T] = []

    def _ranks_before(self, first: Any, second: Any) -> bool:
        raise NotImplementedError

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return bool(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __str__(self) -> str:
        return "".join(f"{value} " for value in self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"

    def push(self, value: T) -> None:
        """Add a value to the heap."""
        self._values.append(value)
        self._sift_up(len(self._values) - 1)

    def peek(self) -> T:
        """Return the top value without removing it; IndexError if empty."""
        if not self._values:
            raise IndexError(f"peek from an empty {type(self).__name__}")
        return self._values[0]

    def pop(self) -> T:
        """Remove and return the top value; IndexError if empty."""
        if not self._values:
            raise IndexError(f"pop from an empty {type(self).__name__}")
        top = self._values[0]
        last = self._values.pop()
        if self._values:
            self._values[0] = last
            self._sift_down(0)
        return top

    def _sift_up(self, index: int) -> None:
        values = self._values
        while index > 0:
            parent = (index - 1) // 2
            if not self._ranks_before(values[index], values[parent]):
                break
            values[index], values[parent] = values[parent], values[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        values = self._values
        size = len(values)
        while (left := 2 * index + 1) < size:
            best = left
            right = left + 1
            if right < size and self._ranks_before(values[right], values[left]):
                best = right
            if not self._ranks_before(values[best], values[index]):
                break
            values[index], values[best] = values[best], values[index]
            index = best


class MinHeap(_BinaryHeap[T]):
    """Heap whose top is the smallest value."""

    def __init__(self) -> None:
        super().__init__()

    def __len__(self) -> int:
        return super().__len__()

    def __str__(self) -> str:
        return super().__str__()

    def _ranks_before(self, first: Any, second: Any) -> bool:
        return first < second

    def push(self, value: T) -> None:
        super().push(value)

    def peek(self) -> T:
        return super().peek()

    def pop(self) -> T:
        return super().pop()


class MaxHeap(_BinaryHeap[T]):
    """Heap whose top is the largest value."""

    def __init__(self) -> None:
        super().__init__()

    def __len__(self) -> int:
        return super().__len__()

    def __str__(self) -> str:
        return super().__str__()

    def _ranks_before(self, first: Any, second: Any) -> bool:
        return first > second

    def push(self, value: T) -> None:
        super().push(value)

    def peek(self) -> T:
        return super().peek()

    def pop(self) -> T:
        return super().pop()