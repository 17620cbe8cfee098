"""Maximal score after repeatedly taking and shrinking the largest value."""

from __future__ import annotations

from typing import Iterable

from codekata.heap import MaxHeap


def max_k_elements(nums: Iterable[int], k: int) -> int:
    """Take the largest value ``k`` times, replacing it by ceil(value / 3)."""
    heap: MaxHeap[int] = MaxHeap()
    for num in nums:
        heap.push(num)

    score = 0
    for _ in range(k):
        if not heap:
            break
        value = heap.pop()
        score += value
        heap.push(-(-value // 3))
    return score