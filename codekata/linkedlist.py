"""Singly linked list nodes and classic list algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from codekata.heap import MinHeap


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list of integers."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def to_list(self) -> List[int]:
        """Return the values from this node to the end of the list."""
        return list(self)

    def __repr__(self) -> str:
        return "ListNode(" + " -> ".join(str(v) for v in self) + ")"


def from_iterable(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list from values; None when there are none."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_list(head: Optional[ListNode]) -> List[int]:
    """Return the values of a possibly empty linked list."""
    return [] if head is None else head.to_list()


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop consecutive duplicate values in place and return the head."""
    node = head
    while node is not None and node.next is not None:
        if node.val == node.next.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list right by k places and return the new head."""
    if k < 0:
        raise ValueError("k must not be negative")
    if head is None or head.next is None:
        return head

    length = 1
    tail = head
    while tail.next is not None:
        tail = tail.next
        length += 1

    k %= length
    if k == 0:
        return head

    new_tail = head
    for _ in range(length - k - 1):
        assert new_tail.next is not None
        new_tail = new_tail.next

    new_head = new_tail.next
    new_tail.next = None
    tail.next = head
    return new_head


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge several linked lists into one new sorted list."""
    heap: MinHeap[int] = MinHeap()
    for head in lists:
        if head is not None:
            for value in head:
                heap.push(value)

    dummy = ListNode()
    tail = dummy
    while heap:
        tail.next = ListNode(heap.pop())
        tail = tail.next
    return dummy.next