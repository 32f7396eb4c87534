"""Singly linked lists and the usual operations on them."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(eq=False, repr=False)
class ListNode:
    """One node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> ListNode | None:
        """Build a list holding the values in order; an empty iterable gives None."""
        dummy = cls()
        tail = dummy
        for value in values:
            tail.next = cls(value)
            tail = tail.next
        return dummy.next

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({list(self)})"


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as little-endian digit lists and return the sum as a new list."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    if carry > 0:
        tail.next = ListNode(carry)
    return dummy.next


def _splice(l1: ListNode | None, l2: ListNode | None, first_wins_ties: bool) -> ListNode | None:
    """Merge two sorted lists by relinking their nodes."""
    dummy = ListNode()
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val < l2.val or (first_wins_ties and l1.val == l2.val):
            tail.next = l1
            l1 = l1.next
        else:
            tail.next = l2
            l2 = l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def merge_two_lists(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Merge two sorted lists into one, reusing their nodes; on ties the first list goes first."""
    return _splice(l1, l2, first_wins_ties=True)


def merge_k_lists(lists: Iterable[ListNode | None]) -> ListNode | None:
    """Return a new sorted list holding every value of the given lists."""
    heap = [node.val for head in lists for node in _nodes(head)]
    heapq.heapify(heap)
    return ListNode.from_values(heapq.heappop(heap) for _ in range(len(heap)))


def sort_list(head: ListNode | None) -> ListNode | None:
    """Sort a list by merge sort, relinking its nodes, and return the new head."""
    if head is None or head.next is None:
        return head
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    right = slow.next
    slow.next = None
    return _splice(sort_list(head), sort_list(right), first_wins_ties=False)