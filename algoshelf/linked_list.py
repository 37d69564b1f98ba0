"""Singly linked list node and digit-list addition."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A singly linked list node. Nodes compare by identity."""

    val: int = 0
    next: Optional["ListNode"] = None


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def _iter(head: Optional[ListNode]) -> Iterator[int]:
    while head is not None:
        yield head.val
        head = head.next


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list as a Python list."""
    return list(_iter(head))


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as lists of digits, least significant first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
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
    return dummy.next