"""Shared, mutable singly-linked lists.

A LispList is a handle on a chain of ListNodes. Several handles (and several
List cells) may point into the same chain: `cdr` hands out a handle on the
second node, `car` hands out the very cell stored in the first node. Appending
through any handle walks to the tail of the shared chain, so the new node is
visible through every other handle that reaches it.

An empty list is a handle with no head node, never a node holding no value.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from sprig import LispValue


class ListNode:
    """One link of a chain: exactly one value and an optional successor."""

    __slots__ = ("value", "next")

    def __init__(self, value: LispValue, next: Optional[ListNode] = None):
        self.value: LispValue = value
        self.next: ListNode | None = next

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


class LispList:
    """Handle on a (possibly empty) chain of ListNodes."""

    __slots__ = ("head",)

    def __init__(self, head: Optional[ListNode] = None):
        self.head: ListNode | None = head

    @classmethod
    def from_values(cls, values: Iterable[LispValue]) -> LispList:
        """Build a fresh chain holding `values` in order."""
        lst = cls()
        tail: ListNode | None = None
        for value in values:
            node = ListNode(value)
            if tail is None:
                lst.head = node
            else:
                tail.next = node
            tail = node
        return lst

    def is_empty(self) -> bool:
        return self.head is None

    def split(self) -> tuple[LispValue, Optional[LispList]]:
        """Return (first value, handle on the remainder).

        The remainder shares nodes with this list and is None when there is
        exactly one element. Splitting an empty list is an error.
        """
        if self.head is None:
            raise IndexError("split of an empty list")
        rest = self.head.next
        return self.head.value, (LispList(rest) if rest is not None else None)

    def push_back(self, value: LispValue) -> ListNode:
        """Append `value` in place at the tail of the shared chain."""
        node = ListNode(value)
        if self.head is None:
            self.head = node
            return node
        tail = self.head
        while tail.next is not None:
            tail = tail.next
        tail.next = node
        return node

    def to_list(self) -> list[LispValue]:
        return list(self)

    def __iter__(self) -> Iterator[LispValue]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        n = 0
        node = self.head
        while node is not None:
            n += 1
            node = node.next
        return n

    def __bool__(self) -> bool:
        return self.head is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LispList):
            return NotImplemented
        if self.head is other.head:
            return True
        return self.to_list() == other.to_list()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"LispList({self.to_list()!r})"
