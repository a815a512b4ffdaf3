"""Singly linked list problems."""

from __future__ import annotations

from typing import Optional

from leetkit.structures import ListNode


def delete_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Remove the node at index ``n // 2`` and return the head; a single node gives None."""
    if head is None or head.next is None:
        return None

    prev = head
    slow = head.next
    fast = head.next.next
    while fast is not None and fast.next is not None:
        prev = prev.next
        slow = slow.next
        fast = fast.next.next

    prev.next = slow.next
    return head


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Relink the list so nodes at odd positions come first, then those at even positions."""
    if head is None or head.next is None or head.next.next is None:
        return head

    odd = head
    even = head.next
    even_head = even
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next

    odd.next = even_head
    return head


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    prev: Optional[ListNode] = None
    current = head
    while current is not None:
        current.next, prev, current = prev, current, current.next
    return prev


def pair_sum(head: Optional[ListNode]) -> int:
    """Return the largest sum of a node and its twin (node i with node n - 1 - i).

    For a list of odd length the middle node is paired with itself.
    The list is left unchanged; an empty list gives 0.
    """
    values = list(head) if head is not None else []
    size = len(values)
    twins = (values[i] + values[size - 1 - i] for i in range((size + 1) // 2))
    return max(twins, default=0) if size else 0