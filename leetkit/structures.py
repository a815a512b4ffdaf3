"""Singly linked list and binary tree nodes, with helpers to build and read them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

_MISSING = object()


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list in order."""
    return list(head) if head is not None else []


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values where None marks a missing child."""
    items = list(values)
    if not items or items[0] is None:
        return None

    root = TreeNode(items[0])
    queue: deque[TreeNode] = deque([root])
    remaining = iter(items[1:])

    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            value = next(remaining, _MISSING)
            if value is _MISSING:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                queue.append(child)
    return root


def tree_values(root: Optional[TreeNode]) -> list[Optional[int]]:
    """Return the level-order values of a tree, None for gaps, trailing gaps dropped."""
    result: list[Optional[int]] = []
    queue: deque[Optional[TreeNode]] = deque([root] if root is not None else [])

    while queue:
        node = queue.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.val)
        queue.append(node.left)
        queue.append(node.right)

    while result and result[-1] is None:
        result.pop()
    return result