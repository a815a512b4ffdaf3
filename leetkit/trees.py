"""Binary tree and binary search tree problems."""

from __future__ import annotations

from collections import Counter, deque
from typing import Optional

from leetkit.structures import TreeNode


def _levels(root: Optional[TreeNode]):
    """Yield the nodes of each level, top to bottom, left to right."""
    if root is None:
        return
    level = [root]
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """Return the value of the rightmost node on each level."""
    return [level[-1].val for level in _levels(root)]


def delete_node(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Delete ``key`` from a binary search tree and return the new root."""
    if root is None:
        return None

    if key > root.val:
        root.right = delete_node(root.right, key)
    elif key < root.val:
        root.left = delete_node(root.left, key)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = root.right
        while successor.left is not None:
            successor = successor.left
        root.val = successor.val
        root.right = delete_node(root.right, successor.val)
    return root


def good_nodes(root: Optional[TreeNode]) -> int:
    """Count nodes whose value is not below any value on the path from the root."""
    if root is None:
        return 0
    count = 0
    stack = [(root, root.val)]
    while stack:
        node, best = stack.pop()
        if node.val >= best:
            count += 1
            best = node.val
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, best))
    return count


def leaf_sequence(root: Optional[TreeNode]) -> list[int]:
    """Return the leaf values from left to right."""
    leaves: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if node.left is None and node.right is None:
            leaves.append(node.val)
            continue
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return leaves


def leaf_similar(root1: Optional[TreeNode], root2: Optional[TreeNode]) -> bool:
    """Return True if both trees have the same leaf value sequence."""
    return leaf_sequence(root1) == leaf_sequence(root2)


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    deepest = 0
    stack = [(root, 1)] if root is not None else []
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, depth + 1))
    return deepest


def max_level_sum(root: Optional[TreeNode]) -> int:
    """Return the smallest 1-based level with the largest sum; an empty tree gives 0."""
    best_level = 0
    best_sum: Optional[int] = None
    for level_number, level in enumerate(_levels(root), start=1):
        total = sum(node.val for node in level)
        if best_sum is None or total > best_sum:
            best_sum = total
            best_level = level_number
    return best_level


def path_sum(root: Optional[TreeNode], target_sum: int) -> int:
    """Count downward paths whose values add up to ``target_sum``."""
    prefix_counts: Counter[int] = Counter({0: 1})
    count = 0

    def visit(node: Optional[TreeNode], running: int) -> None:
        nonlocal count
        if node is None:
            return
        running += node.val
        count += prefix_counts[running - target_sum]
        prefix_counts[running] += 1
        visit(node.left, running)
        visit(node.right, running)
        prefix_counts[running] -= 1

    visit(root, 0)
    return count


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the subtree of a binary search tree rooted at ``val``, or None."""
    node = root
    while node is not None and node.val != val:
        node = node.right if val > node.val else node.left
    return node