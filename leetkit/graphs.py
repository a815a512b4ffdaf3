"""Graph reachability problems."""

from __future__ import annotations

from collections import deque
from typing import Sequence


def _check(rooms: Sequence[Sequence[int]]) -> None:
    if not rooms:
        raise ValueError("rooms must not be empty")


def can_visit_all_rooms(rooms: Sequence[Sequence[int]]) -> bool:
    """Return True if every room is reachable from room 0 (breadth-first)."""
    _check(rooms)
    visited = {0}
    queue = deque([0])
    while queue:
        room = queue.popleft()
        for key in rooms[room]:
            if key not in visited:
                visited.add(key)
                queue.append(key)
    return len(visited) == len(rooms)


def can_visit_all_rooms_dfs(rooms: Sequence[Sequence[int]]) -> bool:
    """Return True if every room is reachable from room 0 (depth-first)."""
    _check(rooms)
    visited = {0}
    stack = [0]
    while stack:
        room = stack.pop()
        for key in rooms[room]:
            if key not in visited:
                visited.add(key)
                stack.append(key)
    return len(visited) == len(rooms)