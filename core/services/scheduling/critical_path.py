from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from core.domain import Task
from core.services.scheduling.graph import DependencyGraph

_PENDING = 0
_IN_PROGRESS = 1
_DONE = 2


def find_critical_path(tasks: Iterable[Task]) -> List[int]:
    """
    Longest dependency chain, ordered from its first dependency to its last task.

    Chain length counts tasks: a task with no in-set dependencies has length 1,
    otherwise 1 + the longest of its dependencies. Ties are broken by lowest
    id, both when choosing which dependency to follow and when choosing the
    task that ends the chain, so the result does not depend on input order.
    """
    graph = DependencyGraph.from_tasks(tasks)
    size = len(graph)
    if size == 0:
        return []

    state = [_PENDING] * size
    length = [0] * size
    parent: List[Optional[int]] = [None] * size

    def offer(slot: int, child: int) -> None:
        # children arrive in ascending id order; strict > keeps the lowest id
        if length[child] + 1 > length[slot]:
            length[slot] = length[child] + 1
            parent[slot] = child

    def enter(slot: int) -> Iterator[int]:
        state[slot] = _IN_PROGRESS
        length[slot] = 1
        return iter(graph.neighbor_slots(slot))

    for root in range(size):
        if state[root] != _PENDING:
            continue
        stack = [(root, enter(root))]
        while stack:
            slot, it = stack[-1]
            child = next(it, None)
            if child is None:
                stack.pop()
                state[slot] = _DONE
                if stack:
                    offer(stack[-1][0], slot)
                continue
            if state[child] == _DONE:
                offer(slot, child)
            elif state[child] == _PENDING:
                stack.append((child, enter(child)))
            # an in-progress child means a broken acyclic invariant; skip the edge

    end = min(range(size), key=lambda s: (-length[s], graph.id_at(s)))

    path: List[int] = []
    cursor: Optional[int] = end
    while cursor is not None:
        path.append(graph.id_at(cursor))
        cursor = parent[cursor]
    path.reverse()
    return path


__all__ = ["find_critical_path"]
