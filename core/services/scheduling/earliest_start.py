from __future__ import annotations

from datetime import datetime
from typing import Dict, Iterable, Iterator, List, Optional

from core.domain import Task
from core.services.scheduling.graph import DependencyGraph

_PENDING = 0
_IN_PROGRESS = 1
_DONE = 2


def compute_earliest_starts(
    tasks: Iterable[Task],
    now: Optional[datetime] = None,
) -> Dict[int, datetime]:
    """
    Earliest moment each task could begin.

    Rules, per task:
    - due date already before ``now`` => its due date; dependencies are ignored
    - no in-set dependencies => ``now``
    - otherwise the latest earliest-start among its in-set dependencies

    ``now`` is sampled once (when omitted) and shared by the whole pass.
    Each task is evaluated once; an edge back into a task still being
    evaluated contributes ``now`` instead of recursing.
    """
    tasks = list(tasks)
    if now is None:
        now = datetime.now()

    graph = DependencyGraph.from_tasks(tasks)
    by_id: Dict[int, Task] = {}
    for task in tasks:
        by_id.setdefault(task.id, task)

    size = len(graph)
    state = [_PENDING] * size
    memo: List[Optional[datetime]] = [None] * size
    best: List[Optional[datetime]] = [None] * size

    def offer(slot: int, value: datetime) -> None:
        current = best[slot]
        if current is None or value > current:
            best[slot] = value

    def enter(slot: int) -> Optional[Iterator[int]]:
        task = by_id[graph.id_at(slot)]
        if task.due_date < now:
            memo[slot] = task.due_date
            state[slot] = _DONE
            return None
        children = graph.neighbor_slots(slot)
        if not children:
            memo[slot] = now
            state[slot] = _DONE
            return None
        state[slot] = _IN_PROGRESS
        return iter(children)

    for root in range(size):
        if state[root] == _DONE:
            continue
        children = enter(root)
        if children is None:
            continue

        stack = [(root, children)]
        while stack:
            slot, it = stack[-1]
            child = next(it, None)
            if child is None:
                stack.pop()
                memo[slot] = best[slot]
                state[slot] = _DONE
                if stack:
                    offer(stack[-1][0], memo[slot])
                continue

            if state[child] == _DONE:
                offer(slot, memo[child])
            elif state[child] == _IN_PROGRESS:
                offer(slot, now)
            else:
                grandchildren = enter(child)
                if grandchildren is None:
                    offer(slot, memo[child])
                else:
                    stack.append((child, grandchildren))

    return {graph.id_at(slot): memo[slot] for slot in range(size)}


__all__ = ["compute_earliest_starts"]
