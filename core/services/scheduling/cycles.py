from __future__ import annotations

from typing import Iterable, List, Optional

from core.domain import Task
from core.services.scheduling.graph import DependencyGraph, ProposedEdges

UNVISITED = 0
ON_STACK = 1
DONE = 2


def _find_cycle_in_graph(
    graph: DependencyGraph,
    first: Optional[int] = None,
) -> Optional[List[int]]:
    """
    Iterative three-colour DFS over ``graph``, starting from task ``first``
    when given.

    Returns the first cycle found as a list of task ids following the
    depends-on direction, with the first id repeated at the end, or None
    when the graph is acyclic. Stops at the first back-edge.
    """
    color = [UNVISITED] * len(graph)
    roots = list(range(len(graph)))
    if first is not None and first in graph:
        roots.insert(0, graph.slot_of(first))

    for root in roots:
        if color[root] != UNVISITED:
            continue
        color[root] = ON_STACK
        path = [root]
        stack = [iter(graph.neighbor_slots(root))]

        while stack:
            nxt = next(stack[-1], None)
            if nxt is None:
                color[path.pop()] = DONE
                stack.pop()
                continue

            state = color[nxt]
            if state == ON_STACK:
                start = path.index(nxt)
                return [graph.id_at(slot) for slot in path[start:]] + [graph.id_at(nxt)]
            if state == UNVISITED:
                color[nxt] = ON_STACK
                path.append(nxt)
                stack.append(iter(graph.neighbor_slots(nxt)))

    return None


def find_cycle(
    tasks: Iterable[Task],
    proposed_edges: Optional[ProposedEdges] = None,
) -> Optional[List[int]]:
    graph = DependencyGraph.from_tasks(tasks, proposed_edges)
    # any new cycle passes through the edited task
    first = proposed_edges.task_id if proposed_edges is not None else None
    return _find_cycle_in_graph(graph, first)


def is_cyclic(
    tasks: Iterable[Task],
    proposed_edges: Optional[ProposedEdges] = None,
) -> bool:
    """True if the snapshot, with ``proposed_edges`` applied, contains a cycle."""
    return find_cycle(tasks, proposed_edges) is not None


__all__ = ["find_cycle", "is_cyclic"]
