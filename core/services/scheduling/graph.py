from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from core.domain import Task


@dataclass(frozen=True)
class ProposedEdges:
    """Replacement dependency set for one task, evaluated without saving it."""

    task_id: int
    dependencies: frozenset[int]

    @staticmethod
    def of(task_id: int, dependencies: Iterable[int]) -> "ProposedEdges":
        return ProposedEdges(task_id=task_id, dependencies=frozenset(dependencies))


def placeholder_id(tasks: Sequence[Task]) -> int:
    """An id distinct from every existing one, for checking a task not yet stored."""
    lowest = min((t.id for t in tasks), default=0)
    return min(lowest, 0) - 1


class DependencyGraph:
    """
    Adjacency view of a task snapshot: task id -> in-set dependency ids.

    Every id gets a dense slot (its position in caller order) so traversals
    can keep per-node state in plain lists. Dependency ids that do not match
    a task in the snapshot are dropped.
    """

    def __init__(self, task_ids: Sequence[int], raw_edges: Dict[int, frozenset[int]]):
        self._ids: List[int] = []
        self._slots: Dict[int, int] = {}
        for task_id in task_ids:
            if task_id not in self._slots:
                self._slots[task_id] = len(self._ids)
                self._ids.append(task_id)

        self._adjacency: Dict[int, frozenset[int]] = {
            task_id: frozenset(d for d in raw_edges.get(task_id, ()) if d in self._slots)
            for task_id in self._ids
        }
        self._ordered: List[tuple[int, ...]] = [
            tuple(sorted(self._adjacency[task_id])) for task_id in self._ids
        ]

    @classmethod
    def from_tasks(
        cls,
        tasks: Iterable[Task],
        proposed: Optional[ProposedEdges] = None,
    ) -> "DependencyGraph":
        task_ids: List[int] = []
        raw_edges: Dict[int, frozenset[int]] = {}
        for task in tasks:
            task_ids.append(task.id)
            raw_edges.setdefault(task.id, task.dependencies)
        if proposed is not None:
            if proposed.task_id not in raw_edges:
                task_ids.append(proposed.task_id)
            raw_edges[proposed.task_id] = proposed.dependencies
        return cls(task_ids, raw_edges)

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._slots

    def neighbors(self, task_id: int) -> frozenset[int]:
        return self._adjacency.get(task_id, frozenset())

    def slot_of(self, task_id: int) -> int:
        return self._slots[task_id]

    def id_at(self, slot: int) -> int:
        return self._ids[slot]

    def neighbor_slots(self, slot: int) -> List[int]:
        """Dependency slots of ``slot``, ordered by ascending dependency id."""
        return [self._slots[d] for d in self._ordered[slot]]


__all__ = ["DependencyGraph", "ProposedEdges", "placeholder_id"]
