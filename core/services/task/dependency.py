from __future__ import annotations

from typing import Iterable, List

from core.domain import Task
from core.exceptions import NotFoundError
from core.interfaces import TaskRepository


class TaskDependencyMixin:
    _task_repo: TaskRepository

    def set_dependencies(self, task_id: int, dependencies: Iterable[int]) -> Task:
        """Replace the dependency set of ``task_id``; rejected if it adds a cycle."""
        return self.update_task(task_id, dependencies=list(dependencies))

    def add_dependency(self, task_id: int, depends_on_id: int) -> Task:
        task = self._task_repo.get(task_id)
        if not task:
            raise NotFoundError("Task not found.", code="TASK_NOT_FOUND")
        return self.set_dependencies(task_id, [*task.dependencies, depends_on_id])

    def remove_dependency(self, task_id: int, depends_on_id: int) -> Task:
        task = self._task_repo.get(task_id)
        if not task:
            raise NotFoundError("Task not found.", code="TASK_NOT_FOUND")
        return self.set_dependencies(task_id, task.dependencies - {depends_on_id})

    def list_dependencies_for_task(self, task_id: int) -> List[Task]:
        task = self._task_repo.get(task_id)
        if not task:
            raise NotFoundError("Task not found.", code="TASK_NOT_FOUND")
        found = [self._task_repo.get(dep_id) for dep_id in sorted(task.dependencies)]
        return [t for t in found if t is not None]
