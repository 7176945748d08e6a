from __future__ import annotations

from typing import List

from core.domain import Task
from core.exceptions import NotFoundError
from core.interfaces import TaskRepository


class TaskQueryMixin:
    _task_repo: TaskRepository

    def list_tasks(self) -> List[Task]:
        return self._task_repo.list_all()

    def get_task(self, task_id: int) -> Task:
        task = self._task_repo.get(task_id)
        if not task:
            raise NotFoundError("Task not found.", code="TASK_NOT_FOUND")
        return task

    def list_dependents(self, task_id: int) -> List[Task]:
        return [t for t in self._task_repo.list_dependents(task_id) if t.id != task_id]
