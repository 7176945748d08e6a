from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from threading import RLock
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from core.domain import Task
from core.events.domain_events import domain_events
from core.exceptions import DeleteBlockedError, NotFoundError
from core.interfaces import TaskRepository


logger = logging.getLogger(__name__)


class TaskLifecycleMixin:
    _session: Session
    _task_repo: TaskRepository
    _write_lock: RLock

    def create_task(
        self,
        title: str,
        due_date: datetime,
        description: str = "",
        dependencies: Iterable[int] = (),
        image_url: Optional[str] = None,
    ) -> Task:
        title = self._validate_task_title(title)
        deps = self._normalize_dependency_ids(dependencies)

        with self._write_lock:
            # new tasks have no id yet; the check uses a placeholder
            self._require_valid_dependencies(self._task_repo.list_all(), None, deps)

            draft = Task(
                id=0,
                title=title,
                description=(description or "").strip(),
                due_date=due_date,
                dependencies=deps,
                image_url=image_url or None,
            )
            try:
                task = self._task_repo.add(draft)
                # stored dangling references to the assigned id are live edges now
                self._require_valid_dependencies(
                    self._task_repo.list_all(), task.id, task.dependencies
                )
                self._session.commit()
                logger.info(f"Created task {task.id} - {task.title}")
            except Exception as exc:
                self._session.rollback()
                logger.error(f"Error creating task: {exc}")
                raise

        domain_events.task_created.emit(task.id)
        domain_events.tasks_changed.emit(task.id)
        return task

    def update_task(
        self,
        task_id: int,
        title: str | None = None,
        description: str | None = None,
        due_date: datetime | None = None,
        dependencies: Iterable[int] | None = None,
        image_url: str | None = None,
    ) -> Task:
        with self._write_lock:
            task = self._task_repo.get(task_id)
            if not task:
                raise NotFoundError("Task not found.", code="TASK_NOT_FOUND")

            changes: dict = {}
            if title is not None:
                changes["title"] = self._validate_task_title(title)
            if description is not None:
                changes["description"] = description.strip()
            if due_date is not None:
                changes["due_date"] = due_date
            if image_url is not None:
                changes["image_url"] = image_url or None
            if dependencies is not None:
                deps = self._normalize_dependency_ids(dependencies)
                self._require_valid_dependencies(self._task_repo.list_all(), task_id, deps)
                changes["dependencies"] = deps

            updated = replace(task, **changes)
            try:
                self._task_repo.update(updated)
                self._session.commit()
                logger.info(f"Updated task {task_id} ({', '.join(sorted(changes)) or 'no changes'})")
            except Exception as exc:
                self._session.rollback()
                logger.error(f"Error updating task {task_id}: {exc}")
                raise

        domain_events.task_updated.emit(task_id)
        domain_events.tasks_changed.emit(task_id)
        return updated

    def delete_task(self, task_id: int) -> None:
        with self._write_lock:
            task = self._task_repo.get(task_id)
            if not task:
                raise NotFoundError("Task not found.", code="TASK_NOT_FOUND")

            dependents = [t for t in self._task_repo.list_dependents(task_id) if t.id != task_id]
            if dependents:
                raise DeleteBlockedError(
                    task_id,
                    [(t.id, t.title) for t in sorted(dependents, key=lambda t: t.id)],
                )

            try:
                self._task_repo.delete(task_id)
                self._session.commit()
                logger.info(f"Deleted task {task_id} - {task.title}")
            except Exception as exc:
                self._session.rollback()
                logger.error(f"Error deleting task {task_id}: {exc}")
                raise

        domain_events.task_deleted.emit(task_id)
        domain_events.tasks_changed.emit(task_id)
