from __future__ import annotations

from threading import RLock

from sqlalchemy.orm import Session

from core.interfaces import TaskRepository
from core.services.task.dependency import TaskDependencyMixin
from core.services.task.dependency_diagnostics import TaskDependencyDiagnosticsMixin
from core.services.task.lifecycle import TaskLifecycleMixin
from core.services.task.query import TaskQueryMixin
from core.services.task.validation import TaskValidationMixin


class TaskService(
    TaskLifecycleMixin,
    TaskDependencyDiagnosticsMixin,
    TaskDependencyMixin,
    TaskQueryMixin,
    TaskValidationMixin,
):
    """
    Task writes with dependency validation.

    Every create/update/delete reads the current task set, validates the
    proposed graph and commits while holding one lock, so two writers
    sharing this service cannot each pass validation against a stale
    snapshot and jointly commit a cycle.
    """

    def __init__(self, session: Session, task_repo: TaskRepository):
        self._session: Session = session
        self._task_repo: TaskRepository = task_repo
        self._write_lock: RLock = RLock()
