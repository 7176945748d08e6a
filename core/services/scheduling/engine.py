# core/services/scheduling/engine.py
from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, List, Optional

from core.domain import Task
from core.interfaces import TaskRepository
from core.services.scheduling.critical_path import find_critical_path
from core.services.scheduling.earliest_start import compute_earliest_starts
from core.services.scheduling.models import AnnotatedTask, ScheduleResult

logger = logging.getLogger(__name__)


def build_schedule(tasks: Iterable[Task], now: Optional[datetime] = None) -> ScheduleResult:
    tasks = list(tasks)
    if now is None:
        now = datetime.now()

    earliest = compute_earliest_starts(tasks, now=now)
    critical_path = find_critical_path(tasks)
    on_path = set(critical_path)

    annotated = [
        AnnotatedTask(
            task=task,
            earliest_start_date=earliest[task.id],
            is_on_critical_path=task.id in on_path,
            is_overdue=task.is_overdue(now),
        )
        for task in tasks
    ]
    return ScheduleResult(tasks=annotated, critical_path=critical_path, computed_at=now)


def annotate(tasks: Iterable[Task], now: Optional[datetime] = None) -> List[AnnotatedTask]:
    """
    Earliest-start and critical-path flags for one task snapshot.

    Pure: reads nothing but ``tasks`` and returns new values in caller order.
    Call again in full after any change to the task set.
    """
    return build_schedule(tasks, now=now).tasks


class SchedulingEngine:
    """
    Read-only scheduling over the stored task set:
    - earliest start per task (overdue tasks clamp to their due date)
    - single longest dependency chain (critical path)
    """

    def __init__(self, task_repo: TaskRepository):
        self._task_repo: TaskRepository = task_repo

    def recalculate_schedule(self, now: Optional[datetime] = None) -> ScheduleResult:
        tasks = self._task_repo.list_all()
        result = build_schedule(tasks, now=now)
        logger.info(
            "Recalculated schedule for %d task(s); critical path length %d",
            len(tasks),
            len(result.critical_path),
        )
        return result
