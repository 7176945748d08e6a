from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List

from core.domain import Task


@dataclass(frozen=True)
class AnnotatedTask:
    task: Task
    earliest_start_date: datetime
    is_on_critical_path: bool
    is_overdue: bool = False

    @property
    def id(self) -> int:
        return self.task.id


@dataclass
class ScheduleResult:
    tasks: List[AnnotatedTask]
    critical_path: List[int]
    computed_at: datetime

    def get(self, task_id: int) -> AnnotatedTask | None:
        for info in self.tasks:
            if info.task.id == task_id:
                return info
        return None
