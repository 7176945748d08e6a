from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any

from sqlalchemy.orm import Session

from core.services.scheduling import SchedulingEngine
from core.services.task import TaskService
from infra.db.repositories import SqlAlchemyTaskRepository


def parse_due_date(value: Any) -> datetime:
    """Accept a datetime, a date (taken at end of day) or an ISO-8601 string."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time(23, 59, 59))
    if isinstance(value, str) and value.strip():
        text = value.strip()
        if len(text) == 10:
            return datetime.combine(date.fromisoformat(text), time(23, 59, 59))
        return datetime.fromisoformat(text)
    raise ValueError(f"Unsupported due date value: {value!r}")


@dataclass(frozen=True)
class ServiceGraph:
    session: Session
    task_service: TaskService
    scheduling_engine: SchedulingEngine

    def as_dict(self) -> dict[str, Any]:
        return {
            "session": self.session,
            "task_service": self.task_service,
            "scheduling_engine": self.scheduling_engine,
        }


def build_service_graph(session: Session) -> ServiceGraph:
    task_repo = SqlAlchemyTaskRepository(session)
    return ServiceGraph(
        session=session,
        task_service=TaskService(session, task_repo),
        scheduling_engine=SchedulingEngine(task_repo),
    )


__all__ = ["ServiceGraph", "build_service_graph", "parse_due_date"]
