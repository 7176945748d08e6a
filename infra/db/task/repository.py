from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.domain import Task
from core.interfaces import TaskRepository
from infra.db.models import TaskORM
from infra.db.task.mapper import task_from_orm, task_to_orm


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, task: Task) -> Task:
        if task.created_at is None:
            task = replace(task, created_at=datetime.now())
        obj = task_to_orm(task, include_id=False)
        self.session.add(obj)
        self.session.flush()
        return task_from_orm(obj)

    def update(self, task: Task) -> None:
        self.session.merge(task_to_orm(task))

    def delete(self, task_id: int) -> None:
        self.session.query(TaskORM).filter_by(id=task_id).delete()

    def get(self, task_id: int) -> Optional[Task]:
        obj = self.session.get(TaskORM, task_id)
        return task_from_orm(obj) if obj else None

    def list_all(self) -> List[Task]:
        stmt = select(TaskORM).order_by(TaskORM.created_at.desc(), TaskORM.id.desc())
        rows = self.session.execute(stmt).scalars().all()
        return [task_from_orm(row) for row in rows]

    def list_dependents(self, task_id: int) -> List[Task]:
        # dependencies live in a JSON text column; decode rather than pattern-match
        return [t for t in self.list_all() if task_id in t.dependencies]


__all__ = ["SqlAlchemyTaskRepository"]
