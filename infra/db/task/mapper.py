from __future__ import annotations

from core.domain import Task, parse_dependency_ids, serialize_dependency_ids
from infra.db.models import TaskORM


def task_to_orm(task: Task, *, include_id: bool = True) -> TaskORM:
    obj = TaskORM(
        title=task.title,
        description=task.description,
        due_date=task.due_date,
        image_url=task.image_url,
        dependencies=serialize_dependency_ids(task.dependencies),
    )
    if include_id:
        obj.id = task.id
    if task.created_at is not None:
        obj.created_at = task.created_at
    return obj


def task_from_orm(obj: TaskORM) -> Task:
    return Task(
        id=obj.id,
        title=obj.title,
        description=obj.description or "",
        due_date=obj.due_date,
        dependencies=parse_dependency_ids(obj.dependencies),
        image_url=obj.image_url,
        created_at=obj.created_at,
    )


__all__ = ["task_to_orm", "task_from_orm"]
