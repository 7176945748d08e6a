from infra.db.task.mapper import task_from_orm, task_to_orm
from infra.db.task.repository import SqlAlchemyTaskRepository

__all__ = [
    "task_to_orm",
    "task_from_orm",
    "SqlAlchemyTaskRepository",
]
