from infra.db.task.repository import SqlAlchemyTaskRepository

__all__ = ["SqlAlchemyTaskRepository"]
