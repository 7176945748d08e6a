from core.domain.task import Task, parse_dependency_ids, serialize_dependency_ids

__all__ = [
    "Task",
    "parse_dependency_ids",
    "serialize_dependency_ids",
]
