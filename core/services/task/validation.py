from __future__ import annotations

from typing import Iterable, Sequence

from core.domain import Task
from core.exceptions import SelfDependencyError, ValidationError


class TaskValidationMixin:
    def _validate_task_title(self, title: str) -> str:
        cleaned = (title or "").strip()
        if not cleaned:
            raise ValidationError("Title is required.", code="TASK_TITLE_EMPTY")
        return cleaned

    def _normalize_dependency_ids(self, dependencies: Iterable[int]) -> frozenset[int]:
        ids = list(dependencies or ())
        bad = [d for d in ids if not isinstance(d, int) or isinstance(d, bool)]
        if bad:
            raise ValidationError(
                f"Dependency ids must be integers, got: {bad!r}",
                code="DEPENDENCY_INVALID_ID",
            )
        return frozenset(ids)

    def _validate_not_self_dependency(self, task_id: int, dependencies: frozenset[int]) -> None:
        if task_id in dependencies:
            raise SelfDependencyError(task_id)

    @staticmethod
    def _describe_path(tasks: Sequence[Task], path: Sequence[int]) -> str:
        titles = {t.id: t.title for t in tasks}
        return " -> ".join(titles.get(task_id, "(new task)") for task_id in path)
