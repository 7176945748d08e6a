from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from core.domain import Task
from core.exceptions import CycleIntroducedError, NotFoundError, ValidationError
from core.interfaces import TaskRepository
from core.services.scheduling import ProposedEdges, find_cycle, placeholder_id


@dataclass
class DependencyDiagnostic:
    is_valid: bool
    code: str
    summary: str
    detail: str
    task_id: Optional[int]
    dependencies: frozenset[int]
    cycle_path: list[int] = field(default_factory=list)
    dangling_ids: list[int] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)


class TaskDependencyDiagnosticsMixin:
    _task_repo: TaskRepository

    def get_dependency_diagnostics(
        self,
        task_id: Optional[int],
        dependencies: Iterable[int],
    ) -> DependencyDiagnostic:
        """
        Explain whether ``task_id`` may depend on ``dependencies`` without writing.
        Pass ``task_id=None`` to check a task that has not been created yet.
        """
        deps = self._normalize_dependency_ids(dependencies)
        return self._diagnose(self._task_repo.list_all(), task_id, deps)

    def _diagnose(
        self,
        tasks: Sequence[Task],
        task_id: Optional[int],
        dependencies: frozenset[int],
    ) -> DependencyDiagnostic:
        if task_id is not None and task_id in dependencies:
            return self._invalid_diagnostic(
                code="DEPENDENCY_SELF",
                summary="A task cannot depend on itself.",
                detail="Remove the task's own id from its dependency list.",
                task_id=task_id,
                dependencies=dependencies,
            )

        if task_id is not None and not any(t.id == task_id for t in tasks):
            return self._invalid_diagnostic(
                code="TASK_NOT_FOUND",
                summary="Task not found.",
                detail=f"Task id '{task_id}' does not exist.",
                task_id=task_id,
                dependencies=dependencies,
            )

        subject = task_id if task_id is not None else placeholder_id(tasks)
        cycle = find_cycle(tasks, ProposedEdges.of(subject, dependencies))
        if cycle:
            return self._invalid_diagnostic(
                code="DEPENDENCY_CYCLE",
                summary="This change would create a circular dependency.",
                detail=f"Cycle path: {self._describe_path(tasks, cycle)}",
                task_id=task_id,
                dependencies=dependencies,
                cycle_path=cycle,
                suggestions=[
                    "Reverse the dependency direction if the work allows it.",
                    "Split one task in two to break the loop.",
                ],
            )

        known = {t.id for t in tasks}
        dangling = sorted(d for d in dependencies if d not in known)
        detail = "Validation passed: no self-dependency and no cycle."
        if dangling:
            detail += f" Unknown ids are kept but ignored for scheduling: {dangling}."
        return DependencyDiagnostic(
            is_valid=True,
            code="DEPENDENCY_VALID",
            summary="Dependencies are valid.",
            detail=detail,
            task_id=task_id,
            dependencies=dependencies,
            dangling_ids=dangling,
        )

    def _require_valid_dependencies(
        self,
        tasks: Sequence[Task],
        task_id: Optional[int],
        dependencies: frozenset[int],
    ) -> None:
        if task_id is not None:
            self._validate_not_self_dependency(task_id, dependencies)
        diagnostic = self._diagnose(tasks, task_id, dependencies)
        if diagnostic.is_valid:
            return
        if diagnostic.code == "TASK_NOT_FOUND":
            raise NotFoundError(diagnostic.summary, code=diagnostic.code)
        if diagnostic.code == "DEPENDENCY_CYCLE":
            raise CycleIntroducedError(
                f"{diagnostic.summary}\n{diagnostic.detail}",
                cycle_path=diagnostic.cycle_path,
            )
        raise ValidationError(diagnostic.summary, code=diagnostic.code)

    @staticmethod
    def _invalid_diagnostic(
        code: str,
        summary: str,
        detail: str,
        task_id: Optional[int],
        dependencies: frozenset[int],
        cycle_path: list[int] | None = None,
        suggestions: list[str] | None = None,
    ) -> DependencyDiagnostic:
        return DependencyDiagnostic(
            is_valid=False,
            code=code,
            summary=summary,
            detail=detail,
            task_id=task_id,
            dependencies=dependencies,
            cycle_path=cycle_path or [],
            suggestions=suggestions or [],
        )
