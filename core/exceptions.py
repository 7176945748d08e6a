# core/exceptions.py
from __future__ import annotations

from typing import Sequence


class DomainError(Exception):
    """Base class for domain-level errors."""
    def __init__(self, message: str,*, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when data is invalid or violates constraints."""


class NotFoundError(DomainError):
    """Raised when an entity is not found."""


class BusinessRuleError(DomainError):
    """Raised when business rules are violated (e.g., circular dependencies)."""


class SelfDependencyError(ValidationError):
    """Raised when a task lists its own id among its dependencies."""

    def __init__(self, task_id: int, message: str = "A task cannot depend on itself."):
        super().__init__(message, code="DEPENDENCY_SELF")
        self.task_id = task_id


class CycleIntroducedError(BusinessRuleError):
    """Raised when a proposed dependency change would close a directed cycle."""

    def __init__(self, message: str, *, cycle_path: Sequence[int] = ()):
        super().__init__(message, code="DEPENDENCY_CYCLE")
        self.cycle_path: list[int] = list(cycle_path)


class DeleteBlockedError(BusinessRuleError):
    """Raised when other tasks still depend on the task being deleted."""

    def __init__(self, task_id: int, dependents: Sequence[tuple[int, str]]):
        names = ", ".join(f"#{dep_id} {title}" for dep_id, title in dependents)
        super().__init__(
            f"This task cannot be deleted because other tasks depend on it: {names}",
            code="TASK_HAS_DEPENDENTS",
        )
        self.task_id = task_id
        self.dependents: list[tuple[int, str]] = list(dependents)

    @property
    def dependent_ids(self) -> set[int]:
        return {dep_id for dep_id, _title in self.dependents}
