from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from core.domain import Task


class TaskRepository(ABC):
    @abstractmethod
    def add(self, task: Task) -> Task:
        """Persist a new task and return it with the store-assigned id."""

    @abstractmethod
    def update(self, task: Task) -> None: ...

    @abstractmethod
    def delete(self, task_id: int) -> None: ...

    @abstractmethod
    def get(self, task_id: int) -> Optional[Task]: ...

    @abstractmethod
    def list_all(self) -> List[Task]:
        """Every stored task, newest first."""

    @abstractmethod
    def list_dependents(self, task_id: int) -> List[Task]:
        """Tasks whose dependency set contains ``task_id``."""


__all__ = ["TaskRepository"]
