from core.services.task.dependency_diagnostics import DependencyDiagnostic
from core.services.task.service import TaskService

__all__ = ["TaskService", "DependencyDiagnostic"]
