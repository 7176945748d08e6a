from .scheduling import AnnotatedTask, ScheduleResult, SchedulingEngine, annotate
from .task import DependencyDiagnostic, TaskService

__all__ = [
    "TaskService",
    "DependencyDiagnostic",
    "SchedulingEngine",
    "ScheduleResult",
    "AnnotatedTask",
    "annotate",
]
