from .cycles import find_cycle, is_cyclic
from .critical_path import find_critical_path
from .earliest_start import compute_earliest_starts
from .engine import SchedulingEngine, annotate, build_schedule
from .graph import DependencyGraph, ProposedEdges, placeholder_id
from .models import AnnotatedTask, ScheduleResult

__all__ = [
    "SchedulingEngine",
    "annotate",
    "build_schedule",
    "compute_earliest_starts",
    "find_critical_path",
    "find_cycle",
    "is_cyclic",
    "DependencyGraph",
    "ProposedEdges",
    "placeholder_id",
    "AnnotatedTask",
    "ScheduleResult",
]
