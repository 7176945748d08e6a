"""Change notifications for presenters that must re-run the schedule in full."""
from core.events.signal import Signal


class DomainEvents:
    def __init__(self) -> None:
        self.task_created: Signal[int] = Signal()   # task_id
        self.task_updated: Signal[int] = Signal()   # task_id
        self.task_deleted: Signal[int] = Signal()   # task_id
        self.tasks_changed: Signal[int] = Signal()  # task_id, fired after any of the above


# SINGLE global instance
domain_events = DomainEvents()
