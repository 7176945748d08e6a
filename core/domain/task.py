from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Task:
    id: int
    title: str
    due_date: datetime
    description: str = ""
    dependencies: frozenset[int] = field(default_factory=frozenset)
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        # duplicates collapse to one edge
        object.__setattr__(self, "dependencies", frozenset(self.dependencies))

    def is_overdue(self, now: datetime) -> bool:
        return self.due_date < now


def _is_task_id(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_dependency_ids(raw: Any) -> frozenset[int]:
    """
    Read a stored dependency value back into a set of task ids.

    Accepts a list/tuple/set of ints or a JSON string encoding such a list.
    Anything else (None, bad JSON, non-list payloads, non-integer items)
    degrades to an empty set so scheduling stays total over any stored row.
    """
    if raw is None or raw == "":
        return frozenset()
    value = raw
    if isinstance(raw, (str, bytes)):
        try:
            value = json.loads(raw)
        except ValueError:
            logger.warning("Ignoring malformed dependency data: %r", raw)
            return frozenset()
    if not isinstance(value, (list, tuple, set, frozenset)):
        logger.warning("Ignoring non-list dependency data: %r", raw)
        return frozenset()
    if not all(_is_task_id(item) for item in value):
        logger.warning("Ignoring dependency data with non-integer ids: %r", raw)
        return frozenset()
    return frozenset(value)


def serialize_dependency_ids(dependencies: Iterable[int]) -> str:
    return json.dumps(sorted(set(dependencies)))


__all__ = ["Task", "parse_dependency_ids", "serialize_dependency_ids"]
