# infra/db/models.py
from __future__ import annotations
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from infra.db.base import Base


class TaskORM(Base):
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(String, default="")
    due_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    image_url: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    # JSON list of task ids, e.g. "[1, 4]"
    dependencies: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.now, server_default=func.current_timestamp()
    )
Index("idx_tasks_created_at", TaskORM.created_at)
