"""Task ORM — an item of work inside a project, optionally assigned to a user.

Invariants:
    - project_id referenced an existing Project when the row was created
    - assigned_to is never checked against users (may point nowhere)
    - status defaults to "pending", priority to "medium"
    - due_date is TEXT holding the client value verbatim
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from task_api.db.base import Base


class Task(Base):
    __tablename__ = "tasks"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    project_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("projects.id"), nullable=False,
    )
    assigned_to: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=True,
    )
    status: Mapped[str | None] = mapped_column(
        Text, nullable=True, default="pending",
    )
    priority: Mapped[str | None] = mapped_column(
        Text, nullable=True, default="medium",
    )
    due_date: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
