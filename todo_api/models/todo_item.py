"""
Todo API — TodoItem SQLAlchemy Model
======================================

What:  ORM model representing the `todo_items` table.
Who:   Used by TodoStore for CRUD operations and by Alembic for schema management.

Table Design:
    - Integer autoincrement primary key, assigned by the database on insert
      and never reused.
    - title: unbounded TEXT, nullable; no length or emptiness rule.
    - is_complete: NOT NULL boolean, false unless the client says otherwise.
"""

from typing import Optional

from sqlalchemy import Boolean, Integer, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from todo_api.database import Base


class TodoItem(Base):
    """
    A single todo entry.

    Lifecycle:
        1. Created on POST /todos (id assigned by storage)
        2. Overwritten in place on PUT /todos/{id} (title and is_complete)
        3. Removed on DELETE /todos/{id}
    """

    __tablename__ = "todo_items"
    # Without AUTOINCREMENT, SQLite hands out max(id)+1 and reuses the id of a
    # deleted last row
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    title: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        default=None,
    )

    is_complete: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )

    def __repr__(self) -> str:
        return (
            f"<TodoItem(id={self.id}, title={self.title!r}, "
            f"is_complete={self.is_complete})>"
        )
