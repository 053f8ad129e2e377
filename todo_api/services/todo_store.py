"""
Todo API — Todo Store (Entity Context)
========================================

What:  Thin accessor over the `todo_items` table.
How:   Wraps one request-scoped AsyncSession. Every method performs a single
       read or write. Writes commit before returning, so a handler only
       reports success for rows that are stored.
Who:   Constructed per request by get_todo_store and handed to route handlers.

Not-found Convention:
    get_by_id / replace / delete return None when no row has the given id.
    The store never raises for a missing row; handlers decide the HTTP status.

Error Handling:
    SQLAlchemy errors are logged and re-raised as DatabaseError, which the
    global handler maps to a generic 500 response.
"""

import logging
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.database import get_db_session
from todo_api.exceptions import DatabaseError
from todo_api.models.todo_item import TodoItem
from todo_api.schemas.todo_item import TodoItemPayload

logger = logging.getLogger(__name__)


class TodoStore:
    """
    Create/read/update/delete access to todo items.

    Responsibilities:
        - list(): every row, no filtering, sorting or pagination
        - get_by_id(): one row or None
        - create(): insert, returning the row with its assigned id
        - replace(): overwrite title and is_complete of an existing row
        - delete(): remove an existing row, returning it
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list(self) -> List[TodoItem]:
        try:
            result = await self.db.execute(select(TodoItem))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise self._database_error("list", e)

    async def get_by_id(self, todo_id: int) -> Optional[TodoItem]:
        try:
            return await self.db.get(TodoItem, todo_id)
        except SQLAlchemyError as e:
            raise self._database_error("get", e, todo_id)

    async def create(self, payload: TodoItemPayload) -> TodoItem:
        """
        Insert a new todo item.

        The flush sends the INSERT so the database-assigned id is populated;
        the commit makes the row durable before the handler answers 201.
        """
        item = TodoItem(title=payload.title, is_complete=payload.is_complete)
        try:
            self.db.add(item)
            await self.db.flush()
            await self.db.commit()
        except SQLAlchemyError as e:
            raise self._database_error("create", e)
        logger.info("Todo item created: %s", item.id)
        return item

    async def replace(self, todo_id: int, payload: TodoItemPayload) -> Optional[TodoItem]:
        """
        Overwrite title and is_complete of an existing item.

        Both fields are replaced wholesale: a payload without a title clears
        the stored title.
        """
        try:
            item = await self.db.get(TodoItem, todo_id)
            if item is None:
                return None
            item.title = payload.title
            item.is_complete = payload.is_complete
            await self.db.flush()
            await self.db.commit()
        except SQLAlchemyError as e:
            raise self._database_error("replace", e, todo_id)
        logger.info("Todo item replaced: %s", todo_id)
        return item

    async def delete(self, todo_id: int) -> Optional[TodoItem]:
        try:
            item = await self.db.get(TodoItem, todo_id)
            if item is None:
                return None
            await self.db.delete(item)
            await self.db.flush()
            await self.db.commit()
        except SQLAlchemyError as e:
            raise self._database_error("delete", e, todo_id)
        logger.info("Todo item deleted: %s", todo_id)
        return item

    @staticmethod
    def _database_error(
        operation: str, error: SQLAlchemyError, todo_id: Optional[int] = None
    ) -> DatabaseError:
        logger.error(
            "Database error during todo %s (id=%s): %s",
            operation,
            todo_id,
            str(error),
            exc_info=True,
        )
        context = {"operation": operation, "error_type": type(error).__name__}
        if todo_id is not None:
            context["todo_id"] = todo_id
        return DatabaseError(context=context)


def get_todo_store(db: AsyncSession = Depends(get_db_session)) -> TodoStore:
    """FastAPI dependency: a TodoStore bound to the request's session."""
    return TodoStore(db)
