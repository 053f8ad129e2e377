"""
Todo API — Todo Route Handlers
================================

What:  The five /todos endpoints.
How:   Each handler performs one TodoStore call and maps the outcome to a
       status code. A None from the store becomes NotFoundError (→ 404 via
       the global handler in main.py).

Route Inventory:
    GET    /todos        → 200 + list
    GET    /todos/{id}   → 200 + item | 404
    POST   /todos        → 201 + item, Location header
    PUT    /todos/{id}   → 204 | 404
    DELETE /todos/{id}   → 200 + removed item | 404
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from todo_api.exceptions import NotFoundError
from todo_api.schemas.todo_item import ErrorResponse, TodoItemPayload, TodoItemResponse
from todo_api.services.todo_store import TodoStore, get_todo_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/todos", tags=["Todos"])

_NOT_FOUND = {404: {"description": "Todo item not found", "model": ErrorResponse}}


def _not_found(todo_id: int) -> NotFoundError:
    return NotFoundError(resource="todo item", resource_id=str(todo_id))


@router.get(
    "",
    response_model=List[TodoItemResponse],
    summary="List todo items",
    description="Returns every stored todo item. No filtering, sorting or pagination.",
)
async def list_todos(store: TodoStore = Depends(get_todo_store)) -> List[TodoItemResponse]:
    items = await store.list()
    return [TodoItemResponse.model_validate(item) for item in items]


@router.get(
    "/{todo_id}",
    response_model=TodoItemResponse,
    responses=_NOT_FOUND,
    summary="Get a todo item by ID",
)
async def get_todo(todo_id: int, store: TodoStore = Depends(get_todo_store)) -> TodoItemResponse:
    item = await store.get_by_id(todo_id)
    if item is None:
        raise _not_found(todo_id)
    return TodoItemResponse.model_validate(item)


@router.post(
    "",
    response_model=TodoItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a todo item",
    description=(
        "Stores a new todo item. The identifier is assigned by storage; any `id` "
        "in the body is ignored. The Location header points at the new item."
    ),
)
async def create_todo(
    payload: TodoItemPayload,
    response: Response,
    store: TodoStore = Depends(get_todo_store),
) -> TodoItemResponse:
    item = await store.create(payload)
    response.headers["Location"] = f"/todos/{item.id}"
    return TodoItemResponse.model_validate(item)


@router.put(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
    summary="Replace a todo item",
    description="Overwrites both `title` and `isComplete` of an existing item.",
)
async def replace_todo(
    todo_id: int,
    payload: TodoItemPayload,
    store: TodoStore = Depends(get_todo_store),
) -> Response:
    item = await store.replace(todo_id, payload)
    if item is None:
        raise _not_found(todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{todo_id}",
    response_model=TodoItemResponse,
    responses=_NOT_FOUND,
    summary="Delete a todo item",
    description="Removes an item and returns it as it was before deletion.",
)
async def delete_todo(todo_id: int, store: TodoStore = Depends(get_todo_store)) -> TodoItemResponse:
    item = await store.delete(todo_id)
    if item is None:
        raise _not_found(todo_id)
    return TodoItemResponse.model_validate(item)
