"""Ownership-scoped todo operations.

Every function takes the caller's username, already taken from a validated
bearer token, and only ever touches rows owned by that user.
"""
from datetime import datetime, timezone
import logging
from typing import List, Optional

from sqlmodel import Session

from todo_api.core.errors import NotFound, UserNotFound
from todo_api.models import Todo, User
from todo_api.schemas.todo import TodoIn
from todo_api.stores import todos, users

logger = logging.getLogger(__name__)


def _owner(session: Session, username: str) -> User:
    user = users.find_by_username(session, username)
    if user is None:
        logger.error("Token subject %s has no user row", username)
        raise UserNotFound()
    return user


def _owned_or_404(session: Session, todo_id: int, user: User) -> Todo:
    todo = todos.find_owned(session, todo_id, user.id)
    if todo is None:
        raise NotFound()
    return todo


def list_todos(session: Session, username: str, completed: Optional[bool] = None) -> List[Todo]:
    user = _owner(session, username)
    return todos.list_for_owner(session, user.id, completed=completed)


def get_todo(session: Session, username: str, todo_id: int) -> Todo:
    user = _owner(session, username)
    return _owned_or_404(session, todo_id, user)


def create_todo(session: Session, username: str, data: TodoIn) -> Todo:
    user = _owner(session, username)
    todo = Todo(
        user_id=user.id,
        title=data.title,
        description=data.description,
        completed=data.completed,
        priority=data.priority,
        due_date=data.due_date,
    )
    todo = todos.save_todo(session, todo)
    logger.info("User %s created todo %s", username, todo.id)
    return todo


def update_todo(session: Session, username: str, todo_id: int, data: TodoIn) -> Todo:
    user = _owner(session, username)
    todo = _owned_or_404(session, todo_id, user)

    # full replace: omitted optional fields fall back to their defaults
    todo.title = data.title
    todo.description = data.description
    todo.completed = data.completed
    todo.priority = data.priority
    todo.due_date = data.due_date
    todo.updated_at = datetime.now(timezone.utc)

    todo = todos.save_todo(session, todo)
    logger.info("User %s updated todo %s", username, todo.id)
    return todo


def delete_todo(session: Session, username: str, todo_id: int) -> None:
    user = _owner(session, username)
    if not todos.delete_owned(session, todo_id, user.id):
        raise NotFound()
    logger.info("User %s deleted todo %s", username, todo_id)
