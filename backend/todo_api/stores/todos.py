from typing import List, Optional

from sqlmodel import Session, select

from todo_api.models import Todo
from todo_api.stores.base import commit


def list_for_owner(session: Session, user_id: int, completed: Optional[bool] = None) -> List[Todo]:
    query = select(Todo).where(Todo.user_id == user_id)
    if completed is not None:
        query = query.where(Todo.completed == completed)
    return list(session.exec(query.order_by(Todo.id.asc())).all())


def find_owned(session: Session, todo_id: int, user_id: int) -> Optional[Todo]:
    # existence and ownership in one lookup
    return session.exec(
        select(Todo).where(Todo.id == todo_id, Todo.user_id == user_id)
    ).first()


def save_todo(session: Session, todo: Todo) -> Todo:
    session.add(todo)
    commit(session)
    session.refresh(todo)
    return todo


def delete_owned(session: Session, todo_id: int, user_id: int) -> bool:
    """Delete a todo owned by ``user_id``; False when nothing matched.

    Lookup and delete share one transaction.
    """
    todo = session.exec(
        select(Todo)
        .where(Todo.id == todo_id, Todo.user_id == user_id)
        .with_for_update()
    ).first()
    if todo is None:
        return False
    session.delete(todo)
    commit(session)
    return True
