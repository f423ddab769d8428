from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session

from todo_api.core.database import get_session
from todo_api.api.deps import get_current_username
from todo_api.schemas.todo import TodoIn, TodoOut
from todo_api.services import todos as todo_service

router = APIRouter(prefix="/todos", tags=["todos"])

@router.get("", response_model=List[TodoOut])
def list_todos(
    completed: Optional[bool] = Query(default=None),
    username: str = Depends(get_current_username),
    session: Session = Depends(get_session),
):
    return todo_service.list_todos(session, username, completed=completed)

@router.post("", response_model=TodoOut, status_code=status.HTTP_201_CREATED)
def create_todo(data: TodoIn, username: str = Depends(get_current_username), session: Session = Depends(get_session)):
    return todo_service.create_todo(session, username, data)

@router.get("/{todo_id}", response_model=TodoOut)
def get_todo(todo_id: int, username: str = Depends(get_current_username), session: Session = Depends(get_session)):
    return todo_service.get_todo(session, username, todo_id)

@router.put("/{todo_id}", response_model=TodoOut)
def update_todo(todo_id: int, data: TodoIn, username: str = Depends(get_current_username), session: Session = Depends(get_session)):
    return todo_service.update_todo(session, username, todo_id, data)

@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_todo(todo_id: int, username: str = Depends(get_current_username), session: Session = Depends(get_session)):
    todo_service.delete_todo(session, username, todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
