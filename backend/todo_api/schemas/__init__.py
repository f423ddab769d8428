from todo_api.schemas.auth import AuthOut, LoginIn, RegisterIn
from todo_api.schemas.todo import TodoIn, TodoOut

__all__ = ["AuthOut", "LoginIn", "RegisterIn", "TodoIn", "TodoOut"]
