from todo_api.models.user import User
from todo_api.models.todo import Priority, Todo

__all__ = ["User", "Todo", "Priority"]
