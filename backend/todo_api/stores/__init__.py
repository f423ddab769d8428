from todo_api.stores import todos, users

__all__ = ["todos", "users"]
