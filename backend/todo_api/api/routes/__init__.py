from todo_api.api.routes.auth import router as auth_router
from todo_api.api.routes.todos import router as todos_router

__all__ = ["auth_router", "todos_router"]
