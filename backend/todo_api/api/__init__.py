from fastapi import APIRouter
from todo_api.api.routes import auth_router, todos_router

api_router = APIRouter(prefix="/api")
api_router.include_router(auth_router)
api_router.include_router(todos_router)
