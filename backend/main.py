import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_api.core.config import settings
from todo_api.core.database import init_db
from todo_api.core.errors import PersistenceError, TodoAppError
from todo_api.core.log import setup_logging
from todo_api.api import api_router

setup_logging(settings.log_level)
logger = logging.getLogger("todo_api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


app = FastAPI(title="Todo API (FastAPI + SQLModel + JWT)", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "%s %s -> %s (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        (time.perf_counter() - started) * 1000.0,
    )
    return response


def error_body(status_code: int, message: str, **extra) -> JSONResponse:
    content = {"message": message, "status": status_code, "timestamp": int(time.time() * 1000)}
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content)


@app.exception_handler(TodoAppError)
async def todo_app_error_handler(request: Request, exc: TodoAppError):
    return error_body(exc.status_code, exc.message)


@app.exception_handler(SQLAlchemyError)
async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Unhandled database error on %s %s", request.method, request.url.path)
    return error_body(PersistenceError.status_code, PersistenceError.message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    response = error_body(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = {}
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"] if part != "body")
        errors.setdefault(field or "body", err["msg"])
    return error_body(400, "Validation failed", errors=errors)


@app.get("/")
def health():
    return {"message": "OK"}

app.include_router(api_router)
