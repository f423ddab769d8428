from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from todo_api.core.database import get_session
from todo_api.schemas.auth import RegisterIn, LoginIn, AuthOut
from todo_api.services import auth as auth_service


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthOut, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterIn, session: Session = Depends(get_session)):
    return auth_service.register(session, payload.username, payload.email, payload.password)


@router.post("/login", response_model=AuthOut)
def login(payload: LoginIn, session: Session = Depends(get_session)):
    return auth_service.login(session, payload.username, payload.password)
