from typing import Optional

from sqlmodel import Session, select

from todo_api.models import User
from todo_api.stores.base import commit


def username_exists(session: Session, username: str) -> bool:
    return find_by_username(session, username) is not None


def email_exists(session: Session, email: str) -> bool:
    return session.exec(select(User.id).where(User.email == email)).first() is not None


def find_by_username(session: Session, username: str) -> Optional[User]:
    return session.exec(select(User).where(User.username == username)).first()


def find_by_email(session: Session, email: str) -> Optional[User]:
    return session.exec(select(User).where(User.email == email)).first()


def get_user(session: Session, user_id: int) -> Optional[User]:
    return session.get(User, user_id)


def save_user(session: Session, user: User) -> User:
    session.add(user)
    commit(session)
    session.refresh(user)
    return user
