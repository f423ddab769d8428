import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from todo_api.core.errors import (
    AuthenticationFailed,
    DuplicateEmail,
    DuplicateUsername,
    PersistenceError,
)
from todo_api.core.security import create_access_token, dummy_verify, hash_password, verify_password
from todo_api.models import User
from todo_api.schemas.auth import AuthOut
from todo_api.stores import users

logger = logging.getLogger(__name__)


def register(session: Session, username: str, email: str, password: str) -> AuthOut:
    if users.username_exists(session, username):
        raise DuplicateUsername()
    if users.email_exists(session, email):
        raise DuplicateEmail()

    try:
        user = users.save_user(
            session,
            User(
                username=username,
                email=email,
                password_hash=hash_password(password),
                role="USER",
                enabled=True,
            ),
        )
    except IntegrityError as exc:
        # a concurrent registration took the username or email after the checks above
        if users.find_by_username(session, username) is not None:
            raise DuplicateUsername() from exc
        if users.find_by_email(session, email) is not None:
            raise DuplicateEmail() from exc
        logger.exception("Registration of %s hit an unexpected constraint", username)
        raise PersistenceError() from exc
    logger.info("Registered user %s (id=%s)", user.username, user.id)

    return AuthOut(token=create_access_token(user.username), username=user.username, email=user.email)


def login(session: Session, username: str, password: str) -> AuthOut:
    user = users.find_by_username(session, username)

    if user is None:
        dummy_verify()
        logger.warning("Failed login for %s", username)
        raise AuthenticationFailed()

    if not verify_password(password, user.password_hash) or not user.enabled:
        logger.warning("Failed login for %s", username)
        raise AuthenticationFailed()

    logger.info("User %s logged in", user.username)
    return AuthOut(token=create_access_token(user.username), username=user.username, email=user.email)
