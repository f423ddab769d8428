from datetime import datetime, timedelta, timezone
from typing import Optional
import logging
import uuid

from jose import JWTError, jwt
from passlib.context import CryptContext

from .config import settings

logger = logging.getLogger(__name__)

# Use Argon2 instead of bcrypt (more reliable on Python 3.13)
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    return pwd_context.verify(password, hashed)


def dummy_verify() -> None:
    """Spend the same hashing time as a real check, for unknown usernames."""
    pwd_context.dummy_verify()


def create_access_token(subject: str, expires_minutes: Optional[int] = None) -> str:
    if expires_minutes is None:
        expires_minutes = settings.jwt_expire_minutes
    now = datetime.now(timezone.utc)
    exp = now + timedelta(minutes=expires_minutes)
    jti = str(uuid.uuid4())

    payload = {
        "sub": subject,
        "exp": exp,
        "iat": now,
        "jti": jti,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict:
    return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])


def read_subject(token: str) -> Optional[str]:
    """Return the ``sub`` claim of a valid token, or None.

    Bad signatures, expired tokens and tokens without a subject are all
    treated the same way.
    """
    try:
        payload = decode_token(token)
    except JWTError as exc:
        logger.debug("Rejected bearer token: %s", exc)
        return None
    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        return None
    return subject
