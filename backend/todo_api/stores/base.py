import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session

from todo_api.core.errors import PersistenceError

logger = logging.getLogger(__name__)


def commit(session: Session) -> None:
    """Commit the unit of work, turning driver failures into PersistenceError.

    Constraint violations are re-raised as ``IntegrityError`` after the
    rollback so callers can tell which unique key collided.
    """
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Commit failed")
        raise PersistenceError() from exc
