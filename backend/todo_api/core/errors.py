"""Application errors raised by the stores and services.

Each error carries the HTTP status it maps to; ``main.py`` registers one
handler for the whole hierarchy.
"""


class TodoAppError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class DuplicateUsername(TodoAppError):
    status_code = 409
    message = "Username already exists"


class DuplicateEmail(TodoAppError):
    status_code = 409
    message = "Email already exists"


class AuthenticationFailed(TodoAppError):
    status_code = 401
    message = "Invalid username or password"


class UserNotFound(TodoAppError):
    status_code = 401
    message = "User not found"


class NotFound(TodoAppError):
    # also raised for rows owned by another user
    status_code = 404
    message = "Todo not found"


class PersistenceError(TodoAppError):
    status_code = 500
    message = "Database error"
