# expense_backend/exceptions.py
# Domain errors raised by the services and mapped to HTTP status codes by the routers


class ExpenseBackendError(Exception):
    """Base class for errors raised by the services."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Conflict(ExpenseBackendError):
    """Raised when a user with the same email already exists."""


class NotFound(ExpenseBackendError):
    """Raised when a user cannot be located by email or id."""


class Unauthorized(ExpenseBackendError):
    """Raised on a bad password or an invalid token."""


class StorageFailure(ExpenseBackendError):
    """Raised for any database error, whatever the cause."""
