"""Service-level error taxonomy, mapped to HTTP statuses by handlers in app.main."""

from sqlalchemy.exc import IntegrityError

# PostgreSQL SQLSTATE for unique_violation.
UNIQUE_VIOLATION = "23505"


class ServiceError(Exception):
    """Base for errors raised by services; carries a client-safe message and HTTP status."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(ServiceError):
    """Malformed or missing input."""

    status_code = 400


class ConflictError(ServiceError):
    """Uniqueness violation."""

    status_code = 409


class AuthError(ServiceError):
    """Bad credentials (401) or a bad token (403)."""

    status_code = 401


class NotFoundError(ServiceError):
    status_code = 404


class InternalError(ServiceError):
    status_code = 500


def is_unique_violation(exc: IntegrityError) -> bool:
    """True if the integrity error was raised by a unique constraint (Postgres or SQLite)."""
    orig = getattr(exc, "orig", None)
    if getattr(orig, "pgcode", None) == UNIQUE_VIOLATION:
        return True
    return "UNIQUE constraint failed" in str(orig)
