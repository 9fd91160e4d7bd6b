"""
Error taxonomy for the service layer.

Services never raise these; they attach them to a ``Result`` so callers
can inspect the kind of failure and its message.  ``RepositoryError`` is
the exception the repository layer raises when the store fails.
"""


class ServiceError(Exception):
    """Base class for errors carried inside a ``Result``."""

    kind = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ServiceError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message}


class ValidationError(ServiceError):
    """Missing or malformed input."""

    kind = "validation"


class NotFoundError(ServiceError):
    """A lookup matched nothing."""

    kind = "not_found"


class PersistenceError(ServiceError):
    """The store failed while executing an operation."""

    kind = "persistence"

    @classmethod
    def wrap(cls, prefix: str, exc: BaseException) -> "PersistenceError":
        """Build an error reading ``"<prefix>: <exc>"`` chained to ``exc``."""
        error = cls(f"{prefix}: {exc}")
        error.__cause__ = exc
        return error


class RepositoryError(Exception):
    """Raised by a repository when the underlying store fails."""
