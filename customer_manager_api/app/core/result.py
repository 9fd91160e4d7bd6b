"""
Uniform return type of every service operation.

A ``Result`` carries the operation's value, an HTTP status code and an
optional error.  Callers never see exceptions from the service layer;
they inspect the ``Result`` instead and the HTTP layer projects
``status_code`` straight onto the response.

``error`` is ``None`` for normal completion.  Two combinations are
deliberate: an empty listing is ``NO_CONTENT`` with an empty list *and*
an explanatory error, and a successful update is ``NO_CONTENT`` with the
submitted entity as value.
"""

from dataclasses import dataclass
from http import HTTPStatus
from typing import Generic, Optional, TypeVar

from .errors import ServiceError

T = TypeVar("T")

SUCCESS_CODES = frozenset({HTTPStatus.OK, HTTPStatus.CREATED, HTTPStatus.NO_CONTENT})


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T]
    status_code: HTTPStatus
    error: Optional[ServiceError] = None

    @property
    def succeeded(self) -> bool:
        """True when the status code is one of the 2xx codes in use."""
        return self.status_code in SUCCESS_CODES

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(value, HTTPStatus.OK)

    @classmethod
    def created(cls, value: T) -> "Result[T]":
        return cls(value, HTTPStatus.CREATED)

    @classmethod
    def no_content(cls, value: T, error: Optional[ServiceError] = None) -> "Result[T]":
        return cls(value, HTTPStatus.NO_CONTENT, error)

    @classmethod
    def bad_request(cls, error: ServiceError, value: Optional[T] = None) -> "Result[T]":
        return cls(value, HTTPStatus.BAD_REQUEST, error)

    @classmethod
    def not_found(cls, error: ServiceError, value: Optional[T] = None) -> "Result[T]":
        return cls(value, HTTPStatus.NOT_FOUND, error)

    @classmethod
    def internal_error(cls, error: ServiceError, value: Optional[T] = None) -> "Result[T]":
        return cls(value, HTTPStatus.INTERNAL_SERVER_ERROR, error)
