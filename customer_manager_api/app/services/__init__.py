"""
Service layer.

Each service encapsulates the business logic of one domain and talks to
storage only through an injected ``DocumentRepository``.  Every public
operation returns a ``Result``; no exception escapes a service method.
"""

from .authentication_service import AuthenticationService
from .base import EntityService
from .customer_service import CustomerService
from .user_service import UserService

__all__ = ["AuthenticationService", "CustomerService", "EntityService", "UserService"]
