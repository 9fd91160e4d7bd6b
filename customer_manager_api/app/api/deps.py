"""
FastAPI dependencies wiring services to the application state.

``create_app`` stores the settings and one repository per document type
on ``app.state``; the functions below build services from them per
request.  Tests replace any of them through ``app.dependency_overrides``.
"""

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..core.config import Settings
from ..core.errors import RepositoryError
from ..core.security import decode_access_token
from ..repositories.base import DocumentRepository
from ..schemas.customer import Customer
from ..schemas.user import User, UserRead
from ..services import AuthenticationService, CustomerService, UserService

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_customer_repository(request: Request) -> DocumentRepository[Customer]:
    return request.app.state.customer_repository


def get_user_repository(request: Request) -> DocumentRepository[User]:
    return request.app.state.user_repository


def get_customer_service(
    repository: DocumentRepository[Customer] = Depends(get_customer_repository),
) -> CustomerService:
    return CustomerService(repository)


def get_user_service(repository: DocumentRepository[User] = Depends(get_user_repository)) -> UserService:
    return UserService(repository)


def get_authentication_service(
    repository: DocumentRepository[User] = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
) -> AuthenticationService:
    return AuthenticationService(repository, settings)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
    repository: DocumentRepository[User] = Depends(get_user_repository),
) -> UserRead:
    """Resolve the bearer token to the stored user.

    Raises HTTP 401 when the header is missing, the token is invalid or
    expired, or its ``id`` claim no longer matches a user.  A store
    failure during the lookup is reported as HTTP 503.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")
    claims = decode_access_token(credentials.credentials, settings.secret, settings.token_algorithm)
    if not claims or not claims.get("id"):
        raise _unauthorized("Invalid or expired token")
    try:
        user = await repository.find_by_id(claims["id"])
    except RepositoryError:
        logger.exception("Resolving user %s from token failed", claims["id"])
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Could not verify credentials",
        )
    if user is None:
        raise _unauthorized("User no longer exists")
    return UserRead.from_user(user)
