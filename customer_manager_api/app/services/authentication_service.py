"""
Authentication: credential check plus access token issuance.

The user is looked up by username and the submitted password is
verified against the stored salted hash.  On success a JWT is issued
with the user's id as the ``id`` claim, valid for
``settings.token_expire_hours`` (12 by default).
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from ..core.config import Settings
from ..core.errors import NotFoundError, PersistenceError, ValidationError
from ..core.result import Result
from ..core.security import create_access_token, verify_password
from ..repositories.base import DocumentRepository
from ..schemas.auth import AuthenticateRequest, AuthenticateResponse
from ..schemas.user import User, UserRead

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "invalid user or password!"


class AuthenticationService:
    def __init__(self, user_repository: DocumentRepository[User], settings: Settings) -> None:
        self._user_repository = user_repository
        self._settings = settings

    async def authenticate(self, request: Optional[AuthenticateRequest]) -> Result[AuthenticateResponse]:
        if request is None:
            return Result.bad_request(ValidationError("authentication request can't be null!"))
        if not request.username:
            return Result.bad_request(ValidationError("username can't be null!"))
        if not request.password:
            return Result.bad_request(ValidationError("password can't be null!"))

        try:
            user = await self._user_repository.find_by_filter({"username": request.username})
            if user is None or not verify_password(request.password, user.password):
                logger.info("Failed login for %s", request.username)
                return Result.not_found(NotFoundError(INVALID_CREDENTIALS))

            token = self.generate_token(user)
        except Exception as e:
            logger.exception("Authentication of %s failed", request.username)
            return Result.internal_error(PersistenceError.wrap("could not authenticate", e))

        logger.info("User %s authenticated", user.id)
        return Result.ok(AuthenticateResponse(user=UserRead.from_user(user), token=token))

    def generate_token(self, user: User, now: Optional[datetime] = None) -> str:
        """Return a signed token carrying ``user.id``."""
        return create_access_token(
            {"id": user.id},
            self._settings.secret,
            timedelta(hours=self._settings.token_expire_hours),
            algorithm=self._settings.token_algorithm,
            now=now,
        )
