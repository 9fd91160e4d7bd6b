"""
Business logic for users.

Passwords are stored as PBKDF2 salted hashes: ``create`` and ``update``
hash the submitted plain password before writing.  ``validate`` checks a
username/password pair and answers with a boolean ``Result`` without
issuing a token; use ``AuthenticationService`` for that.
"""

import logging
from typing import Optional, Union

from ..core.errors import NotFoundError, PersistenceError, ValidationError
from ..core.result import Result
from ..core.security import hash_password, verify_password
from ..schemas.user import User, UserCredentials
from .base import EntityService

logger = logging.getLogger(__name__)


class UserService(EntityService[User]):
    entity_name = "user"
    entity_plural = "users"

    def _prepare(self, entity: User) -> User:
        return entity.model_copy(update={"password": hash_password(entity.password)})

    async def validate(self, user: Optional[Union[User, UserCredentials]]) -> Result[bool]:
        """Check whether ``user``'s username and password match a stored user."""
        if user is None:
            return Result.bad_request(ValidationError("user cannot be null!"), value=False)

        try:
            stored = await self._repository.find_by_filter({"username": user.username})
            if stored is None or not verify_password(user.password, stored.password):
                logger.info("Rejected credentials for %s", user.username)
                return Result.not_found(NotFoundError("invalid user!"), value=False)
        except Exception as e:
            logger.exception("Validating user %s failed", user.username)
            return Result.internal_error(PersistenceError.wrap("could not validate user", e), value=False)

        return Result.ok(True)
