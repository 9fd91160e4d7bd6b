"""
User endpoints for API v1.

Registration and the credential check are public; reading, updating and
deleting users require a bearer token.  Stored users carry a password
hash, so every user in a response is converted to ``UserRead`` first.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from customer_manager_api.app.api.deps import get_current_user, get_user_service
from customer_manager_api.app.api.responses import to_response
from customer_manager_api.app.schemas.user import User, UserCredentials, UserRead
from customer_manager_api.app.services import UserService

router = APIRouter()


def _read_many(users: List[User]) -> List[UserRead]:
    return [UserRead.from_user(user) for user in users]


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(user: User, service: UserService = Depends(get_user_service)) -> Response:
    """Register a new user.  The password is stored hashed."""
    return to_response(await service.create(user), UserRead.from_user)


@router.post("/validate", response_model=bool)
async def validate_user(credentials: UserCredentials, service: UserService = Depends(get_user_service)) -> Response:
    """Answer ``true`` if the username/password pair matches a stored user."""
    return to_response(await service.validate(credentials))


@router.get("/", response_model=List[UserRead], dependencies=[Depends(get_current_user)])
async def list_users(service: UserService = Depends(get_user_service)) -> Response:
    return to_response(await service.get_all(), _read_many)


@router.get("/{user_id}", response_model=UserRead, dependencies=[Depends(get_current_user)])
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> Response:
    return to_response(await service.get(user_id), UserRead.from_user)


@router.put("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(get_current_user)])
async def update_user(user_id: str, user: User, service: UserService = Depends(get_user_service)) -> Response:
    return to_response(await service.update(user_id, user))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(get_current_user)])
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> Response:
    return to_response(await service.delete(user_id))
