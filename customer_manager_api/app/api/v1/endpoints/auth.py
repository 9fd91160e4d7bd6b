"""Authentication endpoint for API v1."""

from fastapi import APIRouter, Depends, Response

from customer_manager_api.app.api.deps import get_authentication_service
from customer_manager_api.app.api.responses import to_response
from customer_manager_api.app.schemas.auth import AuthenticateRequest, AuthenticateResponse
from customer_manager_api.app.services import AuthenticationService

router = APIRouter()


@router.post("/login", response_model=AuthenticateResponse)
async def login(
    request: AuthenticateRequest,
    service: AuthenticationService = Depends(get_authentication_service),
) -> Response:
    """Exchange a username and password for an access token.

    Returns 400 when either field is empty and 404 when the credentials
    do not match a stored user.
    """
    return to_response(await service.authenticate(request))
