"""
Schemas for the authentication flow.

``AuthenticateRequest`` accepts empty strings on purpose: the
authentication service reports missing username and missing password
as distinct errors, so validation is left to it.
"""

from pydantic import BaseModel, Field

from .user import UserRead


class AuthenticateRequest(BaseModel):
    username: str = Field("", examples=["maria"])
    password: str = Field("", examples=["strongpassword"])


class AuthenticateResponse(BaseModel):
    user: UserRead
    token: str
