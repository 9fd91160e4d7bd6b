"""
Pydantic models for user data.

``User`` is the stored document, including the password hash.  It is
never returned through the API; endpoints convert it to ``UserRead``.
The login name may be sent either as ``username`` or as ``login``.
"""

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .base import Document


class UserBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, examples=["Maria Souza"])
    username: str = Field(
        ...,
        validation_alias=AliasChoices("username", "login"),
        examples=["maria"],
    )
    email: Optional[str] = Field(None, examples=["maria@example.com"])


class User(Document, UserBase):
    """Stored user document."""

    password: str = Field(..., examples=["strongpassword"])


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: Optional[str] = None

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    @classmethod
    def from_user(cls, user: User) -> "UserRead":
        return cls(id=user.id, name=user.name, username=user.username, email=user.email)


class UserCredentials(BaseModel):
    """Payload for the plain credential check (``/users/validate``)."""

    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., validation_alias=AliasChoices("username", "login"))
    password: str
