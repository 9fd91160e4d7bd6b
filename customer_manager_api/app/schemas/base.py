"""Base model for stored documents."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """A record persisted in the document store.

    ``id`` is ``None`` until the store assigns one on creation.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, examples=["65f1c0d2a8b4e3f1c2d3e4f5"])
