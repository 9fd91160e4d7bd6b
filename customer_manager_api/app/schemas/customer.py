"""
Pydantic models for customers (clients).

Only ``name`` is required.  Contact fields are free-form strings; no
format validation happens at this layer.
"""

from typing import Optional

from pydantic import Field

from .base import Document


class Customer(Document):
    name: str = Field(..., examples=["Maria Souza"])
    email: Optional[str] = Field(None, examples=["maria@example.com"])
    phone: Optional[str] = Field(None, examples=["+55 11 91234-5678"])
    document: Optional[str] = Field(None, description="Tax or national identification number")
    address: Optional[str] = None
