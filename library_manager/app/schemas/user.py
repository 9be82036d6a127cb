"""
Pydantic models for library users (borrowers).
"""

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    name: str = Field(..., examples=["Marie Curie"])
    email: str = Field(..., examples=["marie@example.com"])
    # Kept as a string: leading zeros are significant.
    phone: str = Field(..., examples=["0123456789"])


class User(UserBase):
    """A registered borrower.  Users are never updated, only added or removed."""

    id: int
