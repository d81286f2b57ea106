"""
Pydantic models for user data.

``UserRead`` is what the API returns: it never carries the password.
``UserRecord`` is the stored form and is only handled inside the
service layer.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Alice"])
    email: str = Field(..., min_length=3, examples=["alice@example.com"])


class UserCreate(UserBase):
    """Schema for signing up."""

    password: str = Field(..., min_length=1, examples=["password123"])


class UserLogin(BaseModel):
    email: str = Field(..., examples=["alice@example.com"])
    password: str = Field(..., examples=["password123"])


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: str

    model_config = {
        "from_attributes": True,
    }


class UserRecord(UserRead):
    """Stored user.  Passwords are kept as given; hashing is out of scope."""

    password: Optional[str] = None

    def public(self) -> UserRead:
        return UserRead(id=self.id, name=self.name, email=self.email)


class LoginResult(BaseModel):
    user: UserRead
    token: str
    token_type: str = "bearer"
