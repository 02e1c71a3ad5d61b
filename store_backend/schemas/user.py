# File: store_backend/schemas/user.py

from typing import Optional

from pydantic import BaseModel


class Credentials(BaseModel):
    username: str
    password: str


class UserUpdate(BaseModel):
    username: str
    # Empty or missing leaves the stored hash alone
    password: Optional[str] = None


class UserRecord(BaseModel):
    """A ``users`` row as stored, hash included."""

    id: int
    username: str
    password: str

    class Config:
        from_attributes = True
