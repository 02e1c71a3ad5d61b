# File: store_backend/models/user.py

"""
User model.

``password`` holds the bcrypt hash, never the plaintext. The column keeps
the name the existing ``users`` table already uses.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from store_backend.models.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    # Uniqueness is the database's job; signup never pre-checks
    username: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
