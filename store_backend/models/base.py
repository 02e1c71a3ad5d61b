# File: store_backend/models/base.py

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base holding the ``users`` and ``products`` tables."""
