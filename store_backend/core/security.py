# File: store_backend/core/security.py

"""
Password hashing helpers for the store API.

bcrypt via passlib, cost factor taken from settings (10 unless overridden).
Only hashing and verification live here; login hands back the stored row,
there is no token or session layer.
"""

import logging

from passlib.context import CryptContext
from passlib.exc import PasslibSecurityError, UnknownHashError

from store_backend.core.config import settings
from store_backend.core.exceptions import HashingError

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = settings.bcrypt_rounds

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    """
    Return a salted bcrypt hash of ``password``.

    A fresh salt is drawn on every call, so hashing the same password twice
    gives two different strings of the same length.
    """
    try:
        return pwd_context.hash(password)
    except (TypeError, ValueError, PasslibSecurityError) as exc:
        raise HashingError("could not hash password") from exc


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check ``plain_password`` against a stored bcrypt hash.

    A mismatch is just ``False``. A stored value that is not a recognizable
    hash raises ``HashingError``.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except UnknownHashError as exc:
        logger.warning("Stored password is not a recognized hash")
        raise HashingError("malformed password hash") from exc
    except (TypeError, ValueError, PasslibSecurityError) as exc:
        raise HashingError("could not verify password") from exc
