# File: store_backend/api/routes_auth.py

"""
Signup and login routes.

Login answers with the stored user row itself; there is no token or
session issued here.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from store_backend.api.deps import get_user_service
from store_backend.core.exceptions import AuthFailure, ConstraintViolation, StoreError
from store_backend.schemas.user import Credentials, UserRecord
from store_backend.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/signup", response_class=PlainTextResponse, summary="Create a user")
def signup(payload: Credentials, users: UserService = Depends(get_user_service)):
    try:
        users.signup(payload.username, payload.password)
    except ConstraintViolation:
        logger.warning("Signup rejected: username %r already exists", payload.username)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username already exists",
        )
    except StoreError:
        logger.exception("Error signing up")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error signing up",
        )
    return "Signup successful!"


@router.post("/login", response_model=UserRecord, summary="Check credentials")
def login(payload: Credentials, users: UserService = Depends(get_user_service)):
    """
    Return the full stored user record when the credentials match.

    Unknown username and wrong password look the same to the client.
    """
    try:
        return users.login(payload.username, payload.password)
    except AuthFailure as exc:
        logger.info("Login failed for %r: %s", payload.username, exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )
    except StoreError:
        logger.exception("Error logging in")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error logging in",
        )
