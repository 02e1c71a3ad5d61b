# File: store_backend/api/routes_users.py

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from store_backend.api.deps import get_user_service
from store_backend.core.exceptions import StoreError
from store_backend.schemas.user import UserRecord, UserUpdate
from store_backend.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


def _server_error(message: str) -> HTTPException:
    logger.exception(message)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=message,
    )


@router.get("", response_model=list[UserRecord], summary="List users")
def list_users(users: UserService = Depends(get_user_service)):
    try:
        return users.list_users()
    except StoreError:
        raise _server_error("Error retrieving users")


@router.put("/{user_id}", response_class=PlainTextResponse, summary="Update a user")
def update_user(
    user_id: int,
    payload: UserUpdate,
    users: UserService = Depends(get_user_service),
):
    """
    Rename a user and optionally reset the password.

    An unknown id changes nothing and still reports success.
    """
    try:
        touched = users.update_user(user_id, payload.username, payload.password)
    except StoreError:
        raise _server_error("Error updating user")
    if not touched:
        logger.info("Update of user %s matched no row", user_id)
    return "User updated successfully!"


@router.delete("/{user_id}", response_class=PlainTextResponse, summary="Delete a user")
def delete_user(user_id: int, users: UserService = Depends(get_user_service)):
    try:
        touched = users.delete_user(user_id)
    except StoreError:
        raise _server_error("Error deleting user")
    if not touched:
        logger.info("Delete of user %s matched no row", user_id)
    return "User deleted successfully!"
