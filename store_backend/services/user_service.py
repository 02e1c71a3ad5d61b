# File: store_backend/services/user_service.py

"""
User service.

Signup, login and the plain CRUD on ``users``. Each operation is a single
statement through the gateway; login and password-bearing updates also do
one bcrypt call. Errors from the gateway and the hasher propagate as the
``StoreError`` subclasses the routes translate.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import bindparam, delete, insert, select, update

from store_backend.core.exceptions import AuthFailure
from store_backend.core.security import hash_password, verify_password
from store_backend.db.gateway import DatabaseGateway
from store_backend.models.user import User

users = User.__table__

INSERT_USER = insert(users).values(
    username=bindparam("new_username"),
    password=bindparam("password_hash"),
)
SELECT_USER_BY_USERNAME = select(users).where(users.c.username == bindparam("lookup_username"))
SELECT_ALL_USERS = select(users).order_by(users.c.id)
UPDATE_USER = (
    update(users)
    .where(users.c.id == bindparam("user_id"))
    .values(username=bindparam("new_username"), password=bindparam("password_hash"))
)
UPDATE_USERNAME = (
    update(users)
    .where(users.c.id == bindparam("user_id"))
    .values(username=bindparam("new_username"))
)
DELETE_USER = delete(users).where(users.c.id == bindparam("user_id"))


class UserService:
    def __init__(self, gateway: DatabaseGateway):
        self.gateway = gateway

    def signup(self, username: str, password: str) -> None:
        """
        Store a new user with a hashed password.

        A taken username surfaces as ``ConstraintViolation`` straight from
        the database's unique index.
        """
        password_hash = hash_password(password)
        self.gateway.execute(
            INSERT_USER,
            {"new_username": username, "password_hash": password_hash},
        )

    def login(self, username: str, password: str) -> Dict[str, Any]:
        """
        Return the stored row for matching credentials.

        The row is returned as stored, password hash included. Unknown
        usernames and wrong passwords both raise ``AuthFailure``.
        """
        row = self.gateway.execute(
            SELECT_USER_BY_USERNAME, {"lookup_username": username}
        ).first()
        if row is None:
            raise AuthFailure("unknown username")
        if not verify_password(password, row["password"]):
            raise AuthFailure("password mismatch")
        return row

    def list_users(self) -> List[Dict[str, Any]]:
        return self.gateway.execute(SELECT_ALL_USERS).rows

    def update_user(self, user_id: int, username: str, password: Optional[str] = None) -> int:
        """
        Rename a user and, when a password is given, replace its hash.

        Returns the number of rows touched; 0 means no such id and is not an
        error.
        """
        if password:
            result = self.gateway.execute(
                UPDATE_USER,
                {
                    "user_id": user_id,
                    "new_username": username,
                    "password_hash": hash_password(password),
                },
            )
        else:
            result = self.gateway.execute(
                UPDATE_USERNAME, {"user_id": user_id, "new_username": username}
            )
        return result.rowcount

    def delete_user(self, user_id: int) -> int:
        return self.gateway.execute(DELETE_USER, {"user_id": user_id}).rowcount
