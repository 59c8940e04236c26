# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from uploadit.application.interfaces import UserService
from uploadit.domain.users.entities import User
from uploadit.domain.users.exceptions import UserConflictError
from uploadit.domain.users.repositories import PasswordHasher, UserRepository
from uploadit.domain.users.results import ServiceResult
from uploadit.shared.logging import logger

USERNAME_MAX_LENGTH = 64
PASSWORD_MAX_LENGTH = 128
EMAIL_MIN_LENGTH = 3
EMAIL_MAX_LENGTH = 254


def _username_problem(username: str) -> str | None:
    if not username:
        return "username is required"
    if len(username) > USERNAME_MAX_LENGTH:
        return f"username exceeds {USERNAME_MAX_LENGTH} characters"
    return None


def _password_problem(password: str) -> str | None:
    if not password:
        return "password is required"
    if len(password) > PASSWORD_MAX_LENGTH:
        return f"password exceeds {PASSWORD_MAX_LENGTH} characters"
    return None


def _email_problem(email: str) -> str | None:
    if not email:
        return "email is required"
    if not EMAIL_MIN_LENGTH <= len(email) <= EMAIL_MAX_LENGTH:
        return "email has an invalid length"
    local, sep, domain = email.partition("@")
    if not sep or not local or not domain or "@" in domain:
        return "email is not a valid address"
    return None


class AccountUserService(UserService):
    """Credential checks and account lifecycle on top of a user repository."""

    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def authenticate(self, username: str, password: str) -> ServiceResult[User]:
        username = (username or "").strip()
        problem = _username_problem(username) or _password_problem(password or "")
        if problem:
            return ServiceResult.malformed(problem)

        user = self._users.find_by_username(username)
        if user is None or not self._password_hasher.verify(password, user.password_hash):
            return ServiceResult.not_found("Invalid username or password")
        return ServiceResult.ok(user)

    def create_user(self, username: str, password: str, email: str) -> ServiceResult[User]:
        username = (username or "").strip()
        email = (email or "").strip().lower()
        problem = (
            _username_problem(username)
            or _password_problem(password or "")
            or _email_problem(email)
        )
        if problem:
            return ServiceResult.malformed(problem)

        if self._users.find_by_username(username) or self._users.find_by_email(email):
            return ServiceResult.duplicate("username or email already registered")

        candidate = User(
            id=0,
            username=username,
            email=email,
            password_hash=self._password_hasher.hash(password),
            created_at=datetime.now(UTC),
        )
        try:
            persisted = self._users.add(candidate)
        except UserConflictError:
            # Lost a race with a concurrent registration.
            return ServiceResult.duplicate("username or email already registered")

        logger.info(f"user_service.create_user: created user_id={persisted.id}")
        return ServiceResult.ok(persisted)

    def delete_user(self, user_id: int) -> ServiceResult[None]:
        if not self._users.delete(user_id):
            return ServiceResult.not_found(f"User with id {user_id} does not exist")
        logger.info(f"user_service.delete_user: deleted user_id={user_id}")
        return ServiceResult.ok()

    def get_user_by_id(self, user_id: int) -> ServiceResult[User]:
        user = self._users.find_by_id(user_id)
        if user is None:
            return ServiceResult.not_found(f"User with id {user_id} does not exist")
        return ServiceResult.ok(user)
