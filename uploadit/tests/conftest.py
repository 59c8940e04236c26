from __future__ import annotations

import os
import tempfile

import pytest

TEST_JWT_SECRET = "test-secret-0123456789abcdef0123456789abcdef"

_DB_DIR = tempfile.mkdtemp(prefix="uploadit-tests-")
os.environ["JWT_SECRET"] = TEST_JWT_SECRET
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'uploadit.db')}"
os.environ.setdefault("APP_ENV", "test")

from uploadit.application.services.user_service import AccountUserService  # noqa: E402
from uploadit.domain.users.entities import User  # noqa: E402
from uploadit.domain.users.exceptions import UserConflictError  # noqa: E402
from uploadit.domain.users.repositories import PasswordHasher, UserRepository  # noqa: E402


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._seq = 1

    def find_by_username(self, username: str) -> User | None:
        return next((u for u in self._users.values() if u.username == username), None)

    def find_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email), None)

    def find_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def add(self, user: User) -> User:
        if self.find_by_username(user.username) or self.find_by_email(user.email):
            raise UserConflictError(user.username)
        new_user = User(
            id=self._seq,
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            created_at=user.created_at,
        )
        self._seq += 1
        self._users[new_user.id] = new_user
        return new_user

    def delete(self, user_id: int) -> bool:
        return self._users.pop(user_id, None) is not None

    def __len__(self) -> int:
        return len(self._users)


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def jwt_secret() -> str:
    return TEST_JWT_SECRET


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def user_service(users: InMemoryUserRepository) -> AccountUserService:
    return AccountUserService(users=users, password_hasher=DeterministicHasher())
