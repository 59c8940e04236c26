# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from uploadit.domain.users.entities import User as DomainUser
from uploadit.domain.users.exceptions import UserConflictError
from uploadit.domain.users.repositories import UserRepository
from uploadit.infrastructure.db.models import User
from uploadit.infrastructure.db.session import session_scope


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def find_by_username(self, username: str) -> DomainUser | None:
        with session_scope() as session:
            row = session.query(User).filter(User.username == username).first()
            return _to_domain(row) if row else None

    def find_by_email(self, email: str) -> DomainUser | None:
        with session_scope() as session:
            row = session.query(User).filter(User.email == email).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with session_scope() as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with session_scope() as session:
                row = User(
                    username=user.username,
                    email=user.email,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            raise UserConflictError(str(exc.orig)) from exc

    def delete(self, user_id: int) -> bool:
        with session_scope() as session:
            deleted = session.query(User).filter(User.id == user_id).delete()
            return deleted > 0
