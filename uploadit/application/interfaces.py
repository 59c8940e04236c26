# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from uploadit.domain import IssuedToken, ServiceResult, User


class UserService(Protocol):
    def authenticate(self, username: str, password: str) -> ServiceResult[User]: ...

    def create_user(
        self, username: str, password: str, email: str
    ) -> ServiceResult[User]: ...

    def delete_user(self, user_id: int) -> ServiceResult[None]: ...

    def get_user_by_id(self, user_id: int) -> ServiceResult[User]: ...


class TokenIssuer(Protocol):
    def issue(
        self, secret: str, claims: Mapping[str, Any], validity_minutes: int
    ) -> IssuedToken: ...

    def decode(self, secret: str, token: str) -> dict[str, Any]: ...
